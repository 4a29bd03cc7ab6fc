# sedmcp/core/debug.py
# Debug logging utilities - delegates to unified OutputManager

from .output import get_output_manager


def is_debug_enabled() -> bool:
    return get_output_manager().is_debug_enabled()


# * Print debug message if debug mode is enabled
def debug_print(message: str, category: str = "DEBUG") -> None:
    get_output_manager().debug(message, category)


# * Engine internals (compiled flags, per-step content sizes)
def debug_engine(message: str) -> None:
    get_output_manager().debug(message, "ENGINE")


# * Print error details in debug mode
def debug_error(error: BaseException, context: str = "") -> None:
    error_msg = f"Exception: {type(error).__name__}: {error}"
    if context:
        error_msg = f"{context} - {error_msg}"
    get_output_manager().debug(error_msg, "ERROR")
