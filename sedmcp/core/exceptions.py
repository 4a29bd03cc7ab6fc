# sedmcp/core/exceptions.py
# Custom exception hierarchy for sedmcp (pure - no I/O operations)

from pathlib import Path
from typing import Any


# * Format error message for display (pure string formatting, no I/O)
def format_error_message(error_type: str, message: str) -> str:
    return f"[red]{error_type}:[/] {message}"


# * Base exception for sedmcp
class SedError(Exception):
    pass


# * Operation could not be built (required field missing for its kind)
class OperationConstructionError(SedError):
    def __init__(self, message: str, kind: Any = None, missing: list[str] | None = None):
        super().__init__(message)
        self.kind = kind
        self.missing = missing or []

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, "
            f"kind={self.kind!r}, missing={self.missing!r})"
        )


# * Operation rejected by the engine (unsupported kind, blank field, bad regex)
class OperationValidationError(SedError):
    def __init__(self, message: str, kind: Any = None, pattern: str | None = None):
        super().__init__(message)
        self.kind = kind
        self.pattern = pattern

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, "
            f"kind={self.kind!r}, pattern={self.pattern!r})"
        )


# * Failure inside an execution algorithm (e.g. bad replacement template)
class OperationExecutionError(SedError):
    pass


# * First failing step of a batch; step is 1-based
class BatchExecutionError(SedError):
    def __init__(self, step: int, cause_message: str):
        super().__init__(f"Batch operation failed at step {step}: {cause_message}")
        self.step = step
        self.cause_message = cause_message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(step={self.step!r}, "
            f"cause_message={self.cause_message!r})"
        )


# * Configuration errors
class ConfigurationError(SedError):
    pass


# * Settings value validation failed
class SettingsValidationError(ConfigurationError):
    def __init__(self, message: str, setting_name: str, value: Any):
        super().__init__(message)
        self.setting_name = setting_name
        self.value = value

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, "
            f"setting_name={self.setting_name!r}, value={self.value!r})"
        )


# * JSON parsing errors
class JSONParsingError(SedError):
    pass


# * Failed tool call; the message is the text the MCP client sees w/ isError=true
class ToolCallError(SedError):
    def __init__(self, message: str, tool: str | None = None):
        super().__init__(message)
        self.tool = tool

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(tool={self.tool!r}, message={self.args[0]!r})"


# * Base error for file I/O operations
class FileOperationError(SedError):
    def __init__(self, message: str, path: Path | str):
        super().__init__(message)
        self.path = Path(path) if isinstance(path, str) else path

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, path={self.path!r})"


# * Failed to read file
class FileReadError(FileOperationError):
    pass


# * Failed to write file
class FileWriteError(FileOperationError):
    pass
