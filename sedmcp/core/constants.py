# sedmcp/core/constants.py
# Constants & enums for operation kinds, flag letters & tool names

from enum import Enum

from .exceptions import OperationConstructionError


# * Recognized flag letters
FLAG_GLOBAL = "g"
FLAG_IGNORE_CASE = "i"
FLAG_MULTILINE = "m"
FLAG_DOTALL = "s"
RECOGNIZED_FLAGS = FLAG_GLOBAL + FLAG_IGNORE_CASE + FLAG_MULTILINE + FLAG_DOTALL


# * Operation kinds w/ their one-letter sed command
class OperationKind(Enum):
    SUBSTITUTE = "s"
    DELETE = "d"
    PRINT = "p"
    INSERT = "i"
    APPEND = "a"
    CHANGE = "c"

    @property
    def command(self) -> str:
        return self.value

    # human-readable name used in messages ("Substitute", "Delete", ...)
    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def from_command(cls, command: str) -> "OperationKind":
        for kind in cls:
            if kind.value == command:
                return kind
        raise OperationConstructionError(f"Unknown sed operation: {command}")


# kinds the engine actually executes
EXECUTABLE_KINDS = frozenset(
    {OperationKind.SUBSTITUTE, OperationKind.DELETE, OperationKind.PRINT}
)

# kinds carrying free text instead of a pattern
TEXT_KINDS = frozenset({OperationKind.INSERT, OperationKind.APPEND, OperationKind.CHANGE})


# * Tool names exposed by the MCP server
TOOL_EXECUTE = "sed_execute"
TOOL_PREVIEW = "sed_preview"
TOOL_VALIDATE = "sed_validate"

# prefix marking invalid-pattern errors; callers match on it
INVALID_PATTERN_PREFIX = "Invalid regex pattern"
