# sedmcp/core/patterns.py
# Regex compilation, flag mapping & line splitting helpers shared by the engine

import re
from typing import Any

from .constants import (
    FLAG_DOTALL,
    FLAG_IGNORE_CASE,
    FLAG_MULTILINE,
    INVALID_PATTERN_PREFIX,
)
from .exceptions import OperationValidationError

LINE_SEPARATOR = "\n"


# * Map sed flag letters to re module flags; g is handled by the algorithm
def regex_flags(flags: str) -> re.RegexFlag:
    result = re.RegexFlag(0)
    if FLAG_IGNORE_CASE in flags:
        result |= re.IGNORECASE
    if FLAG_MULTILINE in flags:
        result |= re.MULTILINE
    if FLAG_DOTALL in flags:
        result |= re.DOTALL
    return result


# * Compile pattern w/ mapped flags; syntax errors become validation errors
def compile_pattern(pattern: str, flags: str = "", kind: Any = None) -> re.Pattern[str]:
    try:
        return re.compile(pattern, regex_flags(flags))
    except re.error as e:
        raise OperationValidationError(
            f"{INVALID_PATTERN_PREFIX}: {e}", kind=kind, pattern=pattern
        ) from e


# * Split on \n only; trailing empty lines are dropped but "" stays [""]
def split_lines(content: str) -> list[str]:
    lines = content.split(LINE_SEPARATOR)
    if not content:
        return lines
    while lines and lines[-1] == "":
        lines.pop()
    return lines


def join_lines(lines: list[str]) -> str:
    return LINE_SEPARATOR.join(lines)
