# sedmcp/sed_io/generics.py
# Text & JSON file helpers w/ consistent error types (no in-place editing)

from pathlib import Path
from typing import Any, Union
import json

from ..core.exceptions import FileReadError, FileWriteError, JSONParsingError
from ..core.verbose import vlog_file_read, vlog_file_write


def ensure_parent(path: Union[Path, str]) -> None:
    # create parent directories for any file path
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)


# read UTF-8 text; missing/unreadable files become FileReadError
def read_text_safe(path: Union[Path, str], encoding: str = "utf-8") -> str:
    p = Path(path)
    try:
        text = p.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise FileReadError(f"Cannot read {p}: {e}", p) from e
    vlog_file_read(p, len(text))
    return text


# write UTF-8 text, creating parent dirs as needed
def write_text_safe(
    content: str, path: Union[Path, str], encoding: str = "utf-8"
) -> None:
    p = Path(path)
    try:
        ensure_parent(p)
        p.write_text(content, encoding=encoding)
    except (OSError, LookupError) as e:
        raise FileWriteError(f"Cannot write {p}: {e}", p) from e
    vlog_file_write(p, len(content))


# write JSON w/ UTF-8 encoding, creating parent dirs as needed
def write_json_safe(obj: Any, path: Path) -> None:
    content = json.dumps(obj, indent=2)
    write_text_safe(content, path)


# read JSON w/ UTF-8 encoding; decode errors show a numbered snippet
def read_json_safe(path: Path) -> Any:
    text = read_text_safe(path)
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        lines = text.split("\n")
        # JSONDecodeError uses 1-based line numbers
        line_num = e.lineno - 1
        snippet_start = max(0, line_num - 2)
        snippet_end = min(len(lines), line_num + 3)

        numbered_lines = []
        for i, line in enumerate(lines[snippet_start:snippet_end], start=snippet_start + 1):
            marker = ">>> " if i == e.lineno else "    "
            numbered_lines.append(f"{marker}{i:3}: {line}")

        snippet = "\n".join(numbered_lines)
        raise JSONParsingError(f"Invalid JSON in {path}:\n{snippet}\nError: {e.msg}")


# * Refuse to write results over the input file (in-place editing is unsupported)
def ensure_distinct_paths(source: Union[Path, str, None], target: Union[Path, str]) -> None:
    if source is None:
        return
    if Path(source).resolve() == Path(target).resolve():
        raise FileWriteError(
            f"Refusing to overwrite input file {target}; in-place editing is not supported",
            target,
        )
