# countdown/countdown_io/generics.py
# Generic filesystem helpers for settings persistence

from pathlib import Path
from typing import Any, Union
import json

from ..core.verbose import vlog_file_read, vlog_file_write


def ensure_parent(path: Union[Path, str]) -> None:
    # create parent directories for any file path
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)


# write JSON w/ UTF-8 encoding, creating parent dirs as needed
def write_json_safe(obj: dict[str, Any], path: Path) -> None:
    ensure_parent(path)
    content = json.dumps(obj, indent=2)
    path.write_text(content, encoding="utf-8")
    vlog_file_write(path, len(content))


# read JSON w/ UTF-8 encoding, return dict
def read_json_safe(path: Path) -> dict[str, Any]:
    from ..core.exceptions import JSONParsingError

    text = Path(path).read_text(encoding="utf-8")
    vlog_file_read(path, len(text))
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        # show the offending line w/ two lines of context on each side
        lines = text.split("\n")
        line_num = e.lineno - 1
        snippet_start = max(0, line_num - 2)
        snippet_end = min(len(lines), line_num + 3)

        numbered_lines = []
        for i, line in enumerate(lines[snippet_start:snippet_end], start=snippet_start + 1):
            marker = ">>> " if i == e.lineno else "    "
            numbered_lines.append(f"{marker}{i:3}: {line}")

        snippet = "\n".join(numbered_lines)
        raise JSONParsingError(f"Invalid JSON in {path}:\n{snippet}\nError: {e.msg}")
    if not isinstance(data, dict):
        raise JSONParsingError(
            f"Expected a JSON object in {path}, got {type(data).__name__}"
        )
    return data

