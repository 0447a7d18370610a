"""
auditor/windows.py — Look-ahead / look-behind windows for the detectors.

Two modes are supported:

* ``legacy`` — fixed-size windows (5 lines after an external call, 10 lines
  from a loop or function header, 3 lines above a declaration).  These do not
  follow scope at all; they are kept as the default for compatibility.
* ``scoped`` — a minimal brace-depth tracker that follows the enclosing
  block, loop body or function body, and the contiguous comment block above
  a declaration.  Every scope is capped at ``SCOPE_LIMIT`` lines so the total
  cost of a scan stays linear in the number of lines.
"""
import re
from enum import Enum
from typing import List, Tuple

from auditor.lines import Line

SCOPE_LIMIT = 200

_COMMENT_PREFIXES = ("//", "/*", "*")
_BLOCK_COMMENT = re.compile(r"/\*.*?(?:\*/|$)")


class ScanMode(str, Enum):
    LEGACY = "legacy"
    SCOPED = "scoped"

    @classmethod
    def parse(cls, value) -> "ScanMode":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            allowed = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown scan mode {value!r} (expected one of: {allowed})") from None


# ── Fixed windows ─────────────────────────────────────────────────────────────

def lines_after(lines: List[Line], index: int, count: int) -> List[Line]:
    """The ``count`` lines following ``lines[index]``."""
    return lines[index + 1:index + 1 + count]


def lines_from(lines: List[Line], index: int, count: int) -> List[Line]:
    """``count`` lines starting at ``lines[index]`` itself."""
    return lines[index:index + count]


def lines_before(lines: List[Line], index: int, count: int) -> List[Line]:
    return lines[max(0, index - count):index]


# ── Scope tracking ────────────────────────────────────────────────────────────

def strip_line_comment(text: str) -> str:
    pos = text.find("//")
    return text if pos < 0 else text[:pos]


def strip_comments(text: str) -> str:
    """Drop `/* ... */` spans (an unclosed one runs to end of line) and any `//` tail."""
    return strip_line_comment(_BLOCK_COMMENT.sub(" ", text))


def is_comment_line(text: str) -> bool:
    return text.strip().startswith(_COMMENT_PREFIXES)


def _braces(text: str) -> Tuple[int, int]:
    if is_comment_line(text):
        return 0, 0
    code = strip_comments(text)
    return code.count("{"), code.count("}")


def rest_of_block(lines: List[Line], index: int, limit: int = SCOPE_LIMIT) -> List[Line]:
    """Lines after ``lines[index]`` up to the one that closes the enclosing block."""
    window: List[Line] = []
    depth = 0
    for line in lines[index + 1:index + 1 + limit]:
        window.append(line)
        opens, closes = _braces(line.text)
        depth += opens - closes
        if depth < 0:
            break
    return window


def block_body(lines: List[Line], index: int, limit: int = SCOPE_LIMIT) -> List[Line]:
    """
    Lines from a header at ``lines[index]`` through the line closing the block
    it opens.  A header without braces covers only its own statement: the header
    line when it ends in ``;``, otherwise the header plus the next line.
    """
    window: List[Line] = []
    depth = 0
    opened = False
    for offset, line in enumerate(lines[index:index + limit]):
        window.append(line)
        opens, closes = _braces(line.text)
        if opens:
            opened = True
        depth += opens - closes
        if opened:
            if depth <= 0:
                break
        elif offset >= 1 or strip_comments(line.text).rstrip().endswith(";"):
            break
    return window


def comment_block_above(lines: List[Line], index: int, limit: int = SCOPE_LIMIT) -> List[Line]:
    """The contiguous run of comment lines directly above ``lines[index]``."""
    block: List[Line] = []
    for line in reversed(lines[max(0, index - limit):index]):
        if not is_comment_line(line.text):
            break
        block.append(line)
    block.reverse()
    return block
