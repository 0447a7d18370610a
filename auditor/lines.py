"""auditor/lines.py — Line model: the only code that touches raw source text."""
from typing import List, NamedTuple


class Line(NamedTuple):
    number: int   # 1-based
    text: str     # exact content, untrimmed

    @property
    def index(self) -> int:
        return self.number - 1


def split_lines(source: str) -> List[Line]:
    """Split source on '\\n'. The empty string has no lines."""
    if not source:
        return []
    return [Line(i, text) for i, text in enumerate(source.split("\n"), start=1)]
