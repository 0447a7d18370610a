"""auditor/detectors/documentation.py — Functions without NatSpec comments"""
import re
from typing import List

from auditor.lines import Line
from auditor.windows import ScanMode, comment_block_above, is_comment_line, lines_before
from models.finding import Category, Finding, Severity

NAME = "natspec"
WINDOW = 3

_FUNCTION = re.compile(r"function\s+\w+")
_NATSPEC = re.compile(r"///|/\*\*")

SUGGESTIONS = (
    "Add @notice for function description",
    "Add @param for parameter descriptions",
    "Add @return for return value descriptions",
    "Use /// for single-line NatSpec comments",
)


def inspect(source: str, lines: List[Line], mode: ScanMode = ScanMode.LEGACY) -> List[Finding]:
    findings: List[Finding] = []

    for line in lines:
        if not _FUNCTION.search(line.text):
            continue
        if mode is ScanMode.SCOPED:
            if is_comment_line(line.text):
                continue
            above = comment_block_above(lines, line.index)
        else:
            above = lines_before(lines, line.index, WINDOW)
        if not any(_NATSPEC.search(prev.text) for prev in above):
            findings.append(_finding(line))

    return findings


def _finding(line: Line) -> Finding:
    return Finding(
        id=f"{NAME}-{line.index}",
        title="Missing NatSpec Documentation",
        severity=Severity.INFO,
        line=line.number,
        description="Function lacks NatSpec documentation for better code maintainability.",
        snippet=line.text.strip(),
        suggestions=SUGGESTIONS,
        categories=(Category.DOCUMENTATION,),
        detector=NAME,
    )
