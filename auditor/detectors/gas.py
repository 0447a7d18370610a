"""
auditor/detectors/gas.py — Storage writes inside loops

Only the first storage-array assignment in each loop is reported.
"""
import re
from typing import List

from auditor.lines import Line
from auditor.windows import ScanMode, block_body, lines_from
from models.finding import Category, Finding, Severity

NAME = "gas-loop"
WINDOW = 10

_FOR_LOOP = re.compile(r"for\s*\(")
_STORAGE_WRITE = re.compile(r"\w+\[\w*\]\s*=(?!=)")

SUGGESTIONS = (
    "Move storage array to memory before the loop",
    "Cache storage variables in memory",
    "Use memory arrays for intermediate calculations",
    "Consider batch operations to reduce gas costs",
)


def inspect(source: str, lines: List[Line], mode: ScanMode = ScanMode.LEGACY) -> List[Finding]:
    findings: List[Finding] = []

    for line in lines:
        if not _FOR_LOOP.search(line.text):
            continue
        if mode is ScanMode.SCOPED:
            body = block_body(lines, line.index)
        else:
            body = lines_from(lines, line.index, WINDOW)
        hit = next((candidate for candidate in body if _STORAGE_WRITE.search(candidate.text)), None)
        if hit is not None:
            findings.append(_finding(line.index, hit))

    return findings


def _finding(loop_index: int, hit: Line) -> Finding:
    return Finding(
        id=f"{NAME}-{loop_index}",
        title="Gas Inefficient Storage Access in Loop",
        severity=Severity.LOW,
        line=hit.number,
        description="Storage operations inside loops can be expensive. "
                    "Consider moving data to memory.",
        snippet=hit.text.strip(),
        suggestions=SUGGESTIONS,
        categories=(Category.GAS_EFFICIENCY, Category.PERFORMANCE),
        detector=NAME,
    )
