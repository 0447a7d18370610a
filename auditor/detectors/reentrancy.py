"""
auditor/detectors/reentrancy.py — Reentrancy detector

Flags external value transfers (``.call{value: ...}``, ``.call.value(``,
``.send(``, ``.transfer(``).  A state mutation shortly after the call means
the contract updates its books only after handing control to the callee,
which is the classic reentrancy window.
"""
import re
from typing import List

from auditor.lines import Line
from auditor.windows import ScanMode, lines_after, rest_of_block
from models.finding import Category, Finding, Severity

NAME = "reentrancy"
WINDOW = 5

_CALL_PATTERNS = [
    re.compile(r"\.call\{value:\s*[^}]+\}"),
    re.compile(r"\.call\.value\("),
    re.compile(r"\.send\("),
    re.compile(r"\.transfer\("),
]

# ident = x, ident[k] -= x, ident++, ident--; never ==
_STATE_MUTATION = re.compile(
    r"\w+(?:\[[^\]]*\])?\s*[-+*/%|&^]?=(?!=)"
    r"|\w+\+\+"
    r"|\w+--"
)

SUGGESTIONS = (
    "Use the checks-effects-interactions pattern",
    "Apply ReentrancyGuard from OpenZeppelin",
    "Update state before external calls",
    "Consider using transfer() instead of call() for simple ether transfers",
)


def inspect(source: str, lines: List[Line], mode: ScanMode = ScanMode.LEGACY) -> List[Finding]:
    findings: List[Finding] = []

    for line in lines:
        hits = sum(1 for pattern in _CALL_PATTERNS if pattern.search(line.text))
        if not hits:
            continue
        severity = Severity.CRITICAL if _mutates_after(lines, line.index, mode) else Severity.HIGH
        for n in range(hits):
            suffix = "" if n == 0 else f"-{n + 1}"
            findings.append(_finding(f"{NAME}-{line.index}{suffix}", line, severity))

    return findings


def _mutates_after(lines: List[Line], index: int, mode: ScanMode) -> bool:
    if mode is ScanMode.SCOPED:
        window = rest_of_block(lines, index)
    else:
        window = lines_after(lines, index, WINDOW)
    return any(_STATE_MUTATION.search(line.text) for line in window)


def _finding(finding_id: str, line: Line, severity: Severity) -> Finding:
    return Finding(
        id=finding_id,
        title="Potential Reentrancy Vulnerability",
        severity=severity,
        line=line.number,
        description="External call detected. Ensure state updates happen before "
                    "external calls to prevent reentrancy attacks.",
        snippet=line.text.strip(),
        suggestions=SUGGESTIONS,
        categories=(Category.SECURITY,),
        detector=NAME,
    )
