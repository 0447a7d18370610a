"""
auditor/detectors/access_control.py — Public/external functions without a guard

A function counts as guarded when its header or body mentions ``onlyOwner``,
``require(msg.sender ...`` or ``modifier``.
"""
import re
from typing import List

from auditor.lines import Line
from auditor.windows import ScanMode, block_body, lines_from
from models.finding import Category, Finding, Severity

NAME = "access"
WINDOW = 10

_PUBLIC_FUNCTION = re.compile(r"function\s+\w+\s*\([^)]*\)\s*(public|external)")
_GUARD = re.compile(r"onlyOwner|require\s*\(\s*msg\.sender|modifier")

SUGGESTIONS = (
    "Add onlyOwner modifier for administrative functions",
    "Use OpenZeppelin's AccessControl for role-based permissions",
    "Add require() statements to check msg.sender",
    "Consider making function internal if not needed externally",
)


def inspect(source: str, lines: List[Line], mode: ScanMode = ScanMode.LEGACY) -> List[Finding]:
    findings: List[Finding] = []

    for line in lines:
        if not _PUBLIC_FUNCTION.search(line.text) or _GUARD.search(line.text):
            continue
        if not _guarded_in_body(lines, line.index, mode):
            findings.append(_finding(line))

    return findings


def _guarded_in_body(lines: List[Line], index: int, mode: ScanMode) -> bool:
    if mode is ScanMode.SCOPED:
        return any(_GUARD.search(line.text) for line in block_body(lines, index))

    for line in lines_from(lines, index, WINDOW):
        if _GUARD.search(line.text):
            return True
        if "}" in line.text:
            break
    return False


def _finding(line: Line) -> Finding:
    return Finding(
        id=f"{NAME}-{line.index}",
        title="Missing Access Control",
        severity=Severity.HIGH,
        line=line.number,
        description="Public/external function without access control modifiers.",
        snippet=line.text.strip(),
        suggestions=SUGGESTIONS,
        categories=(Category.SECURITY,),
        detector=NAME,
    )
