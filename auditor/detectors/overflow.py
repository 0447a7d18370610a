"""
auditor/detectors/overflow.py — Integer overflow/underflow detector

Version-gated: contracts that use SafeMath or target Solidity >= 0.8 (which
has checked arithmetic built in) are skipped entirely.
"""
import logging
import re
from typing import List

from auditor.lines import Line
from auditor.windows import ScanMode, is_comment_line, strip_comments
from models.finding import Category, Finding, Severity

logger = logging.getLogger(__name__)

NAME = "overflow"

_MATH = re.compile(r"(\w+)\s*[+\-*/%]\s*(\w+)")
_SAFE_MATH = re.compile(r"SafeMath", re.IGNORECASE)
_MODERN_PRAGMA = re.compile(r"pragma\s+solidity\s*[\^>=~]*\s*0\.(?:[89]|\d{2,})")
_DIRECTIVE = re.compile(r"^\s*(?:import|pragma)\b")

SUGGESTIONS = (
    "Use OpenZeppelin's SafeMath library",
    "Upgrade to Solidity ^0.8.0 for built-in overflow protection",
    "Add explicit overflow/underflow checks",
    "Use checked{} blocks for arithmetic operations",
)


def is_version_protected(source: str) -> bool:
    """True when the source uses SafeMath or declares a >= 0.8 pragma."""
    return bool(_SAFE_MATH.search(source) or _MODERN_PRAGMA.search(source))


def inspect(source: str, lines: List[Line], mode: ScanMode = ScanMode.LEGACY) -> List[Finding]:
    if is_version_protected(source):
        logger.debug("Overflow check skipped: SafeMath or a >= 0.8 pragma is present")
        return []

    matches = _is_arithmetic_scoped if mode is ScanMode.SCOPED else _is_arithmetic_legacy
    return [_finding(line) for line in lines if matches(line.text)]


def _is_arithmetic_legacy(text: str) -> bool:
    # Any '*' disqualifies the line, including real multiplication.
    return bool(_MATH.search(text)) and "//" not in text and "*" not in text


def _is_arithmetic_scoped(text: str) -> bool:
    if is_comment_line(text) or _DIRECTIVE.match(text):
        return False
    return bool(_MATH.search(strip_comments(text)))


def _finding(line: Line) -> Finding:
    return Finding(
        id=f"{NAME}-{line.index}",
        title="Potential Integer Overflow/Underflow",
        severity=Severity.MEDIUM,
        line=line.number,
        description="Arithmetic operations without SafeMath or Solidity ^0.8.0 "
                    "can cause overflow/underflow.",
        snippet=line.text.strip(),
        suggestions=SUGGESTIONS,
        categories=(Category.SECURITY,),
        detector=NAME,
    )
