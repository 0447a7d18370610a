"""
auditor/__init__.py — Report assembler.

Runs every registered detector over the line model, scores the findings and
wraps everything in an immutable Report.  Pure: no I/O, no configuration,
no state shared between calls.
"""
import logging
import re
from typing import List, Optional

from auditor import scoring, suggestions
from auditor.detectors import DETECTORS
from auditor.limits import AnalysisRejected, enforce_size_limit
from auditor.lines import split_lines
from auditor.windows import ScanMode, is_comment_line, strip_line_comment
from models.finding import Finding
from models.report import Report

logger = logging.getLogger(__name__)

_CONTRACT_NAME = re.compile(r"\b(?:abstract\s+)?(?:contract|interface|library)\s+([A-Za-z_]\w*)")

__all__ = ["analyze", "contract_name", "AnalysisRejected", "enforce_size_limit", "ScanMode"]


def analyze(source: str, mode: ScanMode = ScanMode.LEGACY) -> Report:
    """
    Analyze Solidity source text and return its audit report.

    Findings are ordered by detector registration order, then by line.
    Any exception raised here is a detector defect and propagates.
    """
    mode = ScanMode.parse(mode)
    lines = split_lines(source)

    findings: List[Finding] = []
    for detector in DETECTORS:
        try:
            found = detector.run(source, lines, mode)
        except Exception:
            logger.error("Detector %s failed on %d lines", detector.name, len(lines), exc_info=True)
            raise
        logger.debug("Detector %s: %d finding(s)", detector.name, len(found))
        findings.extend(found)

    report = Report(
        scores=scoring.compute(findings),
        findings=tuple(findings),
        suggestions=suggestions.generate(findings),
    )
    logger.info("Analyzed %d lines [mode=%s]: %d finding(s), overall=%.1f",
                len(lines), mode.value, len(findings), report.overall_score)
    return report


def contract_name(source: str) -> Optional[str]:
    """Name of the first contract, interface or library declared in the source."""
    for line in split_lines(source):
        if is_comment_line(line.text):
            continue
        match = _CONTRACT_NAME.search(strip_line_comment(line.text))
        if match:
            return match.group(1)
    return None
