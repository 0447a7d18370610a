"""
auditor/severity.py — Severity weights shared by scoring.

A weight is the penalty a finding charges against each category it is
scored in; it is never exposed as a score itself.
"""
from models.finding import Severity

SEVERITY_WEIGHTS = {
    Severity.CRITICAL: 10,
    Severity.HIGH: 7,
    Severity.MEDIUM: 5,
    Severity.LOW: 3,
    Severity.INFO: 1,
}


def weight_of(severity) -> int:
    return SEVERITY_WEIGHTS[Severity(severity)]
