"""
auditor/scoring.py — Category scores from a list of findings.

Each finding charges its severity weight against every category it carries,
and 30% of that weight against code quality.  Penalties are capped at 40 per
category, so a category score never drops below 1.0.
"""
from typing import Dict, Iterable

from auditor.severity import weight_of
from models.finding import Category, Finding
from models.report import MAX_SCORE, MIN_SCORE, CategoryScores

MAX_PENALTY = 40
PENALTY_DIVISOR = 4
CODE_QUALITY_SHARE = 0.3


def penalties(findings: Iterable[Finding]) -> Dict[Category, float]:
    totals: Dict[Category, float] = {c: 0 for c in Category}
    for finding in findings:
        weight = weight_of(finding.severity)
        for category in set(finding.categories):
            if category is not Category.CODE_QUALITY:
                totals[category] += weight
        totals[Category.CODE_QUALITY] += weight * CODE_QUALITY_SHARE
    return totals


def category_score(penalty: float) -> float:
    capped = min(MAX_PENALTY, penalty)
    return max(MIN_SCORE, MAX_SCORE - capped / PENALTY_DIVISOR)


def compute(findings: Iterable[Finding]) -> CategoryScores:
    totals = penalties(findings)
    return CategoryScores(
        security=category_score(totals[Category.SECURITY]),
        gas_efficiency=category_score(totals[Category.GAS_EFFICIENCY]),
        performance=category_score(totals[Category.PERFORMANCE]),
        code_quality=category_score(totals[Category.CODE_QUALITY]),
        documentation=category_score(totals[Category.DOCUMENTATION]),
    )

