"""models/report.py — Category scores and the immutable audit report."""
import math
from dataclasses import dataclass, fields
from typing import Any, Dict, Tuple

from models.finding import Category, Finding, Severity

MIN_SCORE = 1.0
MAX_SCORE = 10.0

# Weight of each category in the overall score.
OVERALL_WEIGHTS = {
    Category.SECURITY: 0.30,
    Category.GAS_EFFICIENCY: 0.20,
    Category.PERFORMANCE: 0.20,
    Category.CODE_QUALITY: 0.20,
    Category.DOCUMENTATION: 0.10,
}


@dataclass(frozen=True)
class CategoryScores:
    security: float = MAX_SCORE
    gas_efficiency: float = MAX_SCORE
    performance: float = MAX_SCORE
    code_quality: float = MAX_SCORE
    documentation: float = MAX_SCORE

    def __post_init__(self):
        for f in fields(self):
            value = float(getattr(self, f.name))
            if not MIN_SCORE <= value <= MAX_SCORE:
                raise ValueError(f"{f.name} score {value} outside [{MIN_SCORE}, {MAX_SCORE}]")
            object.__setattr__(self, f.name, value)

    def get(self, category: Category) -> float:
        return {
            Category.SECURITY: self.security,
            Category.GAS_EFFICIENCY: self.gas_efficiency,
            Category.PERFORMANCE: self.performance,
            Category.CODE_QUALITY: self.code_quality,
            Category.DOCUMENTATION: self.documentation,
        }[category]

    @property
    def overall(self) -> float:
        """Weighted overall score, rounded half-up to one decimal place."""
        weighted = sum(self.get(cat) * w for cat, w in OVERALL_WEIGHTS.items())
        # round() is banker's rounding; 7.55 must become 7.6, never 7.5
        return math.floor(weighted * 10 + 0.5) / 10

    def to_dict(self) -> Dict[str, float]:
        return {cat.value: self.get(cat) for cat in Category}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CategoryScores":
        return cls(
            security=data["security"],
            gas_efficiency=data["gasEfficiency"],
            performance=data["performance"],
            code_quality=data["codeQuality"],
            documentation=data["documentation"],
        )


@dataclass(frozen=True)
class Report:
    """Result of one analysis. Carries no reference to the analyzed source."""

    scores: CategoryScores
    findings: Tuple[Finding, ...] = ()
    suggestions: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "findings", tuple(self.findings))
        object.__setattr__(self, "suggestions", tuple(dict.fromkeys(self.suggestions)))

    @property
    def overall_score(self) -> float:
        return self.scores.overall

    def severity_counts(self) -> Dict[str, int]:
        counts = {s.value: 0 for s in Severity}
        for finding in self.findings:
            counts[finding.severity.value] += 1
        return counts

    def to_dict(self) -> Dict[str, Any]:
        return {
            "overallScore": self.overall_score,
            "scores": self.scores.to_dict(),
            "severityCounts": self.severity_counts(),
            "findings": [f.to_dict() for f in self.findings],
            "suggestions": list(self.suggestions),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Report":
        return cls(
            scores=CategoryScores.from_dict(data["scores"]),
            findings=tuple(Finding.from_dict(f) for f in data.get("findings", ())),
            suggestions=tuple(data.get("suggestions", ())),
        )

    def __repr__(self):
        return f"<Report overall={self.overall_score} findings={len(self.findings)}>"
