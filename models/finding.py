"""models/finding.py — Immutable finding record produced by the detectors."""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple


class Severity(str, Enum):
    CRITICAL = "Critical"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"
    INFO = "Info"


class Category(str, Enum):
    SECURITY = "security"
    GAS_EFFICIENCY = "gasEfficiency"
    PERFORMANCE = "performance"
    CODE_QUALITY = "codeQuality"
    DOCUMENTATION = "documentation"


@dataclass(frozen=True)
class Finding:
    id: str
    title: str
    severity: Severity
    line: int                            # 1-based
    description: str
    snippet: str                         # trimmed source line
    suggestions: Tuple[str, ...] = ()
    categories: Tuple[Category, ...] = ()
    detector: str = ""

    def __post_init__(self):
        # Coerce plain strings so a finding can never carry an unknown severity.
        object.__setattr__(self, "severity", Severity(self.severity))
        object.__setattr__(self, "categories", tuple(Category(c) for c in self.categories))
        object.__setattr__(self, "suggestions", tuple(self.suggestions))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "severity": self.severity.value,
            "line": self.line,
            "description": self.description,
            "snippet": self.snippet,
            "suggestions": list(self.suggestions),
            "categories": [c.value for c in self.categories],
            "detector": self.detector,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Finding":
        return cls(
            id=data["id"],
            title=data["title"],
            severity=Severity(data["severity"]),
            line=int(data["line"]),
            description=data.get("description", ""),
            snippet=data.get("snippet", ""),
            suggestions=tuple(data.get("suggestions", ())),
            categories=tuple(Category(c) for c in data.get("categories", ())),
            detector=data.get("detector", ""),
        )

    def __repr__(self):
        return f"<Finding [{self.severity.value}] {self.title} line={self.line}>"
