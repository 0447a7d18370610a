"""
auditor/suggestions.py — General audit checklist attached to every report.

The checklist does not depend on the findings; finding-specific remediation
travels on each finding's own ``suggestions``.
"""
from typing import Iterable, Tuple

from models.finding import Finding

GENERAL_CHECKLIST = (
    "Follow the checks-effects-interactions pattern for all external calls",
    "Use OpenZeppelin libraries for common security patterns",
    "Add comprehensive NatSpec documentation to all public functions",
    "Implement proper access control for administrative functions",
    "Consider gas optimization for frequently called functions",
    "Add event emissions for important state changes",
    "Use latest Solidity version with built-in overflow protection",
)


def generate(findings: Iterable[Finding] = ()) -> Tuple[str, ...]:
    return tuple(dict.fromkeys(GENERAL_CHECKLIST))
