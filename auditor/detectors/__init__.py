"""
auditor/detectors — Pattern detectors run over the line model.

Every detector is a pure ``inspect(source, lines, mode)`` function returning
a list of findings.  ``DETECTORS`` fixes the execution order, which is also
the order findings appear in a report.
"""
from typing import Callable, List, NamedTuple

from auditor.detectors import access_control, documentation, gas, overflow, reentrancy
from auditor.lines import Line
from auditor.windows import ScanMode
from models.finding import Finding

DetectorFn = Callable[[str, List[Line], ScanMode], List[Finding]]


class Detector(NamedTuple):
    name: str
    run: DetectorFn


DETECTORS: List[Detector] = [
    Detector(reentrancy.NAME, reentrancy.inspect),
    Detector(overflow.NAME, overflow.inspect),
    Detector(gas.NAME, gas.inspect),
    Detector(access_control.NAME, access_control.inspect),
    Detector(documentation.NAME, documentation.inspect),
]

__all__ = ["Detector", "DETECTORS"]
