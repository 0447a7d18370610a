"""tests/test_report.py — End-to-end tests for analyze() and the Report value"""
import dataclasses
import json

import pytest

import auditor
from auditor import ScanMode, analyze, contract_name
from auditor.detectors import DETECTORS, Detector
from auditor.suggestions import GENERAL_CHECKLIST
from models.finding import Severity
from models.report import Report


def test_empty_input():
    report = analyze("")
    assert report.findings == ()
    assert report.scores.to_dict() == {
        "security": 10.0, "gasEfficiency": 10.0, "performance": 10.0,
        "codeQuality": 10.0, "documentation": 10.0,
    }
    assert report.overall_score == 10.0


def test_deterministic(vulnerable_bank_source):
    first = json.dumps(analyze(vulnerable_bank_source).to_dict(), sort_keys=True)
    second = json.dumps(analyze(vulnerable_bank_source).to_dict(), sort_keys=True)
    assert first == second


def test_vulnerable_bank(vulnerable_bank_source):
    report = analyze(vulnerable_bank_source)
    summary = [(f.detector, f.severity, f.line) for f in report.findings]
    assert summary == [
        ("reentrancy", Severity.CRITICAL, 12),
        ("overflow", Severity.MEDIUM, 8),
        ("access", Severity.HIGH, 7),
        ("access", Severity.HIGH, 11),
        ("natspec", Severity.INFO, 7),
        ("natspec", Severity.INFO, 11),
    ]
    # security: 10 + 5 + 7 + 7 = 29; documentation: 2; code quality: 0.3 * 31
    assert report.scores.security == 2.75
    assert report.scores.gas_efficiency == 10.0
    assert report.scores.performance == 10.0
    assert report.scores.documentation == 9.5
    assert report.scores.code_quality == pytest.approx(7.675)
    assert report.overall_score == 7.3
    assert report.severity_counts() == {"Critical": 1, "High": 2, "Medium": 1, "Low": 0, "Info": 2}


def test_scoped_mode_agrees_on_simple_contract(vulnerable_bank_source):
    legacy = analyze(vulnerable_bank_source, ScanMode.LEGACY)
    scoped = analyze(vulnerable_bank_source, "scoped")
    assert scoped == legacy


def test_safe_vault_is_clean(safe_vault_source):
    report = analyze(safe_vault_source)
    assert report.findings == ()
    assert report.overall_score == 10.0


def test_findings_follow_detector_then_line_order(vulnerable_bank_source):
    order = [d.name for d in DETECTORS]
    keys = [(order.index(f.detector), f.line) for f in analyze(vulnerable_bank_source).findings]
    assert keys == sorted(keys)


def test_finding_ids_unique():
    source = "a.send(1); b.transfer(2);\nfunction f() public {\n  x = a + b;\n}"
    ids = [f.id for f in analyze(source).findings]
    assert len(ids) == len(set(ids))


def test_suggestions_are_general_checklist(vulnerable_bank_source):
    assert analyze(vulnerable_bank_source).suggestions == GENERAL_CHECKLIST
    assert analyze("").suggestions == GENERAL_CHECKLIST
    assert len(set(GENERAL_CHECKLIST)) == 7


def test_report_is_immutable(vulnerable_bank_source):
    report = analyze(vulnerable_bank_source)
    with pytest.raises(dataclasses.FrozenInstanceError):
        report.overall_score = 10.0
    with pytest.raises(dataclasses.FrozenInstanceError):
        report.findings[0].severity = Severity.INFO


def test_json_round_trip(vulnerable_bank_source):
    report = analyze(vulnerable_bank_source)
    data = json.loads(json.dumps(report.to_dict()))
    assert data["overallScore"] == 7.3
    assert data["findings"][0]["severity"] == "Critical"
    assert data["findings"][0]["categories"] == ["security"]
    assert Report.from_dict(data) == report


def test_unknown_mode_rejected():
    with pytest.raises(ValueError):
        analyze("contract A {}", "fast")


def test_detector_defect_propagates(monkeypatch):
    def broken(source, lines, mode):
        raise RuntimeError("boom")

    monkeypatch.setattr(auditor, "DETECTORS", [Detector("broken", broken)])
    with pytest.raises(RuntimeError):
        analyze("contract A {}")


def test_contract_name():
    assert contract_name("// contract Fake\ncontract Real is Base {}") == "Real"
    assert contract_name("library SafeMath {}") == "SafeMath"
    assert contract_name("uint x;") is None
