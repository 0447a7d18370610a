"""tests/test_gas.py — Unit tests for the storage-in-loop detector"""
from auditor.detectors.gas import inspect
from auditor.lines import split_lines
from auditor.windows import ScanMode
from models.finding import Category, Severity

_LOOP = """contract C {
    uint[] values;
    function fill(uint n) external {
        for (uint i = 0; i < n; i++) {
            values[i] = i;
            values[i] = i + 1;
        }
    }
}"""


def _run(source, mode=ScanMode.LEGACY):
    return inspect(source, split_lines(source), mode)


def test_first_storage_write_in_loop_reported_once():
    findings = _run(_LOOP)
    assert len(findings) == 1
    f = findings[0]
    assert f.severity == Severity.LOW
    assert f.line == 5
    assert f.id == "gas-loop-3"
    assert f.snippet == "values[i] = i;"
    assert f.categories == (Category.GAS_EFFICIENCY, Category.PERFORMANCE)


def test_write_outside_legacy_window_ignored():
    source = "for (uint i = 0; i < n; i++) {\n" + "    x += 1;\n" * 9 + "    values[i] = i;\n}"
    assert _run(source, ScanMode.LEGACY) == []
    assert [f.line for f in _run(source, ScanMode.SCOPED)] == [11]


def test_single_line_loop():
    assert [f.line for f in _run("for (uint i; i < n; i++) values[i] = 0;")] == [1]


def test_equality_is_not_a_write():
    assert _run("for (uint i; i < n; i++) {\n    if (values[i] == 0) break;\n}") == []


def test_scoped_stops_at_loop_end():
    source = "for (uint i; i < n; i++) {\n    total += i;\n}\nvalues[0] = total;"
    assert len(_run(source, ScanMode.LEGACY)) == 1
    assert _run(source, ScanMode.SCOPED) == []
