"""tests/test_limits.py — Unit tests for the input ceiling"""
import pytest

from auditor.limits import AnalysisRejected, enforce_size_limit


def test_within_limits():
    assert enforce_size_limit("contract A {}", max_bytes=100) == "contract A {}"


def test_size_counted_in_utf8_bytes():
    with pytest.raises(AnalysisRejected):
        enforce_size_limit("é" * 60, max_bytes=100)


def test_long_line_rejected():
    with pytest.raises(AnalysisRejected):
        enforce_size_limit("x" * 51, max_bytes=1000, max_line_chars=50)


def test_rejection_is_a_value_error():
    assert issubclass(AnalysisRejected, ValueError)
