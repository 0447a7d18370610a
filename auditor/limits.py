"""
auditor/limits.py — Input ceiling enforced by callers before analysis.

``analyze`` itself accepts any string; hosts call ``enforce_size_limit``
first so that megabyte-scale inputs and pathological single lines are
rejected instead of scanned.
"""
DEFAULT_MAX_SOURCE_KB = 512
DEFAULT_MAX_LINE_CHARS = 10_000


class AnalysisRejected(ValueError):
    """Source text refused before analysis."""


def enforce_size_limit(
    source: str,
    max_bytes: int = DEFAULT_MAX_SOURCE_KB * 1024,
    max_line_chars: int = DEFAULT_MAX_LINE_CHARS,
) -> str:
    size = len(source.encode("utf-8"))
    if size > max_bytes:
        raise AnalysisRejected(f"Source is {size} bytes; the limit is {max_bytes} bytes")

    longest = max((len(line) for line in source.split("\n")), default=0)
    if longest > max_line_chars:
        raise AnalysisRejected(
            f"Source contains a {longest}-character line; the limit is {max_line_chars}"
        )
    return source
