"""
blueprints/api/routes.py — REST API endpoints for the Solidity auditor.

Routes:
    POST  /api/v1/analyze
    POST  /api/v1/analyze/batch
    GET   /api/v1/health
"""
import logging

from flask import current_app, request, jsonify
from werkzeug.exceptions import HTTPException
from werkzeug.utils import secure_filename

from blueprints.api import api_bp
from auditor import AnalysisRejected, ScanMode, analyze, contract_name, enforce_size_limit

logger = logging.getLogger(__name__)


# ── Helpers ────────────────────────────────────────────────────────────────────

def _read_upload(file_storage) -> tuple[str, str]:
    """
    Validate the extension of an uploaded file and decode it as UTF-8.
    Returns (safe_filename, source).
    Raises ValueError on invalid input.
    """
    safe_name = secure_filename(file_storage.filename or "contract.sol")
    allowed = current_app.config.get("ALLOWED_EXTENSIONS", (".sol",))
    if not safe_name.lower().endswith(tuple(allowed)):
        raise ValueError(f"Only {', '.join(allowed)} files are accepted")

    try:
        source = file_storage.read().decode("utf-8")
    except UnicodeDecodeError:
        raise ValueError("File is not valid UTF-8 text") from None
    return safe_name, source


def _scan_mode(value) -> ScanMode:
    return ScanMode.parse(value or current_app.config.get("SCAN_MODE", "legacy"))


def _run_analysis(source: str, mode: ScanMode) -> dict:
    """Apply the input ceiling, analyze, and attach the contract name."""
    enforce_size_limit(
        source,
        current_app.config["MAX_SOURCE_BYTES"],
        current_app.config["MAX_LINE_CHARS"],
    )
    report = analyze(source, mode)
    body = report.to_dict()
    body["contractName"] = contract_name(source)
    return body


# ── Routes ──────────────────────────────────────────────────────────────────────

@api_bp.route("/health", methods=["GET"])
def health():
    return jsonify({"status": "ok", "version": current_app.config.get("VERSION", "1.0.0")}), 200


@api_bp.route("/analyze", methods=["POST"])
def analyze_source():
    """POST /api/v1/analyze — analyze source from a JSON body or an uploaded file."""
    try:
        if "file" in request.files:
            _, source = _read_upload(request.files["file"])
            mode = _scan_mode(request.form.get("mode"))
        else:
            body = request.get_json(silent=True)
            if not isinstance(body, dict):
                body = {}
            source = body.get("source")
            if not isinstance(source, str):
                return jsonify({"error": "Provide 'source' in a JSON body or 'file' in a multipart form."}), 400
            mode = _scan_mode(body.get("mode"))

        if not source.strip():
            return jsonify({"error": "Source is empty"}), 400

        return jsonify(_run_analysis(source, mode)), 200
    except HTTPException:
        raise
    except AnalysisRejected as e:
        logger.info("Analysis rejected: %s", e)
        return jsonify({"error": str(e)}), 413
    except ValueError as e:
        return jsonify({"error": str(e)}), 400
    except Exception as e:
        logger.error("Analysis error: %s", e, exc_info=True)
        return jsonify({"error": "Internal analysis error", "detail": str(e)}), 500


@api_bp.route("/analyze/batch", methods=["POST"])
def analyze_batch():
    """POST /api/v1/analyze/batch — analyze several uploaded contracts."""
    files = request.files.getlist("files[]")
    if not files:
        return jsonify({"error": "No files provided"}), 400
    max_files = current_app.config.get("MAX_BATCH_FILES", 100)
    if len(files) > max_files:
        return jsonify({"error": f"Maximum {max_files} files per batch"}), 400

    try:
        mode = _scan_mode(request.form.get("mode"))
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    results = []
    for file in files:
        try:
            safe_name, source = _read_upload(file)
            report = _run_analysis(source, mode)
            results.append({
                "filename": safe_name,
                "contractName": report["contractName"],
                "overallScore": report["overallScore"],
                "scores": report["scores"],
                "severityCounts": report["severityCounts"],
            })
        except ValueError as e:
            results.append({"filename": file.filename, "error": str(e)})
        except Exception as e:
            logger.error("Batch analysis error for %s: %s", file.filename, e, exc_info=True)
            results.append({"filename": file.filename, "error": str(e)})

    # Riskiest contracts first; failed files last
    results.sort(key=lambda x: x.get("overallScore", 999))
    return jsonify(results), 200
