"""
app.py — Flask Application Factory for the Solidity auditor.
"""
import os
import sys
import json
import logging

import click
from flask import Flask, jsonify
from flask_cors import CORS
from pythonjsonlogger.json import JsonFormatter
from werkzeug.exceptions import RequestEntityTooLarge

from config import config_map

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Route all records through a single JSON handler on the root logger."""
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logging.basicConfig(level=level.upper(), handlers=[handler], force=True)


def create_app(env: str = None) -> Flask:
    """Application factory."""
    env = env or os.environ.get("FLASK_ENV", "development")
    cfg = config_map.get(env, config_map["default"])

    app = Flask(__name__)
    app.config.from_object(cfg)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    # ── Extensions ────────────────────────────────────────────────────────────
    CORS(app, origins=app.config["CORS_ORIGINS"])

    # ── Blueprints ────────────────────────────────────────────────────────────
    from blueprints.api import api_bp
    app.register_blueprint(api_bp, url_prefix="/api/v1")

    @app.errorhandler(RequestEntityTooLarge)
    def too_large(exc):
        return jsonify({"error": "Request body too large"}), 413

    _register_commands(app)

    logger.info("Solidity auditor app created [env=%s]", env)
    return app


def _register_commands(app: Flask) -> None:
    from auditor import AnalysisRejected, ScanMode, analyze, contract_name, enforce_size_limit

    @app.cli.command("scan")
    @click.argument("path", type=click.Path(exists=True, dir_okay=False))
    @click.option("--mode", type=click.Choice([m.value for m in ScanMode]),
                  default=None, help="Look-ahead strategy (defaults to SCAN_MODE).")
    @click.option("--fail-under", type=float, default=None,
                  help="Exit with status 1 when the overall score is below this value.")
    def scan(path, mode, fail_under):
        """Audit a Solidity source file and print the JSON report."""
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            source = f.read()

        try:
            enforce_size_limit(source, app.config["MAX_SOURCE_BYTES"], app.config["MAX_LINE_CHARS"])
        except AnalysisRejected as e:
            click.echo(f"Rejected: {e}", err=True)
            sys.exit(2)

        report = analyze(source, mode or app.config["SCAN_MODE"])
        body = report.to_dict()
        body["contractName"] = contract_name(source)
        click.echo(json.dumps(body, indent=2, ensure_ascii=False))

        if fail_under is not None and report.overall_score < fail_under:
            sys.exit(1)


app = create_app()

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=5000, debug=True)
