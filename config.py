"""
config.py — Flask configuration classes for the Solidity auditor.
"""
import os
import secrets


class BaseConfig:
    """Base configuration shared by all environments."""
    SECRET_KEY = os.environ.get("SECRET_KEY") or secrets.token_hex(32)

    # Input ceiling applied before analysis
    MAX_SOURCE_KB = int(os.environ.get("MAX_SOURCE_KB", 512))
    MAX_SOURCE_BYTES = MAX_SOURCE_KB * 1024
    MAX_LINE_CHARS = int(os.environ.get("MAX_LINE_CHARS", 10000))
    # Multipart uploads carry some overhead on top of the source itself
    MAX_CONTENT_LENGTH = MAX_SOURCE_BYTES * 2

    MAX_BATCH_FILES = int(os.environ.get("MAX_BATCH_FILES", 100))
    ALLOWED_EXTENSIONS = (".sol",)

    # 'legacy' (fixed windows) or 'scoped' (brace tracking)
    SCAN_MODE = os.environ.get("SCAN_MODE", "legacy")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "same-origin")

    VERSION = "1.0.0"


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    TESTING = False
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG")


class ProductionConfig(BaseConfig):
    DEBUG = False
    TESTING = False


class TestingConfig(BaseConfig):
    DEBUG = True
    TESTING = True
    MAX_SOURCE_KB = 4
    MAX_SOURCE_BYTES = MAX_SOURCE_KB * 1024
    MAX_LINE_CHARS = 500
    MAX_CONTENT_LENGTH = 64 * 1024
    MAX_BATCH_FILES = 3
    SCAN_MODE = "legacy"


config_map = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
    "default": DevelopmentConfig,
}
