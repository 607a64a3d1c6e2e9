from __future__ import annotations

import logging
import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    locale: str = os.getenv("UPLOAD_MATCHERS_LOCALE", "en")
    probe_filename: str = os.getenv("UPLOAD_MATCHERS_PROBE_FILENAME", "probe.bin")
    probe_content_type: str = os.getenv("UPLOAD_MATCHERS_PROBE_CONTENT_TYPE", "image/png")
    rejection_probe_content_type: str = os.getenv(
        "UPLOAD_MATCHERS_REJECTION_PROBE_CONTENT_TYPE", "application/x-upload-matchers-probe"
    )
    probe_size_bytes: int = int(os.getenv("UPLOAD_MATCHERS_PROBE_SIZE_BYTES", "1024"))
    probe_payload_bytes: int = int(os.getenv("UPLOAD_MATCHERS_PROBE_PAYLOAD_BYTES", "4096"))
    log_level: str = os.getenv("UPLOAD_MATCHERS_LOG_LEVEL", "WARNING").upper()


settings = Settings()

SUPPORTED_LOCALES = {"en", "fa"}
LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


def validate_settings(cfg: Settings) -> None:
    if cfg.locale not in SUPPORTED_LOCALES:
        raise ValueError(f"Invalid UPLOAD_MATCHERS_LOCALE: {cfg.locale}")

    if not cfg.probe_filename.strip():
        raise ValueError("UPLOAD_MATCHERS_PROBE_FILENAME must not be empty")
    if not cfg.probe_content_type.strip():
        raise ValueError("UPLOAD_MATCHERS_PROBE_CONTENT_TYPE must not be empty")
    if not cfg.rejection_probe_content_type.strip():
        raise ValueError("UPLOAD_MATCHERS_REJECTION_PROBE_CONTENT_TYPE must not be empty")
    if cfg.rejection_probe_content_type == cfg.probe_content_type:
        raise ValueError("UPLOAD_MATCHERS_REJECTION_PROBE_CONTENT_TYPE must differ from UPLOAD_MATCHERS_PROBE_CONTENT_TYPE")

    if cfg.probe_size_bytes < 0:
        raise ValueError("UPLOAD_MATCHERS_PROBE_SIZE_BYTES must be >= 0")
    if cfg.probe_payload_bytes <= 0:
        raise ValueError("UPLOAD_MATCHERS_PROBE_PAYLOAD_BYTES must be > 0")

    if cfg.log_level not in LOG_LEVELS:
        raise ValueError(f"Invalid UPLOAD_MATCHERS_LOG_LEVEL: {cfg.log_level}")


def configure_logging(cfg: Settings) -> logging.Logger:
    logger = logging.getLogger("upload_matchers")
    if not any(isinstance(handler, logging.NullHandler) for handler in logger.handlers):
        logger.addHandler(logging.NullHandler())
    logger.setLevel(cfg.log_level)
    return logger
