"""Matchers for asserting upload validation rules declared on pydantic models."""

from upload_matchers.assertions import assert_does_not_match, assert_matches
from upload_matchers.config import configure_logging, settings, validate_settings
from upload_matchers.matchers import (
    AttachedMatcher,
    ContentTypeMatcher,
    SizeMatcher,
    validate_attached_of,
    validate_content_type_of,
    validate_size_of,
)
from upload_matchers.models import AttachmentModel, collect_errors, error_messages
from upload_matchers.schemas import Verdict
from upload_matchers.uploads import synthetic_upload
from upload_matchers.validators import Attached, ContentType, FileSize

validate_settings(settings)
configure_logging(settings)

__all__ = [
    "Attached",
    "AttachedMatcher",
    "AttachmentModel",
    "ContentType",
    "ContentTypeMatcher",
    "FileSize",
    "SizeMatcher",
    "Verdict",
    "assert_does_not_match",
    "assert_matches",
    "collect_errors",
    "error_messages",
    "synthetic_upload",
    "validate_attached_of",
    "validate_content_type_of",
    "validate_size_of",
]
