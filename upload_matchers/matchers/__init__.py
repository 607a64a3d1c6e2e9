from upload_matchers.matchers.attached import AttachedMatcher
from upload_matchers.matchers.base import AttachmentMatcher, NoMatch
from upload_matchers.matchers.content_type import ContentTypeExpectation, ContentTypeMatcher
from upload_matchers.matchers.size import SizeMatcher


def validate_content_type_of(attribute: str) -> ContentTypeMatcher:
    return ContentTypeMatcher(attribute)


def validate_size_of(attribute: str) -> SizeMatcher:
    return SizeMatcher(attribute)


def validate_attached_of(attribute: str) -> AttachedMatcher:
    return AttachedMatcher(attribute)


__all__ = [
    "AttachedMatcher",
    "AttachmentMatcher",
    "ContentTypeExpectation",
    "ContentTypeMatcher",
    "NoMatch",
    "SizeMatcher",
    "validate_attached_of",
    "validate_content_type_of",
    "validate_size_of",
]
