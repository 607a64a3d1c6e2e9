from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel

from upload_matchers.config import settings
from upload_matchers.introspection import content_type_validator_for
from upload_matchers.matchers.base import AttachmentMatcher, NoMatch
from upload_matchers.validators import ContentType


@dataclass(frozen=True)
class ContentTypeExpectation:
    attribute: str
    allowed_types: tuple[str, ...] = ()
    rejected_types: tuple[str, ...] = ()
    expected_message: str | None = None


def _append_types(target: list[str], types: tuple[str, ...], clause: str) -> None:
    if not types:
        raise ValueError(f"{clause}() requires at least one content type")
    for content_type in types:
        if not isinstance(content_type, str) or not content_type:
            raise ValueError(f"{clause}() expects non-empty strings, got {content_type!r}")
    for content_type in types:
        if content_type not in target:
            target.append(content_type)


class ContentTypeMatcher(AttachmentMatcher):
    def __init__(self, attribute: str) -> None:
        super().__init__(attribute)
        self._allowed: list[str] = []
        self._rejected: list[str] = []

    def allowing(self, *types: str) -> ContentTypeMatcher:
        _append_types(self._allowed, types, "allowing")
        return self

    def rejecting(self, *types: str) -> ContentTypeMatcher:
        _append_types(self._rejected, types, "rejecting")
        return self

    def snapshot(self) -> ContentTypeExpectation:
        return ContentTypeExpectation(
            attribute=self.attribute,
            allowed_types=tuple(self._allowed),
            rejected_types=tuple(self._rejected),
            expected_message=self.expected_message,
        )

    def description(self) -> str:
        text = f"validate the content type of {self.attribute!r}"
        if self._allowed:
            text += f" allowing {', '.join(self._allowed)}"
        if self._rejected:
            text += f" rejecting {', '.join(self._rejected)}"
        if self.expected_message is not None:
            text += f" with the message {self.expected_message!r}"
        return text

    def evaluate(self, instance: BaseModel) -> None:
        expectation = self.snapshot()
        if content_type_validator_for(instance, expectation.attribute) is None:
            raise NoMatch(f"{expectation.attribute!r} has no content type validation")

        size = self.probe_size(instance)
        for content_type in expectation.allowed_types:
            errors = self._errors_for(instance, content_type, size)
            if errors:
                raise NoMatch(f"expected {content_type!r} to be accepted but it was rejected with {errors[0]!r}")

        observed: list[str] = []
        for content_type in expectation.rejected_types:
            errors = self._errors_for(instance, content_type, size)
            if not errors:
                raise NoMatch(f"expected {content_type!r} to be rejected but it was accepted")
            observed.extend(errors)

        self.check_message(
            observed,
            lambda: self._errors_for(instance, settings.rejection_probe_content_type, size),
        )

    def _errors_for(self, instance: BaseModel, content_type: str, size: int) -> list[str]:
        return self.probe(
            instance,
            self.probe_upload(content_type, size),
            lambda code: code == ContentType.code,
        )
