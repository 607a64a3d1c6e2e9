from __future__ import annotations

import logging
from typing import Any, Callable

from pydantic import BaseModel

from upload_matchers.config import settings
from upload_matchers.introspection import accepts_many, first_validator
from upload_matchers.models import attach, blank_instance, collect_errors
from upload_matchers.schemas import Verdict
from upload_matchers.uploads import synthetic_upload
from upload_matchers.validators import ContentType, FileSize

LOGGER = logging.getLogger(__name__)

_UNSET = object()


class NoMatch(Exception):
    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class AttachmentMatcher:
    """Subclasses raise ``NoMatch`` at the first expectation that does not hold."""

    def __init__(self, attribute: str) -> None:
        if not isinstance(attribute, str) or not attribute:
            raise ValueError("attribute must be a non-empty string")
        self.attribute = attribute
        self.expected_message: str | None = None
        self.verdict: Verdict | None = None
        self._target_name = ""
        self._probes: list[str] = []

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.description()}>"

    def with_message(self, text: str) -> AttachmentMatcher:
        if not isinstance(text, str):
            raise ValueError("with_message() requires a string")
        self.expected_message = text
        return self

    def description(self) -> str:
        raise NotImplementedError

    def evaluate(self, instance: BaseModel) -> None:
        raise NotImplementedError

    def matches(self, target: type[BaseModel] | BaseModel) -> Verdict:
        instance = blank_instance(target)
        self._target_name = target.__name__ if isinstance(target, type) else f"{type(target).__name__} instance"
        self._probes = []

        original = instance.__dict__.get(self.attribute, _UNSET)
        try:
            self.evaluate(instance)
        except NoMatch as exc:
            verdict = Verdict(matched=False, reason=exc.reason, probes=list(self._probes))
        else:
            verdict = Verdict(matched=True, probes=list(self._probes))
        finally:
            if original is _UNSET:
                instance.__dict__.pop(self.attribute, None)
            else:
                instance.__dict__[self.attribute] = original

        LOGGER.debug("%s on %s: matched=%s reason=%s", self.description(), self._target_name, verdict.matched, verdict.reason)
        self.verdict = verdict
        return verdict

    def does_not_match(self, target: type[BaseModel] | BaseModel) -> Verdict:
        verdict = self.matches(target)
        return Verdict(
            matched=not verdict.matched,
            reason=None if not verdict.matched else "every expectation held",
            probes=verdict.probes,
        )

    @property
    def failure_message(self) -> str:
        verdict = self._require_verdict()
        return f"Expected {self._target_name} to {self.description()}, but {verdict.reason}"

    @property
    def failure_message_when_negated(self) -> str:
        self._require_verdict()
        return f"Expected {self._target_name} not to {self.description()}, but every expectation held"

    def _require_verdict(self) -> Verdict:
        if self.verdict is None:
            raise RuntimeError("matcher has not been evaluated yet")
        return self.verdict

    def probe(self, instance: BaseModel, value: Any, wanted: Callable[[str], bool]) -> list[str]:
        if value is not None and not isinstance(value, list) and accepts_many(instance, self.attribute):
            value = [value]
        attach(instance, self.attribute, value)
        errors = collect_errors(instance).get(self.attribute, [])
        messages = [error.message for error in errors if wanted(error.code)]
        self._probes.append(f"{_describe_value(value)}: {'rejected' if messages else 'accepted'}")
        LOGGER.debug("probe %s.%s with %s -> %s", self._target_name, self.attribute, _describe_value(value), messages)
        return messages

    def probe_size(self, instance: BaseModel) -> int:
        validator = first_validator(instance, self.attribute, FileSize)
        if validator is None:
            return settings.probe_size_bytes
        size = validator.satisfying_size(settings.probe_size_bytes)
        return settings.probe_size_bytes if size is None else size

    def probe_content_type(self, instance: BaseModel) -> str:
        validator = first_validator(instance, self.attribute, ContentType)
        if validator is None or validator.accepts(settings.probe_content_type):
            return settings.probe_content_type
        return validator.example_type() or settings.probe_content_type

    def probe_upload(self, content_type: str, size: int) -> Any:
        return synthetic_upload(content_type, size=size)

    def check_message(self, observed: list[str], provoke: Callable[[], list[str]]) -> None:
        if self.expected_message is None:
            return
        if not observed:
            observed = provoke()
        if not observed:
            raise NoMatch(f"no rejection could be provoked to compare the message {self.expected_message!r}")
        if self.expected_message not in observed:
            got = ", ".join(repr(message) for message in observed)
            raise NoMatch(f"expected the error message {self.expected_message!r} but got {got}")


def _describe_value(value: Any) -> str:
    if value is None:
        return "nothing"
    if isinstance(value, list):
        if not value:
            return "nothing"
        return ", ".join(_describe_value(item) for item in value)
    return f"{value.content_type or '<no content type>'} ({value.size} bytes)"
