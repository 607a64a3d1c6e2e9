from __future__ import annotations

from pydantic import BaseModel

from upload_matchers.introspection import accepts_many, first_validator
from upload_matchers.matchers.base import AttachmentMatcher, NoMatch
from upload_matchers.validators import Attached


class AttachedMatcher(AttachmentMatcher):
    def description(self) -> str:
        text = f"validate that {self.attribute!r} is attached"
        if self.expected_message is not None:
            text += f" with the message {self.expected_message!r}"
        return text

    def evaluate(self, instance: BaseModel) -> None:
        if first_validator(instance, self.attribute, Attached) is None:
            raise NoMatch(f"{self.attribute!r} has no attached validation")

        blank = [] if accepts_many(instance, self.attribute) else None
        missing = self.probe(instance, blank, self._is_blank)
        if not missing:
            raise NoMatch("expected a missing attachment to be rejected but it was accepted")

        upload = self.probe_upload(self.probe_content_type(instance), self.probe_size(instance))
        errors = self.probe(instance, upload, self._is_blank)
        if errors:
            raise NoMatch(f"expected an attached file to be accepted but it was rejected with {errors[0]!r}")

        self.check_message(missing, lambda: [])

    @staticmethod
    def _is_blank(code: str) -> bool:
        return code == Attached.code
