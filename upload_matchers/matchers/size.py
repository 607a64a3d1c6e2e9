from __future__ import annotations

from pydantic import BaseModel

from upload_matchers.introspection import first_validator
from upload_matchers.matchers.base import AttachmentMatcher, NoMatch
from upload_matchers.validators import FileSize


def _bound(value: int, clause: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{clause}() expects a non-negative integer, got {value!r}")
    return value


class SizeMatcher(AttachmentMatcher):
    def __init__(self, attribute: str) -> None:
        super().__init__(attribute)
        self._bounds: list[tuple[str, tuple[int, ...]]] = []

    def less_than(self, size: int) -> SizeMatcher:
        self._bounds.append(("less_than", (_bound(size, "less_than"),)))
        return self

    def less_than_or_equal_to(self, size: int) -> SizeMatcher:
        self._bounds.append(("less_than_or_equal_to", (_bound(size, "less_than_or_equal_to"),)))
        return self

    def greater_than(self, size: int) -> SizeMatcher:
        self._bounds.append(("greater_than", (_bound(size, "greater_than"),)))
        return self

    def greater_than_or_equal_to(self, size: int) -> SizeMatcher:
        self._bounds.append(("greater_than_or_equal_to", (_bound(size, "greater_than_or_equal_to"),)))
        return self

    def between(self, low: int, high: int) -> SizeMatcher:
        low, high = _bound(low, "between"), _bound(high, "between")
        if high < low:
            raise ValueError("between() expects low <= high")
        self._bounds.append(("between", (low, high)))
        return self

    def description(self) -> str:
        text = f"validate the file size of {self.attribute!r}"
        for kind, values in self._bounds:
            text += f" {kind.replace('_', ' ')} {' and '.join(str(value) for value in values)} bytes"
        if self.expected_message is not None:
            text += f" with the message {self.expected_message!r}"
        return text

    def boundary_probes(self) -> list[tuple[int, bool]]:
        probes: list[tuple[int, bool]] = []
        for kind, values in self._bounds:
            if kind == "less_than":
                probes += [(values[0] - 1, True), (values[0], False)]
            elif kind == "less_than_or_equal_to":
                probes += [(values[0], True), (values[0] + 1, False)]
            elif kind == "greater_than":
                probes += [(values[0] + 1, True), (values[0], False)]
            elif kind == "greater_than_or_equal_to":
                probes += [(values[0], True), (values[0] - 1, False)]
            else:
                low, high = values
                probes += [(low, True), (high, True), (low - 1, False), (high + 1, False)]
        return [(size, accepted) for size, accepted in probes if size >= 0]

    def evaluate(self, instance: BaseModel) -> None:
        validator = first_validator(instance, self.attribute, FileSize)
        if validator is None:
            raise NoMatch(f"{self.attribute!r} has no file size validation")

        content_type = self.probe_content_type(instance)
        observed: list[str] = []
        for size, accepted in self.boundary_probes():
            errors = self._errors_for(instance, content_type, size)
            if accepted and errors:
                raise NoMatch(f"expected a {size} byte file to be accepted but it was rejected with {errors[0]!r}")
            if not accepted:
                if not errors:
                    raise NoMatch(f"expected a {size} byte file to be rejected but it was accepted")
                observed.extend(errors)

        violating = validator.violating_size()
        self.check_message(
            observed,
            lambda: [] if violating is None else self._errors_for(instance, content_type, violating),
        )

    def _errors_for(self, instance: BaseModel, content_type: str, size: int) -> list[str]:
        return self.probe(
            instance,
            self.probe_upload(content_type, size),
            lambda code: code.startswith("file_size_"),
        )
