from __future__ import annotations

from pydantic import BaseModel

from upload_matchers.matchers.base import AttachmentMatcher


def assert_matches(matcher: AttachmentMatcher, target: type[BaseModel] | BaseModel) -> None:
    __tracebackhide__ = True
    if not matcher.matches(target):
        raise AssertionError(matcher.failure_message)


def assert_does_not_match(matcher: AttachmentMatcher, target: type[BaseModel] | BaseModel) -> None:
    __tracebackhide__ = True
    if not matcher.does_not_match(target):
        raise AssertionError(matcher.failure_message_when_negated)
