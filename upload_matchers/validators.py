from __future__ import annotations

import re
from typing import Any, Iterable

from pydantic import GetCoreSchemaHandler
from pydantic_core import PydanticCustomError, core_schema
from starlette.datastructures import UploadFile

from upload_matchers.config import settings
from upload_matchers.i18n import human_size, t
from upload_matchers.schemas import AttachedSpec, ContentTypeSpec, FileSizeSpec

AllowEntry = str | re.Pattern[str]


def uploads_of(value: Any) -> list[UploadFile]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [item for item in value if item is not None]
    return [value]


def upload_size(upload: UploadFile) -> int:
    if upload.size is not None:
        return int(upload.size)
    position = upload.file.tell()
    upload.file.seek(0, 2)
    size = upload.file.tell()
    upload.file.seek(position)
    return size


def normalize_content_type(content_type: str | None) -> str:
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip()


class AttachmentValidator:
    """Runs as a pydantic after-validator on each upload held by the field."""

    code: str = "attachment_invalid"

    def __init__(self, *, message: str | None = None) -> None:
        self.message = message

    def __get_pydantic_core_schema__(self, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(self, handler(source_type))

    def __call__(self, value: Any) -> Any:
        for upload in uploads_of(value):
            self.check(upload)
        return value

    def check(self, upload: UploadFile) -> None:
        raise NotImplementedError

    def fail(self, code: str, context: dict[str, str]) -> PydanticCustomError:
        return PydanticCustomError(code, self.message or t(code, settings.locale), context)


class ContentType(AttachmentValidator):
    code = "content_type_invalid"

    def __init__(self, *allow: AllowEntry | Iterable[AllowEntry], message: str | None = None) -> None:
        super().__init__(message=message)
        entries: list[AllowEntry] = []
        for item in allow:
            if isinstance(item, (str, re.Pattern)):
                entries.append(item)
            else:
                entries.extend(item)
        if not entries:
            raise ValueError("ContentType requires at least one allowed content type")
        for entry in entries:
            if isinstance(entry, re.Pattern):
                continue
            if not isinstance(entry, str) or not entry.strip():
                raise ValueError(f"Invalid allowed content type: {entry!r}")
        self.allow: tuple[AllowEntry, ...] = tuple(entries)

    def __repr__(self) -> str:
        return f"ContentType({', '.join(repr(entry) for entry in self.allow)}, message={self.message!r})"

    def accepts(self, content_type: str | None) -> bool:
        value = normalize_content_type(content_type)
        for entry in self.allow:
            if isinstance(entry, re.Pattern):
                if entry.search(value):
                    return True
            elif entry == value:
                return True
        return False

    def check(self, upload: UploadFile) -> None:
        if self.accepts(upload.content_type):
            return
        spec = self.describe()
        raise self.fail(
            self.code,
            {
                "content_type": normalize_content_type(upload.content_type),
                "authorized_types": ", ".join(spec.exact_types + spec.patterns),
            },
        )

    def example_type(self) -> str | None:
        for entry in self.allow:
            if isinstance(entry, str):
                return entry
        return None

    def describe(self) -> ContentTypeSpec:
        return ContentTypeSpec(
            exact_types=tuple(entry for entry in self.allow if isinstance(entry, str)),
            patterns=tuple(entry.pattern for entry in self.allow if isinstance(entry, re.Pattern)),
            message=self.message,
        )


class FileSize(AttachmentValidator):
    def __init__(
        self,
        *,
        less_than: int | None = None,
        less_than_or_equal_to: int | None = None,
        greater_than: int | None = None,
        greater_than_or_equal_to: int | None = None,
        between: tuple[int, int] | None = None,
        message: str | None = None,
    ) -> None:
        super().__init__(message=message)
        bounds = {
            "less_than": less_than,
            "less_than_or_equal_to": less_than_or_equal_to,
            "greater_than": greater_than,
            "greater_than_or_equal_to": greater_than_or_equal_to,
        }
        configured = {name: value for name, value in bounds.items() if value is not None}
        if between is not None and configured:
            raise ValueError("FileSize 'between' cannot be combined with other bounds")
        if between is None and not configured:
            raise ValueError("FileSize requires at least one bound")
        for name, value in configured.items():
            if value < 0:
                raise ValueError(f"FileSize {name} must be >= 0")
        if between is not None:
            low, high = between
            if low < 0 or high < low:
                raise ValueError("FileSize between must be (low, high) with 0 <= low <= high")
            between = (int(low), int(high))

        self.less_than = less_than
        self.less_than_or_equal_to = less_than_or_equal_to
        self.greater_than = greater_than
        self.greater_than_or_equal_to = greater_than_or_equal_to
        self.between = between

    def __repr__(self) -> str:
        spec = self.describe().model_dump(exclude_none=True)
        return f"FileSize({', '.join(f'{k}={v!r}' for k, v in spec.items())})"

    def violation(self, size: int) -> tuple[str, dict[str, str]] | None:
        file_size = human_size(size)
        if self.less_than is not None and size >= self.less_than:
            return "file_size_not_less_than", {"file_size": file_size, "max_size": human_size(self.less_than)}
        if self.less_than_or_equal_to is not None and size > self.less_than_or_equal_to:
            return "file_size_not_less_than_or_equal_to", {
                "file_size": file_size,
                "max_size": human_size(self.less_than_or_equal_to),
            }
        if self.greater_than is not None and size <= self.greater_than:
            return "file_size_not_greater_than", {"file_size": file_size, "min_size": human_size(self.greater_than)}
        if self.greater_than_or_equal_to is not None and size < self.greater_than_or_equal_to:
            return "file_size_not_greater_than_or_equal_to", {
                "file_size": file_size,
                "min_size": human_size(self.greater_than_or_equal_to),
            }
        if self.between is not None:
            low, high = self.between
            if size < low or size > high:
                return "file_size_not_between", {
                    "file_size": file_size,
                    "min_size": human_size(low),
                    "max_size": human_size(high),
                }
        return None

    def check(self, upload: UploadFile) -> None:
        found = self.violation(upload_size(upload))
        if found:
            code, context = found
            raise self.fail(code, context)

    def accepted_range(self) -> tuple[int, int | None]:
        lower = 0
        upper: int | None = None
        if self.greater_than is not None:
            lower = max(lower, self.greater_than + 1)
        if self.greater_than_or_equal_to is not None:
            lower = max(lower, self.greater_than_or_equal_to)
        if self.less_than is not None:
            upper = self.less_than - 1
        if self.less_than_or_equal_to is not None:
            upper = self.less_than_or_equal_to if upper is None else min(upper, self.less_than_or_equal_to)
        if self.between is not None:
            lower = max(lower, self.between[0])
            upper = self.between[1] if upper is None else min(upper, self.between[1])
        return lower, upper

    def satisfying_size(self, preferred: int) -> int | None:
        lower, upper = self.accepted_range()
        if upper is not None and upper < lower:
            return None
        if preferred >= lower and (upper is None or preferred <= upper):
            return preferred
        return lower

    def violating_size(self) -> int | None:
        lower, upper = self.accepted_range()
        if upper is not None:
            return upper + 1
        if lower > 0:
            return lower - 1
        return None

    def describe(self) -> FileSizeSpec:
        return FileSizeSpec(
            less_than=self.less_than,
            less_than_or_equal_to=self.less_than_or_equal_to,
            greater_than=self.greater_than,
            greater_than_or_equal_to=self.greater_than_or_equal_to,
            between=self.between,
            message=self.message,
        )


class Attached(AttachmentValidator):
    code = "blank"

    def __repr__(self) -> str:
        return f"Attached(message={self.message!r})"

    def __call__(self, value: Any) -> Any:
        if not uploads_of(value):
            raise self.fail(self.code, {})
        return value

    def check(self, upload: UploadFile) -> None:
        return

    def describe(self) -> AttachedSpec:
        return AttachedSpec(message=self.message)
