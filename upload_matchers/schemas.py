from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ContentTypeSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    exact_types: tuple[str, ...] = ()
    patterns: tuple[str, ...] = ()
    message: str | None = None


class FileSizeSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    less_than: int | None = None
    less_than_or_equal_to: int | None = None
    greater_than: int | None = None
    greater_than_or_equal_to: int | None = None
    between: tuple[int, int] | None = None
    message: str | None = None


class AttachedSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str | None = None


class AttachmentError(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    message: str


class Verdict(BaseModel):
    model_config = ConfigDict(frozen=True)

    matched: bool
    reason: str | None = None
    probes: list[str] = Field(default_factory=list)

    def __bool__(self) -> bool:
        return self.matched
