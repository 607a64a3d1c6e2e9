from __future__ import annotations

import typing
from typing import Annotated, Any, TypeVar

from pydantic import BaseModel

from upload_matchers.models import model_class
from upload_matchers.schemas import AttachedSpec, ContentTypeSpec, FileSizeSpec
from upload_matchers.validators import Attached, AttachmentValidator, ContentType, FileSize

V = TypeVar("V", bound=AttachmentValidator)


def attachment_validators(target: type[BaseModel] | BaseModel, attribute: str) -> list[AttachmentValidator]:
    field = model_class(target).model_fields.get(attribute)
    if field is None:
        return []
    found = [item for item in field.metadata if isinstance(item, AttachmentValidator)]
    return found + _nested_validators(field.annotation)


def _nested_validators(annotation: Any) -> list[AttachmentValidator]:
    if typing.get_origin(annotation) is Annotated:
        inner, *metadata = typing.get_args(annotation)
        own = [item for item in metadata if isinstance(item, AttachmentValidator)]
        return own + _nested_validators(inner)
    found: list[AttachmentValidator] = []
    for arg in typing.get_args(annotation):
        found.extend(_nested_validators(arg))
    return found


def validators_for(target: type[BaseModel] | BaseModel, attribute: str, kind: type[V]) -> list[V]:
    return [item for item in attachment_validators(target, attribute) if isinstance(item, kind)]


def first_validator(target: type[BaseModel] | BaseModel, attribute: str, kind: type[V]) -> V | None:
    found = validators_for(target, attribute, kind)
    return found[0] if found else None


def content_type_validator_for(target: type[BaseModel] | BaseModel, attribute: str) -> ContentTypeSpec | None:
    validator = first_validator(target, attribute, ContentType)
    return validator.describe() if validator else None


def file_size_validator_for(target: type[BaseModel] | BaseModel, attribute: str) -> FileSizeSpec | None:
    validator = first_validator(target, attribute, FileSize)
    return validator.describe() if validator else None


def attached_validator_for(target: type[BaseModel] | BaseModel, attribute: str) -> AttachedSpec | None:
    validator = first_validator(target, attribute, Attached)
    return validator.describe() if validator else None


def accepts_many(target: type[BaseModel] | BaseModel, attribute: str) -> bool:
    field = model_class(target).model_fields.get(attribute)
    if field is None:
        return False
    return _is_sequence(field.annotation)


def _is_sequence(annotation: Any) -> bool:
    origin = typing.get_origin(annotation)
    if origin in (list, tuple):
        return True
    return any(_is_sequence(arg) for arg in typing.get_args(annotation) if arg is not type(None))
