from __future__ import annotations

from collections import defaultdict
from typing import Any

from pydantic import BaseModel, ValidationError
from pydantic.fields import FieldInfo

from upload_matchers.schemas import AttachmentError


def model_class(target: type[BaseModel] | BaseModel) -> type[BaseModel]:
    if isinstance(target, type) and issubclass(target, BaseModel):
        return target
    if isinstance(target, BaseModel):
        return type(target)
    raise TypeError(f"Expected a pydantic model class or instance, got {target!r}")


def blank_instance(target: type[BaseModel] | BaseModel) -> BaseModel:
    if isinstance(target, BaseModel):
        return target
    return model_class(target).model_construct()


def attach(instance: BaseModel, name: str, value: Any) -> None:
    if name not in type(instance).model_fields:
        raise AttributeError(f"{type(instance).__name__} has no attribute {name!r}")
    # Plain attribute assignment; validation happens in collect_errors.
    instance.__dict__[name] = value


def input_key(name: str, field: FieldInfo) -> str:
    if isinstance(field.validation_alias, str):
        return field.validation_alias
    return field.alias or name


def collect_errors(instance: BaseModel) -> dict[str, list[AttachmentError]]:
    fields = type(instance).model_fields
    keys = {name: input_key(name, field) for name, field in fields.items()}
    names = {key: name for name, key in keys.items()}
    data = {keys[name]: value for name, value in instance.__dict__.items() if name in fields}
    try:
        type(instance).model_validate(data)
    except ValidationError as exc:
        errors: dict[str, list[AttachmentError]] = defaultdict(list)
        for error in exc.errors(include_url=False):
            loc = error.get("loc") or ("__root__",)
            name = names.get(str(loc[0]), str(loc[0]))
            errors[name].append(AttachmentError(code=str(error["type"]), message=str(error["msg"])))
        return dict(errors)
    return {}


def error_messages(instance: BaseModel) -> dict[str, list[str]]:
    return {name: [error.message for error in errors] for name, errors in collect_errors(instance).items()}


class AttachmentModel(BaseModel):
    """Nothing is validated until ``validation_errors()`` is called."""

    @classmethod
    def blank(cls) -> AttachmentModel:
        return cls.model_construct()

    def attach(self, name: str, value: Any) -> None:
        attach(self, name, value)

    def validation_errors(self) -> dict[str, list[str]]:
        return error_messages(self)

    def is_valid(self) -> bool:
        return not collect_errors(self)
