import re
from typing import Annotated

from fastapi import UploadFile
from pydantic import Field

from upload_matchers import Attached, AttachmentModel, ContentType, FileSize


class ContentTypeMatcherModel(AttachmentModel):
    title: str
    allowing_one: Annotated[UploadFile | None, ContentType("image/png")] = None
    allowing_several: Annotated[UploadFile | None, ContentType("image/png", "image/gif")] = None
    allowing_several_through_regex: Annotated[UploadFile | None, ContentType(re.compile(r"\Aimage/.*\Z"))] = None
    with_message: Annotated[UploadFile | None, ContentType("image/png", message="Not authorized file type.")] = None
    allowing_one_with_message: Annotated[
        UploadFile | None, ContentType("file/pdf", message="Not authorized file type.")
    ] = None
    gallery: Annotated[list[UploadFile] | None, ContentType(["image/png", "image/jpeg"])] = None
    sized_and_typed: Annotated[UploadFile | None, FileSize(greater_than=10_000), ContentType("image/png")] = None
    no_validation: UploadFile | None = None


class SizeMatcherModel(AttachmentModel):
    less_than: Annotated[UploadFile | None, FileSize(less_than=2 * 1024)] = None
    less_than_or_equal_to: Annotated[UploadFile | None, FileSize(less_than_or_equal_to=2 * 1024)] = None
    greater_than: Annotated[UploadFile | None, FileSize(greater_than=1024)] = None
    greater_than_or_equal_to: Annotated[UploadFile | None, FileSize(greater_than_or_equal_to=1024)] = None
    between: Annotated[UploadFile | None, FileSize(between=(1024, 5 * 1024))] = None
    with_message: Annotated[UploadFile | None, FileSize(less_than=1024, message="File is too big.")] = None
    typed_and_sized: Annotated[UploadFile | None, ContentType("application/pdf"), FileSize(less_than=1024)] = None
    documents: Annotated[list[UploadFile] | None, FileSize(less_than=1024)] = None
    no_validation: UploadFile | None = None


class AttachedMatcherModel(AttachmentModel):
    avatar: Annotated[UploadFile | None, Attached()] = None
    with_message: Annotated[UploadFile | None, Attached(message="Please attach a file.")] = None
    photos: Annotated[list[UploadFile] | None, Attached()] = None
    typed_avatar: Annotated[UploadFile | None, Attached(), ContentType("image/jpeg")] = None
    optional: Annotated[UploadFile | None, ContentType("image/png")] = None


class NestedAnnotationModel(AttachmentModel):
    avatar: Annotated[UploadFile | None, ContentType("image/png"), Field(alias="avatarFile")] = None
    cover: Annotated[UploadFile, ContentType("image/png", message="Cover must be a PNG.")] | None = None
    photos: list[Annotated[UploadFile, ContentType("image/png", "image/jpeg")]] | None = None
