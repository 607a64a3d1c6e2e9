import pytest
from fastapi import FastAPI, File, UploadFile
from fastapi.responses import JSONResponse
from fastapi.testclient import TestClient

from tests.models import ContentTypeMatcherModel, SizeMatcherModel
from upload_matchers import error_messages, validate_content_type_of, validate_size_of


def create_app() -> FastAPI:
    app = FastAPI(title="upload-matchers demo")

    @app.post("/profiles/{attribute}")
    def upload_profile_file(attribute: str, file: UploadFile = File(...)):
        profile = ContentTypeMatcherModel(title="profile")
        profile.attach(attribute, file)
        errors = error_messages(profile)
        if errors:
            return JSONResponse(status_code=422, content={"errors": errors})
        return {"attribute": attribute, "content_type": file.content_type}

    @app.post("/documents/{attribute}")
    def upload_document(attribute: str, file: UploadFile = File(...)):
        document = SizeMatcherModel.blank()
        document.attach(attribute, file)
        errors = error_messages(document)
        if errors:
            return JSONResponse(status_code=422, content={"errors": errors})
        return {"attribute": attribute, "size": file.size}

    return app


client = TestClient(create_app())


def post_profile_file(attribute: str, content_type: str):
    return client.post(
        f"/profiles/{attribute}",
        files={"file": ("upload.bin", b"\x89PNG\r\n\x1a\n", content_type)},
    )


def test_upload_with_allowed_content_type():
    r = post_profile_file("allowing_one", "image/png")
    assert r.status_code == 200
    assert r.json() == {"attribute": "allowing_one", "content_type": "image/png"}


def test_upload_with_custom_message():
    r = post_profile_file("with_message", "video/mkv")
    assert r.status_code == 422
    assert r.json() == {"errors": {"with_message": ["Not authorized file type."]}}


@pytest.mark.parametrize(
    ("attribute", "content_type"),
    [
        ("allowing_one", "image/png"),
        ("allowing_one", "not_valid"),
        ("allowing_several", "image/gif"),
        ("allowing_several", "file/pdf"),
        ("allowing_several_through_regex", "image/webp"),
        ("allowing_several_through_regex", "video/mkv"),
    ],
)
def test_matcher_agrees_with_http_upload(attribute, content_type):
    accepted_over_http = post_profile_file(attribute, content_type).status_code == 200

    allowing = validate_content_type_of(attribute).allowing(content_type).matches(ContentTypeMatcherModel)
    rejecting = validate_content_type_of(attribute).rejecting(content_type).matches(ContentTypeMatcherModel)

    assert bool(allowing) is accepted_over_http
    assert bool(rejecting) is not accepted_over_http


def test_size_matcher_agrees_with_http_upload():
    assert validate_size_of("with_message").less_than(1024).with_message("File is too big.").matches(SizeMatcherModel)

    small = client.post("/documents/with_message", files={"file": ("small.bin", b"\x00" * 1023, "application/pdf")})
    large = client.post("/documents/with_message", files={"file": ("large.bin", b"\x00" * 1024, "application/pdf")})
    assert small.status_code == 200
    assert small.json() == {"attribute": "with_message", "size": 1023}
    assert large.status_code == 422
    assert large.json() == {"errors": {"with_message": ["File is too big."]}}
