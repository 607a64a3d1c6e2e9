import pytest

from upload_matchers import synthetic_upload
from upload_matchers.config import settings
from upload_matchers.validators import upload_size


def test_synthetic_upload_carries_content_type_and_size():
    upload = synthetic_upload("image/png", size=10)
    assert upload.content_type == "image/png"
    assert upload.size == 10
    assert upload.filename == settings.probe_filename
    assert upload.file.read() == b"\x00" * 10


def test_synthetic_upload_caps_payload_but_keeps_declared_size():
    upload = synthetic_upload("image/png", size=settings.probe_payload_bytes * 4)
    assert upload.size == settings.probe_payload_bytes * 4
    assert len(upload.file.read()) == settings.probe_payload_bytes


def test_synthetic_upload_defaults():
    upload = synthetic_upload("not_valid", filename="avatar.png")
    assert upload.content_type == "not_valid"
    assert upload.size == settings.probe_size_bytes
    assert upload.filename == "avatar.png"


def test_synthetic_upload_rejects_negative_size():
    with pytest.raises(ValueError):
        synthetic_upload("image/png", size=-1)


def test_upload_size_measures_file_when_size_is_unknown():
    upload = synthetic_upload("image/png", size=12)
    upload.size = None
    assert upload_size(upload) == 12
    assert upload.file.tell() == 0
