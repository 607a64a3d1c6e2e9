import pytest

from tests.models import ContentTypeMatcherModel
from upload_matchers import assert_does_not_match, assert_matches, validate_content_type_of


def test_assert_matches_raises_with_failure_message():
    matcher = validate_content_type_of("allowing_one").rejecting("image/png")
    with pytest.raises(AssertionError) as exc:
        assert_matches(matcher, ContentTypeMatcherModel)
    assert str(exc.value) == (
        "Expected ContentTypeMatcherModel to validate the content type of 'allowing_one' rejecting image/png, "
        "but expected 'image/png' to be rejected but it was accepted"
    )


def test_assert_does_not_match_raises_when_every_expectation_holds():
    matcher = validate_content_type_of("allowing_one").allowing("image/png")
    with pytest.raises(AssertionError) as exc:
        assert_does_not_match(matcher, ContentTypeMatcherModel)
    assert "not to validate the content type of 'allowing_one'" in str(exc.value)


def test_matcher_logs_verdict(caplog):
    caplog.set_level("DEBUG", logger="upload_matchers")
    validate_content_type_of("allowing_one").allowing("image/png").matches(ContentTypeMatcherModel)
    assert any("matched=True" in record.getMessage() for record in caplog.records)
