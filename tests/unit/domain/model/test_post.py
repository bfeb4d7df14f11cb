"""Unit tests for the Post model."""

from uuid import UUID, uuid4

import pytest

from surmise.domain.error import ValidationError
from surmise.domain.model.post import REQUIRED_FIELDS_MESSAGE, require_post_fields
from surmise.domain.value import UserId
from tests.conftest import make_post


@pytest.mark.parametrize(
    "title,summary,content",
    [
        (None, "summary", "content"),
        ("title", "", "content"),
        ("title", "summary", None),
    ],
)
def test_require_post_fields_rejects_missing(title, summary, content):
    """Any missing or empty field should fail with the shared message."""
    with pytest.raises(ValidationError, match=REQUIRED_FIELDS_MESSAGE):
        require_post_fields(title, summary, content)


def test_require_post_fields_accepts_complete_input():
    """All three fields present should pass."""
    require_post_fields("title", "summary", "<p>content</p>")


def test_is_authored_by_uses_value_equality():
    """Ownership should compare id values, not object identity."""
    author_id = UserId(uuid4())
    post = make_post(author_id=author_id)

    assert post.is_authored_by(UserId(UUID(str(author_id))))
    assert not post.is_authored_by(UserId(uuid4()))
