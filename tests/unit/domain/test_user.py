"""Unit tests for the User aggregate, Email and AboutEntry."""

import pytest

from booklists.domain.shared.exceptions import ErrorCode, ValidationError
from booklists.domain.user import AboutEntry, Email, InvalidEmailError, User


class TestEmail:
    def test_normalizes_to_lower_case(self):
        assert Email("  Alice@Example.COM ").value == "alice@example.com"

    @pytest.mark.parametrize("value", ["", "not-an-email", "a@b", "@example.com"])
    def test_rejects_malformed_addresses(self, value):
        with pytest.raises(InvalidEmailError) as exc_info:
            Email(value)
        assert exc_info.value.code == ErrorCode.INVALID_EMAIL


class TestUser:
    def test_create(self):
        user = User.create(username="alice", email="Alice@example.com")

        assert user.username == "alice"
        assert user.email == "alice@example.com"
        assert user.about == ()
        assert user.updated_at == user.created_at

    def test_username_is_required(self):
        with pytest.raises(ValidationError, match="Username is required"):
            User.create(username=" ", email="alice@example.com")

    def test_username_length_is_bounded(self):
        with pytest.raises(ValidationError, match="cannot exceed"):
            User.create(username="a" * 51, email="alice@example.com")

    def test_invalid_email_is_rejected(self):
        with pytest.raises(InvalidEmailError):
            User.create(username="alice", email="nope")


class TestAboutEntry:
    def test_create_strips_text(self):
        entry = AboutEntry.create("  Reads sci-fi  ")
        assert entry.text == "Reads sci-fi"

    def test_empty_text_is_rejected(self):
        with pytest.raises(ValidationError, match="About text is required"):
            AboutEntry.create("")

    def test_entries_have_distinct_ids(self):
        assert AboutEntry.create("a").id != AboutEntry.create("a").id
