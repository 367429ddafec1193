"""Unit tests for Email value object."""

import pytest

from domain.shared.errors import ErrorKind, ValidationError
from domain.shared.value_objects.email import Email


class TestEmail:
    """Test Email value object."""

    @pytest.mark.parametrize(
        "address",
        [
            "student@koreatech.ac.kr",
            "first.last@example.com",
            "user+tag@mail.example.org",
            "under_score-dash@sub.domain.io",
        ],
    )
    def test_accepts_valid_addresses(self, address):
        """Test well-formed addresses are accepted unchanged."""
        assert Email(address).value == address

    @pytest.mark.parametrize(
        "address",
        [
            "",
            "missing-at.example.com",
            "two@@example.com",
            "user@domain",
            "user@domain.c",
            "user name@example.com",
            "@example.com",
            "user@.com1",
        ],
    )
    def test_rejects_malformed_addresses(self, address):
        """Test malformed addresses raise INVALID_EMAIL_FORMAT."""
        with pytest.raises(ValidationError) as exc_info:
            Email(address)

        assert exc_info.value.kind == ErrorKind.INVALID_EMAIL_FORMAT

    def test_validation_error_is_value_error(self):
        """Test plain ValueError handlers still catch invalid emails."""
        with pytest.raises(ValueError):
            Email("nope")

    def test_equality_by_value(self):
        """Test two emails with the same string are equal and hash alike."""
        assert Email("a@example.com") == Email("a@example.com")
        assert hash(Email("a@example.com")) == hash(Email("a@example.com"))
        assert Email("a@example.com") != Email("b@example.com")

    def test_ordering_by_value(self):
        """Test emails sort by their underlying string."""
        emails = [Email("c@example.com"), Email("a@example.com"), Email("b@example.com")]

        assert [e.value for e in sorted(emails)] == [
            "a@example.com",
            "b@example.com",
            "c@example.com",
        ]

    def test_domain_and_str(self):
        """Test domain part and string conversion."""
        email = Email("kim@koreatech.ac.kr")

        assert email.domain == "koreatech.ac.kr"
        assert str(email) == "kim@koreatech.ac.kr"

    def test_is_immutable(self):
        """Test value cannot be reassigned."""
        email = Email("kim@koreatech.ac.kr")

        with pytest.raises(AttributeError):
            email.value = "other@example.com"  # type: ignore[misc]
