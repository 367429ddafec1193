"""Unit tests for UserDomainService."""

import logging
from unittest.mock import MagicMock

import pytest

from domain.shared.errors import ErrorKind, ValidationError
from domain.shared.value_objects.email import Email
from domain.user.core.exceptions.user_errors import (
    DuplicateEmailError,
    InvalidCredentialsError,
    UserNotFoundError,
)
from domain.user.core.value_objects.user_id import UserId
from domain.user.services.user_service import UserDomainService

EMAIL = Email("kim@koreatech.ac.kr")


@pytest.fixture
def registered(user_service):
    return user_service.create_user(EMAIL, "secret", "Kim", "2020136000")


class TestCreateUser:
    """Test registration."""

    def test_create_user_assigns_id_and_hashes_password(self, user_service, user_repository):
        """Test stored user has an id and only the hash of the password."""
        user = user_service.create_user(EMAIL, "secret", "Kim", "2020136000")

        assert user.id == UserId(1)
        assert user.password.value == "hashed:secret"
        assert user_repository.find_by_id(UserId(1)) == user

    def test_timestamps_come_from_clock(self, user_service, clock):
        """Test created_at uses the injected clock."""
        user = user_service.create_user(EMAIL, "secret", "Kim", "2020136000")

        assert user.created_at == clock.now()
        assert user.updated_at == clock.now()

    def test_duplicate_email_rejected(self, user_service, user_repository, registered):
        """Test a second registration with the same email fails."""
        with pytest.raises(DuplicateEmailError) as exc_info:
            user_service.create_user(EMAIL, "other", "Lee", "2020136001")

        assert exc_info.value.kind == ErrorKind.DUPLICATE_EMAIL
        assert user_repository.count() == 1

    def test_duplicate_check_happens_before_hashing(self, user_repository):
        """Test the hasher is not called for a taken email."""
        hasher = MagicMock()
        hasher.encode.return_value = "hashed:x"
        service = UserDomainService(user_repository, hasher)
        service.create_user(EMAIL, "secret", "Kim", "2020136000")
        hasher.reset_mock()

        with pytest.raises(DuplicateEmailError):
            service.create_user(EMAIL, "secret", "Kim", "2020136000")

        hasher.encode.assert_not_called()

    def test_blank_name_rejected(self, user_service, user_repository):
        """Test entity validation surfaces and nothing is stored."""
        with pytest.raises(ValidationError) as exc_info:
            user_service.create_user(EMAIL, "secret", " ", "2020136000")

        assert exc_info.value.kind == ErrorKind.BLANK_NAME
        assert user_repository.count() == 0

    def test_logs_registration(self, user_service, caplog):
        """Test registration is logged at INFO."""
        with caplog.at_level(logging.INFO, logger="domain.user.services.user_service"):
            user_service.create_user(EMAIL, "secret", "Kim", "2020136000")

        assert "User registered" in caplog.text


class TestAuthenticateUser:
    """Test credential checks."""

    def test_correct_credentials(self, user_service, registered):
        """Test the stored user is returned."""
        assert user_service.authenticate_user(EMAIL, "secret") == registered

    def test_wrong_password_and_unknown_email_are_indistinguishable(
        self, user_service, registered
    ):
        """Test both failures raise the same kind and message."""
        with pytest.raises(InvalidCredentialsError) as wrong_password:
            user_service.authenticate_user(EMAIL, "wrong")

        with pytest.raises(InvalidCredentialsError) as unknown_email:
            user_service.authenticate_user(Email("nobody@koreatech.ac.kr"), "secret")

        assert wrong_password.value.kind == unknown_email.value.kind
        assert wrong_password.value.kind == ErrorKind.INVALID_CREDENTIALS
        assert str(wrong_password.value) == str(unknown_email.value)

    def test_failed_attempt_logged_as_warning(self, user_service, registered, caplog):
        """Test failures are logged without saying which check failed."""
        with caplog.at_level(logging.WARNING):
            with pytest.raises(InvalidCredentialsError):
                user_service.authenticate_user(EMAIL, "wrong")

        assert "Authentication failed" in caplog.text
        assert "password" not in caplog.text.lower()


class TestLookupAndRename:
    """Test get_user_by_id and update_user_name."""

    def test_get_user_by_id(self, user_service, registered):
        """Test lookup returns the stored user."""
        assert user_service.get_user_by_id(registered.id) == registered

    def test_get_unknown_user(self, user_service):
        """Test missing ids raise USER_NOT_FOUND."""
        with pytest.raises(UserNotFoundError) as exc_info:
            user_service.get_user_by_id(UserId(99))

        assert exc_info.value.kind == ErrorKind.USER_NOT_FOUND

    def test_update_user_name_persists(self, user_service, user_repository, registered):
        """Test the renamed user is saved and returned."""
        renamed = user_service.update_user_name(registered.id, "Kim Minsu")

        assert renamed.name == "Kim Minsu"
        assert renamed.id == registered.id
        assert user_repository.find_by_id(registered.id).name == "Kim Minsu"

    def test_update_unknown_user(self, user_service):
        """Test renaming a missing user fails."""
        with pytest.raises(UserNotFoundError):
            user_service.update_user_name(UserId(5), "Nobody")

    def test_update_to_blank_name_keeps_stored_user(
        self, user_service, user_repository, registered
    ):
        """Test validation failure leaves the repository untouched."""
        with pytest.raises(ValidationError):
            user_service.update_user_name(registered.id, "")

        assert user_repository.find_by_id(registered.id).name == "Kim"
