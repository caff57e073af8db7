"""Unit tests for the password policy."""

import pytest

from domain.user.core.exceptions.user_errors import PasswordPolicyError
from domain.user.core.value_objects.password_policy import MIN_PASSWORD_LENGTH, PasswordPolicy


def test_minimum_length_is_ten():
    assert MIN_PASSWORD_LENGTH == 10
    assert PasswordPolicy().min_length == 10


@pytest.mark.parametrize("password", ["0123456789", "a much longer passphrase"])
def test_accepts_long_enough_passwords(password):
    PasswordPolicy().validate(password)


@pytest.mark.parametrize("password", [None, "", "123456789"])
def test_rejects_short_or_missing_passwords(password):
    with pytest.raises(PasswordPolicyError) as exc_info:
        PasswordPolicy().validate(password)

    assert exc_info.value.min_length == 10


def test_custom_minimum():
    policy = PasswordPolicy(min_length=4)

    policy.validate("abcd")
    with pytest.raises(PasswordPolicyError):
        policy.validate("abc")
