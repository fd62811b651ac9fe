import pytest

from app.core.exceptions import HashError, ValidationError
from app.core.security import get_password_hash, pwd_context, verify_password


def test_hash_is_salted_and_never_plaintext():
    first = get_password_hash("hunter2")
    second = get_password_hash("hunter2")

    assert first != "hunter2"
    assert second != "hunter2"
    # Random salt per hash
    assert first != second


def test_hash_uses_bcrypt_with_configured_rounds():
    hashed = get_password_hash("hunter2")

    assert pwd_context.identify(hashed) == "bcrypt"
    # conftest sets BCRYPT_ROUNDS=4
    assert hashed.split("$")[2] == "04"


def test_verify_password():
    hashed = get_password_hash("hunter2")

    assert verify_password("hunter2", hashed) is True
    assert verify_password("hunter3", hashed) is False


@pytest.mark.parametrize("stored", ["", "not-a-hash"])
def test_verify_against_unrecognised_hash_raises(stored):
    with pytest.raises(HashError):
        verify_password("hunter2", stored)


def test_hash_failure_raises_hash_error(monkeypatch):
    def _fail(password):
        raise ValueError("entropy source unavailable")

    monkeypatch.setattr(pwd_context, "hash", _fail)

    with pytest.raises(HashError):
        get_password_hash("hunter2")


def test_hash_rejects_nul_byte_as_invalid_input():
    with pytest.raises(ValidationError):
        get_password_hash("a\x00b")


def test_verify_nul_byte_password_never_matches():
    hashed = get_password_hash("ab")

    assert verify_password("a\x00b", hashed) is False
