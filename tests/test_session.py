# tests/test_session.py

from __future__ import annotations

from pathlib import Path

import pytest

from taskpad.auth.session import SessionStore
from taskpad.auth.validation import validate_login, validate_sign_up, validate_title
from taskpad.storage.kv_store import KeyValueStore


def _session(tmp_path: Path) -> SessionStore:
    return SessionStore(KeyValueStore(tmp_path / "login_prefs.json"))


def test_sign_up_logs_in_and_survives_restart(tmp_path: Path) -> None:
    session = _session(tmp_path)
    assert session.is_logged_in() is False

    session.sign_up("user@example.com", "Passw0rd!")

    again = _session(tmp_path)
    assert again.is_logged_in() is True
    assert again.email == "user@example.com"


def test_login_is_exact_match(tmp_path: Path) -> None:
    session = _session(tmp_path)
    session.sign_up("user@example.com", "Passw0rd!")
    session.logout()
    assert session.is_logged_in() is False

    assert session.login("User@example.com", "Passw0rd!") is False
    assert session.login("user@example.com", "passw0rd!") is False
    assert session.is_logged_in() is False

    assert session.login("user@example.com", "Passw0rd!") is True
    assert session.is_logged_in() is True


def test_login_without_account_fails(tmp_path: Path) -> None:
    assert _session(tmp_path).login("user@example.com", "Passw0rd!") is False


def test_sign_up_again_overwrites_the_account(tmp_path: Path) -> None:
    session = _session(tmp_path)
    session.sign_up("old@example.com", "Passw0rd!")
    session.sign_up("new@example.com", "N3w-Pass=")
    session.logout()

    assert session.login("old@example.com", "Passw0rd!") is False
    assert session.login("new@example.com", "N3w-Pass=") is True


@pytest.mark.parametrize(
    "email",
    ["user@example.com", "first.last+tag@mail.example.org", "a_b%c@x-y.io"],
)
def test_valid_emails(email: str) -> None:
    assert "email" not in validate_sign_up(email, "Passw0rd!", "Passw0rd!")


@pytest.mark.parametrize("email", ["", "plain", "user@host", "user@host.c", "user@@example.com"])
def test_invalid_emails(email: str) -> None:
    assert "email" in validate_sign_up(email, "Passw0rd!", "Passw0rd!")


@pytest.mark.parametrize(
    "password",
    ["short1A!", "Passw0rd!", "Abcdefg1=", "XyZ9^abcd"],
)
def test_valid_passwords(password: str) -> None:
    assert validate_sign_up("user@example.com", password, password) == {}


@pytest.mark.parametrize(
    "password",
    [
        "Sh0rt!",  # too short
        "passw0rd!",  # no uppercase
        "PASSW0RD!",  # no lowercase
        "Password!",  # no digit
        "Passw0rdX",  # no special character
        "Pass w0rd!",  # whitespace
    ],
)
def test_invalid_passwords(password: str) -> None:
    assert "password" in validate_sign_up("user@example.com", password, password)


def test_password_confirmation_must_match() -> None:
    errors = validate_sign_up("user@example.com", "Passw0rd!", "Passw0rd?")

    assert errors == {"confirm": "Passwords do not match"}


def test_login_and_title_require_input() -> None:
    assert validate_login("", "x")
    assert validate_login("a@b.cd", "  ")
    assert validate_login("a@b.cd", "x") == {}
    assert validate_title("   ")
    assert validate_title("Buy milk") == {}
