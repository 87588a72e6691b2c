from __future__ import annotations

import pytest

from src.attendance_tracker.attendance_tracker.core.exceptions import (
    AuthenticationError,
    DuplicateUsernameError,
    ValidationError,
)


def test_signup_then_login_returns_verifiable_token(container):
    svc = container.account_service

    account = svc.signup("alice", "pw1")
    token = svc.login("alice", "pw1")

    subject = container.token_service.verify(token)
    assert subject.account_id == account.account_id
    assert subject.username == "alice"


def test_signup_stores_hash_not_plaintext(container, accounts_repo):
    container.account_service.signup("alice", "pw1")

    stored = accounts_repo.get_by_username("alice")
    assert stored.password_hash != "pw1"
    assert container.password_hasher.verify("pw1", stored.password_hash)


@pytest.mark.parametrize("password", ["pw1", "different"])
def test_signup_duplicate_username_fails_regardless_of_password(container, password):
    container.account_service.signup("alice", "pw1")

    with pytest.raises(DuplicateUsernameError):
        container.account_service.signup("alice", password)


def test_usernames_are_case_sensitive(container):
    container.account_service.signup("alice", "pw1")
    container.account_service.signup("Alice", "pw2")

    assert container.token_service.verify(container.account_service.login("Alice", "pw2")).username == "Alice"


@pytest.mark.parametrize("username, password", [("", "pw"), ("   ", "pw"), (None, "pw"), ("bob", ""), ("bob", None)])
def test_signup_requires_username_and_password(container, username, password):
    with pytest.raises(ValidationError):
        container.account_service.signup(username, password)


def test_login_errors_do_not_reveal_which_part_failed(container):
    container.account_service.signup("alice", "pw1")

    with pytest.raises(AuthenticationError) as wrong_password:
        container.account_service.login("alice", "nope")
    with pytest.raises(AuthenticationError) as unknown_user:
        container.account_service.login("mallory", "pw1")

    assert str(wrong_password.value) == str(unknown_user.value) == "Invalid username or password."


def test_bootstrap_twice_creates_one_account(container, accounts_repo):
    created_first = container.account_service.bootstrap("root", "toor")
    created_second = container.account_service.bootstrap("root", "toor")

    assert (created_first, created_second) == (True, False)
    assert accounts_repo.get_by_username("root") is not None
    assert container.account_service.login("root", "toor")


def test_bootstrap_tolerates_concurrent_insert(container, accounts_repo, monkeypatch):
    # Lookup misses but the insert collides, as when two processes start together.
    monkeypatch.setattr(accounts_repo, "get_by_username", lambda username: None)
    accounts_repo.create_account(username="root", password_hash="x")

    assert container.account_service.bootstrap("root", "toor") is False
    assert accounts_repo.count() == 1


def test_bootstrap_disabled_without_username(container, accounts_repo):
    before = accounts_repo.count()

    assert container.account_service.bootstrap("", "") is False
    assert accounts_repo.count() == before


@pytest.mark.parametrize("username", [" alice", "alice ", "al ice"])
def test_username_is_kept_exactly_as_given(container, accounts_repo, username):
    container.account_service.signup(username, "pw1")

    assert accounts_repo.get_by_username(username) is not None
    assert container.token_service.verify(container.account_service.login(username, "pw1")).username == username
