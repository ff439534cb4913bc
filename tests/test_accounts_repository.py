from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
import threading

import pytest

from shophub.application.dto.auth import SignupUserInput
from shophub.application.use_cases.signup_user import SignupUserUseCase
from shophub.domain.exceptions import (
    EmailAlreadyRegisteredError,
    UserConflictError,
    UsernameAlreadyTakenError,
)
from shophub.infrastructure.db.repositories.accounts_repository import SqlAccountsRepository


class FakePasswordHasher:
    def hash(self, plain_password: str) -> str:
        return f"hashed::{plain_password}"

    def verify(self, plain_password: str, password_hash: str) -> bool:
        return password_hash == f"hashed::{plain_password}"


def _create(repo: SqlAccountsRepository, *, user_id: str, email: str, username: str):
    now = datetime.now(timezone.utc)
    return repo.create_user(
        user_id=user_id,
        email=email,
        username=username,
        password_hash="hashed::abcdef",
        firstname="Alice",
        lastname="Liddell",
        phone="",
        created_at=now,
        updated_at=now,
    )


def test_create_and_lookup_user(engine):
    repo = SqlAccountsRepository(engine)

    created = _create(repo, user_id="u-1", email="Alice@Example.com", username="alice")

    assert created.email == "alice@example.com"
    assert repo.get_user_by_id(user_id="u-1") == created
    assert repo.get_user_by_email(email="ALICE@example.com").id == "u-1"
    assert repo.get_user_by_id(user_id="missing") is None


def test_find_by_email_or_username_prefers_email_match(engine):
    repo = SqlAccountsRepository(engine)
    _create(repo, user_id="u-1", email="alice@example.com", username="alice")
    _create(repo, user_id="u-2", email="bob@example.com", username="bobby")

    assert repo.find_user_by_email_or_username(email="bob@example.com", username="alice").id == "u-2"
    assert repo.find_user_by_email_or_username(email="carol@example.com", username="alice").id == "u-1"
    assert repo.find_user_by_email_or_username(email="carol@example.com", username="carol") is None


def test_unique_constraints_reject_duplicates(engine):
    repo = SqlAccountsRepository(engine)
    _create(repo, user_id="u-1", email="alice@example.com", username="alice")

    with pytest.raises(EmailAlreadyRegisteredError):
        _create(repo, user_id="u-2", email="alice@example.com", username="other")
    with pytest.raises(UsernameAlreadyTakenError):
        _create(repo, user_id="u-3", email="other@example.com", username="alice")

    assert repo.get_user_by_id(user_id="u-2") is None
    assert repo.get_user_by_id(user_id="u-3") is None


def test_concurrent_signups_with_same_email_exactly_one_succeeds(engine, token_service):
    barrier = threading.Barrier(2)

    class RacingAccountsRepository(SqlAccountsRepository):
        # both requests pass the pre-check before either inserts
        def find_user_by_email_or_username(self, *, email: str, username: str):
            found = super().find_user_by_email_or_username(email=email, username=username)
            barrier.wait(timeout=10)
            return found

    use_case = SignupUserUseCase(
        auth_port=RacingAccountsRepository(engine),
        password_hasher=FakePasswordHasher(),
        token_port=token_service,
    )

    def _signup(username: str):
        try:
            return "ok", use_case.execute(
                SignupUserInput(
                    email="race@example.com",
                    username=username,
                    password="abcdef",
                    firstname="Race",
                    lastname="Condition",
                )
            )
        except UserConflictError as exc:
            return "conflict", exc

    with ThreadPoolExecutor(max_workers=2) as pool:
        results = list(pool.map(_signup, ["racer1", "racer2"]))

    assert sorted(kind for kind, _ in results) == ["conflict", "ok"]
    conflict = next(value for kind, value in results if kind == "conflict")
    assert isinstance(conflict, EmailAlreadyRegisteredError)
    assert SqlAccountsRepository(engine).get_user_by_email(email="race@example.com") is not None
