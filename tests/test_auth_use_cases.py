from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from shophub.application.dto.auth import AccessTokenPayload, LoginLocalInput, SignupUserInput
from shophub.application.use_cases.authenticate_user import AuthenticateUserUseCase
from shophub.application.use_cases.get_profile import GetProfileUseCase
from shophub.application.use_cases.login_local import LoginLocalUseCase
from shophub.application.use_cases.signup_user import SignupUserUseCase
from shophub.domain.entities.user import User
from shophub.domain.exceptions import (
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    TokenExpiredError,
    UsernameAlreadyTakenError,
    UserNotFoundError,
    ValidationError,
)


class FakeAuthPort:
    def __init__(self):
        self.users: dict[str, User] = {}

    def get_user_by_id(self, *, user_id: str) -> User | None:
        return self.users.get(user_id)

    def get_user_by_email(self, *, email: str) -> User | None:
        for user in self.users.values():
            if user.email == email.lower():
                return user
        return None

    def find_user_by_email_or_username(self, *, email: str, username: str) -> User | None:
        by_email = self.get_user_by_email(email=email)
        if by_email is not None:
            return by_email
        for user in self.users.values():
            if user.username == username:
                return user
        return None

    def create_user(
        self,
        *,
        user_id: str,
        email: str,
        username: str,
        password_hash: str,
        firstname: str,
        lastname: str,
        phone: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> User:
        user = User(
            id=user_id,
            email=email,
            username=username,
            password_hash=password_hash,
            firstname=firstname,
            lastname=lastname,
            phone=phone,
            address=None,
            created_at=created_at,
            updated_at=updated_at,
        )
        self.users[user.id] = user
        return user


class ExplodingAuthPort:
    def __getattr__(self, name):
        raise AssertionError(f"store must not be touched, got {name}")


class FakePasswordHasher:
    def __init__(self):
        self.verify_calls = 0

    def hash(self, plain_password: str) -> str:
        return f"hashed::{plain_password}"

    def verify(self, plain_password: str, password_hash: str) -> bool:
        self.verify_calls += 1
        return password_hash == f"hashed::{plain_password}"

    def verify_dummy(self, plain_password: str) -> None:
        self.verify_calls += 1


class FakeTokenPort:
    def __init__(self, *, expired: bool = False):
        self._expired = expired

    def create_access_token(self, *, user_id: str, now: datetime) -> tuple[str, datetime]:
        return f"access-{user_id}", now + timedelta(days=30)

    def decode_access_token(self, *, token: str, now: datetime) -> AccessTokenPayload:
        if self._expired:
            raise TokenExpiredError("Access token expired.")
        return AccessTokenPayload(
            user_id=token.removeprefix("access-"),
            issued_at=now,
            expires_at=now + timedelta(days=30),
        )


def _signup_input(**overrides) -> SignupUserInput:
    values = {
        "email": "alice@example.com",
        "username": "alice",
        "password": "secret1",
        "firstname": "Alice",
        "lastname": "Liddell",
        "phone": None,
    }
    values.update(overrides)
    return SignupUserInput(**values)


def _signup_use_case(auth_port) -> SignupUserUseCase:
    return SignupUserUseCase(
        auth_port=auth_port,
        password_hasher=FakePasswordHasher(),
        token_port=FakeTokenPort(),
    )


def _login_use_case(auth_port) -> LoginLocalUseCase:
    return LoginLocalUseCase(
        auth_port=auth_port,
        password_hasher=FakePasswordHasher(),
        token_port=FakeTokenPort(),
    )


def test_signup_stores_hash_and_returns_token():
    auth_port = FakeAuthPort()

    output = _signup_use_case(auth_port).execute(_signup_input(email="  Alice@Example.com "))

    stored = auth_port.users[output.user.id]
    assert stored.email == "alice@example.com"
    assert stored.password_hash == "hashed::secret1"
    assert stored.phone == ""
    assert output.access_token == f"access-{output.user.id}"
    assert not hasattr(output.user, "password_hash")


def test_signup_username_length_boundary():
    with pytest.raises(ValidationError) as exc_info:
        _signup_use_case(FakeAuthPort()).execute(_signup_input(username="ab"))
    assert [error.field for error in exc_info.value.errors] == ["username"]
    assert exc_info.value.errors[0].message == "Username must be at least 3 characters"

    output = _signup_use_case(FakeAuthPort()).execute(_signup_input(username="abc"))
    assert output.user.username == "abc"


def test_signup_password_length_boundary():
    with pytest.raises(ValidationError) as exc_info:
        _signup_use_case(FakeAuthPort()).execute(_signup_input(password="abcde"))
    assert [error.field for error in exc_info.value.errors] == ["password"]

    output = _signup_use_case(FakeAuthPort()).execute(_signup_input(password="abcdef"))
    assert output.user.email == "alice@example.com"


def test_signup_reports_every_invalid_field_before_touching_store():
    use_case = _signup_use_case(ExplodingAuthPort())

    with pytest.raises(ValidationError) as exc_info:
        use_case.execute(
            _signup_input(
                email="not-an-email",
                username="ab",
                password="123",
                firstname="   ",
                lastname="",
            )
        )

    assert [error.field for error in exc_info.value.errors] == [
        "email",
        "username",
        "password",
        "firstname",
        "lastname",
    ]


def test_signup_conflict_reports_email_before_username():
    auth_port = FakeAuthPort()
    use_case = _signup_use_case(auth_port)
    use_case.execute(_signup_input(email="alice@example.com", username="alice"))
    use_case.execute(_signup_input(email="bob@example.com", username="bobby"))

    with pytest.raises(EmailAlreadyRegisteredError, match="Email already registered"):
        use_case.execute(_signup_input(email="alice@example.com", username="bobby"))

    with pytest.raises(UsernameAlreadyTakenError, match="Username already taken"):
        use_case.execute(_signup_input(email="carol@example.com", username="alice"))

    assert len(auth_port.users) == 2


def test_login_returns_fresh_token():
    auth_port = FakeAuthPort()
    signup = _signup_use_case(auth_port).execute(_signup_input(phone="555-0100"))

    output = _login_use_case(auth_port).execute(
        LoginLocalInput(email="ALICE@example.com", password="secret1")
    )

    assert output.user.id == signup.user.id
    assert output.user.phone == "555-0100"
    assert output.access_token.startswith("access-")


def test_login_failures_are_indistinguishable():
    auth_port = FakeAuthPort()
    _signup_use_case(auth_port).execute(_signup_input())
    use_case = _login_use_case(auth_port)

    with pytest.raises(InvalidCredentialsError) as unknown_email:
        use_case.execute(LoginLocalInput(email="nobody@example.com", password="secret1"))
    with pytest.raises(InvalidCredentialsError) as wrong_password:
        use_case.execute(LoginLocalInput(email="alice@example.com", password="wrong-pass"))

    assert str(unknown_email.value) == str(wrong_password.value) == "Invalid email or password"


def test_login_unknown_email_still_runs_password_check():
    auth_port = FakeAuthPort()
    _signup_use_case(auth_port).execute(_signup_input())
    hasher = FakePasswordHasher()
    use_case = LoginLocalUseCase(
        auth_port=auth_port,
        password_hasher=hasher,
        token_port=FakeTokenPort(),
    )

    with pytest.raises(InvalidCredentialsError):
        use_case.execute(LoginLocalInput(email="nobody@example.com", password="secret1"))
    assert hasher.verify_calls == 1

    with pytest.raises(InvalidCredentialsError):
        use_case.execute(LoginLocalInput(email="alice@example.com", password="wrong-pass"))
    assert hasher.verify_calls == 2


def test_login_validation_runs_before_lookup():
    use_case = _login_use_case(ExplodingAuthPort())

    with pytest.raises(ValidationError) as exc_info:
        use_case.execute(LoginLocalInput(email="bad", password=""))

    assert [error.field for error in exc_info.value.errors] == ["email", "password"]


def test_authenticate_user_resolves_subject():
    auth_port = FakeAuthPort()
    signup = _signup_use_case(auth_port).execute(_signup_input())
    use_case = AuthenticateUserUseCase(auth_port=auth_port, token_port=FakeTokenPort())

    user = use_case.execute(token=signup.access_token)

    assert user.id == signup.user.id


def test_authenticate_user_rejects_token_for_missing_user():
    use_case = AuthenticateUserUseCase(auth_port=FakeAuthPort(), token_port=FakeTokenPort())

    with pytest.raises(UserNotFoundError):
        use_case.execute(token="access-ghost")


def test_authenticate_user_propagates_token_errors():
    auth_port = FakeAuthPort()
    signup = _signup_use_case(auth_port).execute(_signup_input())
    use_case = AuthenticateUserUseCase(auth_port=auth_port, token_port=FakeTokenPort(expired=True))

    with pytest.raises(TokenExpiredError):
        use_case.execute(token=signup.access_token)


def test_get_profile_returns_profile_fields():
    auth_port = FakeAuthPort()
    signup = _signup_use_case(auth_port).execute(_signup_input(phone="555-0100"))

    output = GetProfileUseCase(auth_port=auth_port).execute(user_id=signup.user.id)

    assert output.username == "alice"
    assert output.firstname == "Alice"
    assert output.lastname == "Liddell"
    assert output.phone == "555-0100"
    assert output.address is None


def test_get_profile_missing_user_raises_not_found():
    with pytest.raises(UserNotFoundError):
        GetProfileUseCase(auth_port=FakeAuthPort()).execute(user_id="missing")


def test_signup_timestamps_are_utc():
    auth_port = FakeAuthPort()
    output = _signup_use_case(auth_port).execute(_signup_input())

    assert auth_port.users[output.user.id].created_at.tzinfo == timezone.utc
