from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from shophub.api.deps import (
    get_current_user,
    get_get_profile_use_case,
    get_login_local_use_case,
    get_signup_user_use_case,
)
from shophub.api.errors import validation_http_exception
from shophub.api.schemas.auth import (
    LoginRequest,
    LoginResponse,
    ProfileNameResponse,
    ProfileResponse,
    SignupRequest,
    SignupResponse,
)
from shophub.application.dto.auth import LoginLocalInput, SignupUserInput
from shophub.application.use_cases.get_profile import GetProfileUseCase
from shophub.application.use_cases.login_local import LoginLocalUseCase
from shophub.application.use_cases.signup_user import SignupUserUseCase
from shophub.domain.entities.user import User
from shophub.domain.exceptions import (
    InvalidCredentialsError,
    UserConflictError,
    UserNotFoundError,
    ValidationError,
)


router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=SignupResponse, status_code=201)
def signup(
    req: SignupRequest,
    use_case: SignupUserUseCase = Depends(get_signup_user_use_case),
):
    try:
        output = use_case.execute(
            SignupUserInput(
                email=req.email,
                username=req.username,
                password=req.password,
                firstname=req.firstname,
                lastname=req.lastname,
                phone=req.phone,
            )
        )
    except ValidationError as exc:
        raise validation_http_exception(exc) from exc
    except UserConflictError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc

    return SignupResponse(
        id=output.user.id,
        email=output.user.email,
        username=output.user.username,
        firstname=output.user.firstname,
        lastname=output.user.lastname,
        token=output.access_token,
    )


@router.post("/login", response_model=LoginResponse)
def login(
    req: LoginRequest,
    use_case: LoginLocalUseCase = Depends(get_login_local_use_case),
):
    try:
        output = use_case.execute(LoginLocalInput(email=req.email, password=req.password))
    except ValidationError as exc:
        raise validation_http_exception(exc) from exc
    except InvalidCredentialsError as exc:
        raise HTTPException(status_code=401, detail=str(exc)) from exc

    return LoginResponse(
        id=output.user.id,
        email=output.user.email,
        username=output.user.username,
        firstname=output.user.firstname,
        lastname=output.user.lastname,
        phone=output.user.phone,
        token=output.access_token,
    )


@router.get("/profile", response_model=ProfileResponse)
def get_profile(
    current_user: User = Depends(get_current_user),
    use_case: GetProfileUseCase = Depends(get_get_profile_use_case),
):
    try:
        output = use_case.execute(user_id=current_user.id)
    except UserNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    return ProfileResponse(
        id=output.id,
        email=output.email,
        username=output.username,
        name=ProfileNameResponse(firstname=output.firstname, lastname=output.lastname),
        phone=output.phone,
        address=output.address,
    )
