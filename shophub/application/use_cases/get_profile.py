from __future__ import annotations

from shophub.application.dto.auth import ProfileOutput
from shophub.application.ports.auth_port import AuthPort
from shophub.domain.exceptions import UserNotFoundError


class GetProfileUseCase:
    def __init__(self, *, auth_port: AuthPort):
        self._auth_port = auth_port

    def execute(self, *, user_id: str) -> ProfileOutput:
        user = self._auth_port.get_user_by_id(user_id=user_id)
        if user is None:
            raise UserNotFoundError("User not found")
        return ProfileOutput(
            id=user.id,
            email=user.email,
            username=user.username,
            firstname=user.firstname,
            lastname=user.lastname,
            phone=user.phone,
            address=user.address,
        )
