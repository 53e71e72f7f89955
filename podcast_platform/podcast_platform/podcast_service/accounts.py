"""
Account service: signup, login, profile lookup and profile edit.

Every public operation returns a result model; expected failures are
reported through ``error`` and store faults are mapped to a fixed message
for that operation.
"""
from typing import Optional
import logging

from .auth import JwtService
from .errors import (
    DuplicateAccountError,
    InternalError,
    InvalidCredentialsError,
    InvalidTokenError,
    NotFoundError,
    ServiceError,
)
from .models import User
from .repositories import UserStore
from .schemas import (
    CoreOutput,
    CreateAccountInput,
    EditProfileInput,
    LoginInput,
    LoginOutput,
    UserProfileOutput,
)
from .utils.event_logger import log_account_event

logger = logging.getLogger(__name__)


class AccountService:

    def __init__(self, users: UserStore, jwt_service: JwtService):
        self.users = users
        self.jwt_service = jwt_service

    async def create_account(self, data: CreateAccountInput) -> CoreOutput:
        try:
            exists = await self.users.find_by_email(data.email)
            if exists:
                raise DuplicateAccountError()

            # The store hashes the password as part of the write
            user = await self.users.save(
                self.users.create(email=data.email, password=data.password, role=data.role)
            )
            log_account_event("account_created", user)
            return CoreOutput(ok=True, error=None)
        except ServiceError as e:
            return CoreOutput(ok=False, error=e.message)
        except Exception:
            logger.exception(f"Account creation failed for {data.email}")
            return CoreOutput(ok=False, error=InternalError("Could not create account").message)

    async def login(self, data: LoginInput) -> LoginOutput:
        """
        Check the credentials and issue a session token bound to the user id.

        Returns:
            LoginOutput with ``token`` on success, otherwise ``error`` is one of
            "User not found", "Wrong password" or "Could not login"
        """
        try:
            user = await self.users.find_by_email(data.email)
            if not user:
                raise NotFoundError("User not found")

            if not user.check_password(data.password):
                log_account_event("login_failure", user)
                raise InvalidCredentialsError()

            token = self.jwt_service.sign(user.id)
            log_account_event("login_success", user)
            return LoginOutput(ok=True, token=token)
        except ServiceError as e:
            return LoginOutput(ok=False, error=e.message)
        except Exception:
            logger.exception(f"Login failed for {data.email}")
            return LoginOutput(ok=False, error=InternalError("Could not login").message)

    async def find_by_id(self, user_id: int) -> UserProfileOutput:
        try:
            user = await self.users.find_one_or_fail(user_id)
            return UserProfileOutput(ok=True, user=user)
        except Exception as e:
            logger.debug(f"User lookup failed for id={user_id}: {e}")
            return UserProfileOutput(ok=False, error=InternalError("User Not Found").message)

    async def edit_profile(self, user_id: int, data: EditProfileInput) -> CoreOutput:
        """
        Apply the supplied fields onto the user and persist it.

        A changed password is re-hashed by the store on save.
        """
        try:
            user = await self.users.find_one_or_fail(user_id)
            changes = {
                field: value
                for field, value in data.model_dump(exclude_unset=True).items()
                if value is not None
            }
            for field, value in changes.items():
                setattr(user, field, value)

            await self.users.save(user)
            log_account_event("profile_updated", user, metadata={"fields": sorted(changes)})
            return CoreOutput(ok=True)
        except Exception:
            logger.exception(f"Profile update failed for user_id={user_id}")
            return CoreOutput(ok=False, error=InternalError("Could not update profile").message)

    async def user_from_token(self, token: str) -> Optional[User]:
        """Resolve the user a session token was issued to, or None."""
        try:
            decoded = self.jwt_service.verify(token)
        except InvalidTokenError:
            return None

        user_id = decoded.get("id") if isinstance(decoded, dict) else None
        if user_id is None:
            return None

        result = await self.find_by_id(user_id)
        return result.user if result.ok else None
