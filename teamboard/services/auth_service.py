from mindtrace.core import Mindtrace, get_logger, hash_password, verify_password
from teamboard.core.exceptions import Unauthenticated
from teamboard.core.security import TokenService
from teamboard.models.user import AuthResponse, LoginPayload, SignupPayload, UserPublic
from teamboard.repositories.user_repository import UserRepository

INVALID_CREDENTIALS = "Invalid credentials"


class AuthService(Mindtrace):
    """Signup and login. Both return a fresh bearer token and the caller's public profile."""

    def __init__(self, users: UserRepository, tokens: TokenService):
        super().__init__()
        self.logger = get_logger(self.unique_name, use_structlog=True)
        self.users = users
        self.tokens = tokens

    def _respond(self, user) -> AuthResponse:
        return AuthResponse(
            token=self.tokens.issue(user_id=user.id, email=user.email),
            user=UserPublic.from_user(user),
        )

    async def signup(self, payload: SignupPayload) -> AuthResponse:
        user = await self.users.create_user(
            name=payload.name,
            email=payload.email,
            password_hash=hash_password(payload.password),
        )
        self.logger.info("user_signed_up", user_id=user.id)
        return self._respond(user)

    async def login(self, payload: LoginPayload) -> AuthResponse:
        # Unknown email and wrong password are indistinguishable to the caller.
        user = await self.users.get_by_email(payload.email)
        if user is None or not verify_password(user.password_hash, payload.password):
            raise Unauthenticated(INVALID_CREDENTIALS)
        return self._respond(user)
