import logging

from fastapi.concurrency import run_in_threadpool

from channel_api.errors import AuthError, ConflictError, NotFoundError, ValidationError
from channel_api.middlewares.security import hash_password, verify_password
from channel_api.models.user_model import user_document

logger = logging.getLogger(__name__)


class AccountService:
    """Registration and login on top of the credential store."""

    def __init__(self, user_store):
        self.user_store = user_store

    async def register(self, name: str | None, email: str | None, password: str | None) -> dict:
        if not name or not email or not password:
            raise ValidationError()

        existing = await self.user_store.find_user_by_email(email)
        if existing:
            raise ConflictError()

        try:
            password_hash = await run_in_threadpool(hash_password, password)
        except ValueError:
            # bcrypt refuses NUL bytes
            raise ValidationError("Invalid password")
        user = user_document(name, email, password_hash)
        # the store re-checks uniqueness atomically
        await self.user_store.save_user(user)

        logger.info(f"Registered user {email}")
        return user

    async def login(self, email: str | None, password: str | None) -> dict:
        if not email or not password:
            raise ValidationError()

        user = await self.user_store.find_user_by_email(email)
        if not user:
            raise NotFoundError()

        try:
            valid = await run_in_threadpool(verify_password, password, user["passwordHash"])
        except ValueError:
            valid = False
        if not valid:
            logger.info(f"Invalid password for {email}")
            raise AuthError()

        logger.info(f"Login success for {email}")
        return user
