"""
Business logic for user accounts.

Registration stores a hashed password and a random verification token
then mails the verification link.  Account deletion mails a notice to
the address the account had.  Emails are sent after the store write
has committed: a delivery failure surfaces as ``UpstreamError`` but
does not undo the write.
"""

import logging
import secrets
from typing import Any, List, Optional

from ..core.authorization import parse_role
from ..core.config import settings
from ..core.errors import ConflictError, DuplicateKeyError
from ..core.security import hash_password
from ..integrations.mailer import Mailer, OutboundEmail, SmtpMailer
from ..repositories.users import UserRepository
from ..schemas.user import User, UserCreate

logger = logging.getLogger(__name__)


def verification_link(user_id: str, token: str) -> str:
    return f"{settings.api_public_url.rstrip('/')}/auth/verify/{user_id}/{token}"


class UserService:
    """Service for user accounts, roles and email verification."""

    def __init__(self, users: Optional[UserRepository] = None, mailer: Optional[Mailer] = None) -> None:
        self.user_repo = users or UserRepository()
        self.mailer = mailer or SmtpMailer()

    async def get(self, user_id: str) -> User:
        return await self.user_repo.get_by_id(user_id)

    async def find_all(self, **query: Any) -> List[User]:
        return await self.user_repo.find_all(**query)

    async def find_one(self, **query: Any) -> Optional[User]:
        return await self.user_repo.find_one(**query)

    async def create_user(self, body: UserCreate) -> User:
        """Register a user and send the verification email.

        Raises
        ------
        ConflictError
            If the username or email is already taken.  No email is sent.
        """
        token = secrets.token_urlsafe(32)
        record = {
            "username": body.username,
            "email": body.email,
            "password": hash_password(body.password),
            "roles": [],
            "isVerified": False,
            "verificationToken": token,
        }
        try:
            user = await self.user_repo.create(record)
        except DuplicateKeyError as e:
            logger.info("Registration refused for '%s': %s", body.username, e.detail)
            raise ConflictError("Username or email already exists") from e
        logger.info("Registered user %s (%s)", user.id, user.username)

        await self.mailer.send(
            OutboundEmail(
                sender=settings.email_sender,
                to=body.email,
                subject="Verify your email",
                body=(
                    f"Hello {body.username},\n\n"
                    "Please confirm your email address by opening the link below:\n"
                    f"{verification_link(user.id, token)}\n"
                ),
            )
        )
        return user

    async def delete(self, user_id: str) -> User:
        """Delete an account and notify its owner; returns the deleted account."""
        user = await self.user_repo.get_by_id(user_id)
        await self.user_repo.delete(user_id)
        logger.info("Deleted user %s", user_id)
        if user.email:
            await self.mailer.send(
                OutboundEmail(
                    sender=settings.email_sender,
                    to=user.email,
                    subject="Your account has been deleted",
                    body=f"Hello {user.username},\n\nYour account has been deleted.\n",
                )
            )
        return user

    async def add_role(self, user_id: str, role: str) -> User:
        """Grant ``role``.  Granting a role the user already holds is a no-op."""
        user = await self.user_repo.get_by_id(user_id)
        parsed = parse_role(role)
        if parsed in user.roles:
            return user
        return await self.user_repo.set(user.model_copy(update={"roles": [*user.roles, parsed]}))

    async def delete_role(self, user_id: str, role: str) -> User:
        """Revoke ``role``.  Revoking a role the user lacks is a no-op."""
        user = await self.user_repo.get_by_id(user_id)
        parsed = parse_role(role)
        if parsed not in user.roles:
            return user
        return await self.user_repo.set(
            user.model_copy(update={"roles": [r for r in user.roles if r != parsed]})
        )

    async def verify(self, user_id: str, token: str) -> bool:
        """Mark the account verified when ``token`` matches.

        Returns ``False`` for an unknown id or a wrong token.  The token
        is consumed on success, so a second attempt returns ``False``.
        """
        user = await self.user_repo.find_with_token(user_id, token)
        if user is None:
            logger.info("Verification failed for user %s", user_id)
            return False
        await self.user_repo.set(user.model_copy(update={"is_verified": True, "verification_token": None}))
        logger.info("Verified user %s", user_id)
        return True
