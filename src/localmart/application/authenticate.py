"""Application service: resolve an account into a ledger Caller.

Credential checks happen upstream; this only confirms the account exists
and is still active.
"""

from __future__ import annotations

from localmart.domain.exceptions import AuthenticationError
from localmart.domain.model.user import Caller
from localmart.domain.repository.user_repository import UserRepository


class AuthenticateHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, email: str) -> Caller:
        user = self._user_repo.get_by_email(email.strip()) if email else None
        if user is None:
            raise AuthenticationError(f"Unknown account: {email!r}")
        if not user.is_active:
            raise AuthenticationError("Account is deactivated")
        return user.as_caller()
