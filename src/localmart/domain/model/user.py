"""Marketplace accounts and the caller identity derived from them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Role(Enum):
    CUSTOMER = "customer"
    VENDOR = "vendor"


@dataclass(frozen=True)
class Caller:
    """The authenticated identity behind a ledger operation."""

    user_id: str
    role: Role
    name: str

    @property
    def is_vendor(self) -> bool:
        return self.role == Role.VENDOR


@dataclass
class User:
    """A customer or vendor account.

    Registration and credentials are handled outside the ledger; this is
    the profile the ledger needs for display names and role checks.
    """

    id: str
    name: str
    email: str
    role: Role
    phone: str = ""
    address: str = ""
    city: str = ""
    is_active: bool = True

    def as_caller(self) -> Caller:
        return Caller(user_id=self.id, role=self.role, name=self.name)
