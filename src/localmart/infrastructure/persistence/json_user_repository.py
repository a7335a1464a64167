"""JSON-file-backed implementation of UserRepository."""

from __future__ import annotations

from pathlib import Path

from localmart.domain.model.user import Role, User
from localmart.domain.repository.user_repository import UserRepository
from localmart.infrastructure.persistence.json_store import JsonDocumentFile


class JsonUserRepository(UserRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonDocumentFile(file_path, empty=[])

    def get_by_id(self, user_id: str) -> User | None:
        for user in self.list_all():
            if user.id == user_id:
                return user
        return None

    def get_by_email(self, email: str) -> User | None:
        for user in self.list_all():
            if user.email.lower() == email.lower():
                return user
        return None

    def list_all(self) -> list[User]:
        return [self._to_domain(raw) for raw in self._file.read()]

    def save(self, user: User) -> None:
        with self._file.locked():
            users = [u for u in self.list_all() if u.id != user.id]
            users.append(user)
            self._file.write([self._to_raw(u) for u in users])

    @staticmethod
    def _to_raw(user: User) -> dict:
        return {
            "id": user.id,
            "name": user.name,
            "email": user.email,
            "role": user.role.value,
            "phone": user.phone,
            "address": user.address,
            "city": user.city,
            "is_active": user.is_active,
        }

    @staticmethod
    def _to_domain(raw: dict) -> User:
        return User(
            id=raw["id"],
            name=raw["name"],
            email=raw["email"],
            role=Role(raw["role"]),
            phone=raw.get("phone", ""),
            address=raw.get("address", ""),
            city=raw.get("city", ""),
            is_active=raw.get("is_active", True),
        )
