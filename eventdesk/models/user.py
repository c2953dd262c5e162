"""
User model. Users are seeded at startup and never change afterwards.
"""

from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    GUEST = "Guest"
    USER = "User"
    ADMIN = "Admin"


@dataclass(frozen=True)
class User:
    id: int
    name: str
    role: Role

    def __repr__(self) -> str:
        return f"<User(id={self.id}, name={self.name}, role={self.role.value})>"
