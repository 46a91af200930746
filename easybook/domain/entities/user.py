from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    id: str
    first_name: str
    last_name: str = ""
    email: str = ""
    phone: str = ""
    role: str = "customer"  # "customer", "provider", "admin"
    is_verified: bool = False
    profile_image: str = ""
    service_category: str | None = None  # providers only

    @property
    def full_name(self) -> str:
        if not self.last_name or not self.last_name.strip():
            return self.first_name
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class SessionSummary:
    user_id: str | None = None
    display_name: str = ""
    email: str = ""
    role: str | None = None
    is_logged_in: bool = False

    @staticmethod
    def from_user(user: "User | None") -> "SessionSummary":
        if user is None:
            return SessionSummary()
        return SessionSummary(
            user_id=user.id,
            display_name=user.full_name,
            email=user.email,
            role=user.role,
            is_logged_in=True,
        )
