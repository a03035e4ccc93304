from dataclasses import dataclass

from ..utils.constants import Role
from ..utils.security import verify_password


@dataclass(frozen=True)
class Account:
    """
    A login account. The directory stores a password hash, never the raw
    password; `check_password` compares a candidate against it.
    Accounts are immutable once registered.
    """
    username: str
    password_hash: str
    role: str  # "Admin" | "Customer"

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def check_password(self, password: str) -> bool:
        return verify_password(password, self.password_hash)

    def to_dict(self) -> dict:
        return {"username": self.username, "role": self.role}
