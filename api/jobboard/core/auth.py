from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    ADMINISTRATOR = "admin"
    CREATOR = "recruiter"
    ORDINARY = "user"


@dataclass(slots=True)
class Principal:
    user_id: int
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMINISTRATOR

    def require_roles(self, allowed: set[Role]) -> None:
        if self.role not in allowed:
            names = sorted(role.value for role in allowed)
            raise PermissionError(f"role {self.role.value!r} is not permitted; requires one of: {names}")


def parse_role(value: str | None) -> Role:
    if not value:
        return Role.ORDINARY
    normalized = value.strip().lower()
    for role in Role:
        if role.value == normalized or role.name.lower() == normalized:
            return role
    return Role.ORDINARY
