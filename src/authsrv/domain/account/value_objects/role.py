"""Account roles (``UserLevels``)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Role:
    id: int
    name: str


ADMIN = Role(id=1, name="Admin")
USER = Role(id=2, name="User")
GUEST = Role(id=3, name="Guest")

DEFAULT_ROLES: tuple[Role, ...] = (ADMIN, USER, GUEST)
DEFAULT_SIGNUP_ROLE = USER
