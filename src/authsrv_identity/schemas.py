"""Identity schemas and data structures."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    Attributes
    ----------
    account_id
        Numeric account identifier (``user_id`` claim)
    role_name
        Role name at issuance (``level_name`` claim)
    issued_at
        Token issue timestamp (``iat`` claim)
    expires_at
        Token expiration timestamp (``exp`` claim)
    """

    account_id: int
    role_name: str
    issued_at: datetime
    expires_at: datetime
