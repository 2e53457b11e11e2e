"""Password reset token."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ResetToken:
    """Single-use, time-limited password reset credential."""

    token: str
    user_id: int
    expires_at: datetime
