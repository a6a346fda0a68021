from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class AccessToken:
    """レンタル API のアクセストークン"""

    value: str
    expires_at: datetime

    def __post_init__(self) -> None:
        if not self.value or len(self.value.strip()) == 0:
            raise ValueError("Access token cannot be empty")
        if self.expires_at.tzinfo is None:
            raise ValueError("Token expiration must be timezone-aware")

    def __str__(self) -> str:
        return self.value

    def is_expired(self, now: datetime) -> bool:
        """指定時刻の時点で期限切れかどうか"""
        return now >= self.expires_at
