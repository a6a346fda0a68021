from dataclasses import dataclass


@dataclass(frozen=True)
class ConfirmationNumber:
    """レンタル API が発行する予約確認番号"""

    value: int

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise ValueError("Confirmation number must be positive")

    def __str__(self) -> str:
        return str(self.value)

    def __int__(self) -> int:
        return self.value
