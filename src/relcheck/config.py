import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    fused_poll_margin: int = 1
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.fused_poll_margin < 1:
            raise ValueError(
                f"fused_poll_margin must be at least 1, got {self.fused_poll_margin}"
            )

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from RELCHECK_* environment variables.

        Returns:
            Settings with defaults for every variable that is unset

        Raises:
            ValueError: If a variable is set but is not a valid integer
        """
        return cls(
            fused_poll_margin=_int_from_env("RELCHECK_FUSED_POLL_MARGIN", 1),
            seed=_int_from_env("RELCHECK_SEED", None),
        )


def _int_from_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
