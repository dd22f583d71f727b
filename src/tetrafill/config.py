"""Runtime defaults, overridable through ``TETRAFILL_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple

ENV_PREFIX = "TETRAFILL_"

DEFAULT_HEIGHT = 6
DEFAULT_WIDTH = 6
# I J L O S T Z
DEFAULT_PIECES: Tuple[int, ...] = (8, 1, 1, 0, 0, 0, 0)

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from None


def _env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{ENV_PREFIX}{name} must be a boolean, got {raw!r}")


def _env_pieces(env: Mapping[str, str], name: str, default: Tuple[int, ...]) -> Tuple[int, ...]:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        values = tuple(int(token) for token in raw.replace(",", " ").split())
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must hold integers, got {raw!r}") from None
    if len(values) != len(DEFAULT_PIECES):
        raise ValueError(
            f"{ENV_PREFIX}{name} must hold {len(DEFAULT_PIECES)} counts (I J L O S T Z), got {raw!r}"
        )
    return values


@dataclass(frozen=True)
class SolverConfig:
    """Settings for a command line solve."""

    height: int = DEFAULT_HEIGHT
    width: int = DEFAULT_WIDTH
    pieces: Tuple[int, ...] = field(default=DEFAULT_PIECES)
    # Leave an empty cell unfilled once every piece has failed there.  Later
    # anchors can still reach back into it, so turning this off loses tilings.
    skip_fallback: bool = True
    color: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "SolverConfig":
        """Build a config from ``env`` (``os.environ`` by default).

        Raises:
            ValueError: If a variable is set to a malformed value.
        """

        env = os.environ if env is None else env
        return cls(
            height=_env_int(env, "HEIGHT", DEFAULT_HEIGHT),
            width=_env_int(env, "WIDTH", DEFAULT_WIDTH),
            pieces=_env_pieces(env, "PIECES", DEFAULT_PIECES),
            skip_fallback=_env_bool(env, "SKIP_FALLBACK", True),
            color=_env_bool(env, "COLOR", False),
            log_level=(env.get(ENV_PREFIX + "LOG_LEVEL") or "INFO").upper(),
        )


__all__ = ["DEFAULT_HEIGHT", "DEFAULT_PIECES", "DEFAULT_WIDTH", "ENV_PREFIX", "SolverConfig"]
