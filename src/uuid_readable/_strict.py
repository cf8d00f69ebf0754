import os
from typing import Final

STRICT_ENV_VAR: Final[str] = "UUID_READABLE_STRICT"

_enabled: bool = False


def enable_strict() -> None:
    """Make decoding also check the connective words of a sentence."""
    global _enabled
    _enabled = True


def disable_strict() -> None:
    """Go back to decoding from slot positions only."""
    global _enabled
    _enabled = False


def _is_enabled() -> bool:
    """Check if strict decoding is on (respects env var override)."""
    if os.environ.get(STRICT_ENV_VAR, "").strip() == "1":
        return True
    return _enabled
