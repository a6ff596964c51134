from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


def _get_env(*keys: str, default: Optional[str] = None) -> Optional[str]:
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


def _get_delay(*keys: str, default: float) -> float:
    v = _get_env(*keys, default=None)
    if v is None:
        return default
    delay = float(v)
    if delay < 0:
        raise ValueError(f"{keys[0]} must be >= 0, got {delay}")
    return delay


def _get_flag(*keys: str) -> bool:
    v = _get_env(*keys, default="")
    return v.lower() not in ("", "0", "false", "no", "off")


@dataclass(frozen=True)
class Settings:
    """
    Runtime knobs, all in seconds.

    Fields:
      - splash_delay: time the splash screen stays up before login
      - auth_delay: simulated latency before a login attempt resolves
      - search_debounce: how long the search box must be stable before filtering
      - debug: enables DEBUG level logging
    """

    splash_delay: float = 2.0
    auth_delay: float = 1.0
    search_debounce: float = 0.3
    debug: bool = False


def load_settings() -> Settings:
    return Settings(
        splash_delay=_get_delay("SHOP_SPLASH_DELAY", default=2.0),
        auth_delay=_get_delay("SHOP_AUTH_DELAY", default=1.0),
        search_debounce=_get_delay("SHOP_SEARCH_DEBOUNCE", default=0.3),
        debug=_get_flag("DEBUG"),
    )


settings = load_settings()
