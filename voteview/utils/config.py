"""
Settings for the Voteview client, read from the environment.
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://voteview.polisci.ucla.edu"
SEARCH_ENDPOINT = "/api/search"
MEMBERS_ENDPOINT = "/api/getmembers"
USER_AGENT = "voteview-python/0.1 (+https://github.com/JeffreyBLewis/Rvoteview)"


@dataclass(frozen=True)
class Settings:
    base_url: str
    timeout: Optional[float]

    @property
    def search_url(self) -> str:
        return f"{self.base_url}{SEARCH_ENDPOINT}"

    @property
    def members_url(self) -> str:
        return f"{self.base_url}{MEMBERS_ENDPOINT}"


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(f"VOTEVIEW_TIMEOUT must be a number of seconds, got {raw!r}")
    if timeout <= 0:
        raise ValueError(f"VOTEVIEW_TIMEOUT must be positive, got {raw!r}")
    return timeout


def get_settings(base_url: Optional[str] = None, timeout: Optional[float] = None) -> Settings:
    """
    Build client settings.

    Args:
        base_url: Server root. Falls back to VOTEVIEW_BASE_URL, then the public server.
        timeout: Request timeout in seconds. Falls back to VOTEVIEW_TIMEOUT; None means no timeout.

    Returns:
        Settings instance
    """
    base_url = base_url or os.getenv('VOTEVIEW_BASE_URL') or DEFAULT_BASE_URL
    if timeout is None:
        timeout = _parse_timeout(os.getenv('VOTEVIEW_TIMEOUT'))
    settings = Settings(base_url=base_url.rstrip('/'), timeout=timeout)
    logger.debug("Voteview settings: base_url=%s timeout=%s", settings.base_url, settings.timeout)
    return settings
