"""Configuration module for the RBL query service.

Loads and validates environment variables once at startup.
"""

import os
import re
from dataclasses import dataclass


DEFAULT_API_PORT = 8001
DEFAULT_RBL_ZONES = (
    "zen.spamhaus.org,bl.score.senderscore.com,b.barracudacentral.org,bl.spamcop.net"
)

_LABEL_RE = re.compile(r"^(?!-)[A-Za-z0-9-]{1,63}(?<!-)$")


@dataclass(frozen=True)
class Config:
    """Application configuration loaded from environment variables."""

    # HTTP Configuration
    api_port: int

    # RBL Configuration
    rbl_zones: tuple[str, ...]
    dns_timeout: int
    dns_concurrency: int

    # Operational Configuration
    verbose: bool

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Raises:
            ValueError: If a variable is invalid.

        Returns:
            Config: Validated configuration instance.
        """
        # HTTP Configuration
        api_port = cls._get_int_env("API_PORT", DEFAULT_API_PORT)
        if not 1 <= api_port <= 65535:
            raise ValueError("API_PORT must be between 1 and 65535")

        # RBL Configuration
        rbl_zones_str = os.getenv("RBL_DNS_LOOKUP") or DEFAULT_RBL_ZONES
        rbl_zones = tuple(
            zone.strip() for zone in rbl_zones_str.split(",") if zone.strip()
        )
        if not rbl_zones:
            raise ValueError("RBL_DNS_LOOKUP must contain at least one zone")
        for zone in rbl_zones:
            if not is_valid_zone(zone):
                raise ValueError(f"RBL_DNS_LOOKUP contains an invalid zone: {zone}")

        dns_timeout = cls._get_int_env("DNS_TIMEOUT", 5)
        if not 1 <= dns_timeout <= 60:
            raise ValueError("DNS_TIMEOUT must be between 1 and 60 seconds")

        dns_concurrency = cls._get_int_env("DNS_CONCURRENCY", 10)
        if not 1 <= dns_concurrency <= 100:
            raise ValueError("DNS_CONCURRENCY must be between 1 and 100")

        # Operational Configuration
        verbose_str = os.getenv("VERBOSE", "false").lower()
        verbose = verbose_str in ("true", "1", "yes")

        return cls(
            api_port=api_port,
            rbl_zones=rbl_zones,
            dns_timeout=dns_timeout,
            dns_concurrency=dns_concurrency,
            verbose=verbose,
        )

    @staticmethod
    def _get_int_env(key: str, default: int) -> int:
        """Get an integer environment variable, falling back when unset or empty.

        Raises:
            ValueError: If the value is not an integer.
        """
        value = os.getenv(key)
        if not value:
            return default
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"{key} must be an integer, got {value!r}") from None


def is_valid_zone(zone: str) -> bool:
    """Check that a zone is a legal DNS domain name.

    A single trailing dot is accepted.

    Examples:
        >>> is_valid_zone("zen.spamhaus.org")
        True
        >>> is_valid_zone("bad..zone")
        False
    """
    name = zone[:-1] if zone.endswith(".") else zone
    if not name or len(name) > 253:
        return False
    return all(_LABEL_RE.match(label) for label in name.split("."))
