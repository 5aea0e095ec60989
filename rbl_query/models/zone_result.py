"""RBL zone query result models."""

from dataclasses import dataclass, field
from enum import Enum


class ZoneStatus(Enum):
    """Classification of a single zone lookup."""

    LISTED = "LISTED"  # Lookup answered (IP is on the RBL)
    NOT_LISTED = "NOT_LISTED"  # NXDOMAIN response (IP is clean)
    UNKNOWN = "UNKNOWN"  # Timeout, SERVFAIL, or other non-definitive response


@dataclass(frozen=True)
class ZoneResult:
    """Result of a single RBL zone query.

    Attributes:
        zone: RBL zone domain that was queried.
        status: Classification of the lookup outcome.
        addresses: Resolved addresses, verbatim and in answer order.
            Empty unless the zone answered.
    """

    zone: str
    status: ZoneStatus
    addresses: tuple[str, ...] = field(default_factory=tuple)

    @property
    def matched(self) -> bool:
        """Whether the IP is reported as listed on this zone."""
        return self.status == ZoneStatus.LISTED

    def is_unknown(self) -> bool:
        return self.status == ZoneStatus.UNKNOWN

    def to_json(self) -> dict:
        """Serialize to the response object shape.

        Returns:
            dict: JSON-serializable representation.
        """
        return {
            "RblServer": self.zone,
            "IsMatch": self.matched,
            "IPs": list(self.addresses),
        }


def results_to_json(results: list[ZoneResult]) -> list[dict]:
    """Serialize a query response, keeping zone order."""
    return [result.to_json() for result in results]
