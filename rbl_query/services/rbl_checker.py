"""RBL checker service: per-zone DNS lookups and their classification."""

import logging
import time
from concurrent.futures import ThreadPoolExecutor

import dns.exception
import dns.resolver

from rbl_query.config import Config
from rbl_query.models.zone_result import ZoneResult, ZoneStatus
from rbl_query.services.logger import log_query
from rbl_query.utils.ip_utils import build_rbl_query, reverse_ip


logger = logging.getLogger(__name__)


def classify_lookup(
    answer: object | None = None, exception: BaseException | None = None
) -> ZoneStatus:
    """Classify the outcome of one zone lookup.

    Any answer, empty or not, counts as a listing. NXDOMAIN is the
    definitive "not listed" response; every other failure is inconclusive.
    Callers report both negative statuses as not matched.

    Args:
        answer: The lookup answer, when the lookup did not raise.
        exception: The exception raised by the lookup, if any.

    Returns:
        ZoneStatus: LISTED, NOT_LISTED or UNKNOWN.
    """
    if exception is None:
        return ZoneStatus.LISTED
    if isinstance(exception, dns.resolver.NXDOMAIN):
        return ZoneStatus.NOT_LISTED
    return ZoneStatus.UNKNOWN


def lookup_zone(reversed_root: str, zone: str, timeout: int = 5) -> ZoneResult:
    """Look up a reversed IP against a single RBL zone.

    Args:
        reversed_root: Reversed IPv4 labels (e.g., "4.3.2.1").
        zone: RBL zone domain.
        timeout: Resolver lifetime in seconds.

    Returns:
        ZoneResult: Classified result; addresses are empty unless listed.
    """
    query_hostname = build_rbl_query(reversed_root, zone)

    try:
        resolver = dns.resolver.Resolver()
        resolver.lifetime = timeout  # Total timeout for query
        answers = resolver.resolve(query_hostname, "A")
    except dns.exception.DNSException as e:
        status = classify_lookup(exception=e)
        logger.debug(
            "RBL lookup failed",
            extra={
                "query": query_hostname,
                "zone": zone,
                "status": status.value,
                "error": type(e).__name__,
            },
        )
        return ZoneResult(zone=zone, status=status)

    addresses = tuple(str(rdata) for rdata in answers)
    status = classify_lookup(answer=answers)
    logger.debug(
        "RBL lookup answered",
        extra={
            "query": query_hostname,
            "zone": zone,
            "status": status.value,
            "addresses": list(addresses),
        },
    )
    return ZoneResult(zone=zone, status=status, addresses=addresses)


def query_zones(
    reversed_root: str,
    zones: list[str] | tuple[str, ...],
    concurrency: int = 10,
    timeout: int = 5,
) -> list[ZoneResult]:
    """Query a reversed IP against multiple RBL zones concurrently.

    Results come back in the order of zones, whatever order the lookups
    finish in, and there is exactly one result per zone.

    Args:
        reversed_root: Reversed IPv4 labels.
        zones: Ordered RBL zone domains.
        concurrency: Max concurrent DNS queries.
        timeout: Per-query resolver lifetime in seconds.

    Returns:
        list[ZoneResult]: One result per zone, in zone order.
    """
    results: list[ZoneResult] = []

    with ThreadPoolExecutor(max_workers=concurrency) as executor:
        futures = [
            executor.submit(lookup_zone, reversed_root, zone, timeout)
            for zone in zones
        ]

        for zone, future in zip(zones, futures):
            try:
                results.append(future.result())
            except Exception as e:
                # Unexpected error - treat as UNKNOWN
                logger.error(
                    f"Unexpected error checking {reversed_root} against {zone}: {e}"
                )
                results.append(ZoneResult(zone=zone, status=ZoneStatus.UNKNOWN))

    return results


def check_ip(ip: str, config: Config) -> list[ZoneResult]:
    """Check a candidate IP against every configured RBL zone.

    Args:
        ip: Candidate IPv4 address string.
        config: Application configuration.

    Returns:
        list[ZoneResult]: One result per configured zone, in configured order.

    Raises:
        InvalidAddress: If ip is not an IPv4 address. No zone is queried.
    """
    start = time.time()
    reversed_root = reverse_ip(ip)

    results = query_zones(
        reversed_root,
        config.rbl_zones,
        concurrency=config.dns_concurrency,
        timeout=config.dns_timeout,
    )

    log_query(
        ip=ip,
        listed_zones=[r.zone for r in results if r.matched],
        unknown_zones=[r.zone for r in results if r.is_unknown()],
        duration_ms=int((time.time() - start) * 1000),
    )
    return results
