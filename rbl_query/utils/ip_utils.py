"""IP address utilities for RBL queries."""

import ipaddress


class InvalidAddress(ValueError):
    """Raised when a candidate address is not an IPv4 address."""

    def __init__(self, address: object):
        super().__init__("Invalid IPv4 address")
        self.address = address


def is_valid_ipv4(ip: str) -> bool:
    """Validate if string is a valid IPv4 address.

    Args:
        ip: IP address string to validate.

    Returns:
        bool: True if valid IPv4, False otherwise.

    Examples:
        >>> is_valid_ipv4("203.0.113.45")
        True
        >>> is_valid_ipv4("256.0.0.1")
        False
        >>> is_valid_ipv4("::1")
        False
    """
    if not isinstance(ip, str):
        return False
    try:
        addr = ipaddress.ip_address(ip)
    except ValueError:
        return False
    return isinstance(addr, ipaddress.IPv4Address)


def reverse_ip(ip: str) -> str:
    """Convert IPv4 address to the reversed label form used by RBL queries.

    RBL queries require reversed octets, as with in-addr.arpa names. For
    example 203.0.113.45 becomes 45.113.0.203. The zone suffix is not added.

    Args:
        ip: IPv4 address in dotted-quad format.

    Returns:
        str: Reversed IP address.

    Raises:
        InvalidAddress: If ip is not a valid IPv4 address.

    Examples:
        >>> reverse_ip("203.0.113.45")
        '45.113.0.203'
        >>> reverse_ip("192.168.1.1")
        '1.1.168.192'
    """
    if not is_valid_ipv4(ip):
        raise InvalidAddress(ip)

    octets = str(ipaddress.IPv4Address(ip)).split(".")
    return ".".join(reversed(octets))


def build_rbl_query(reversed_root: str, zone: str) -> str:
    """Build the absolute RBL query name for a DNS lookup.

    Args:
        reversed_root: Reversed IPv4 labels, as returned by reverse_ip().
        zone: RBL zone domain (e.g., "zen.spamhaus.org").

    Returns:
        str: Query name with a trailing root dot
             (e.g., "45.113.0.203.zen.spamhaus.org.").

    Raises:
        ValueError: If zone is empty.

    Examples:
        >>> build_rbl_query("45.113.0.203", "zen.spamhaus.org")
        '45.113.0.203.zen.spamhaus.org.'
    """
    zone = zone.rstrip(".")
    if not zone:
        raise ValueError("RBL zone cannot be empty")

    return f"{reversed_root}.{zone}."
