"""pytest fixtures for testing."""

import pytest
from unittest.mock import MagicMock, patch

import dns.resolver


class FakeDNS(dict):
    """Canned DNS outcomes keyed by absolute query name.

    Values are a list of addresses (an answer) or an exception instance
    (raised). Unregistered names raise NXDOMAIN.
    """

    def __init__(self):
        super().__init__()
        self.queries = []

    def resolve(self, qname, rdtype="A"):
        self.queries.append(qname)
        outcome = self.get(qname, dns.resolver.NXDOMAIN())
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


@pytest.fixture
def sample_config():
    """Sample configuration with two RBL zones."""
    from rbl_query.config import Config

    return Config(
        api_port=8001,
        rbl_zones=("zen.spamhaus.org", "bl.spamcop.net"),
        dns_timeout=1,
        dns_concurrency=4,
        verbose=False,
    )


@pytest.fixture
def fake_dns():
    """Patch dns.resolver.Resolver with a FakeDNS lookup table."""
    fake = FakeDNS()

    with patch("rbl_query.services.rbl_checker.dns.resolver.Resolver") as mock_class:
        mock_resolver = MagicMock()
        mock_resolver.resolve.side_effect = fake.resolve
        mock_class.return_value = mock_resolver
        yield fake
