"""End-to-end tests for the HTTP routes."""

import dataclasses

import dns.exception
import pytest
from fastapi.testclient import TestClient

from rbl_query.api import create_app


@pytest.fixture
def client(sample_config):
    return TestClient(create_app(sample_config))


def test_health_returns_ok(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.text == "OK"
    assert response.headers["content-type"] == "text/plain; charset=utf-8"


def test_query_listed_and_clean_zones(client, fake_dns):
    fake_dns["4.3.2.1.zen.spamhaus.org."] = ["127.0.0.2", "127.0.0.11"]

    response = client.get("/query/1.2.3.4")

    assert response.status_code == 200
    assert response.json() == [
        {
            "RblServer": "zen.spamhaus.org",
            "IsMatch": True,
            "IPs": ["127.0.0.2", "127.0.0.11"],
        },
        {"RblServer": "bl.spamcop.net", "IsMatch": False, "IPs": []},
    ]


def test_query_lookup_failure_is_not_matched(client, fake_dns):
    fake_dns["4.3.2.1.zen.spamhaus.org."] = dns.exception.Timeout()

    response = client.get("/query/1.2.3.4")

    assert response.status_code == 200
    assert response.json()[0] == {
        "RblServer": "zen.spamhaus.org",
        "IsMatch": False,
        "IPs": [],
    }


@pytest.mark.parametrize("candidate", ["not-an-ip", "999.1.1.1", "::1"])
def test_query_invalid_address(client, fake_dns, candidate):
    response = client.get(f"/query/{candidate}")

    assert response.status_code == 500
    assert response.json() == {"error": "Invalid IPv4 address"}
    assert fake_dns.queries == []


def test_query_non_resolving_zone(sample_config):
    """A zone under the reserved .invalid TLD never answers."""
    config = dataclasses.replace(sample_config, rbl_zones=("test.invalid",))
    client = TestClient(create_app(config))

    response = client.get("/query/1.2.3.4")

    assert response.status_code == 200
    assert response.json() == [{"RblServer": "test.invalid", "IsMatch": False, "IPs": []}]
