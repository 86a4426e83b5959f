"""
Tests for route / notes / chain / rename formatting.
"""

import pytest

from ratecon.formatter import (
    format_address,
    format_notes,
    format_route,
    generate_chain,
    generate_rename,
    get_region,
)
from ratecon.models import ParsedRateCon


@pytest.fixture
def verified():
    return ParsedRateCon(
        load_number="12345",
        weight="42000 LBS",
        pickup_time="08:00",
        pickup_date="03.15.2024",
        delivery_time="14:00",
        origin_address="1200 Industrial Blvd, Chicago, IL 60601",
        destination_address="4500 Commerce St, Dallas, TX 75201",
    )


def test_format_address_simplified():
    assert format_address("123 Main St, Springfield, IL 62701", True) == "SPRINGFIELD, IL 62701"


def test_format_address_simplified_without_commas():
    assert format_address("123 Main St Springfield IL 62701", True) == "SPRINGFIELD, IL 62701"


def test_format_address_passthrough():
    assert format_address("123 Main St, Springfield, IL 62701", False) == "123 Main St, Springfield, IL 62701"
    assert format_address("Somewhere far away", True) == "Somewhere far away"


def test_get_region():
    assert get_region("1200 Industrial Blvd, Chicago, IL 60601") == "IL"
    assert get_region("") == "??"


def test_format_route(verified):
    assert format_route(verified) == (
        "1200 INDUSTRIAL BLVD, CHICAGO, IL 60601\n4500 COMMERCE ST, DALLAS, TX 75201"
    )
    assert format_route(verified, simplified=True) == "CHICAGO, IL 60601\nDALLAS, TX 75201"


def test_format_route_missing_addresses():
    assert format_route(ParsedRateCon()) == "ORIGIN NOT FOUND\nDEST NOT FOUND"


def test_generate_chain(verified):
    assert generate_chain(verified, "101", "TRAFFIX", "green") == \
        "🟢 101-IL-TX-03.15.2024 TRAFFIX LOAD T12345"
    assert generate_chain(verified, "101", "Acme", "none") == \
        "101-IL-TX-03.15.2024 Acme LOAD 12345"


def test_generate_chain_placeholders():
    assert generate_chain(ParsedRateCon(), "7", "ACME") == "7-??-??-MM.DD.YYYY ACME LOAD "


def test_generate_rename(verified):
    assert generate_rename(verified, "101") == "101-IL-TX-03.15.2024-C"


def test_format_notes(verified):
    assert format_notes(verified, "CHAIN") == "W42000 LBS\nPU 08:00\nDEL 14:00\nCHAIN"
    assert format_notes(ParsedRateCon(), "X") == "W?\nPU ?\nDEL ?\nX"
