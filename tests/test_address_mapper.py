"""
Tests for AddressMapper (CSPC address → address line).
"""

import pytest

from escrow_refund.mappers.address_mapper import AddressMapper
from escrow_refund.schemas import AddressRecord


@pytest.fixture
def mapper() -> AddressMapper:
    return AddressMapper()


def test_full_address_wins(mapper: AddressMapper) -> None:
    address = AddressRecord(
        full_address="  190000, Saint Petersburg, Nevsky pr., 28 ",
        city="ignored",
    )
    assert mapper.map_record(address) == "190000, Saint Petersburg, Nevsky pr., 28"


def test_components_joined_in_postal_order(mapper: AddressMapper) -> None:
    address = AddressRecord(
        apartment="15",
        house="1",
        street="Tverskaya",
        city="Moscow",
        postal_code="101000",
    )
    assert mapper.map_record(address) == "101000, Moscow, Tverskaya, 1, 15"


def test_blank_components_skipped(mapper: AddressMapper) -> None:
    address = AddressRecord(full_address="   ", city="Moscow", street=" ")
    assert mapper.map_record(address) == "Moscow"


def test_empty_address_maps_to_none(mapper: AddressMapper) -> None:
    assert mapper.map_record(AddressRecord()) is None


def test_map_address_accepts_none(mapper: AddressMapper) -> None:
    assert mapper.map_address(None) is None


def test_map_many(mapper: AddressMapper) -> None:
    results = mapper.map_many(
        [AddressRecord(city="Moscow"), AddressRecord(city="Kazan")]
    )
    assert results == ["Moscow", "Kazan"]


def test_camel_case_payload(mapper: AddressMapper) -> None:
    address = AddressRecord.model_validate(
        {"postalCode": "420000", "city": "Kazan"}
    )
    assert mapper.map_record(address) == "420000, Kazan"
