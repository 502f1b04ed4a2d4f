"""
Concrete mapper: CSPC address record → single address line.
"""

from escrow_refund.mappers.base_mapper import BaseMapper
from escrow_refund.schemas import AddressRecord

_COMPONENT_ORDER = (
    "postal_code",
    "country",
    "region",
    "city",
    "street",
    "house",
    "building",
    "apartment",
)
_SEPARATOR = ", "


class AddressMapper(BaseMapper[AddressRecord, str | None]):
    """Render a CSPC address as the one-line string a party carries."""

    def map_record(self, source: AddressRecord) -> str | None:
        """
        Prefer the pre-formatted ``full_address``; otherwise join the
        non-blank components in postal order. An address with no usable
        component maps to None.
        """
        if source.full_address and source.full_address.strip():
            return source.full_address.strip()

        parts = [
            value.strip()
            for value in (getattr(source, name) for name in _COMPONENT_ORDER)
            if value and value.strip()
        ]
        return _SEPARATOR.join(parts) or None

    def map_address(self, address: AddressRecord | None) -> str | None:
        """Null-tolerant entry point used by the party mapper."""
        if address is None:
            return None
        return self.map_record(address)
