"""
Concrete mapper: client data source → depositor party.

Unlike ``AddressMapper`` this one updates an existing ``Party`` in place:
the party already sits inside a participant of the refund payload and
only its client fields are refreshed.
"""

from escrow_refund.core.logging import get_logger
from escrow_refund.mappers.address_mapper import AddressMapper
from escrow_refund.mappers.client_data_source import (
    ClientDataSource,
    ClientInfoAdapter,
    ErrorDataSource,
)
from escrow_refund.schemas import ClientRecord
from escrow_refund.schemas.refund_schema import Party

logger = get_logger(__name__)


class PartyMapper:
    """Copy client data onto a ``Party``, whatever its source."""

    def __init__(self, address_mapper: AddressMapper | None = None) -> None:
        self._address_mapper = address_mapper or AddressMapper()

    def update_party_from_data_source(
        self, party: Party, data_source: ClientDataSource | None
    ) -> None:
        """
        Overwrite the client fields of ``party`` from ``data_source``.

        Sets first/middle/last name and tax id as given, the composed
        depositor name, and the mapped address. A None source leaves the
        party untouched.
        """
        if data_source is None:
            logger.debug("No client data source, party left as is",
                         extra={"party_id": party.id})
            return

        party.first_name = data_source.first_name
        party.middle_name = data_source.middle_name
        party.last_name = data_source.last_name
        party.tax_id = data_source.tax_id
        party.depositor_name = self.build_depositor_name(data_source)
        party.address = self._address_mapper.map_address(data_source.address)

    def update_party_from_client_info(
        self, party: Party, client_info: ClientRecord
    ) -> None:
        self.update_party_from_data_source(party, ClientInfoAdapter(client_info))

    def set_party_error_data(self, party: Party, error_message: str) -> None:
        self.update_party_from_data_source(party, ErrorDataSource(error_message))

    @staticmethod
    def build_depositor_name(data_source: ClientDataSource | None) -> str | None:
        if data_source is None:
            return None
        return data_source.depositor_name
