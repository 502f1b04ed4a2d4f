"""
Depositor enrichment — fills depositor parties of a refund payload with
client data from CSPC.

For every participant tagged ``depositor`` (any case) the party's client
id is looked up in CSPC, one participant at a time, in list order. A
found client card is copied onto the party; anything else writes the
uniform "external system" error message into the party. Other
participants are passed through as they are. Nothing is raised for a
failed lookup.
"""

from typing import Protocol

from escrow_refund.config import get_settings
from escrow_refund.core.logging import get_logger
from escrow_refund.mappers.party_mapper import PartyMapper
from escrow_refund.schemas import ClientRecord
from escrow_refund.schemas.refund_schema import (
    DetailRefundAmountResponse,
    Participant,
)

logger = get_logger(__name__)


class ClientInformationLookup(Protocol):
    """Anything able to resolve a client id to a CSPC client card."""

    async def get_client_information(
        self, client_id: str | None
    ) -> ClientRecord | None: ...


class DepositorEnrichmentService:
    """Enrich depositor participants with CSPC client data."""

    def __init__(
        self,
        client_lookup: ClientInformationLookup,
        party_mapper: PartyMapper | None = None,
        error_message: str | None = None,
        depositor_type: str | None = None,
    ) -> None:
        settings = get_settings()
        self._client_lookup = client_lookup
        self._party_mapper = party_mapper or PartyMapper()
        self._error_message = (
            error_message
            if error_message is not None
            else settings.external_system_error_message
        )
        self._depositor_type = (
            depositor_type or settings.party_type_depositor
        ).casefold()

    @property
    def error_message(self) -> str:
        return self._error_message

    def is_depositor(self, participant: Participant) -> bool:
        return (participant.type or "").casefold() == self._depositor_type

    async def fill_depositor_names(
        self, response: DetailRefundAmountResponse
    ) -> DetailRefundAmountResponse:
        """
        Enrich the depositors of ``response`` in place and return it.

        The rebuilt participant list is assigned back into the product
        instance. A payload without a participant list is returned as is.
        """
        product_instance = response.data.retail_escrow_product_instance
        participants = product_instance.participants
        if participants is None:
            logger.info("No participants in refund payload, nothing to enrich")
            return response

        product_instance.participants = await self.enrich_participants(
            participants
        )
        return response

    async def enrich_participants(
        self, participants: list[Participant] | None
    ) -> list[Participant] | None:
        """
        Return a new list, in the original order, in which every
        depositor's party has been filled from CSPC or with the error
        message. Non-depositors are the same objects as in the input.
        """
        if participants is None:
            return None

        enriched: list[Participant] = []
        depositor_count = 0
        failed_count = 0

        for participant in participants:
            if not self.is_depositor(participant):
                enriched.append(participant)
                continue

            depositor_count += 1
            if not await self._fill_depositor(participant):
                failed_count += 1
            enriched.append(participant)

        logger.info(
            "Depositor enrichment complete",
            extra={
                "participant_count": len(participants),
                "depositor_count": depositor_count,
                "failed_count": failed_count,
            },
        )
        return enriched

    async def _fill_depositor(self, participant: Participant) -> bool:
        """Fill one depositor's party; False when CSPC gave nothing."""
        party = participant.party
        client_info = await self._client_lookup.get_client_information(party.id)

        if client_info is None:
            logger.warning(
                "Client data unavailable, filling depositor with error message",
                extra={"party_id": party.id},
            )
            self._party_mapper.set_party_error_data(party, self._error_message)
            return False

        self._party_mapper.update_party_from_client_info(party, client_info)
        return True
