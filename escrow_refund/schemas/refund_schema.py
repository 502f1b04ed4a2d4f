"""
Refund detail schemas.

``DetailRefundAmountResponse`` is the payload produced by the refund
calculation flow. Only the participant part is modelled field by field;
everything else in the payload is carried through untouched
(``extra="allow"``).
"""

from pydantic import BaseModel, Field


class Party(BaseModel):
    """
    Party of a product participant.

    For depositors every field below except ``id`` is overwritten by the
    enrichment pass, either with CSPC data or with the error message.
    """

    id: str | None = Field(default=None, description="CSPC client id")
    depositor_name: str | None = Field(
        default=None, alias="depositorName",
        description="'Last First Middle', trimmed")
    first_name: str | None = Field(default=None, alias="firstName")
    middle_name: str | None = Field(default=None, alias="middleName")
    last_name: str | None = Field(default=None, alias="lastName")
    tax_id: str | None = Field(default=None, alias="inn")
    address: str | None = Field(default=None)

    model_config = {"extra": "allow", "populate_by_name": True}


class Participant(BaseModel):
    """A participant of an escrow product instance."""

    type: str = Field(..., description="Role tag, compared case-insensitively")
    party: Party

    model_config = {"extra": "allow", "populate_by_name": True}


class RetailEscrowProductInstance(BaseModel):
    participants: list[Participant] | None = Field(default=None)

    model_config = {"extra": "allow", "populate_by_name": True}


class RefundAmountData(BaseModel):
    retail_escrow_product_instance: RetailEscrowProductInstance = Field(
        ..., alias="retailEscrowProductInstance")

    model_config = {"extra": "allow", "populate_by_name": True}


class DetailRefundAmountResponse(BaseModel):
    """Envelope of a refund amount calculation for one escrow product."""

    data: RefundAmountData

    model_config = {"extra": "allow", "populate_by_name": True}
