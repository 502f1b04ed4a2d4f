"""
Pydantic schemas for the CSPC client information API.

These models represent the client card returned by
GET {CSPC}/api/v1/clients/{client_id}/information.
"""

from pydantic import BaseModel, Field


class AddressRecord(BaseModel):
    """
    Registration address of a client as CSPC returns it.

    Field names match the JSON keys returned by CSPC.
    """

    postal_code: str | None = Field(default=None, alias="postalCode")
    country: str | None = Field(default=None)
    region: str | None = Field(default=None)
    city: str | None = Field(default=None)
    street: str | None = Field(default=None)
    house: str | None = Field(default=None)
    building: str | None = Field(default=None)
    apartment: str | None = Field(default=None)
    full_address: str | None = Field(
        default=None, alias="fullAddress",
        description="Pre-formatted address line, preferred when present")

    model_config = {"extra": "allow", "populate_by_name": True}


class ClientRecord(BaseModel):
    """
    A client card from CSPC. Every field may be missing.
    """

    first_name: str | None = Field(default=None, alias="firstName")
    middle_name: str | None = Field(default=None, alias="middleName")
    last_name: str | None = Field(default=None, alias="lastName")
    tax_id: str | None = Field(
        default=None, alias="inn", description="Taxpayer identification number")
    address: AddressRecord | None = Field(default=None)

    model_config = {"extra": "allow", "populate_by_name": True}
