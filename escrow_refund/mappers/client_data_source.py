"""
Client data sources for the party mapper.

``ClientDataSource`` gives the party mapper one read-only view over the
two possible outcomes of a CSPC lookup:

  - ``ClientInfoAdapter``  wraps the client card that CSPC returned;
  - ``ErrorDataSource``    repeats one error message in every name/tax
                           field, the composed depositor name included,
                           and has no address.

Both outcomes therefore go through the same mapping code.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from escrow_refund.schemas import AddressRecord, ClientRecord


class ClientDataSource(ABC):
    """Read-only client data consumed by ``PartyMapper``."""

    @property
    @abstractmethod
    def first_name(self) -> str | None: ...

    @property
    @abstractmethod
    def middle_name(self) -> str | None: ...

    @property
    @abstractmethod
    def last_name(self) -> str | None: ...

    @property
    @abstractmethod
    def tax_id(self) -> str | None: ...

    @property
    @abstractmethod
    def address(self) -> AddressRecord | None: ...

    @property
    def depositor_name(self) -> str:
        """
        Full name in 'Last First Middle' order.

        Missing parts count as empty strings and only the ends are trimmed,
        so an empty first name leaves a double space between the others.
        """
        return (
            f"{self.last_name or ''} "
            f"{self.first_name or ''} "
            f"{self.middle_name or ''}"
        ).strip()


@dataclass(frozen=True)
class ClientInfoAdapter(ClientDataSource):
    """Pass-through view of a CSPC client card."""

    client_info: ClientRecord

    @property
    def first_name(self) -> str | None:
        return self.client_info.first_name

    @property
    def middle_name(self) -> str | None:
        return self.client_info.middle_name

    @property
    def last_name(self) -> str | None:
        return self.client_info.last_name

    @property
    def tax_id(self) -> str | None:
        return self.client_info.tax_id

    @property
    def address(self) -> AddressRecord | None:
        return self.client_info.address


@dataclass(frozen=True)
class ErrorDataSource(ClientDataSource):
    """Stand-in used when CSPC had nothing for the client."""

    error_message: str

    @property
    def first_name(self) -> str:
        return self.error_message

    @property
    def middle_name(self) -> str:
        return self.error_message

    @property
    def last_name(self) -> str:
        return self.error_message

    @property
    def tax_id(self) -> str:
        return self.error_message

    @property
    def depositor_name(self) -> str:
        return self.error_message

    @property
    def address(self) -> None:
        # A party's address is built from a structured record; there is
        # nothing to build from an error message.
        return None
