"""Typed queries understood by the remote ledger.

Each query names itself on the wire and declares the entity model its
result items are validated against.
"""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from src.explorer.domain.entities import (
    Account,
    Asset,
    AssetDefinition,
    Domain,
    Peer,
    Role,
)
from src.explorer.domain.identifiers import AccountId, AssetId, DomainId


class LedgerQuery(BaseModel):
    """Base class for ledger queries.

    Subclasses set ``name`` (the query name on the wire) and ``entity``
    (the model each result item is parsed into). Query fields become the
    ``params`` object of the request body.
    """

    name: ClassVar[str]
    entity: ClassVar[type[BaseModel]]

    model_config = ConfigDict(frozen=True)

    def params(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


class FindAllAccounts(LedgerQuery):
    name = "FindAllAccounts"
    entity = Account


class FindAccountById(LedgerQuery):
    name = "FindAccountById"
    entity = Account

    id: str

    @classmethod
    def for_id(cls, account_id: AccountId) -> "FindAccountById":
        return cls(id=str(account_id))


class FindAllDomains(LedgerQuery):
    name = "FindAllDomains"
    entity = Domain


class FindDomainById(LedgerQuery):
    name = "FindDomainById"
    entity = Domain

    id: str

    @classmethod
    def for_id(cls, domain_id: DomainId) -> "FindDomainById":
        return cls(id=str(domain_id))


class FindAllAssets(LedgerQuery):
    name = "FindAllAssets"
    entity = Asset


class FindAssetById(LedgerQuery):
    name = "FindAssetById"
    entity = Asset

    definition_id: str
    account_id: str

    @classmethod
    def for_id(cls, asset_id: AssetId) -> "FindAssetById":
        return cls(
            definition_id=str(asset_id.definition_id),
            account_id=str(asset_id.account_id),
        )


class FindAllAssetsDefinitions(LedgerQuery):
    name = "FindAllAssetsDefinitions"
    entity = AssetDefinition


class FindAllPeers(LedgerQuery):
    name = "FindAllPeers"
    entity = Peer


class FindAllRoles(LedgerQuery):
    name = "FindAllRoles"
    entity = Role
