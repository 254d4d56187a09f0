"""Client-facing response models and their projections from ledger entities.

Each DTO has a pure ``from_entity`` classmethod. Routers pass it to
:meth:`PaginatedResponse.build` for list endpoints or call it directly
for single-entity endpoints.
"""

from typing import Any

from pydantic import BaseModel, Field

from src.explorer.domain.entities import (
    Account,
    Asset,
    AssetDefinition,
    AssetValueType,
    Domain,
    Mintable,
    Peer,
    Role,
)


class AssetValueDTO(BaseModel):
    """Asset value as an adjacently tagged pair: ``{"t": kind, "c": content}``."""

    t: AssetValueType = Field(description="Kind of value")
    c: Any = Field(description="Value content")

    @classmethod
    def from_entity(cls, value: dict[str, Any]) -> "AssetValueDTO":
        """Convert the ledger's ``{"Kind": content}`` encoding.

        Raises:
            ValueError: If the encoding is not exactly one known kind.
        """
        if len(value) != 1:
            raise ValueError(f"Asset value must have exactly one kind, got {value!r}")
        (kind, content), = value.items()
        value_type = AssetValueType(kind)

        # Fixed-point values are rendered as decimal strings
        if value_type is AssetValueType.FIXED:
            content = str(float(content))
        elif value_type in (AssetValueType.QUANTITY, AssetValueType.BIG_QUANTITY):
            if isinstance(content, bool) or not isinstance(content, int) or content < 0:
                raise ValueError(f"{kind} must be a non-negative integer, got {content!r}")
        return cls(t=value_type, c=content)


class AssetDTO(BaseModel):
    account_id: str
    definition_id: str
    value: AssetValueDTO

    @classmethod
    def from_entity(cls, asset: Asset) -> "AssetDTO":
        return cls(
            account_id=asset.id.account_id,
            definition_id=asset.id.definition_id,
            value=AssetValueDTO.from_entity(asset.value),
        )


class AssetDefinitionDTO(BaseModel):
    id: str
    value_type: AssetValueType
    mintable: Mintable

    @classmethod
    def from_entity(cls, definition: AssetDefinition) -> "AssetDefinitionDTO":
        return cls(
            id=definition.id,
            value_type=definition.value_type,
            mintable=definition.mintable,
        )


class AccountDTO(BaseModel):
    id: str
    assets: list[AssetDTO]
    metadata: dict[str, Any]
    roles: list[str]

    @classmethod
    def from_entity(cls, account: Account) -> "AccountDTO":
        return cls(
            id=account.id,
            assets=[AssetDTO.from_entity(asset) for asset in account.assets],
            metadata=account.metadata,
            roles=list(account.roles),
        )


class DomainDTO(BaseModel):
    id: str
    accounts: list[AccountDTO]
    logo: str | None
    metadata: dict[str, Any]
    asset_definitions: list[AssetDefinitionDTO]
    # TODO: report the trigger count once the ledger exposes a trigger query
    triggers: int = 0

    @classmethod
    def from_entity(cls, domain: Domain) -> "DomainDTO":
        return cls(
            id=domain.id,
            accounts=[AccountDTO.from_entity(acc) for acc in domain.accounts],
            logo=domain.logo,
            metadata=domain.metadata,
            asset_definitions=[
                AssetDefinitionDTO.from_entity(d) for d in domain.asset_definitions
            ],
        )


class PeerDTO(BaseModel):
    address: str
    public_key: str

    @classmethod
    def from_entity(cls, peer: Peer) -> "PeerDTO":
        return cls(address=peer.id.address, public_key=peer.id.public_key)


class RoleDTO(BaseModel):
    id: str
    permissions: list[dict[str, Any]]

    @classmethod
    def from_entity(cls, role: Role) -> "RoleDTO":
        return cls(id=role.id, permissions=role.permissions)
