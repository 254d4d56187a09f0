"""Pydantic models for entities returned by the remote ledger.

These mirror the ledger's JSON representation. They are validated when
a response arrives; mapping them to client-facing shapes happens in
:mod:`src.explorer.domain.dto`.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class AssetValueType(str, Enum):
    """Kinds of value an asset definition can hold."""

    QUANTITY = "Quantity"
    BIG_QUANTITY = "BigQuantity"
    FIXED = "Fixed"
    STORE = "Store"


class Mintable(str, Enum):
    """Minting policy of an asset definition."""

    INFINITELY = "Infinitely"
    ONCE = "Once"
    NOT = "Not"


class AssetKey(BaseModel):
    """Composite id of an asset as encoded by the ledger."""

    definition_id: str
    account_id: str


class Asset(BaseModel):
    """An amount (or key-value store) of some asset held by an account.

    ``value`` is the ledger's externally tagged encoding, e.g.
    ``{"Quantity": 10}`` or ``{"Store": {...}}``.
    """

    id: AssetKey
    value: dict[str, Any]


class AssetDefinition(BaseModel):
    id: str
    value_type: AssetValueType
    mintable: Mintable = Mintable.INFINITELY


class Account(BaseModel):
    id: str
    assets: list[Asset] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)
    roles: list[str] = Field(default_factory=list)


class Domain(BaseModel):
    id: str
    accounts: list[Account] = Field(default_factory=list)
    asset_definitions: list[AssetDefinition] = Field(default_factory=list)
    logo: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)


class PeerId(BaseModel):
    address: str
    public_key: str


class Peer(BaseModel):
    id: PeerId


class Role(BaseModel):
    id: str
    permissions: list[dict[str, Any]] = Field(default_factory=list)


class Uptime(BaseModel):
    secs: int = Field(ge=0)
    nanos: int = Field(ge=0)


class LedgerStatus(BaseModel):
    """Health counters reported by the ledger node."""

    peers: int = Field(ge=0, description="Number of connected peers")
    blocks: int = Field(ge=0, description="Height of the chain")
    txs_accepted: int = Field(ge=0, description="Accepted transactions")
    txs_rejected: int = Field(ge=0, description="Rejected transactions")
    uptime: Uptime = Field(description="Node uptime")
    view_changes: int = Field(default=0, ge=0, description="Consensus view changes")
