"""Response shapes the CLI needs to read (pydantic v2).

Almost every command prints the service response untouched; these models are
only used by the commands that reason about a response locally. Fields the
CLI never reads are kept optional so a slightly different service version
still decodes, and unknown fields are ignored.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class DecodedScript(BaseModel):
    """What the service could decode from an input or output script.

    ``address`` is ``None`` for scripts the service could not decode
    (non-standard scripts, data outputs).
    """

    model_config = ConfigDict(extra="ignore")

    address: str | None = None
    timelock: int | None = None
    data: str | None = None


class HistoryOutput(BaseModel):
    model_config = ConfigDict(extra="ignore")

    value: int = 0
    token_data: int = 0
    script: str = ""
    decoded: DecodedScript
    token: str
    spent_by: str | None = None


class HistoryInput(BaseModel):
    model_config = ConfigDict(extra="ignore")

    value: int = 0
    token_data: int = 0
    script: str = ""
    decoded: DecodedScript
    token: str
    tx_id: str = ""
    index: int = 0


class HistoryTx(BaseModel):
    """One entry of ``GET /wallet/tx-history``."""

    model_config = ConfigDict(extra="ignore")

    tx_id: str = ""
    version: int = 0
    weight: float = 0.0
    timestamp: int = 0
    is_voided: bool = False
    inputs: list[HistoryInput] = Field(default_factory=list)
    outputs: list[HistoryOutput] = Field(default_factory=list)
    parents: list[str] = Field(default_factory=list)
    token_name: str | None = None
    token_symbol: str | None = None
    tokens: list[str] | None = None


class AddressesResponse(BaseModel):
    """Body of ``GET /wallet/addresses``."""

    model_config = ConfigDict(extra="ignore")

    addresses: list[str]


class AddressInfoResponse(BaseModel):
    """Body of ``GET /wallet/address-info``.

    Successful calls fill the amounts, failed ones only ``error``.
    """

    model_config = ConfigDict(extra="ignore")

    success: bool
    total_amount_received: int | None = None
    total_amount_sent: int | None = None
    total_amount_available: int | None = None
    total_amount_locked: int | None = None
    token: str | None = None
    index: int | None = None
    error: str | None = None
