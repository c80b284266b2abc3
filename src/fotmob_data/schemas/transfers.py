"""Schema for the ``transfers`` endpoint."""

from __future__ import annotations

from typing import Any

from .base import FotmobModel


class TransferFee(FotmobModel):
    fee_text: str | None = None
    localized_fee_text: str | None = None
    value: int | None = None


class Transfer(FotmobModel):
    name: str
    player_id: int
    position: dict[str, Any] | None = None
    transfer_date: str | None = None
    transfer_text: list[Any] | None = None
    from_club: str | None = None
    from_club_id: int | None = None
    to_club: str | None = None
    to_club_id: int | None = None
    fee: TransferFee | None = None
    transfer_type: dict[str, Any] | None = None
    contract_extension: bool | None = None
    on_loan: bool | None = None
    market_value: int | None = None


class Transfers(FotmobModel):
    """A page of recent transfers."""

    hits: int | None = None
    transfers: list[Transfer]
