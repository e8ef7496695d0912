"""Trade configuration and priority-fee settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from soltrade.constants.trade import (
    DEFAULT_BUY_TIP_FEE,
    DEFAULT_RPC_UNIT_LIMIT,
    DEFAULT_RPC_UNIT_PRICE,
    DEFAULT_SELL_TIP_FEE,
    DEFAULT_TIP_UNIT_LIMIT,
    DEFAULT_TIP_UNIT_PRICE,
)
from soltrade.pubkey import Pubkey


class Commitment(str, Enum):
    """How settled a block must be before a request treats it as final."""

    PROCESSED = "processed"
    CONFIRMED = "confirmed"
    FINALIZED = "finalized"


@dataclass
class PriorityFee:
    """Compute-unit limits and prices, and the tips paid for buys and sells."""

    tip_unit_limit: int = DEFAULT_TIP_UNIT_LIMIT
    tip_unit_price: int = DEFAULT_TIP_UNIT_PRICE
    rpc_unit_limit: int = DEFAULT_RPC_UNIT_LIMIT
    rpc_unit_price: int = DEFAULT_RPC_UNIT_PRICE
    buy_tip_fee: float = DEFAULT_BUY_TIP_FEE
    buy_tip_fees: list[float] = field(default_factory=list)
    smart_buy_tip_fee: float = 0.0
    sell_tip_fee: float = DEFAULT_SELL_TIP_FEE


@dataclass
class TradeConfig:
    """Where to send requests and transactions, and with what fees."""

    rpc_url: str
    swqos_configs: list[Any]
    priority_fee: PriorityFee = field(default_factory=PriorityFee)
    commitment: Commitment = Commitment.CONFIRMED
    lookup_table_key: Pubkey | None = None