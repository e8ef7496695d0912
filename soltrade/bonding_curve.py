"""Pump.fun bonding curve state and its price calculations."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from soltrade.constants.pumpfun import (
    INITIAL_REAL_TOKEN_RESERVES,
    INITIAL_VIRTUAL_SOL_RESERVES,
    INITIAL_VIRTUAL_TOKEN_RESERVES,
    TOKEN_TOTAL_SUPPLY,
)
from soltrade.pubkey import Pubkey

_U64_MASK = (1 << 64) - 1


class CurveCompleteError(Exception):
    """The bonding curve is complete and no longer trades."""

    def __init__(self) -> None:
        super().__init__("Curve is complete")


def _sub(left: int, right: int) -> int:
    """Unsigned subtraction that refuses to go below zero."""
    if right > left:
        raise OverflowError("arithmetic underflow")
    return left - right


def _to_u64(value: int) -> int:
    """Truncate to 64 bits, as a narrowing integer cast does."""
    return value & _U64_MASK


@dataclass
class BondingCurveAccount:
    """Reserves and supply of one token's bonding curve."""

    discriminator: int = 0
    account: Pubkey = field(default_factory=Pubkey.default)
    virtual_token_reserves: int = 0
    virtual_sol_reserves: int = 0
    real_token_reserves: int = 0
    real_sol_reserves: int = 0
    token_total_supply: int = 0
    complete: bool = False
    creator: Pubkey = field(default_factory=Pubkey.default)

    @classmethod
    def from_dev_trade(
        cls,
        account: Pubkey,
        dev_token_amount: int,
        dev_sol_amount: int,
        creator: Pubkey,
    ) -> BondingCurveAccount:
        """The curve of a new token right after its creator's first buy."""
        virtual_sol = INITIAL_VIRTUAL_SOL_RESERVES + dev_sol_amount
        if virtual_sol > _U64_MASK:
            raise OverflowError("arithmetic overflow")
        return cls(
            discriminator=0,
            account=account,
            virtual_token_reserves=_sub(INITIAL_VIRTUAL_TOKEN_RESERVES, dev_token_amount),
            virtual_sol_reserves=virtual_sol,
            real_token_reserves=_sub(INITIAL_REAL_TOKEN_RESERVES, dev_token_amount),
            real_sol_reserves=dev_sol_amount,
            token_total_supply=TOKEN_TOTAL_SUPPLY,
            complete=False,
            creator=creator,
        )

    def get_buy_price(self, amount: int) -> int:
        """Tokens received for spending `amount` lamports."""
        if self.complete:
            raise CurveCompleteError()
        if amount == 0:
            return 0
        product = self.virtual_sol_reserves * self.virtual_token_reserves
        new_sol = self.virtual_sol_reserves + amount
        new_tokens = product // new_sol + 1
        tokens = _to_u64(_sub(self.virtual_token_reserves, new_tokens))
        return min(tokens, self.real_token_reserves)

    def get_sell_price(self, amount: int, fee_basis_points: int) -> int:
        """Lamports received, after fees, for selling `amount` tokens."""
        if self.complete:
            raise CurveCompleteError()
        if amount == 0:
            return 0
        gross = (amount * self.virtual_sol_reserves) // (
            self.virtual_token_reserves + amount
        )
        fee = (gross * fee_basis_points) // 10000
        return _to_u64(gross - fee)

    def get_market_cap_sol(self) -> int:
        """Current market cap in lamports."""
        if self.virtual_token_reserves == 0:
            return 0
        return _to_u64(
            self.token_total_supply
            * self.virtual_sol_reserves
            // self.virtual_token_reserves
        )

    def get_final_market_cap_sol(self, fee_basis_points: int) -> int:
        """Market cap in lamports once all remaining real tokens are bought."""
        total_sell_value = self.get_buy_out_price(
            self.real_token_reserves, fee_basis_points
        )
        total_virtual_value = self.virtual_sol_reserves + total_sell_value
        total_virtual_tokens = _sub(
            self.virtual_token_reserves, self.real_token_reserves
        )
        if total_virtual_tokens == 0:
            return 0
        return _to_u64(
            self.token_total_supply * total_virtual_value // total_virtual_tokens
        )

    def get_buy_out_price(self, amount: int, fee_basis_points: int) -> int:
        """Lamports, fee included, to buy `amount` tokens off the curve."""
        sol_tokens = max(amount, self.real_sol_reserves)
        remaining = _sub(self.virtual_token_reserves, sol_tokens)
        total_sell_value = (sol_tokens * self.virtual_sol_reserves) // remaining + 1
        fee = (total_sell_value * fee_basis_points) // 10000
        return _to_u64(total_sell_value + fee)

    def get_token_price(self) -> float:
        """Price of one token in SOL, from the virtual reserves."""
        v_sol = self.virtual_sol_reserves / 100_000_000.0
        v_tokens = self.virtual_token_reserves / 100_000.0
        if v_tokens == 0.0:
            return math.nan if v_sol == 0.0 else math.inf
        return v_sol / v_tokens