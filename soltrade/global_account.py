"""Pump.fun global configuration account."""

from __future__ import annotations

from dataclasses import dataclass

from soltrade.constants.pumpfun import (
    AUTHORITY,
    CREATOR_FEE,
    ENABLE_MIGRATE,
    FEE_BASIS_POINTS,
    FEE_RECIPIENT,
    GLOBAL_ACCOUNT,
    INITIAL_REAL_TOKEN_RESERVES,
    INITIAL_VIRTUAL_SOL_RESERVES,
    INITIAL_VIRTUAL_TOKEN_RESERVES,
    POOL_MIGRATION_FEE,
    PUMPFUN_AMM_FEES,
    TOKEN_TOTAL_SUPPLY,
    WITHDRAW_AUTHORITY,
)
from soltrade.pubkey import Pubkey


@dataclass
class GlobalAccount:
    """Program-wide pricing parameters, fees and authorities."""

    discriminator: int = 0
    account: Pubkey = GLOBAL_ACCOUNT
    initialized: bool = True
    authority: Pubkey = AUTHORITY
    fee_recipient: Pubkey = FEE_RECIPIENT
    initial_virtual_token_reserves: int = INITIAL_VIRTUAL_TOKEN_RESERVES
    initial_virtual_sol_reserves: int = INITIAL_VIRTUAL_SOL_RESERVES
    initial_real_token_reserves: int = INITIAL_REAL_TOKEN_RESERVES
    token_total_supply: int = TOKEN_TOTAL_SUPPLY
    fee_basis_points: int = FEE_BASIS_POINTS
    withdraw_authority: Pubkey = WITHDRAW_AUTHORITY
    enable_migrate: bool = ENABLE_MIGRATE
    pool_migration_fee: int = POOL_MIGRATION_FEE
    creator_fee: int = CREATOR_FEE
    fee_recipients: tuple[Pubkey, ...] = PUMPFUN_AMM_FEES

    def get_initial_buy_price(self, amount: int) -> int:
        """Tokens received for spending `amount` lamports on a fresh curve."""
        if amount == 0:
            return 0
        product = self.initial_virtual_sol_reserves * self.initial_virtual_token_reserves
        new_sol = self.initial_virtual_sol_reserves + amount
        new_tokens = product // new_sol + 1
        if new_tokens > self.initial_virtual_token_reserves:
            raise OverflowError("arithmetic underflow")
        tokens = self.initial_virtual_token_reserves - new_tokens
        return min(tokens, self.initial_real_token_reserves)