"""Seeds, fee rates and account addresses of the Raydium AMM v4 program."""

from soltrade.pubkey import Pubkey

# PDA seeds
POOL_SEED = b"pool"

# Program accounts
AUTHORITY = Pubkey.from_string("5Q544fKrFoe6tsEbD7S8EmxGTJYAKtTVhAW5Q5pge4j1")
TOKEN_PROGRAM = Pubkey.from_string("TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA")
WSOL_TOKEN_ACCOUNT = Pubkey.from_string("So11111111111111111111111111111111111111112")
RAYDIUM_AMM_V4 = Pubkey.from_string("675kPX9MHTjS2zt1qfr1NYHuzeLXfQM9H24wFSUt1Mp8")

TRADE_FEE_NUMERATOR = 25
TRADE_FEE_DENOMINATOR = 10000
SWAP_FEE_NUMERATOR = 25
SWAP_FEE_DENOMINATOR = 10000

SWAP_BASE_IN_DISCRIMINATOR = bytes([9])
SWAP_BASE_OUT_DISCRIMINATOR = bytes([11])