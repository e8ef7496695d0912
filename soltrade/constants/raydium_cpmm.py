"""Seeds, fee rates and account addresses of the Raydium CPMM program."""

from soltrade.pubkey import Pubkey

# PDA seeds
POOL_SEED = b"pool"
POOL_VAULT_SEED = b"pool_vault"
OBSERVATION_STATE_SEED = b"observation"

# Program accounts
AUTHORITY = Pubkey.from_string("GpMZbSM2GgvTKHJirzeGfMFoaZ8UR2X7F4v8vHTvxFbL")
AMM_CONFIG = Pubkey.from_string("D4FPEruKEHrG5TenZ2mpDGEfu1iUvTiqBxvpU8HLBvC2")
TOKEN_PROGRAM = Pubkey.from_string("TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA")
WSOL_TOKEN_ACCOUNT = Pubkey.from_string("So11111111111111111111111111111111111111112")
RAYDIUM_CPMM = Pubkey.from_string("CPMMoo8L3F4NbTegBCKVNunggL7H1ZpdTHKxQB5qKP1C")

FEE_RATE_DENOMINATOR_VALUE = 1_000_000
TRADE_FEE_RATE = 2500
CREATOR_FEE_RATE = 0
PROTOCOL_FEE_RATE = 120000
FUND_FEE_RATE = 40000

SWAP_BASE_IN_DISCRIMINATOR = bytes([143, 190, 90, 218, 196, 30, 51, 222])
SWAP_BASE_OUT_DISCRIMINATOR = bytes([55, 217, 98, 86, 163, 74, 180, 173])