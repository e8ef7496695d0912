"""Seeds, fee rates and account addresses of the Bonk launchpad program."""

from soltrade.pubkey import Pubkey

# PDA seeds
POOL_SEED = b"pool"
POOL_VAULT_SEED = b"pool_vault"

# Program accounts
AUTHORITY = Pubkey.from_string("WLHv2UAZm6z4KyaaELi5pjdbJh6RESMva1Rnn8pJVVh")
GLOBAL_CONFIG = Pubkey.from_string("6s1xP3hpbAfFoNtUNF8mfHsjr2Bd97JxFJRWLbL6aHuX")
TOKEN_PROGRAM = Pubkey.from_string("TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA")
EVENT_AUTHORITY = Pubkey.from_string("2DPAtwB8L12vrMRExbLuyGnC7n2J5LNoZQSejeQGpwkr")
WSOL_TOKEN_ACCOUNT = Pubkey.from_string("So11111111111111111111111111111111111111112")
BONK = Pubkey.from_string("LanMV9sAd7wArD4vJFi2qDdfnVhFxYSUg6eADduJ3uj")
SYSTEM_PROGRAM = Pubkey.from_string("11111111111111111111111111111111")

PLATFORM_FEE_RATE = 100  # 1%
PROTOCOL_FEE_RATE = 25  # 0.25%
SHARE_FEE_RATE = 0

BUY_EXECT_IN_DISCRIMINATOR = bytes([250, 234, 13, 123, 213, 156, 19, 236])
SELL_EXECT_IN_DISCRIMINATOR = bytes([149, 39, 222, 155, 211, 124, 152, 26])