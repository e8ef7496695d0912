"""Default trade settings and token decimal places."""

DEFAULT_SLIPPAGE = 1000  # basis points, 10%
DEFAULT_TIP_UNIT_LIMIT = 78000
DEFAULT_TIP_UNIT_PRICE = 500000
DEFAULT_BUY_TIP_FEE = 0.0006
DEFAULT_SELL_TIP_FEE = 0.0001
DEFAULT_RPC_UNIT_LIMIT = 78000
DEFAULT_RPC_UNIT_PRICE = 500000

SOL_DECIMALS = 9
DEFAULT_TOKEN_DECIMALS = 6