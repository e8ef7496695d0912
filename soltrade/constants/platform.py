"""Names of the supported trading platforms."""

PUMPFUN = "pumpfun"
PUMPFUN_SWAP = "pumpswap"
BONK = "bonk"
RAYDIUM_CPMM = "raydium_cpmm"
RAYDIUM_CLMM = "raydium_clmm"
RAYDIUM_AMM_V4 = "raydium_amm_v4"