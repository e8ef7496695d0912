# soltrade

Building blocks for trading on Solana DEX programs:

- base58 encoding and a 32-byte `Pubkey` type,
- the addresses, PDA seeds, fee rates and instruction discriminators of
  Pump.fun, PumpSwap, Bonk, Raydium CPMM and Raydium AMM v4,
- tip accounts and regional endpoints of transaction-landing services,
- exact integer pricing for Pump.fun bonding curves,
- small thread-safe in-process caches for address lookup tables, the
  durable nonce and the tip amount.

The package has no runtime dependencies.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Public keys

```python
from soltrade.pubkey import Pubkey, b58encode, b58decode

wsol = Pubkey.from_string("So11111111111111111111111111111111111111112")
zero = Pubkey.default()          # 32 zero bytes
print(zero)                      # 11111111111111111111111111111111
assert bytes(wsol) == wsol.raw   # 32 raw bytes

raw = b58decode("3mJr7AoUXx2Wqd")
assert b58encode(raw) == "3mJr7AoUXx2Wqd"
```

`Pubkey` is frozen, hashable and ordered. Building one from anything other
than 32 bytes raises `ValueError`, as does `b58decode` on a character
outside the Base58 alphabet.

## Constants

- `soltrade.constants.platform` – platform names (`PUMPFUN`,
  `PUMPFUN_SWAP`, `BONK`, `RAYDIUM_CPMM`, `RAYDIUM_CLMM`, `RAYDIUM_AMM_V4`).
- `soltrade.constants.pumpfun` – PDA seeds, initial curve reserves, fee
  settings, the program and fee-recipient accounts, and
  `PUMPFUN_AMM_FEES`, the seven protocol fee accounts.
- `soltrade.constants.pumpswap`, `soltrade.constants.bonk`,
  `soltrade.constants.raydium_cpmm`, `soltrade.constants.raydium_amm_v4` –
  seeds, accounts, fee rates and buy/sell or swap discriminators.
- `soltrade.constants.swqos` – tip account tuples (`JITO_TIP_ACCOUNTS`,
  `NEXTBLOCK_TIP_ACCOUNTS`, `ZEROSLOT_TIP_ACCOUNTS`, `NOZOMI_TIP_ACCOUNTS`,
  `BLOX_TIP_ACCOUNTS`, `NODE1_TIP_ACCOUNTS`, `FLASHBLOCK_TIP_ACCOUNTS`) and
  endpoint tuples (`SWQOS_ENDPOINTS_*`) of eight entries each, indexed by
  region in the order New York, Frankfurt, Amsterdam, SLC, Tokyo, London,
  Los Angeles, Default.
- `soltrade.constants.trade` – default slippage, compute-unit limits and
  prices, buy and sell tip fees, and `SOL_DECIMALS` /
  `DEFAULT_TOKEN_DECIMALS`.

## Bonding-curve pricing

```python
from soltrade.bonding_curve import BondingCurveAccount, CurveCompleteError
from soltrade.pubkey import Pubkey

curve = BondingCurveAccount.from_dev_trade(
    account=Pubkey.default(),     # the curve's own address
    dev_token_amount=0,
    dev_sol_amount=0,
    creator=Pubkey.default(),
)
tokens_out = curve.get_buy_price(1_000_000_000)       # lamports in
lamports_out = curve.get_sell_price(tokens_out, 95)   # fee in basis points
market_cap = curve.get_market_cap_sol()
final_cap = curve.get_final_market_cap_sol(95)
buy_out = curve.get_buy_out_price(curve.real_token_reserves, 95)
price = curve.get_token_price()                       # float, SOL per token
```

`from_dev_trade` starts from the initial Pump.fun reserves and applies the
creator's first buy. `get_buy_price` never returns more than the real token
reserves. On a complete curve `get_buy_price` and `get_sell_price` raise
`CurveCompleteError`; a subtraction that would go below zero raises
`OverflowError`.

`soltrade.global_account.GlobalAccount` carries the program's global
settings with their default values; `get_initial_buy_price(amount)` gives
the tokens received by a buy on a fresh curve.

## Trade configuration

```python
from soltrade.types import Commitment, PriorityFee, TradeConfig

config = TradeConfig(
    rpc_url="http://localhost:8899",
    swqos_configs=[],
    priority_fee=PriorityFee(buy_tip_fee=0.001),
    commitment=Commitment.FINALIZED,
)
```

`PriorityFee` defaults come from `soltrade.constants.trade`;
`TradeConfig` defaults to `Commitment.CONFIRMED` and no lookup table key.

## Address lookup tables

`soltrade.address_lookup` provides:

- `AddressLookupTableAccount(key, addresses)` and its `copy()`,
- `get_pumpfun_addresses(payer, include_addresses)` – the payer, the
  Pump.fun program accounts, then the extra addresses,
- `get_pumpfun_filtered_addresses(payer, include_addresses)` – the same
  with the AMM protocol fee accounts added,
- `filter_lookup_table(table, indices)` – a table with the same key holding
  only the entries at the given indices (indices out of range are skipped),
- `select_lookup_addresses(table, addresses)` – a table holding those of
  the given addresses that the table contains; missing ones are logged
  through `logging`, and `LookupError` is raised if none is found.

`soltrade.lookup_cache.AddressLookupTableCache.get_instance()` returns a
process-wide cache of tables keyed by address, with `add_or_update_table`,
`remove_table`, `get_table`, `get_all_table_addresses`, `table_exists`,
`lock_table`, `unlock_table`, `update_table_content` and
`get_table_content` (an empty table when none is cached). The coroutine
`get_address_lookup_table_account(address)` reads a table from the shared
cache.

## Nonce and tip caches

`soltrade.nonce_cache.NonceCache.get_instance()` keeps a `NonceInfo`: the
nonce account, its current 32-byte value, the next permitted buy time and
the `lock` and `used` flags. `init(nonce_account_str)` sets the account
when the string parses and clears both flags; `update_nonce_info_partial`
changes only the fields given; `mark_used`, `lock` and `unlock` set the
flags; `get_nonce_info` returns a copy.

`soltrade.tip_cache.TipCache.get_instance()` keeps the tip amount in SOL,
0.001 unless set with `update_tip` or `init`.

## Subscriptions

`soltrade.subscription_handle.SubscriptionHandle(task, unsub_fn)` pairs a
running asyncio task with an unsubscribe callback; `await handle.shutdown()`
calls the callback and cancels the task.

## What the package does not do

It does not talk to the network. There is no RPC client, no event
streaming, no instruction or transaction building, no signing and no
submission to landing services; the endpoint and tip-account tables are
data only. Program-derived addresses are not computed: addresses such as a
bonding curve's account are passed in by the caller. The caches live in
memory only and are not persisted.