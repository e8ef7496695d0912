import pytest

from soltrade.address_lookup import (
    AddressLookupTableAccount,
    filter_lookup_table,
    get_pumpfun_addresses,
    get_pumpfun_filtered_addresses,
    select_lookup_addresses,
)
from soltrade.constants import pumpfun
from soltrade.pubkey import Pubkey


def key(n: int) -> Pubkey:
    return Pubkey(bytes([n]) * 32)


@pytest.fixture
def table() -> AddressLookupTableAccount:
    return AddressLookupTableAccount(key(200), [key(1), key(2), key(3), key(4)])


def test_pumpfun_addresses_start_with_payer_and_end_with_extras():
    payer = key(9)
    result = get_pumpfun_addresses(payer, [key(10), key(11)])
    assert result[0] == payer
    assert result[1] == pumpfun.PUMPFUN
    assert result[-3] == pumpfun.FEE_RECIPIENT
    assert result[-2:] == [key(10), key(11)]


def test_pumpfun_addresses_order_fixed_by_source():
    result = get_pumpfun_addresses(key(9), [])
    assert result[1:] == [
        pumpfun.PUMPFUN,
        pumpfun.SYSTEM_PROGRAM,
        pumpfun.TOKEN_PROGRAM,
        pumpfun.RENT,
        pumpfun.EVENT_AUTHORITY,
        pumpfun.ASSOCIATED_TOKEN_PROGRAM,
        pumpfun.GLOBAL_ACCOUNT,
        pumpfun.FEE_RECIPIENT,
    ]


def test_filtered_addresses_extend_base_with_amm_fees():
    payer = key(9)
    base = get_pumpfun_addresses(payer, [])
    filtered = get_pumpfun_filtered_addresses(payer, [key(12)])
    assert filtered[: len(base)] == base
    assert tuple(filtered[len(base) : -1]) == pumpfun.PUMPFUN_AMM_FEES
    assert filtered[-1] == key(12)


def test_filter_lookup_table_skips_out_of_range(table):
    result = filter_lookup_table(table, [2, 0, 99, -1])
    assert result.key == table.key
    assert result.addresses == [key(3), key(1)]


def test_filter_lookup_table_leaves_original_untouched(table):
    before = list(table.addresses)
    filter_lookup_table(table, [1])
    assert table.addresses == before


def test_select_keeps_found_addresses_in_request_order(table):
    result = select_lookup_addresses(table, [key(4), key(50), key(2)])
    assert result.key == table.key
    assert result.addresses == [key(4), key(2)]


def test_select_raises_when_nothing_found(table):
    with pytest.raises(LookupError):
        select_lookup_addresses(table, [key(50), key(51)])


def test_select_with_empty_request_raises(table):
    with pytest.raises(LookupError):
        select_lookup_addresses(table, [])


def test_copy_is_independent(table):
    clone = table.copy()
    clone.addresses.append(key(7))
    assert key(7) not in table.addresses
    assert clone.key == table.key