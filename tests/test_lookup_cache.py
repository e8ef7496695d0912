import pytest

from soltrade.address_lookup import AddressLookupTableAccount
from soltrade.lookup_cache import (
    AddressLookupTableCache,
    get_address_lookup_table_account,
)
from soltrade.pubkey import Pubkey


def key(n: int) -> Pubkey:
    return Pubkey(bytes([n]) * 32)


@pytest.fixture
def cache() -> AddressLookupTableCache:
    return AddressLookupTableCache()


def test_get_instance_shares_state():
    first = AddressLookupTableCache.get_instance()
    second = AddressLookupTableCache.get_instance()
    first.add_or_update_table(key(90))
    try:
        assert second.table_exists(key(90)) is True
        assert second.get_table(key(90)).lookup_table_address == key(90)
    finally:
        first.remove_table(key(90))
    assert second.table_exists(key(90)) is False


def test_add_new_table_defaults_unlocked(cache):
    cache.add_or_update_table(key(1))
    info = cache.get_table(key(1))
    assert info.lookup_table_address == key(1)
    assert info.address_lookup_table is None
    assert info.lock is False


def test_update_keeps_fields_not_given(cache):
    table = AddressLookupTableAccount(key(1), [key(2)])
    cache.add_or_update_table(key(1), table, True)
    cache.add_or_update_table(key(1), None, None)
    info = cache.get_table(key(1))
    assert info.address_lookup_table == table
    assert info.lock is True
    cache.add_or_update_table(key(1), None, False)
    assert cache.get_table(key(1)).lock is False


def test_missing_table_queries(cache):
    assert cache.get_table(key(5)) is None
    assert cache.table_exists(key(5)) is False
    assert cache.remove_table(key(5)) is False
    assert cache.lock_table(key(5)) is False
    assert cache.unlock_table(key(5)) is False
    assert cache.update_table_content(key(5), AddressLookupTableAccount(key(5))) is False


def test_lock_unlock_remove(cache):
    cache.add_or_update_table(key(1))
    assert cache.lock_table(key(1)) is True
    assert cache.get_table(key(1)).lock is True
    assert cache.unlock_table(key(1)) is True
    assert cache.get_table(key(1)).lock is False
    assert cache.remove_table(key(1)) is True
    assert cache.table_exists(key(1)) is False


def test_all_addresses(cache):
    cache.add_or_update_table(key(1))
    cache.add_or_update_table(key(2))
    assert sorted(cache.get_all_table_addresses()) == [key(1), key(2)]


def test_content_defaults_to_empty_table(cache):
    content = cache.get_table_content(key(3))
    assert content.key == key(3)
    assert content.addresses == []


def test_content_is_a_copy(cache):
    cache.add_or_update_table(key(1))
    assert cache.update_table_content(key(1), AddressLookupTableAccount(key(1), [key(2)]))
    content = cache.get_table_content(key(1))
    content.addresses.append(key(3))
    assert cache.get_table_content(key(1)).addresses == [key(2)]


@pytest.mark.asyncio
async def test_async_lookup_uses_shared_cache():
    shared = AddressLookupTableCache.get_instance()
    shared.add_or_update_table(key(77), AddressLookupTableAccount(key(77), [key(78)]))
    try:
        account = await get_address_lookup_table_account(key(77))
        assert account.addresses == [key(78)]
    finally:
        shared.remove_table(key(77))