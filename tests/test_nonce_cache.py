import pytest

from soltrade.nonce_cache import NonceCache
from soltrade.pubkey import Pubkey

NONCE_ADDRESS = "62qc2CNXwrYqQScmEdiZFFAnJR262PxWEuNQtxfafNgV"


@pytest.fixture
def cache() -> NonceCache:
    return NonceCache()


def test_get_instance_shares_state():
    first = NonceCache.get_instance()
    second = NonceCache.get_instance()
    original = second.get_nonce_info().next_buy_time
    first.update_nonce_info_partial(next_buy_time=original + 4321)
    try:
        assert second.get_nonce_info().next_buy_time == original + 4321
    finally:
        first.update_nonce_info_partial(next_buy_time=original)


def test_initial_state(cache):
    info = cache.get_nonce_info()
    assert info.nonce_account is None
    assert info.current_nonce == bytes(32)
    assert info.next_buy_time == 0
    assert info.lock is False
    assert info.used is False


def test_init_parses_account_and_clears_flags(cache):
    cache.lock()
    cache.mark_used()
    cache.init(NONCE_ADDRESS)
    info = cache.get_nonce_info()
    assert info.nonce_account == Pubkey.from_string(NONCE_ADDRESS)
    assert info.lock is False
    assert info.used is False


def test_init_with_bad_account_keeps_previous(cache):
    cache.init(NONCE_ADDRESS)
    cache.init("not-base58-0OIl")
    assert cache.get_nonce_info().nonce_account == Pubkey.from_string(NONCE_ADDRESS)


def test_partial_update_changes_only_given_fields(cache):
    nonce = bytes([7]) * 32
    cache.update_nonce_info_partial(current_nonce=nonce, next_buy_time=1234)
    info = cache.get_nonce_info()
    assert info.current_nonce == nonce
    assert info.next_buy_time == 1234
    assert info.lock is False
    assert info.nonce_account is None


def test_lock_unlock_and_mark_used(cache):
    cache.lock()
    assert cache.get_nonce_info().lock is True
    cache.unlock()
    assert cache.get_nonce_info().lock is False
    cache.mark_used()
    assert cache.get_nonce_info().used is True


def test_returned_info_is_a_copy(cache):
    info = cache.get_nonce_info()
    info.lock = True
    assert cache.get_nonce_info().lock is False