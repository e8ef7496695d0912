"""A process-wide, thread-safe record of the durable nonce in use."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field, replace

from soltrade.pubkey import Pubkey

HASH_LENGTH = 32


@dataclass
class NonceInfo:
    """The nonce account, its current value and its usage state."""

    nonce_account: Pubkey | None = None
    current_nonce: bytes = field(default_factory=lambda: bytes(HASH_LENGTH))
    next_buy_time: int = 0
    lock: bool = False
    used: bool = False


class NonceCache:
    """Holds one NonceInfo and updates it under a lock."""

    _instance: NonceCache | None = None
    _instance_guard = threading.Lock()

    def __init__(self) -> None:
        self._info = NonceInfo()
        self._guard = threading.Lock()

    @classmethod
    def get_instance(cls) -> NonceCache:
        """The shared cache, created on first use."""
        with cls._instance_guard:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    def init(self, nonce_account_str: str | None = None) -> None:
        """Set the nonce account, if parseable, and clear the lock and used flags."""
        nonce_account = None
        if nonce_account_str is not None:
            try:
                nonce_account = Pubkey.from_string(nonce_account_str)
            except ValueError:
                nonce_account = None
        self.update_nonce_info_partial(nonce_account, None, None, False, False)

    def get_nonce_info(self) -> NonceInfo:
        """A copy of the current state."""
        with self._guard:
            return replace(self._info)

    def update_nonce_info_partial(
        self,
        nonce_account: Pubkey | None = None,
        current_nonce: bytes | None = None,
        next_buy_time: int | None = None,
        lock: bool | None = None,
        used: bool | None = None,
    ) -> None:
        """Update only the fields that are given."""
        with self._guard:
            info = self._info
            if nonce_account is not None:
                info.nonce_account = nonce_account
            if current_nonce is not None:
                info.current_nonce = bytes(current_nonce)
            if next_buy_time is not None:
                info.next_buy_time = next_buy_time
            if lock is not None:
                info.lock = lock
            if used is not None:
                info.used = used

    def mark_used(self) -> None:
        self.update_nonce_info_partial(used=True)

    def lock(self) -> None:
        self.update_nonce_info_partial(lock=True)

    def unlock(self) -> None:
        self.update_nonce_info_partial(lock=False)