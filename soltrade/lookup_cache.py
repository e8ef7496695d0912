"""A process-wide, thread-safe cache of address lookup tables."""

from __future__ import annotations

import threading
from dataclasses import dataclass, replace

from soltrade.address_lookup import AddressLookupTableAccount
from soltrade.pubkey import Pubkey


@dataclass
class AddressLookupTableInfo:
    """A cached lookup table, its contents if known, and whether it is locked."""

    lookup_table_address: Pubkey | None = None
    address_lookup_table: AddressLookupTableAccount | None = None
    lock: bool = False

    def copy(self) -> AddressLookupTableInfo:
        table = self.address_lookup_table
        return replace(self, address_lookup_table=table.copy() if table else None)


class AddressLookupTableCache:
    """Lookup tables keyed by their address."""

    _instance: AddressLookupTableCache | None = None
    _instance_guard = threading.Lock()

    def __init__(self) -> None:
        self._tables: dict[Pubkey, AddressLookupTableInfo] = {}
        self._guard = threading.Lock()

    @classmethod
    def get_instance(cls) -> AddressLookupTableCache:
        """The shared cache, created on first use."""
        with cls._instance_guard:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    def add_or_update_table(
        self,
        lookup_table_address: Pubkey,
        address_lookup_table: AddressLookupTableAccount | None = None,
        lock: bool | None = None,
    ) -> None:
        """Add a table, or update the given fields of one already cached."""
        with self._guard:
            info = self._tables.get(lookup_table_address)
            if info is None:
                self._tables[lookup_table_address] = AddressLookupTableInfo(
                    lookup_table_address=lookup_table_address,
                    address_lookup_table=address_lookup_table,
                    lock=bool(lock),
                )
                return
            if address_lookup_table is not None:
                info.address_lookup_table = address_lookup_table
            if lock is not None:
                info.lock = lock

    def remove_table(self, lookup_table_address: Pubkey) -> bool:
        """Remove a table; True if it was cached."""
        with self._guard:
            return self._tables.pop(lookup_table_address, None) is not None

    def get_table(self, lookup_table_address: Pubkey) -> AddressLookupTableInfo | None:
        """A copy of the cached entry, or None."""
        with self._guard:
            info = self._tables.get(lookup_table_address)
            return info.copy() if info else None

    def get_all_table_addresses(self) -> list[Pubkey]:
        """Addresses of every cached table."""
        with self._guard:
            return list(self._tables)

    def table_exists(self, lookup_table_address: Pubkey) -> bool:
        with self._guard:
            return lookup_table_address in self._tables

    def _set_lock(self, lookup_table_address: Pubkey, value: bool) -> bool:
        with self._guard:
            info = self._tables.get(lookup_table_address)
            if info is None:
                return False
            info.lock = value
            return True

    def lock_table(self, lookup_table_address: Pubkey) -> bool:
        """Lock a cached table; False if it is not cached."""
        return self._set_lock(lookup_table_address, True)

    def unlock_table(self, lookup_table_address: Pubkey) -> bool:
        """Unlock a cached table; False if it is not cached."""
        return self._set_lock(lookup_table_address, False)

    def update_table_content(
        self,
        lookup_table_address: Pubkey,
        address_lookup_table: AddressLookupTableAccount,
    ) -> bool:
        """Replace a cached table's contents; False if it is not cached."""
        with self._guard:
            info = self._tables.get(lookup_table_address)
            if info is None:
                return False
            info.address_lookup_table = address_lookup_table
            return True

    def get_table_content(self, lookup_table_address: Pubkey) -> AddressLookupTableAccount:
        """A copy of the table's contents, or an empty table if none is cached."""
        with self._guard:
            info = self._tables.get(lookup_table_address)
            if info is not None and info.address_lookup_table is not None:
                return info.address_lookup_table.copy()
        return AddressLookupTableAccount(lookup_table_address, [])


async def get_address_lookup_table_account(
    lookup_table_address: Pubkey,
) -> AddressLookupTableAccount:
    """The contents of a table from the shared cache."""
    return AddressLookupTableCache.get_instance().get_table_content(lookup_table_address)