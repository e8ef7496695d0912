"""Address lookup tables and the account lists kept in them for Pump.fun trades."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from soltrade.constants import pumpfun
from soltrade.pubkey import Pubkey

logger = logging.getLogger(__name__)


@dataclass
class AddressLookupTableAccount:
    """The contents of one lookup table: its own address and the addresses it holds."""

    key: Pubkey
    addresses: list[Pubkey] = field(default_factory=list)

    def copy(self) -> AddressLookupTableAccount:
        """A copy whose address list can be changed independently."""
        return AddressLookupTableAccount(self.key, list(self.addresses))


_PUMPFUN_BASE = (
    pumpfun.PUMPFUN,
    pumpfun.SYSTEM_PROGRAM,
    pumpfun.TOKEN_PROGRAM,
    pumpfun.RENT,
    pumpfun.EVENT_AUTHORITY,
    pumpfun.ASSOCIATED_TOKEN_PROGRAM,
    pumpfun.GLOBAL_ACCOUNT,
    pumpfun.FEE_RECIPIENT,
)


def get_pumpfun_addresses(
    payer: Pubkey, include_addresses: Iterable[Pubkey] = ()
) -> list[Pubkey]:
    """The payer, the Pump.fun program accounts, then any extra addresses."""
    return [payer, *_PUMPFUN_BASE, *include_addresses]


def get_pumpfun_filtered_addresses(
    payer: Pubkey, include_addresses: Iterable[Pubkey] = ()
) -> list[Pubkey]:
    """Like get_pumpfun_addresses, with the AMM protocol fee accounts added."""
    return [payer, *_PUMPFUN_BASE, *pumpfun.PUMPFUN_AMM_FEES, *include_addresses]


def filter_lookup_table(
    lookup_table: AddressLookupTableAccount, indices: Iterable[int]
) -> AddressLookupTableAccount:
    """A table with the same key holding only the addresses at `indices`.

    Indices outside the table are skipped.
    """
    size = len(lookup_table.addresses)
    selected = [lookup_table.addresses[index] for index in indices if 0 <= index < size]
    logger.info("selected %d addresses from the lookup table", len(selected))
    for position, address in enumerate(selected):
        logger.debug("using address %d: %s", position, address)
    return AddressLookupTableAccount(lookup_table.key, selected)


def select_lookup_addresses(
    lookup_table: AddressLookupTableAccount, addresses: Sequence[Pubkey]
) -> AddressLookupTableAccount:
    """A table with the same key holding those of `addresses` that the table contains.

    Addresses missing from the table are logged and left out; raises LookupError
    if none of them is in the table.
    """
    index_of = {address: index for index, address in enumerate(lookup_table.addresses)}
    indices = [index_of[address] for address in addresses if address in index_of]
    missing = [address for address in addresses if address not in index_of]

    if missing:
        logger.warning("%d addresses not found in the lookup table", len(missing))
        for position, address in enumerate(missing):
            logger.warning("missing address %d: %s", position, address)

    if not indices:
        raise LookupError("none of the requested addresses is in the lookup table")

    return filter_lookup_table(lookup_table, indices)