"""Base58 keys, protocol constants, bonding-curve pricing and in-process caches for Solana DEX trading."""

__version__ = "0.5.1"