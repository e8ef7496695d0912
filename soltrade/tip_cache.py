"""A process-wide, thread-safe tip amount."""

from __future__ import annotations

import threading

DEFAULT_TIP = 0.001


class TipCache:
    """Holds the tip, in SOL, paid to transaction-landing services."""

    _instance: TipCache | None = None
    _instance_guard = threading.Lock()

    def __init__(self, tip_amount: float = DEFAULT_TIP) -> None:
        self._tip = tip_amount
        self._guard = threading.Lock()

    @classmethod
    def get_instance(cls) -> TipCache:
        """The shared cache, created on first use."""
        with cls._instance_guard:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    def init(self, tip_amount: float | None = None) -> None:
        """Set the tip, or reset it to the default when none is given."""
        self.update_tip(DEFAULT_TIP if tip_amount is None else tip_amount)

    def get_tip(self) -> float:
        with self._guard:
            return self._tip

    def update_tip(self, amount: float) -> None:
        with self._guard:
            self._tip = amount