from __future__ import annotations

from typing import Iterable


class InvalidInput(ValueError):
    """Raised when calculator inputs cannot produce a meaningful projection."""

    def __init__(self, messages: Iterable[str]):
        self.messages = list(messages)
        super().__init__("; ".join(self.messages) or "Invalid calculator inputs.")
