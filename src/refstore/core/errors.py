"""Exception types raised by the in-memory reference reader."""

from __future__ import annotations


class RefStoreError(Exception):
    """Base class for all refstore errors."""


class InvalidArgumentError(RefStoreError, ValueError):
    """A region, sequence, or query argument failed validation."""


class NotFoundError(RefStoreError, KeyError):
    """A contig name is not known to the reader."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable
        return str(self.args[0]) if self.args else ""


class ReaderClosedError(RefStoreError, RuntimeError):
    """The reader was closed before the operation ran."""
