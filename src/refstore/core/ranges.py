"""Genomic coordinate types and region parsing.

All coordinates are 0-based and half-open: ``Range("chr1", 0, 4)`` covers the
first four bases of ``chr1``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from .errors import InvalidArgumentError


@dataclass(frozen=True)
class ContigInfo:
    """A contig (chromosome or scaffold) of a reference genome."""

    name: str
    n_bases: int = 0  # Length of the whole contig, not just the cached part
    pos_in_fasta: int = 0
    description: str = ""


@dataclass(frozen=True)
class Range:
    """A half-open interval ``[start, end)`` on a named contig."""

    reference_name: str
    start: int
    end: int

    @property
    def size(self) -> int:
        """Number of bases spanned; negative for an inverted range."""
        return self.end - self.start

    def __str__(self) -> str:
        return f'reference_name: "{self.reference_name}" start: {self.start} end: {self.end}'

    def contains(self, other: Range) -> bool:
        """Return True if ``other`` lies entirely within this range."""
        return (
            other.reference_name == self.reference_name
            and other.start >= self.start
            and other.end <= self.end
        )


@dataclass(frozen=True)
class ReferenceSequence:
    """The bases covering one contiguous region of a contig."""

    region: Range
    bases: str


class ReferenceRecord(NamedTuple):
    """A contig name paired with all of its cached bases."""

    name: str
    bases: str


def make_range(reference_name: str, start: int, end: int) -> Range:
    """Shorthand for building a Range."""
    return Range(reference_name, start, end)


def is_valid_interval(region: Range) -> bool:
    """Check that a range is well formed.

    A valid range has a non-empty reference name, a non-negative start and an
    end no smaller than its start. Empty ranges (``start == end``) are valid.
    """
    return bool(region.reference_name) and 0 <= region.start <= region.end


def parse_region(region: str, max_size: int | None = None) -> Range:
    """
    Parse a genomic region string into a Range.

    Supports formats:
        - chr1:1000-2000
        - chr1:1,000-2,000
        - 1:1000-2000

    Coordinates are read as 0-based half-open, matching Range.

    Args:
        region: Region string to parse.
        max_size: If given, reject regions spanning more bases than this.

    Raises:
        InvalidArgumentError: If the format is invalid, the coordinates are
            inverted, or the region exceeds max_size.
    """
    region = region.strip().replace(",", "")
    try:
        contig, coords = region.rsplit(":", 1)
        start_str, end_str = coords.split("-")
        start = int(start_str)
        end = int(end_str)
    except ValueError as e:
        raise InvalidArgumentError(
            f"Invalid region format: '{region}'. Expected format: 'chr1:1000-2000'"
        ) from e

    if not contig:
        raise InvalidArgumentError(f"Invalid region format: '{region}'. Missing contig name")
    if start < 0:
        raise InvalidArgumentError(f"Start position must be non-negative, got {start}")
    if end < start:
        raise InvalidArgumentError(f"End position ({end}) must not be less than start ({start})")

    if max_size is not None and end - start > max_size:
        raise InvalidArgumentError(
            f"Region size {end - start:,}bp exceeds maximum allowed {max_size:,}bp. "
            f"Please request a smaller region."
        )

    return Range(contig, start, end)
