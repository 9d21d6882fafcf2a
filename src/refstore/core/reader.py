"""In-memory genome reference reader.

Holds a fixed set of cached reference sequences, one per contig, and answers
base queries and full scans without touching disk.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from .errors import InvalidArgumentError, NotFoundError, ReaderClosedError
from .ranges import (
    ContigInfo,
    Range,
    ReferenceRecord,
    ReferenceSequence,
    is_valid_interval,
)

logger = logging.getLogger(__name__)


def _build_sequence_map(seqs: Iterable[ReferenceSequence]) -> dict[str, ReferenceSequence]:
    """Validate cached sequences and index them by contig name.

    Raises:
        InvalidArgumentError: On a malformed region, a region whose size does
            not match its bases, or two sequences on the same contig.
    """
    seqs_map: dict[str, ReferenceSequence] = {}
    for seq in seqs:
        region = seq.region
        if not region.reference_name or region.start < 0 or region.start > region.end:
            raise InvalidArgumentError(f"Malformed region {region}")

        region_len = region.end - region.start
        if region_len != len(seq.bases):
            raise InvalidArgumentError(
                f"Region size = {region_len} not equal to bases.length() {len(seq.bases)}"
            )

        if region.reference_name in seqs_map:
            raise InvalidArgumentError(
                "Each ReferenceSequence must be on a different chromosome but "
                f"multiple ones were found on {region.reference_name}"
            )
        seqs_map[region.reference_name] = seq
    return seqs_map


class InMemoryFastaReader:
    """A genome reference backed by sequences held in memory.

    Build instances with :meth:`create` (or :meth:`from_chromosomes`); the
    constructor does no validation. Readers are immutable once built, so
    queries and independent iterators may run from several threads at once.

    ``contigs`` describes every contig of the reference and fixes the order of
    :meth:`iterate`. A contig's ``ContigInfo`` describes the whole chromosome
    even when its cached ``ReferenceSequence`` covers only part of it. Only one
    ``ReferenceSequence`` per contig is supported.
    """

    def __init__(self, contigs: Sequence[ContigInfo], seqs: dict[str, ReferenceSequence]):
        self._contigs = tuple(contigs)
        self._contigs_by_name = {c.name: c for c in self._contigs}
        self._seqs = seqs
        self._generation = 0
        self._closed = False

    @classmethod
    def create(
        cls,
        contigs: Sequence[ContigInfo],
        seqs: Iterable[ReferenceSequence],
    ) -> InMemoryFastaReader:
        """Validate ``seqs`` and build a reader over them.

        Sequences are checked in input order and the first problem found is
        raised. No reader exists unless every sequence is valid. Contigs and
        sequences are not cross-checked: a contig without a sequence (or a
        sequence without a contig) is accepted here.

        Args:
            contigs: Descriptors for every contig, in reference order.
            seqs: Cached regions and their bases, at most one per contig.

        Returns:
            A ready-to-query reader.

        Raises:
            InvalidArgumentError: If any sequence fails validation.
        """
        seqs_map = _build_sequence_map(seqs)
        logger.debug(
            "Created in-memory reference with %d contigs, %d cached sequences",
            len(contigs),
            len(seqs_map),
        )
        return cls(contigs, seqs_map)

    @classmethod
    def from_chromosomes(
        cls, chromosomes: Iterable[tuple[str, int, str]]
    ) -> InMemoryFastaReader:
        """Build a reader from ``(name, start, bases)`` tuples.

        Each tuple caches ``bases`` starting at 0-based ``start`` on contig
        ``name``. Contigs are created in input order with ``n_bases`` set to
        ``start + len(bases)``.
        """
        contigs = []
        seqs = []
        for i, (name, start, bases) in enumerate(chromosomes):
            contigs.append(ContigInfo(name=name, n_bases=start + len(bases), pos_in_fasta=i))
            seqs.append(ReferenceSequence(Range(name, start, start + len(bases)), bases))
        return cls.create(contigs, seqs)

    def __enter__(self) -> InMemoryFastaReader:
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:  # noqa: ANN001
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else f"{len(self._seqs)} cached sequences"
        return f"<InMemoryFastaReader {len(self._contigs)} contigs, {state}>"

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def generation(self) -> int:
        """Counter bumped on close; iterators compare it to detect teardown."""
        return self._generation

    @property
    def contigs(self) -> tuple[ContigInfo, ...]:
        return self._contigs

    @property
    def n_contigs(self) -> int:
        return len(self._contigs)

    def contig(self, name: str) -> ContigInfo:
        """Return the ContigInfo for ``name``.

        Raises:
            NotFoundError: If no contig has that name.
        """
        try:
            return self._contigs_by_name[name]
        except KeyError:
            raise NotFoundError(f"Unknown contig {name}") from None

    def check_is_alive(self) -> None:
        """Raise ReaderClosedError if the reader has been closed."""
        if self._closed:
            raise ReaderClosedError("Reader is not alive")

    def close(self) -> None:
        """Release the cached sequences and invalidate outstanding iterators."""
        if self._closed:
            logger.warning("InMemoryFastaReader closed more than once")
            return
        self._closed = True
        self._generation += 1
        self._seqs = {}
        logger.debug("Closed in-memory reference")

    def is_valid(self, region: Range) -> bool:
        """Return True if ``region`` can be answered by :meth:`get_bases`."""
        if self._closed or not is_valid_interval(region):
            return False
        if region.reference_name not in self._contigs_by_name:
            return False
        seq = self._seqs.get(region.reference_name)
        return seq is not None and seq.region.contains(region)

    def get_bases(self, region: Range) -> str:
        """Return the bases covering ``region``.

        Args:
            region: 0-based half-open range to fetch.

        Returns:
            The exact bases in ``region``; an empty string for an empty range.

        Raises:
            ReaderClosedError: If the reader has been closed.
            InvalidArgumentError: If the range is malformed or extends past
                the cached region of its contig.
            NotFoundError: If the contig is not in the catalog or has no
                cached sequence.
        """
        self.check_is_alive()
        if not is_valid_interval(region):
            raise InvalidArgumentError(f"Invalid interval: {region}")
        if region.reference_name not in self._contigs_by_name:
            raise NotFoundError(f"Unknown contig {region.reference_name}")

        seq = self._seqs.get(region.reference_name)
        if seq is None:
            self.check_is_alive()
            raise NotFoundError(f"No bases available for contig {region.reference_name}")

        if region.start < seq.region.start or region.end > seq.region.end:
            raise InvalidArgumentError(
                f"Cannot query range={region} as this store only has bases in the "
                f"interval={seq.region}"
            )
        pos = region.start - seq.region.start
        return seq.bases[pos : pos + (region.end - region.start)]

    query = get_bases

    def iterate(self) -> FullScanIterator:
        """Return a fresh iterator over ``(name, bases)`` records in contig order.

        Raises:
            ReaderClosedError: If the reader has been closed.
        """
        self.check_is_alive()
        return FullScanIterator(self)

    def __iter__(self) -> FullScanIterator:
        return self.iterate()

    def _cached_sequence(self, name: str) -> ReferenceSequence | None:
        return self._seqs.get(name)


class FullScanIterator:
    """Walks the reader's contigs in order, yielding their cached bases.

    The scan stops at the first contig that has no cached sequence; later
    contigs are not visited. Not thread-safe: drive each iterator from one
    thread. Closing the reader makes further ``next()`` calls raise
    ReaderClosedError.
    """

    def __init__(self, reader: InMemoryFastaReader):
        self._reader = reader
        self._generation = reader.generation
        self._pos = 0
        self._exhausted = False

    def __iter__(self) -> FullScanIterator:
        return self

    def _check_is_alive(self) -> None:
        if self._reader.closed or self._reader.generation != self._generation:
            raise ReaderClosedError("Reader is not alive")

    def __next__(self) -> ReferenceRecord:
        self._check_is_alive()
        if self._exhausted:
            raise StopIteration

        contigs = self._reader.contigs
        if self._pos >= len(contigs):
            self._exhausted = True
            raise StopIteration

        name = contigs[self._pos].name
        seq = self._reader._cached_sequence(name)
        if seq is None:
            # close() may have emptied the map after the check above
            self._check_is_alive()
            logger.debug("No cached sequence for contig %s, ending scan", name)
            self._exhausted = True
            raise StopIteration

        self._pos += 1
        return ReferenceRecord(name, seq.bases)
