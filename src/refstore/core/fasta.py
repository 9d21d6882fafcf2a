"""Eager FASTA loading into an in-memory reader using pysam."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable

import pysam

from ..constants import FASTA_INDEX_SUFFIX
from .errors import InvalidArgumentError, NotFoundError
from .ranges import ContigInfo, Range, ReferenceSequence, is_valid_interval
from .reader import InMemoryFastaReader

logger = logging.getLogger(__name__)


def load_fasta(
    fasta_path: str,
    regions: Iterable[Range] | None = None,
    uppercase: bool = True,
) -> InMemoryFastaReader:
    """
    Read a FASTA file fully into memory.

    Every record in the file becomes a ContigInfo, in file order. By default
    each contig is cached whole; pass ``regions`` to cache only those spans
    (at most one per contig). The file is closed before returning, so the
    resulting reader never reads from disk.

    Args:
        fasta_path: Path to a FASTA file. A .fai index is built if missing.
        regions: Optional spans to cache instead of whole contigs.
        uppercase: Uppercase bases (soft-masked references are lowercase).

    Returns:
        An InMemoryFastaReader over the loaded bases.

    Raises:
        FileNotFoundError: If fasta_path does not exist.
        NotFoundError: If a requested region names a contig not in the file.
        InvalidArgumentError: If a requested region is malformed or runs past
            the end of its contig.
    """
    if not os.path.exists(fasta_path):
        raise FileNotFoundError(f"FASTA file not found: {fasta_path}")

    if not os.path.exists(fasta_path + FASTA_INDEX_SUFFIX):
        logger.info("Indexing FASTA: %s", fasta_path)
        pysam.faidx(fasta_path)

    with pysam.FastaFile(fasta_path) as fasta:
        contigs = [
            ContigInfo(name=name, n_bases=length, pos_in_fasta=i)
            for i, (name, length) in enumerate(zip(fasta.references, fasta.lengths))
        ]
        lengths = {c.name: c.n_bases for c in contigs}

        if regions is None:
            wanted = [Range(c.name, 0, c.n_bases) for c in contigs]
        else:
            wanted = list(regions)
            for region in wanted:
                if not is_valid_interval(region):
                    raise InvalidArgumentError(f"Invalid interval: {region}")
                if region.reference_name not in lengths:
                    raise NotFoundError(
                        f"Contig {region.reference_name} not found in {fasta_path}"
                    )
                if region.end > lengths[region.reference_name]:
                    raise InvalidArgumentError(
                        f"Region {region} extends past the end of contig "
                        f"{region.reference_name} ({lengths[region.reference_name]}bp)"
                    )

        seqs = []
        for region in wanted:
            bases = fasta.fetch(region.reference_name, region.start, region.end)
            if uppercase:
                bases = bases.upper()
            seqs.append(ReferenceSequence(region, bases))

    logger.info(
        "Loaded %d sequences (%d bases) from %s",
        len(seqs),
        sum(len(s.bases) for s in seqs),
        fasta_path,
    )
    return InMemoryFastaReader.create(contigs, seqs)
