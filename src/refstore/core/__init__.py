"""Core in-memory reference modules."""

from .errors import (
    InvalidArgumentError,
    NotFoundError,
    ReaderClosedError,
    RefStoreError,
)
from .fasta import load_fasta
from .ranges import (
    ContigInfo,
    Range,
    ReferenceRecord,
    ReferenceSequence,
    is_valid_interval,
    make_range,
    parse_region,
)
from .reader import FullScanIterator, InMemoryFastaReader

__all__ = [
    "ContigInfo",
    "FullScanIterator",
    "InMemoryFastaReader",
    "InvalidArgumentError",
    "NotFoundError",
    "Range",
    "ReaderClosedError",
    "RefStoreError",
    "ReferenceRecord",
    "ReferenceSequence",
    "is_valid_interval",
    "load_fasta",
    "make_range",
    "parse_region",
]
