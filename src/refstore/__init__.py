"""In-memory genome reference sequences with range queries."""

from .config import RefStoreConfig
from .core import (
    ContigInfo,
    FullScanIterator,
    InMemoryFastaReader,
    InvalidArgumentError,
    NotFoundError,
    Range,
    ReaderClosedError,
    RefStoreError,
    ReferenceRecord,
    ReferenceSequence,
    is_valid_interval,
    load_fasta,
    make_range,
    parse_region,
)

__version__ = "0.1.0"

__all__ = [
    "ContigInfo",
    "FullScanIterator",
    "InMemoryFastaReader",
    "InvalidArgumentError",
    "NotFoundError",
    "Range",
    "ReaderClosedError",
    "RefStoreConfig",
    "RefStoreError",
    "ReferenceRecord",
    "ReferenceSequence",
    "is_valid_interval",
    "load_fasta",
    "make_range",
    "parse_region",
]
