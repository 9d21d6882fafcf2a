"""Shared test fixtures for refstore tests."""

import os

import pytest

from refstore.core import ContigInfo, InMemoryFastaReader, Range, ReferenceSequence

FASTA_TEXT = ">chr1 first contig\nACGTACGTAC\nGTacgt\n>chr2\nTTTTGGGG\n>chrM\nNNAC\n"


@pytest.fixture
def contigs():
    """Contig catalog for the two-contig reference."""
    return [ContigInfo("chr1", n_bases=4), ContigInfo("chr2", n_bases=3)]


@pytest.fixture
def seqs():
    """Whole-contig sequences matching the contigs fixture."""
    return [
        ReferenceSequence(Range("chr1", 0, 4), "ACGT"),
        ReferenceSequence(Range("chr2", 0, 3), "TTT"),
    ]


@pytest.fixture
def reader(contigs, seqs):
    """Reader over chr1=ACGT and chr2=TTT."""
    return InMemoryFastaReader.create(contigs, seqs)


@pytest.fixture
def fasta_path(tmp_path):
    """Path to a small three-contig FASTA file (no index)."""
    path = os.path.join(tmp_path, "ref.fa")
    with open(path, "w") as fh:
        fh.write(FASTA_TEXT)
    return path
