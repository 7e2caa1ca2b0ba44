"""Pytest configuration for AlphaPeptDigest tests.

Common fixtures shared by the unit tests. Everything is pure computation
on small in-memory sequences, the only I/O being temporary FASTA files.
"""

import pytest


@pytest.fixture
def simple_peptide():
    """Simple peptide for basic tests."""
    return "PEPTIDE"


@pytest.fixture
def tryptic_protein():
    """Protein with two tryptic sites and one proline-blocked site.

    Fragments: AAAK | GGGR | CCCKPDDD
    """
    return "AAAKGGGRCCCKPDDD"


@pytest.fixture
def trypsin():
    """Trypsin enzyme."""
    from alphapeptdigest.enzymes import get_enzyme
    return get_enzyme("Trypsin")


@pytest.fixture
def builder():
    """Peptide builder without fixed modifications."""
    from alphapeptdigest.digestion import PeptideBuilder
    return PeptideBuilder()


@pytest.fixture
def factory():
    """Iterator factory without fixed modifications."""
    from alphapeptdigest.digestion import IteratorFactory
    return IteratorFactory()


@pytest.fixture
def neutral_mass():
    """Unmodified neutral mass of a concrete sequence."""
    from alphapeptdigest.constants import AA_MASSES_DICT, H2O_MASS

    def _neutral_mass(sequence):
        return sum(AA_MASSES_DICT[aa] for aa in sequence) + H2O_MASS

    return _neutral_mass
