"""Ambiguous residue detection and combination expansion.

Protein databases contain codes like B (Asp/Asn) or X (any residue) that
stand for more than one concrete amino acid. Peptides holding such codes
have no defined mass; they are expanded into every concrete sequence they
can stand for before a mass is computed.

Examples
--------
>>> has_combination("PEPTBIDE")
True
>>> list(expand_combinations("PEBK"))
['PEDK', 'PENK']
"""

import itertools
from typing import Iterator

from .constants import AMBIGUOUS_AA_MAP


def has_combination(sequence: str) -> bool:
    """Return True if the sequence contains at least one ambiguous code."""
    return any(aa in AMBIGUOUS_AA_MAP for aa in sequence)


def count_combinations(sequence: str) -> int:
    """Count the ambiguous code occurrences in a sequence."""
    return sum(1 for aa in sequence if aa in AMBIGUOUS_AA_MAP)


def get_combinations(residue: str) -> str:
    """Return the concrete residues a single code stands for.

    Concrete residues stand for themselves.

    Examples
    --------
    >>> get_combinations('J')
    'IL'
    >>> get_combinations('K')
    'K'
    """
    return AMBIGUOUS_AA_MAP.get(residue, residue)


def expand_combinations(sequence: str) -> Iterator[str]:
    """Lazily enumerate every concrete sequence an ambiguous sequence stands for.

    Expansion follows the cartesian product order: the first ambiguous
    position varies slowest. A sequence without ambiguous codes yields
    itself once.

    Parameters
    ----------
    sequence : str
        Residue sequence, possibly holding ambiguous codes

    Yields
    ------
    str
        Concrete residue sequences
    """
    if not has_combination(sequence):
        yield sequence
        return

    for residues in itertools.product(*(get_combinations(aa) for aa in sequence)):
        yield ''.join(residues)
