"""Peptide values produced by digestion."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Peptide:
    """A concrete peptide with its fixed modifications applied.

    Attributes
    ----------
    sequence : str
        Concrete residue sequence (no ambiguous codes)
    mass : float
        Monoisotopic neutral mass including H2O and modification shifts
    fixed_modifications : Tuple[Tuple[str, int], ...]
        (modification_name, position) pairs, positions 0-based within the
        peptide. Terminal modifications sit on the terminal residue.
    """
    sequence: str
    mass: float
    fixed_modifications: Tuple[Tuple[str, int], ...] = ()

    def __len__(self) -> int:
        return len(self.sequence)


@dataclass(frozen=True)
class PeptideWithPosition:
    """A peptide and its 0-based start offset in the protein sequence."""
    peptide: Peptide
    position: int
