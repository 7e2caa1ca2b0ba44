"""Peptide construction from protein sequence windows.

The PeptideBuilder turns a window of a protein sequence into a Peptide:
it applies the fixed modifications configured for the search, computes the
monoisotopic mass and checks it against the mass bounds. It also expands
ambiguous windows into concrete ones under a budget of ambiguous residues.

The builder is configured once and read-only afterwards, so a single
instance is shared by every iterator created by an IteratorFactory.

Key optimizations:
1. Modification shifts folded into an ord()-indexed residue mass array
2. Numba JIT-compiled mass sums
3. Per-position lower-bound masses for prefix-sum pruning in the iterators
"""

from typing import Dict, Iterator, List, Optional, Tuple

import numba
import numpy as np

from ..constants import AA_MASSES, AMBIGUOUS_AA_MAP, H2O_MASS
from ..modifications import FixedModification, ModificationType, get_fixed_modifications
from ..residues import count_combinations, expand_combinations, has_combination
from .peptide import Peptide


# =============================================================================
# Numba Kernels
# =============================================================================

def encode_sequence_to_ord(sequence: str) -> np.ndarray:
    """Encode a residue string to an ord() array for Numba processing.

    Examples
    --------
    >>> encode_sequence_to_ord("PEP")
    array([80, 69, 80], dtype=uint8)
    """
    return np.frombuffer(sequence.encode("ascii"), dtype=np.uint8)


@numba.jit(nopython=True, cache=True)
def calculate_residue_masses(sequence_ord: np.ndarray, residue_masses: np.ndarray) -> np.ndarray:
    """Per-position residue masses of an ord() encoded sequence.

    Parameters
    ----------
    sequence_ord : np.ndarray (uint8)
        Sequence as ord() values
    residue_masses : np.ndarray (float64)
        ord()-indexed residue mass table

    Returns
    -------
    masses : np.ndarray (float64)
        Mass of the residue at each position
    """
    masses = np.empty(len(sequence_ord), dtype=np.float64)
    for i in range(len(sequence_ord)):
        masses[i] = residue_masses[sequence_ord[i]]
    return masses


@numba.jit(nopython=True, cache=True)
def sum_residue_masses(sequence_ord: np.ndarray, residue_masses: np.ndarray) -> float:
    """Sum of the residue masses of an ord() encoded sequence."""
    total = 0.0
    for i in range(len(sequence_ord)):
        total += residue_masses[sequence_ord[i]]
    return total


# =============================================================================
# Peptide Builder
# =============================================================================

class PeptideBuilder:
    """Builds peptides with fixed modifications from sequence windows.

    Parameters
    ----------
    fixed_modifications : List[str], optional
        Names of the fixed modifications to apply, see
        ``alphapeptdigest.modifications.FIXED_MODIFICATIONS``
    max_x : int, optional
        Maximal number of ambiguous residues in a window to expand.
        None means unbounded.

    Attributes
    ----------
    residue_masses : np.ndarray (float64)
        ord()-indexed residue masses including residue modification shifts.
        Ambiguous codes hold the lightest residue they stand for.
    negative_terminal_shifts : Tuple[float, ...]
        Mass shifts of the terminal modifications that make a peptide
        lighter, in the order the builder adds them.

    Examples
    --------
    >>> builder = PeptideBuilder(["Carbamidomethylation of C"])
    >>> peptide = builder.build_peptide("ACDK", "ACDKPEP", 0)
    >>> peptide.fixed_modifications
    (('Carbamidomethylation of C', 1),)
    """

    def __init__(self, fixed_modifications: Optional[List[str]] = None, max_x: Optional[int] = None):
        if max_x is not None and (isinstance(max_x, bool) or not isinstance(max_x, int) or max_x < 0):
            raise ValueError(f"max_x must be a non-negative integer or None, got {max_x!r}")

        self.fixed_modifications: Tuple[FixedModification, ...] = tuple(
            get_fixed_modifications(list(fixed_modifications or []))
        )
        self.max_x = max_x

        self._residue_modifications: Dict[str, List[FixedModification]] = {}
        self._terminal_modifications: List[FixedModification] = []

        residue_masses = AA_MASSES.copy()
        for mod in self.fixed_modifications:
            if mod.is_terminal:
                self._terminal_modifications.append(mod)
                continue
            for residue in mod.residues:
                self._residue_modifications.setdefault(residue, []).append(mod)
                residue_masses[ord(residue)] += mod.mass

        # Lower bounds again, now with the residue shifts
        for code, residues in AMBIGUOUS_AA_MAP.items():
            residue_masses[ord(code)] = min(residue_masses[ord(r)] for r in residues)

        self.residue_masses = residue_masses
        self.negative_terminal_shifts: Tuple[float, ...] = tuple(
            mod.mass for mod in self._terminal_modifications if mod.mass < 0.0
        )

    def minimal_mass(self, residue_mass: float) -> float:
        """Lower bound of any peptide built from a window with this residue mass sum.

        Sums in the same order as ``build_peptide``, so the bound never
        exceeds the built mass by a rounding error.
        """
        mass = residue_mass + H2O_MASS
        for shift in self.negative_terminal_shifts:
            mass += shift
        return mass

    def get_residue_masses(self, sequence: str) -> np.ndarray:
        """Per-position lower-bound residue masses of a sequence."""
        return calculate_residue_masses(encode_sequence_to_ord(sequence), self.residue_masses)

    def within_budget(self, window: str) -> bool:
        """Whether the window holds no more ambiguous residues than allowed."""
        return self.max_x is None or count_combinations(window) <= self.max_x

    def expand_combinations(self, window: str) -> Iterator[str]:
        """Concrete windows an ambiguous window stands for.

        Yields nothing if the window exceeds the ambiguous residue budget.
        """
        if not self.within_budget(window):
            return
        yield from expand_combinations(window)

    def _terminal_position(
        self,
        mod: FixedModification,
        window: str,
        start: int,
        protein_length: int,
    ) -> Optional[int]:
        last = len(window) - 1
        mod_type = mod.modification_type
        if mod_type == ModificationType.PEPTIDE_N_TERM:
            return 0 if mod.applies_to_residue(window[0]) else None
        if mod_type == ModificationType.PROTEIN_N_TERM:
            return 0 if start == 0 and mod.applies_to_residue(window[0]) else None
        if mod_type == ModificationType.PEPTIDE_C_TERM:
            return last if mod.applies_to_residue(window[last]) else None
        if mod_type == ModificationType.PROTEIN_C_TERM:
            at_end = start + len(window) == protein_length
            return last if at_end and mod.applies_to_residue(window[last]) else None
        return None

    def build_peptide(
        self,
        window: str,
        protein_sequence: str,
        start: int,
        mass_min: Optional[float] = None,
        mass_max: Optional[float] = None,
    ) -> Optional[Peptide]:
        """Build the peptide of a concrete window.

        Parameters
        ----------
        window : str
            Residues of the peptide, without ambiguous codes
        protein_sequence : str
            Full protein sequence, for protein terminal modifications
        start : int
            0-based offset of the window in the protein sequence
        mass_min, mass_max : float, optional
            Inclusive mass bounds, ignored if None

        Returns
        -------
        peptide : Peptide or None
            None if the window is empty, holds ambiguous residues, or the
            peptide mass is out of bounds
        """
        if not window or has_combination(window):
            return None

        mass = sum_residue_masses(encode_sequence_to_ord(window), self.residue_masses) + H2O_MASS

        modifications = [
            (mod.name, i)
            for i, aa in enumerate(window)
            for mod in self._residue_modifications.get(aa, ())
        ]
        for mod in self._terminal_modifications:
            position = self._terminal_position(mod, window, start, len(protein_sequence))
            if position is not None:
                mass += mod.mass
                modifications.append((mod.name, position))

        if mass_min is not None and mass < mass_min:
            return None
        if mass_max is not None and mass > mass_max:
            return None

        return Peptide(window, float(mass), tuple(modifications))
