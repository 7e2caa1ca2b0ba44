"""Sequence iterators enumerating the peptides of a protein sequence.

Every iterator is a pull-based, single-pass cursor: each call to
``get_next_peptide()`` returns the next PeptideWithPosition, or None once
the sequence is exhausted (and on every call after that). Iterators also
follow the Python iterator protocol, so ``for p in iterator`` works.

Three window walks define which (start, end) windows are candidates:

- NoDigestionIterator: the whole sequence
- UnspecificIterator: every contiguous subsequence
- SingleEnzymeIterator: runs of 1 to m + 1 consecutive enzymatic fragments

Their "-Combination" variants decorate the same walks with
CombinationMixin, which expands ambiguous residues before building.

Mass pruning
------------
Residue masses are positive, so for a fixed start the mass of a window
never decreases as it grows. The walks accumulate a lower bound of the
window mass residue by residue (in the same order the builder sums it) and
stop extending a start once the bound exceeds ``mass_max``.

Iterators are not thread-safe; create one per sequence and thread.
"""

from typing import Iterator, List, Optional, Tuple

from ..enzymes import Enzyme
from ..residues import has_combination
from .builder import PeptideBuilder
from .peptide import PeptideWithPosition


class SequenceIterator:
    """Base class of the sequence iterators.

    Subclasses define the candidate windows in ``_windows()``; building,
    mass filtering and the pull protocol live here.

    Parameters
    ----------
    peptide_builder : PeptideBuilder
        Shared, read-only peptide builder
    sequence : str
        Protein sequence to iterate
    mass_min, mass_max : float, optional
        Inclusive peptide mass bounds, ignored if None
    """

    def __init__(
        self,
        peptide_builder: PeptideBuilder,
        sequence: str,
        mass_min: Optional[float] = None,
        mass_max: Optional[float] = None,
    ):
        self.peptide_builder = peptide_builder
        self.sequence = sequence
        self.mass_min = mass_min
        self.mass_max = mass_max
        self._peptides = self._iterate()

    def get_next_peptide(self) -> Optional[PeptideWithPosition]:
        """Return the next peptide, None when exhausted."""
        return next(self._peptides, None)

    def __iter__(self) -> "SequenceIterator":
        return self

    def __next__(self) -> PeptideWithPosition:
        peptide_with_position = self.get_next_peptide()
        if peptide_with_position is None:
            raise StopIteration
        return peptide_with_position

    def _windows(self) -> Iterator[Tuple[int, int]]:
        """Yield candidate (start, end) windows, end exclusive."""
        raise NotImplementedError

    def _residue_masses(self) -> List[float]:
        return self.peptide_builder.get_residue_masses(self.sequence).tolist()

    def _too_heavy(self, residue_mass: float) -> bool:
        """Whether no peptide with this residue mass sum can be admissible."""
        if self.mass_max is None:
            return False
        return self.peptide_builder.minimal_mass(residue_mass) > self.mass_max

    def _accepts(self, window: str, start: int) -> bool:
        """Whether a concrete expansion of an ambiguous window is a candidate."""
        return True

    def _build(self, window: str, start: int) -> Optional[PeptideWithPosition]:
        peptide = self.peptide_builder.build_peptide(
            window, self.sequence, start, self.mass_min, self.mass_max
        )
        if peptide is None:
            return None
        return PeptideWithPosition(peptide, start)

    def _iterate(self) -> Iterator[PeptideWithPosition]:
        for start, end in self._windows():
            peptide_with_position = self._build(self.sequence[start:end], start)
            if peptide_with_position is not None:
                yield peptide_with_position


class CombinationMixin:
    """Expands ambiguous windows into concrete ones before building.

    Mixed in before a window walk, e.g.
    ``class UnspecificCombinationIterator(CombinationMixin, UnspecificIterator)``.
    Windows exceeding the builder's ambiguous residue budget are skipped.
    All expansions of a window are yielded before the walk moves on.
    Expansions the walk rejects through ``_accepts`` are not built.
    """

    def _iterate(self) -> Iterator[PeptideWithPosition]:
        for start, end in self._windows():
            for window in self.peptide_builder.expand_combinations(self.sequence[start:end]):
                if not self._accepts(window, start):
                    continue
                peptide_with_position = self._build(window, start)
                if peptide_with_position is not None:
                    yield peptide_with_position


# =============================================================================
# Window Walks
# =============================================================================

class NoDigestionIterator(SequenceIterator):
    """The whole sequence as a single peptide at position 0.

    The peptide is built on the first pull, not at construction. The
    output is the same either way.
    """

    def _windows(self) -> Iterator[Tuple[int, int]]:
        if self.sequence:
            yield 0, len(self.sequence)


class UnspecificIterator(SequenceIterator):
    """Every contiguous subsequence, by ascending start then ascending end.

    For a sequence of length n and no mass bounds, yields n(n + 1) / 2
    peptides. With ``mass_max`` set, a start is abandoned as soon as its
    window becomes too heavy.
    """

    def _windows(self) -> Iterator[Tuple[int, int]]:
        n = len(self.sequence)
        masses = self._residue_masses()
        for start in range(n):
            residue_mass = 0.0
            for end in range(start + 1, n + 1):
                residue_mass += masses[end - 1]
                if self._too_heavy(residue_mass):
                    break
                yield start, end


class SingleEnzymeIterator(SequenceIterator):
    """Peptides of a single enzyme digestion with missed cleavages.

    The cleavage sites split the sequence into fragments. Peptides are runs
    of 1 to ``n_missed_cleavages + 1`` consecutive fragments, by ascending
    start fragment then ascending number of fragments.

    On ambiguous sequences a boundary is a candidate if some reading of its
    residues is cut, and only definite sites count as missed cleavages
    while the walk extends a start. Each concrete expansion is then checked
    against its own residues: its flanks must be sites and its internal
    sites must not exceed ``n_missed_cleavages``.

    Parameters
    ----------
    peptide_builder : PeptideBuilder
        Shared, read-only peptide builder
    sequence : str
        Protein sequence to digest
    enzyme : Enzyme
        The digestion enzyme
    n_missed_cleavages : int
        Maximal number of missed cleavages per peptide
    mass_min, mass_max : float, optional
        Inclusive peptide mass bounds, ignored if None
    """

    def __init__(
        self,
        peptide_builder: PeptideBuilder,
        sequence: str,
        enzyme: Enzyme,
        n_missed_cleavages: int,
        mass_min: Optional[float] = None,
        mass_max: Optional[float] = None,
    ):
        self.enzyme = enzyme
        self.n_missed_cleavages = n_missed_cleavages
        self.cleavage_sites = enzyme.get_cleavage_sites(sequence)
        if has_combination(sequence):
            self.definite_cleavage_sites = enzyme.get_cleavage_sites(sequence, definite=True)
        else:
            self.definite_cleavage_sites = self.cleavage_sites
        super().__init__(peptide_builder, sequence, mass_min, mass_max)

    def _windows(self) -> Iterator[Tuple[int, int]]:
        if not self.sequence:
            return
        boundaries = [0] + self.cleavage_sites + [len(self.sequence)]
        definite = set(self.definite_cleavage_sites)
        n_fragments = len(boundaries) - 1
        masses = self._residue_masses()

        for first in range(n_fragments):
            start = boundaries[first]
            residue_mass = 0.0
            n_missed = 0
            for fragment in range(first, n_fragments):
                if fragment > first and boundaries[fragment] in definite:
                    n_missed += 1
                    if n_missed > self.n_missed_cleavages:
                        break
                end = boundaries[fragment + 1]
                for position in range(boundaries[fragment], end):
                    residue_mass += masses[position]
                if self._too_heavy(residue_mass):
                    break
                yield start, end

    def _accepts(self, window: str, start: int) -> bool:
        end = start + len(window)
        if start > 0 and not self.enzyme.is_cleavage_site(self.sequence[start - 1], window[0]):
            return False
        if end < len(self.sequence) and not self.enzyme.is_cleavage_site(window[-1], self.sequence[end]):
            return False
        return len(self.enzyme.get_cleavage_sites(window)) <= self.n_missed_cleavages


# =============================================================================
# Combination Variants
# =============================================================================

class NoDigestionCombinationIterator(CombinationMixin, NoDigestionIterator):
    """NoDigestionIterator expanding ambiguous residues."""


class UnspecificCombinationIterator(CombinationMixin, UnspecificIterator):
    """UnspecificIterator expanding ambiguous residues."""


class SingleEnzymeCombinationIterator(CombinationMixin, SingleEnzymeIterator):
    """SingleEnzymeIterator expanding ambiguous residues."""
