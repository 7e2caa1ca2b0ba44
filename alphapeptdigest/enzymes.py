"""Enzyme cleavage rules.

An enzyme is described by the residues it cleaves after (C-terminal side)
or before (N-terminal side), each with an optional set of residues that
block the cleavage. Trypsin, for example, cleaves after K and R unless the
next residue is P.

Design principles:
1. Rules are plain residue sets, evaluated one boundary at a time
2. Ambiguous residues cleave if any residue they stand for cleaves
3. Sequence termini are never internal cleavage sites

Examples
--------
>>> trypsin = get_enzyme("Trypsin")
>>> trypsin.is_cleavage_site('K', 'A')
True
>>> trypsin.is_cleavage_site('K', 'P')
False
>>> trypsin.get_cleavage_sites("PEPTIDEKAAR")
[8]
"""

from dataclasses import dataclass
from typing import Dict, List

from .residues import get_combinations


@dataclass(frozen=True)
class Enzyme:
    """A proteolytic enzyme.

    Attributes
    ----------
    name : str
        Enzyme name, also used to look up its missed cleavages
    amino_acid_before : str
        Residues after which the enzyme cleaves
    restriction_after : str
        Residues that block a cleavage after `amino_acid_before` when
        they follow it
    amino_acid_after : str
        Residues before which the enzyme cleaves
    restriction_before : str
        Residues that block a cleavage before `amino_acid_after` when
        they precede it
    """
    name: str
    amino_acid_before: str = ""
    restriction_after: str = ""
    amino_acid_after: str = ""
    restriction_before: str = ""

    def _cleaves(self, before: str, after: str) -> bool:
        if before in self.amino_acid_before and after not in self.restriction_after:
            return True
        return after in self.amino_acid_after and before not in self.restriction_before

    def is_cleavage_site(
        self,
        before: str,
        after: str,
        sequence_start: bool = False,
        sequence_end: bool = False,
    ) -> bool:
        """Whether the enzyme cuts between two residues.

        Parameters
        ----------
        before : str
            Residue N-terminal to the boundary
        after : str
            Residue C-terminal to the boundary
        sequence_start, sequence_end : bool
            True when the boundary is the start or end of the sequence,
            which is never an internal cleavage site

        Returns
        -------
        bool
            True if the boundary is a cleavage site. Ambiguous residues
            make a site if any of their concrete residues does.
        """
        if sequence_start or sequence_end:
            return False
        return any(
            self._cleaves(b, a)
            for b in get_combinations(before)
            for a in get_combinations(after)
        )

    def is_definite_cleavage_site(self, before: str, after: str) -> bool:
        """Whether every concrete pair the residues stand for is cut."""
        return all(
            self._cleaves(b, a)
            for b in get_combinations(before)
            for a in get_combinations(after)
        )

    def get_cleavage_sites(self, sequence: str, definite: bool = False) -> List[int]:
        """Return the ordered internal cleavage sites of a sequence.

        A site ``p`` means the enzyme cuts between ``sequence[p - 1]`` and
        ``sequence[p]``, so ``0 < p < len(sequence)``. With ``definite``,
        only sites cut for every concrete reading of ambiguous residues are
        returned. Both lists are equal for concrete sequences.
        """
        is_site = self.is_definite_cleavage_site if definite else self.is_cleavage_site
        return [
            p for p in range(1, len(sequence))
            if is_site(sequence[p - 1], sequence[p])
        ]


# =============================================================================
# Catalogue
# =============================================================================

_CATALOGUE = [
    Enzyme("Trypsin", amino_acid_before="KR", restriction_after="P"),
    Enzyme("Trypsin (no P rule)", amino_acid_before="KR"),
    Enzyme("Arg-C", amino_acid_before="R", restriction_after="P"),
    Enzyme("Arg-C (no P rule)", amino_acid_before="R"),
    Enzyme("Arg-N", amino_acid_after="R"),
    Enzyme("Lys-C", amino_acid_before="K", restriction_after="P"),
    Enzyme("Lys-C (no P rule)", amino_acid_before="K"),
    Enzyme("Lys-N", amino_acid_after="K"),
    Enzyme("Asp-N", amino_acid_after="D"),
    Enzyme("Glu-C", amino_acid_before="E"),
    Enzyme("Glu-C (DE)", amino_acid_before="DE"),
    Enzyme("Chymotrypsin", amino_acid_before="FYWL", restriction_after="P"),
    Enzyme("Chymotrypsin (no P rule)", amino_acid_before="FYWL"),
    Enzyme("Pepsin A", amino_acid_before="FL"),
    Enzyme("CNBr", amino_acid_before="M"),
]

ENZYMES: Dict[str, Enzyme] = {enzyme.name: enzyme for enzyme in _CATALOGUE}


def get_enzyme(name: str) -> Enzyme:
    """Look up an enzyme by name.

    Raises
    ------
    KeyError
        If the enzyme is not defined
    """
    try:
        return ENZYMES[name]
    except KeyError:
        raise KeyError(f"Undefined or unsupported enzyme type: {name}") from None
