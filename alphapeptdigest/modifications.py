"""Fixed modifications applied while building peptides.

Fixed modifications are set once per search (e.g. carbamidomethylation of
cysteines after alkylation, or isobaric labels) and apply to every matching
site of every peptide. This module defines how a fixed modification targets
a peptide and provides a catalogue of the common ones, looked up by name.

Examples
--------
>>> mod = get_fixed_modification("Carbamidomethylation of C")
>>> mod.mass
57.021464
>>> mod.applies_to_residue('C')
True
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List

from .constants import (
    CARBAMIDOMETHYL_MASS,
    OXIDATION_MASS,
    ACETYL_MASS,
    METHYLTHIO_MASS,
    DEAMIDATION_MASS,
    AMIDATION_MASS,
    PYRO_GLU_FROM_Q_MASS,
    PYRO_GLU_FROM_E_MASS,
    TMT_MASS,
    ITRAQ4_MASS,
    ITRAQ8_MASS,
)


class ModificationType(Enum):
    """Where on a peptide a fixed modification can sit."""
    RESIDUE = "residue"
    PEPTIDE_N_TERM = "peptide_n_term"
    PEPTIDE_C_TERM = "peptide_c_term"
    PROTEIN_N_TERM = "protein_n_term"
    PROTEIN_C_TERM = "protein_c_term"


@dataclass(frozen=True)
class FixedModification:
    """A fixed modification.

    Attributes
    ----------
    name : str
        Unique name, e.g. "Carbamidomethylation of C"
    mass : float
        Monoisotopic mass shift in Da (may be negative)
    residues : str
        Targeted residues. Empty means any residue, only meaningful for
        terminal modifications.
    modification_type : ModificationType
        Residue or terminal modification
    """
    name: str
    mass: float
    residues: str = ""
    modification_type: ModificationType = ModificationType.RESIDUE

    def __post_init__(self):
        if self.modification_type == ModificationType.RESIDUE and not self.residues:
            raise ValueError(f"Residue modification {self.name} targets no residue")

    @property
    def is_terminal(self) -> bool:
        return self.modification_type != ModificationType.RESIDUE

    def applies_to_residue(self, residue: str) -> bool:
        """Whether the modification can sit on the given residue."""
        return not self.residues or residue in self.residues


# =============================================================================
# Catalogue
# =============================================================================

_CATALOGUE = [
    FixedModification("Carbamidomethylation of C", CARBAMIDOMETHYL_MASS, "C"),
    FixedModification("Methylthio of C", METHYLTHIO_MASS, "C"),
    FixedModification("Oxidation of M", OXIDATION_MASS, "M"),
    FixedModification("Deamidation of N", DEAMIDATION_MASS, "N"),
    FixedModification("Deamidation of Q", DEAMIDATION_MASS, "Q"),
    FixedModification("TMT 10-plex of K", TMT_MASS, "K"),
    FixedModification(
        "TMT 10-plex of peptide N-term", TMT_MASS, "",
        ModificationType.PEPTIDE_N_TERM,
    ),
    FixedModification("iTRAQ 4-plex of K", ITRAQ4_MASS, "K"),
    FixedModification(
        "iTRAQ 4-plex of peptide N-term", ITRAQ4_MASS, "",
        ModificationType.PEPTIDE_N_TERM,
    ),
    FixedModification("iTRAQ 8-plex of K", ITRAQ8_MASS, "K"),
    FixedModification(
        "iTRAQ 8-plex of peptide N-term", ITRAQ8_MASS, "",
        ModificationType.PEPTIDE_N_TERM,
    ),
    FixedModification(
        "Acetylation of peptide N-term", ACETYL_MASS, "",
        ModificationType.PEPTIDE_N_TERM,
    ),
    FixedModification(
        "Acetylation of protein N-term", ACETYL_MASS, "",
        ModificationType.PROTEIN_N_TERM,
    ),
    FixedModification(
        "Pyrolidone from Q", PYRO_GLU_FROM_Q_MASS, "Q",
        ModificationType.PEPTIDE_N_TERM,
    ),
    FixedModification(
        "Pyrolidone from E", PYRO_GLU_FROM_E_MASS, "E",
        ModificationType.PEPTIDE_N_TERM,
    ),
    FixedModification(
        "Amidation of peptide C-term", AMIDATION_MASS, "",
        ModificationType.PEPTIDE_C_TERM,
    ),
    FixedModification(
        "Amidation of protein C-term", AMIDATION_MASS, "",
        ModificationType.PROTEIN_C_TERM,
    ),
]

FIXED_MODIFICATIONS: Dict[str, FixedModification] = {
    mod.name: mod for mod in _CATALOGUE
}


def get_fixed_modification(name: str) -> FixedModification:
    """Look up a fixed modification by name.

    Raises
    ------
    KeyError
        If no modification of that name is defined
    """
    try:
        return FIXED_MODIFICATIONS[name]
    except KeyError:
        raise KeyError(f"Undefined fixed modification: {name}") from None


def get_fixed_modifications(names: List[str]) -> List[FixedModification]:
    """Resolve a list of modification names, preserving their order."""
    return [get_fixed_modification(name) for name in names]
