"""AlphaPeptDigest - In silico protein digestion for peptide search.

Lazily enumerates candidate peptides of protein sequences under a digestion
model (whole protein, unspecific, or single enzyme with missed cleavages),
with fixed modifications, mass window pruning and expansion of ambiguous
residue codes.
"""

__version__ = "0.1.0"

from alphapeptdigest import constants
from alphapeptdigest import residues
from alphapeptdigest import modifications
from alphapeptdigest import enzymes
from alphapeptdigest import preferences
from alphapeptdigest import digestion
from alphapeptdigest import database

from alphapeptdigest.enzymes import Enzyme, get_enzyme
from alphapeptdigest.preferences import CleavagePreference, DigestionPreferences
from alphapeptdigest.digestion import (
    IteratorFactory,
    UnsupportedConfigurationError,
    Peptide,
    PeptideWithPosition,
)

__all__ = [
    "constants",
    "residues",
    "modifications",
    "enzymes",
    "preferences",
    "digestion",
    "database",
    "Enzyme",
    "get_enzyme",
    "CleavagePreference",
    "DigestionPreferences",
    "IteratorFactory",
    "UnsupportedConfigurationError",
    "Peptide",
    "PeptideWithPosition",
]
