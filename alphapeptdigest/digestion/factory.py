"""Iterator factory selecting the digestion strategy for a sequence.

Examples
--------
>>> factory = IteratorFactory(["Carbamidomethylation of C"])
>>> iterator = factory.get_sequence_iterator(
...     "PEPTIDEKAAAR", DigestionPreferences.from_enzyme("Trypsin", 0)
... )
>>> [p.peptide.sequence for p in iterator]
['PEPTIDEK', 'AAAR']
"""

import logging
from typing import List, Optional

from ..preferences import CleavagePreference, DigestionPreferences
from ..residues import has_combination
from .builder import PeptideBuilder
from .iterators import (
    SequenceIterator,
    NoDigestionIterator,
    NoDigestionCombinationIterator,
    UnspecificIterator,
    UnspecificCombinationIterator,
    SingleEnzymeIterator,
    SingleEnzymeCombinationIterator,
)

logger = logging.getLogger(__name__)


class UnsupportedConfigurationError(NotImplementedError):
    """The digestion preferences cannot be handled by any iterator."""


class IteratorFactory:
    """Creates sequence iterators listing peptides with their fixed modifications.

    The factory owns a single PeptideBuilder, configured once and shared
    read-only by every iterator it creates. Iterators themselves are
    independent, so sequences can be processed in parallel with one
    iterator each.

    Parameters
    ----------
    fixed_modifications : List[str], optional
        Names of the fixed modifications to apply to the peptides
    max_x : int, optional
        Maximal number of ambiguous residues in a peptide window to expand
        (default: None, unbounded)
    """

    def __init__(self, fixed_modifications: Optional[List[str]] = None, max_x: Optional[int] = None):
        self.peptide_builder = PeptideBuilder(fixed_modifications, max_x)
        logger.debug(
            f"Iterator factory: {len(self.peptide_builder.fixed_modifications)} fixed "
            f"modifications, max_x={max_x}"
        )

    def get_sequence_iterator(
        self,
        sequence: str,
        digestion_preferences: DigestionPreferences,
        mass_min: Optional[float] = None,
        mass_max: Optional[float] = None,
    ) -> SequenceIterator:
        """Return a sequence iterator for the given sequence and preferences.

        Parameters
        ----------
        sequence : str
            Protein sequence to iterate
        digestion_preferences : DigestionPreferences
            Digestion settings
        mass_min, mass_max : float, optional
            Inclusive peptide mass bounds, ignored if None

        Returns
        -------
        iterator : SequenceIterator

        Raises
        ------
        UnsupportedConfigurationError
            If the cleavage preference is unknown, or enzyme digestion is
            requested with zero or several enzymes
        ValueError
            If the enzyme has no missed cleavages set
        """
        preference = digestion_preferences.get_cleavage_preference()
        builder = self.peptide_builder

        if preference == CleavagePreference.UNSPECIFIC:
            if has_combination(sequence):
                return UnspecificCombinationIterator(builder, sequence, mass_min, mass_max)
            return UnspecificIterator(builder, sequence, mass_min, mass_max)

        if preference == CleavagePreference.WHOLE_PROTEIN:
            if has_combination(sequence):
                return NoDigestionCombinationIterator(builder, sequence, mass_min, mass_max)
            return NoDigestionIterator(builder, sequence, mass_min, mass_max)

        if preference == CleavagePreference.ENZYME:
            enzymes = digestion_preferences.get_enzymes()
            if len(enzymes) == 1:
                enzyme = enzymes[0]
                n_missed_cleavages = digestion_preferences.get_n_missed_cleavages(enzyme.name)
                if n_missed_cleavages is None:
                    raise ValueError(f"No missed cleavages set for enzyme {enzyme.name}")
                if has_combination(sequence):
                    return SingleEnzymeCombinationIterator(
                        builder, sequence, enzyme, n_missed_cleavages, mass_min, mass_max
                    )
                return SingleEnzymeIterator(
                    builder, sequence, enzyme, n_missed_cleavages, mass_min, mass_max
                )
            raise UnsupportedConfigurationError(
                f"Cleavage preference of type {preference.value} with "
                f"{len(enzymes)} enzymes not supported."
            )

        raise UnsupportedConfigurationError(
            f"Cleavage preference of type {preference} not supported."
        )
