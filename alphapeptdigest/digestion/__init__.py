"""In silico digestion of protein sequences into peptides.

Lazily enumerates the peptides of a protein sequence under a cleavage
preference and a mass window, including the concrete peptides implied by
ambiguous residue codes.

Examples
--------
>>> from alphapeptdigest.digestion import IteratorFactory
>>> from alphapeptdigest.preferences import DigestionPreferences
>>> factory = IteratorFactory(["Carbamidomethylation of C"], max_x=2)
>>> iterator = factory.get_sequence_iterator(
...     "MKWVTFISLLLLFSSAYSR", DigestionPreferences.default(), 500.0, 4600.0
... )
>>> while (peptide := iterator.get_next_peptide()) is not None:
...     print(peptide.position, peptide.peptide.sequence)
"""

from .peptide import (
    Peptide,
    PeptideWithPosition,
)

from .builder import (
    PeptideBuilder,
    encode_sequence_to_ord,
    calculate_residue_masses,
    sum_residue_masses,
)

from .iterators import (
    SequenceIterator,
    CombinationMixin,
    NoDigestionIterator,
    NoDigestionCombinationIterator,
    UnspecificIterator,
    UnspecificCombinationIterator,
    SingleEnzymeIterator,
    SingleEnzymeCombinationIterator,
)

from .factory import (
    IteratorFactory,
    UnsupportedConfigurationError,
)

__all__ = [
    # Peptides
    'Peptide',
    'PeptideWithPosition',

    # Peptide builder
    'PeptideBuilder',
    'encode_sequence_to_ord',
    'calculate_residue_masses',
    'sum_residue_masses',

    # Iterators
    'SequenceIterator',
    'CombinationMixin',
    'NoDigestionIterator',
    'NoDigestionCombinationIterator',
    'UnspecificIterator',
    'UnspecificCombinationIterator',
    'SingleEnzymeIterator',
    'SingleEnzymeCombinationIterator',

    # Factory
    'IteratorFactory',
    'UnsupportedConfigurationError',
]
