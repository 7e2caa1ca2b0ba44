"""Protein digestion for peptide database generation.

Convenience layer digesting whole proteomes through an IteratorFactory:
- Any cleavage preference (enzyme, unspecific, whole protein)
- Fixed modifications and mass window filtering
- Ambiguous residue expansion under a budget
- Peptide to protein mapping with deduplication

Proteins are processed one after the other. To digest in parallel, give
each worker its own iterators; the factory and preferences can be shared.
"""

import logging
from collections import defaultdict
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

from ..digestion import IteratorFactory, PeptideWithPosition
from ..preferences import DigestionPreferences
from .fasta_reader import iterate_fasta

logger = logging.getLogger(__name__)


def digest_protein(
    sequence: str,
    factory: IteratorFactory,
    digestion_preferences: DigestionPreferences,
    mass_min: Optional[float] = None,
    mass_max: Optional[float] = None,
) -> List[PeptideWithPosition]:
    """Digest a single protein.

    Parameters
    ----------
    sequence : str
        Protein sequence
    factory : IteratorFactory
        Factory holding the fixed modifications and ambiguity budget
    digestion_preferences : DigestionPreferences
        Digestion settings
    mass_min, mass_max : float, optional
        Inclusive peptide mass bounds

    Returns
    -------
    peptides : List[PeptideWithPosition]
        Peptides in iteration order

    Examples
    --------
    >>> factory = IteratorFactory()
    >>> peptides = digest_protein("PEPTIDEKRPROTEINK", factory, DigestionPreferences.default())
    >>> [p.peptide.sequence for p in peptides]
    ['PEPTIDEK', 'PEPTIDEKRPROTEINK', 'RPROTEINK']
    """
    iterator = factory.get_sequence_iterator(sequence, digestion_preferences, mass_min, mass_max)
    return list(iterator)


def digest_protein_list(
    proteins: Iterable[Tuple[str, str, str]],
    factory: IteratorFactory,
    digestion_preferences: DigestionPreferences,
    mass_min: Optional[float] = None,
    mass_max: Optional[float] = None,
) -> Tuple[List[str], Dict[int, List[str]]]:
    """Digest proteins and build the peptide-to-protein mapping.

    Parameters
    ----------
    proteins : Iterable[Tuple[str, str, str]]
        (protein_id, sequence, description) tuples, e.g. from iterate_fasta()
    factory : IteratorFactory
        Factory holding the fixed modifications and ambiguity budget
    digestion_preferences : DigestionPreferences
        Digestion settings
    mass_min, mass_max : float, optional
        Inclusive peptide mass bounds

    Returns
    -------
    unique_peptides : List[str]
        Unique peptide sequences, in order of first occurrence
    peptide_to_proteins : Dict[int, List[str]]
        Index-based mapping: peptide_idx → protein IDs, each listed once
    """
    seq_to_proteins: Dict[str, List[str]] = defaultdict(list)
    n_proteins = 0
    total_peptides_generated = 0

    for protein_id, sequence, _ in proteins:
        n_proteins += 1
        iterator = factory.get_sequence_iterator(sequence, digestion_preferences, mass_min, mass_max)
        for peptide_with_position in iterator:
            total_peptides_generated += 1
            protein_ids = seq_to_proteins[peptide_with_position.peptide.sequence]
            if not protein_ids or protein_ids[-1] != protein_id:
                protein_ids.append(protein_id)

        if n_proteins % 5000 == 0:
            logger.info(
                f"  Processed {n_proteins:,} proteins: "
                f"{len(seq_to_proteins):,} unique peptides"
            )

    unique_peptides = list(seq_to_proteins.keys())
    peptide_to_proteins = {
        i: seq_to_proteins[peptide]
        for i, peptide in enumerate(unique_peptides)
    }

    logger.info("✓ Digestion complete:")
    logger.info(f"  Total proteins: {n_proteins:,}")
    logger.info(f"  Total peptides generated: {total_peptides_generated:,}")
    logger.info(f"  Unique peptides: {len(unique_peptides):,}")

    return unique_peptides, peptide_to_proteins


def digest_fasta(
    fasta_path: Union[str, Path],
    factory: IteratorFactory,
    digestion_preferences: DigestionPreferences,
    mass_min: Optional[float] = None,
    mass_max: Optional[float] = None,
    min_length: int = 0,
) -> Tuple[List[str], Dict[int, List[str]]]:
    """Read a FASTA file and digest its proteins in one pass.

    See digest_protein_list() for the returned values.

    Examples
    --------
    >>> factory = IteratorFactory(["Carbamidomethylation of C"])
    >>> peptides, mapping = digest_fasta(
    ...     "human.fasta", factory, DigestionPreferences.default(), 500.0, 5000.0
    ... )
    """
    logger.info(f"Digesting FASTA file: {Path(fasta_path).name}")
    return digest_protein_list(
        iterate_fasta(fasta_path, min_length=min_length),
        factory,
        digestion_preferences,
        mass_min,
        mass_max,
    )
