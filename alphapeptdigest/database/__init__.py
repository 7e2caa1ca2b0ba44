"""Proteome digestion helpers.

Reads protein sequences from FASTA files and digests them through an
IteratorFactory into a deduplicated peptide list with its peptide-to-protein
mapping.
"""

from .fasta_reader import (
    read_fasta,
    iterate_fasta,
    parse_protein_id,
)

from .digestion import (
    digest_protein,
    digest_protein_list,
    digest_fasta,
)

__all__ = [
    # FASTA reading
    'read_fasta',
    'iterate_fasta',
    'parse_protein_id',

    # Protein digestion
    'digest_protein',
    'digest_protein_list',
    'digest_fasta',
]
