"""FASTA file reading and parsing.

Streaming FASTA parser feeding protein sequences to the digestion
iterators. Supports:
- UniProt and generic FASTA headers
- Multi-FASTA files
- Sequences wrapped over several lines

Proteins are yielded one at a time, so a proteome never needs to be held
in memory to be digested.
"""

import logging
from pathlib import Path
from typing import Iterator, List, Tuple, Union

logger = logging.getLogger(__name__)


def parse_protein_id(header: str) -> Tuple[str, str]:
    """Extract protein ID and description from FASTA header.

    Parameters
    ----------
    header : str
        FASTA header line (without leading '>')

    Returns
    -------
    protein_id : str
        Accession for UniProt headers (sp|P12345|NAME), else the first
        whitespace-separated token
    description : str
        Full header line

    Examples
    --------
    >>> parse_protein_id("sp|P12345|NAME_HUMAN Some protein")
    ('P12345', 'sp|P12345|NAME_HUMAN Some protein')

    >>> parse_protein_id("PROT123 Description here")
    ('PROT123', 'PROT123 Description here')
    """
    description = header.strip()
    tokens = description.split()
    if not tokens:
        return "", description

    first = tokens[0]
    parts = first.split('|')
    if len(parts) >= 2 and parts[1]:
        return parts[1], description
    return first, description


def iterate_fasta(
    fasta_path: Union[str, Path],
    min_length: int = 0,
) -> Iterator[Tuple[str, str, str]]:
    """Lazily read a FASTA file.

    Parameters
    ----------
    fasta_path : str or Path
        Path to FASTA file
    min_length : int
        Minimum protein length (default: 0, no filter)

    Yields
    ------
    protein : Tuple[str, str, str]
        (protein_id, sequence, description), sequence upper-cased

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    """
    fasta_path = Path(fasta_path)

    if not fasta_path.exists():
        raise FileNotFoundError(f"FASTA file not found: {fasta_path}")

    current_id = None
    current_description = None
    current_seq: List[str] = []

    with open(fasta_path) as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            if line.startswith('>'):
                if current_id is not None:
                    sequence = ''.join(current_seq)
                    if sequence and len(sequence) >= min_length:
                        yield current_id, sequence, current_description
                current_id, current_description = parse_protein_id(line[1:])
                current_seq = []
            elif current_id is not None:
                current_seq.append(line.upper())

    if current_id is not None:
        sequence = ''.join(current_seq)
        if sequence and len(sequence) >= min_length:
            yield current_id, sequence, current_description


def read_fasta(
    fasta_path: Union[str, Path],
    min_length: int = 0,
) -> List[Tuple[str, str, str]]:
    """Read a whole FASTA file into a list of (protein_id, sequence, description).

    Examples
    --------
    >>> proteins = read_fasta("human.fasta", min_length=7)
    >>> protein_id, sequence, description = proteins[0]
    """
    fasta_path = Path(fasta_path)
    logger.info(f"Reading FASTA file: {fasta_path.name}")
    proteins = list(iterate_fasta(fasta_path, min_length=min_length))
    logger.info(f"✓ Read {len(proteins):,} proteins from {fasta_path.name}")
    return proteins
