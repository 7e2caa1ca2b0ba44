"""Physical constants, amino acid masses and ambiguous residue codes.

This module provides the mass constants and residue alphabets used throughout
AlphaPeptDigest. All values are sourced from NIST or established proteomics
standards.

Constants are provided in both dictionary and ord()-indexed array formats
for compatibility with both standard Python and Numba JIT-compiled code.

Key Features
------------
- Monoisotopic residue masses for the 20 standard amino acids plus U and O
- Ambiguous ("combination") codes B, J, Z, X with their concrete residues
- ord()-indexed AA_MASSES array for high-performance Numba code
- Common modification masses (Carbamidomethyl, Oxidation, Acetyl, labels)

Sources
-------
- NIST physical constants: https://physics.nist.gov/cgi-bin/cuu/Value
- IUPAC amino acid masses: https://www.unimod.org/masses.html
- Unimod modification masses: https://www.unimod.org/modifications_list.php
"""

import numpy as np

# =============================================================================
# Fundamental Physical Constants (NIST values)
# =============================================================================

# Water mass (H2O)
# Calculated: 2*1.007825 + 15.994915 = 18.010564684
H2O_MASS = 18.010564684  # Da

# Ammonia mass (NH3)
# Calculated: 14.003074 + 3*1.007825 = 17.026549101
NH3_MASS = 17.026549101  # Da

# =============================================================================
# Amino Acid Monoisotopic Masses (Da)
# =============================================================================

# Standard 20 amino acids (unmodified)
# Values are monoisotopic masses of residues (not including N/C terminals)
AA_MASSES_DICT = {
    'A': 71.037114,   # Alanine
    'R': 156.101111,  # Arginine
    'N': 114.042927,  # Asparagine
    'D': 115.026943,  # Aspartic acid
    'C': 103.009185,  # Cysteine (unmodified)
    'E': 129.042593,  # Glutamic acid
    'Q': 128.058578,  # Glutamine
    'G': 57.021464,   # Glycine
    'H': 137.058912,  # Histidine
    'I': 113.084064,  # Isoleucine
    'L': 113.084064,  # Leucine
    'K': 128.094963,  # Lysine
    'M': 131.040485,  # Methionine
    'F': 147.068414,  # Phenylalanine
    'P': 97.052764,   # Proline
    'S': 87.032028,   # Serine
    'T': 101.047679,  # Threonine
    'W': 186.079313,  # Tryptophan
    'Y': 163.063320,  # Tyrosine
    'V': 99.068414,   # Valine
}

STANDARD_AMINO_ACIDS = "ARNDCEQGHILKMFPSTWYV"

# Rare genetically encoded amino acids, concrete residues with their own mass
AA_MASSES_RARE = {
    'U': 150.953636,  # Selenocysteine
    'O': 237.147727,  # Pyrrolysine
}

# =============================================================================
# Ambiguous (Combination) Amino Acid Codes
# =============================================================================

# Each code stands for two or more concrete residues. The order of the
# concrete residues fixes the order in which combinations are enumerated.
AMBIGUOUS_AA_MAP = {
    'B': 'DN',                  # Asp/Asn
    'J': 'IL',                  # Ile/Leu
    'Z': 'EQ',                  # Glu/Gln
    'X': STANDARD_AMINO_ACIDS,  # Any standard residue
}

# =============================================================================
# ord()-Indexed Arrays for Numba
# =============================================================================

# Create ord()-indexed lookup array for fast Numba access
# Array size 256 covers full ASCII range
# Access via: AA_MASSES[ord('A')] → 71.037114
AA_MASSES = np.zeros(256, dtype=np.float64)

for aa, mass in AA_MASSES_DICT.items():
    AA_MASSES[ord(aa)] = mass

for aa, mass in AA_MASSES_RARE.items():
    AA_MASSES[ord(aa)] = mass

# Ambiguous codes carry the lightest residue they can stand for, so that
# a window mass computed from this array is a lower bound of every
# concrete peptide it expands to.
for aa, residues in AMBIGUOUS_AA_MAP.items():
    AA_MASSES[ord(aa)] = min(AA_MASSES[ord(r)] for r in residues)

# =============================================================================
# Common Modification Masses
# =============================================================================

# Carbamidomethylation of Cysteine (Unimod:4)
CARBAMIDOMETHYL_MASS = 57.021464

# Oxidation of Methionine (Unimod:35)
OXIDATION_MASS = 15.994915

# Acetylation (Unimod:1)
ACETYL_MASS = 42.010565

# Methylthio (Unimod:39), MMTS alkylation of Cysteine
METHYLTHIO_MASS = 45.987721

# Deamidation (Unimod:7)
DEAMIDATION_MASS = 0.984016

# Amidation of the C-terminus (Unimod:2)
AMIDATION_MASS = -0.984016

# Pyro-glu from Q (Unimod:28), loss of NH3
PYRO_GLU_FROM_Q_MASS = -NH3_MASS

# Pyro-glu from E (Unimod:27), loss of H2O
PYRO_GLU_FROM_E_MASS = -H2O_MASS

# TMT 6/10/11-plex (Unimod:737)
TMT_MASS = 229.162932

# iTRAQ 4-plex (Unimod:214)
ITRAQ4_MASS = 144.102063

# iTRAQ 8-plex (Unimod:730)
ITRAQ8_MASS = 304.205360
