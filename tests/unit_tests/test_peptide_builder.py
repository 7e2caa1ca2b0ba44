"""Tests for the peptide builder.

Covers mass calculation, fixed modification placement, mass bounds and the
ambiguous residue budget.
"""

import numpy as np
import pytest

from alphapeptdigest.constants import (
    AA_MASSES_DICT,
    H2O_MASS,
    CARBAMIDOMETHYL_MASS,
    ACETYL_MASS,
    AMIDATION_MASS,
    NH3_MASS,
    TMT_MASS,
)
from alphapeptdigest.digestion import (
    PeptideBuilder,
    encode_sequence_to_ord,
    calculate_residue_masses,
    sum_residue_masses,
)


# =============================================================================
# Numba Kernels
# =============================================================================

class TestKernels:
    """Test the mass kernels."""

    def test_encode(self):
        encoded = encode_sequence_to_ord("PEP")
        assert encoded.dtype == np.uint8
        assert list(encoded) == [80, 69, 80]

    def test_residue_masses(self, builder):
        masses = calculate_residue_masses(encode_sequence_to_ord("AGK"), builder.residue_masses)
        expected = [AA_MASSES_DICT['A'], AA_MASSES_DICT['G'], AA_MASSES_DICT['K']]
        np.testing.assert_allclose(masses, expected)

    def test_sum(self, builder, simple_peptide, neutral_mass):
        total = sum_residue_masses(encode_sequence_to_ord(simple_peptide), builder.residue_masses)
        assert total + H2O_MASS == pytest.approx(neutral_mass(simple_peptide), abs=1e-6)


# =============================================================================
# Unmodified Peptides
# =============================================================================

class TestBuildPeptide:
    """Test building without modifications."""

    def test_mass(self, builder, simple_peptide, neutral_mass):
        peptide = builder.build_peptide(simple_peptide, simple_peptide, 0)
        assert peptide.sequence == simple_peptide
        assert peptide.mass == pytest.approx(neutral_mass(simple_peptide), abs=1e-6)
        assert peptide.fixed_modifications == ()
        assert len(peptide) == 7

    def test_known_mass(self, builder):
        # PEPTIDE monoisotopic neutral mass
        peptide = builder.build_peptide("PEPTIDE", "PEPTIDE", 0)
        assert peptide.mass == pytest.approx(799.35997, abs=1e-4)

    def test_bounds_are_inclusive(self, builder, simple_peptide):
        mass = builder.build_peptide(simple_peptide, simple_peptide, 0).mass
        assert builder.build_peptide(simple_peptide, simple_peptide, 0, mass, mass) is not None

    def test_out_of_bounds(self, builder, simple_peptide):
        mass = builder.build_peptide(simple_peptide, simple_peptide, 0).mass
        assert builder.build_peptide(simple_peptide, simple_peptide, 0, mass_min=mass + 0.01) is None
        assert builder.build_peptide(simple_peptide, simple_peptide, 0, mass_max=mass - 0.01) is None

    def test_ambiguous_window_is_not_built(self, builder):
        assert builder.build_peptide("PEBTIDE", "PEBTIDE", 0) is None

    def test_empty_window(self, builder):
        assert builder.build_peptide("", "PEPTIDE", 0) is None


# =============================================================================
# Fixed Modifications
# =============================================================================

class TestFixedModifications:
    """Test fixed modification placement and mass shifts."""

    def test_residue_modification(self, neutral_mass):
        builder = PeptideBuilder(["Carbamidomethylation of C"])
        peptide = builder.build_peptide("ACDCK", "ACDCK", 0)
        assert peptide.fixed_modifications == (
            ("Carbamidomethylation of C", 1),
            ("Carbamidomethylation of C", 3),
        )
        expected = neutral_mass("ACDCK") + 2 * CARBAMIDOMETHYL_MASS
        assert peptide.mass == pytest.approx(expected, abs=1e-6)

    def test_residue_mass_table_includes_shift(self):
        builder = PeptideBuilder(["Carbamidomethylation of C"])
        assert builder.residue_masses[ord('C')] == pytest.approx(
            AA_MASSES_DICT['C'] + CARBAMIDOMETHYL_MASS
        )

    def test_protein_n_term_only_at_start(self, neutral_mass):
        builder = PeptideBuilder(["Acetylation of protein N-term"])
        protein = "MAAKGGK"

        first = builder.build_peptide("MAAK", protein, 0)
        assert first.fixed_modifications == (("Acetylation of protein N-term", 0),)
        assert first.mass == pytest.approx(neutral_mass("MAAK") + ACETYL_MASS, abs=1e-6)

        inner = builder.build_peptide("GGK", protein, 4)
        assert inner.fixed_modifications == ()

    def test_protein_c_term_only_at_end(self):
        builder = PeptideBuilder(["Amidation of protein C-term"])
        protein = "MAAKGGK"
        assert builder.build_peptide("MAAK", protein, 0).fixed_modifications == ()
        last = builder.build_peptide("GGK", protein, 4)
        assert last.fixed_modifications == (("Amidation of protein C-term", 2),)

    def test_peptide_terminal_modifications(self, neutral_mass):
        builder = PeptideBuilder(["TMT 10-plex of peptide N-term", "Amidation of peptide C-term"])
        peptide = builder.build_peptide("GGK", "MAAKGGK", 4)
        assert peptide.fixed_modifications == (
            ("TMT 10-plex of peptide N-term", 0),
            ("Amidation of peptide C-term", 2),
        )
        expected = neutral_mass("GGK") + TMT_MASS + AMIDATION_MASS
        assert peptide.mass == pytest.approx(expected, abs=1e-6)

    def test_residue_specific_terminal_modification(self, neutral_mass):
        builder = PeptideBuilder(["Pyrolidone from Q"])
        assert builder.build_peptide("AQK", "AQK", 0).fixed_modifications == ()
        peptide = builder.build_peptide("QAK", "QAK", 0)
        assert peptide.fixed_modifications == (("Pyrolidone from Q", 0),)
        assert peptide.mass == pytest.approx(neutral_mass("QAK") - NH3_MASS, abs=1e-6)

    def test_negative_terminal_shifts(self):
        assert PeptideBuilder().negative_terminal_shifts == ()
        assert PeptideBuilder(["Acetylation of protein N-term"]).negative_terminal_shifts == ()
        builder = PeptideBuilder(["Amidation of peptide C-term", "Pyrolidone from Q"])
        assert builder.negative_terminal_shifts == (AMIDATION_MASS, -NH3_MASS)

    def test_minimal_mass(self):
        assert PeptideBuilder().minimal_mass(100.0) == 100.0 + H2O_MASS
        builder = PeptideBuilder(["Pyrolidone from Q"])
        assert builder.minimal_mass(100.0) == pytest.approx(100.0 + H2O_MASS - NH3_MASS)

    @pytest.mark.parametrize("sequence", ["EL", "ED", "EN", "EI", "EPEPTIDE"])
    def test_minimal_mass_never_above_built_mass(self, sequence):
        """The bound and the built mass are summed in the same order."""
        builder = PeptideBuilder(["Amidation of peptide C-term", "Pyrolidone from E"])
        peptide = builder.build_peptide(sequence, sequence, 0)
        residue_mass = 0.0
        for mass in builder.get_residue_masses(sequence).tolist():
            residue_mass += mass
        assert builder.minimal_mass(residue_mass) <= peptide.mass

    def test_unknown_modification(self):
        with pytest.raises(KeyError):
            PeptideBuilder(["Not a modification"])


# =============================================================================
# Ambiguous Residues
# =============================================================================

class TestCombinations:
    """Test expansion under the ambiguous residue budget."""

    def test_unbounded_by_default(self, builder):
        assert builder.max_x is None
        assert len(list(builder.expand_combinations("BBBB"))) == 16

    def test_budget(self):
        builder = PeptideBuilder(max_x=1)
        assert list(builder.expand_combinations("PEBK")) == ["PEDK", "PENK"]
        assert list(builder.expand_combinations("PBBK")) == []
        assert builder.within_budget("PEPK")

    def test_zero_budget_keeps_concrete_windows(self):
        builder = PeptideBuilder(max_x=0)
        assert list(builder.expand_combinations("PEPK")) == ["PEPK"]
        assert list(builder.expand_combinations("PEBK")) == []

    @pytest.mark.parametrize("max_x", [-1, 1.5, "2", True])
    def test_invalid_budget(self, max_x):
        with pytest.raises(ValueError):
            PeptideBuilder(max_x=max_x)

    def test_lower_bound_masses(self):
        builder = PeptideBuilder(["Carbamidomethylation of C"])
        masses = builder.get_residue_masses("AXB")
        assert masses[0] == AA_MASSES_DICT['A']
        assert masses[1] == AA_MASSES_DICT['G']
        assert masses[2] == AA_MASSES_DICT['N']
