"""Digestion preferences.

Describes how protein sequences are digested in silico: not at all (whole
protein), at every residue boundary (unspecific), or at the sites of a
given enzyme with a maximal number of missed cleavages.

Examples
--------
>>> prefs = DigestionPreferences.default()
>>> prefs.get_cleavage_preference()
<CleavagePreference.ENZYME: 'enzyme'>
>>> prefs.get_n_missed_cleavages("Trypsin")
2

>>> prefs = DigestionPreferences.from_dict(
...     {"cleavage": "enzyme", "enzymes": ["Lys-C"], "missed_cleavages": 1}
... )
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union

from .enzymes import Enzyme, get_enzyme

DEFAULT_ENZYME = "Trypsin"
DEFAULT_MISSED_CLEAVAGES = 2


class CleavagePreference(Enum):
    """How a protein is cleaved."""
    WHOLE_PROTEIN = "wholeProtein"
    UNSPECIFIC = "unSpecific"
    ENZYME = "enzyme"

    @classmethod
    def from_name(cls, name: str) -> "CleavagePreference":
        """Parse a preference from its value or member name, case-insensitive."""
        key = name.replace("_", "").replace(" ", "").lower()
        for preference in cls:
            if key in (preference.value.lower(), preference.name.replace("_", "").lower()):
                return preference
        raise ValueError(f"Unknown cleavage preference: {name}")


@dataclass
class DigestionPreferences:
    """Digestion settings for one search.

    Attributes
    ----------
    cleavage_preference : CleavagePreference
        Cleavage mode
    enzymes : List[Enzyme]
        Enzymes, in order, used in ENZYME mode
    missed_cleavages : Dict[str, int]
        Maximal number of missed cleavages per enzyme name
    """
    cleavage_preference: CleavagePreference = CleavagePreference.ENZYME
    enzymes: List[Enzyme] = field(default_factory=list)
    missed_cleavages: Dict[str, int] = field(default_factory=dict)

    def __post_init__(self):
        for name, n_missed in self.missed_cleavages.items():
            _check_missed_cleavages(name, n_missed)

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def default(cls) -> "DigestionPreferences":
        """Trypsin with 2 missed cleavages."""
        preferences = cls(CleavagePreference.ENZYME)
        preferences.add_enzyme(get_enzyme(DEFAULT_ENZYME), DEFAULT_MISSED_CLEAVAGES)
        return preferences

    @classmethod
    def whole_protein(cls) -> "DigestionPreferences":
        return cls(CleavagePreference.WHOLE_PROTEIN)

    @classmethod
    def unspecific(cls) -> "DigestionPreferences":
        return cls(CleavagePreference.UNSPECIFIC)

    @classmethod
    def from_enzyme(
        cls,
        enzyme: Union[str, Enzyme],
        missed_cleavages: int = DEFAULT_MISSED_CLEAVAGES,
    ) -> "DigestionPreferences":
        """Single enzyme digestion, the enzyme given by name or instance."""
        if isinstance(enzyme, str):
            enzyme = get_enzyme(enzyme)
        preferences = cls(CleavagePreference.ENZYME)
        preferences.add_enzyme(enzyme, missed_cleavages)
        return preferences

    @classmethod
    def from_dict(cls, config: Mapping[str, Any]) -> "DigestionPreferences":
        """Build preferences from a plain configuration mapping.

        Parameters
        ----------
        config : Mapping
            Keys:
            - ``cleavage``: "enzyme", "wholeProtein" or "unSpecific"
              (default: "enzyme")
            - ``enzymes``: list of enzyme names (default: ["Trypsin"] in
              enzyme mode)
            - ``missed_cleavages``: int applied to all enzymes, or a
              mapping of enzyme name to int (default: 2)

        Raises
        ------
        ValueError
            Unknown cleavage preference or invalid missed cleavages
        KeyError
            Unknown enzyme name
        """
        cleavage = CleavagePreference.from_name(
            config.get("cleavage", CleavagePreference.ENZYME.value)
        )
        preferences = cls(cleavage)
        if cleavage != CleavagePreference.ENZYME:
            return preferences

        names = config.get("enzymes", [DEFAULT_ENZYME])
        if isinstance(names, str):
            names = [names]
        missed = config.get("missed_cleavages", DEFAULT_MISSED_CLEAVAGES)
        for name in names:
            n_missed = missed.get(name, DEFAULT_MISSED_CLEAVAGES) if isinstance(missed, Mapping) else missed
            preferences.add_enzyme(get_enzyme(name), n_missed)
        return preferences

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def get_cleavage_preference(self) -> CleavagePreference:
        return self.cleavage_preference

    def get_enzymes(self) -> List[Enzyme]:
        return self.enzymes

    def add_enzyme(self, enzyme: Enzyme, missed_cleavages: int = DEFAULT_MISSED_CLEAVAGES):
        """Add an enzyme with its maximal number of missed cleavages."""
        _check_missed_cleavages(enzyme.name, missed_cleavages)
        if enzyme not in self.enzymes:
            self.enzymes.append(enzyme)
        self.missed_cleavages[enzyme.name] = missed_cleavages

    def get_n_missed_cleavages(self, enzyme_name: str) -> Optional[int]:
        """Maximal number of missed cleavages for an enzyme, None if not set."""
        return self.missed_cleavages.get(enzyme_name)


def _check_missed_cleavages(enzyme_name: str, n_missed: int):
    if isinstance(n_missed, bool) or not isinstance(n_missed, int) or n_missed < 0:
        raise ValueError(
            f"Missed cleavages for {enzyme_name} must be a non-negative integer, "
            f"got {n_missed!r}"
        )
