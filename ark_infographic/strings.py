"""Default English strings.

The renderer looks up every visible label through a ``StringLookup``
callable. :func:`default_get_string` serves this table and echoes keys it
does not know, so a partial translation table can fall back to key names.
"""

from pyrsistent import pmap
from pyrsistent.typing import PMap

from ark_infographic.types import StringLookup

DEFAULT_STRINGS: PMap[str, str] = pmap(
    {
        "Level": "Level",
        "W": "W",
        "M": "M",
        "D": "D",
        "Values": "Values",
        "Colors": "Colors",
        "Spayed": "Spayed",
        "Neutered": "Neutered",
        "mutation counter": "Mut",
        "generation": "Gen",
        "max wild level": "max wild level",
        # Stat names
        "Health": "Health",
        "Stamina": "Stamina",
        "Torpidity": "Torpidity",
        "Oxygen": "Oxygen",
        "Food": "Food",
        "Water": "Water",
        "Temperature": "Temperature",
        "Weight": "Weight",
        "Damage": "Damage",
        "Speed": "Speed",
        "Fortitude": "Fortitude",
        "Crafting Speed": "Crafting Speed",
        # Abbreviations
        "Health_Abb": "HP",
        "Stamina_Abb": "St",
        "Torpidity_Abb": "To",
        "Oxygen_Abb": "Ox",
        "Food_Abb": "Fo",
        "Water_Abb": "Wa",
        "Temperature_Abb": "Te",
        "Weight_Abb": "We",
        "Damage_Abb": "Dm",
        "Speed_Abb": "Sp",
        "Fortitude_Abb": "Fr",
        "Crafting Speed_Abb": "Cr",
    }
)


def default_get_string(key: str) -> str:
    return DEFAULT_STRINGS.get(key, key)


def string_lookup(table: PMap[str, str]) -> StringLookup:
    """Lookup over ``table`` falling back to the default strings."""

    def get_string(key: str) -> str:
        if key in table:
            return table[key]
        return default_get_string(key)

    return get_string
