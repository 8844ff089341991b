"""Text content of the card header, info line and column headers.

Kept apart from drawing so the layout can size fonts from the exact text
that will be drawn.
"""

from ark_infographic.models.config import InfoGraphicConfig
from ark_infographic.models.creature import Creature, Sex
from ark_infographic.models.server import ASA_GAME, ServerSettings
from ark_infographic.rendering.graphic_utils import sex_symbol
from ark_infographic.types import StringLookup


def header_text(
    creature: Creature, server: ServerSettings, config: InfoGraphicConfig
) -> str:
    species = creature.species_name
    if server.game == ASA_GAME:
        species = f"{species} (ASA)"
    if config.display_creature_name:
        return f"{species} - {creature.creature_name}"
    return species


def level_text(
    creature: Creature, server: ServerSettings, config: InfoGraphicConfig
) -> str:
    """``level/max level`` with dom levels shown, else the hatch level."""
    if config.display_dom_levels:
        return f"{creature.level}/{creature.level_hatched + server.max_dom_level}"
    return str(creature.level_hatched)


def info_text(
    creature: Creature,
    server: ServerSettings,
    config: InfoGraphicConfig,
    get_string: StringLookup,
) -> str:
    """Level, sex, neuter state and the optional mutation / generation counters."""
    neuter = ""
    if creature.is_neutered:
        tag = "Spayed" if creature.sex == Sex.FEMALE else "Neutered"
        neuter = f" ({get_string(tag)})"

    text = (
        f"{get_string('Level')} {level_text(creature, server, config)}"
        f" | {sex_symbol(creature.sex)}{neuter}"
    )
    if config.display_mutations:
        text += f" | {get_string('mutation counter')} {creature.mutations}"
    if config.display_generation:
        text += f" | {get_string('generation')} {creature.generation}"
    return text


def wild_column_label(config: InfoGraphicConfig, get_string: StringLookup) -> str:
    label = get_string("W")
    if config.display_sum_wild_mut_levels:
        label += "+" + get_string("M")
    return label
