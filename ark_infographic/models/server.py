from dataclasses import dataclass


ASA_GAME = "ASA"


@dataclass(frozen=True)
class ServerSettings:
    """Server limits shown on or used to scale the card.

    Attributes:
        max_chart_level: Wild level that fills a stat bar completely.
        max_dom_level: Dom levels a creature can gain after taming.
        max_wild_level: Shown in the footer.
        game: Game identifier; ``"ASA"`` enables mutated-level columns.
    """

    max_chart_level: int = 50
    max_dom_level: int = 88
    max_wild_level: int = 150
    game: str = ASA_GAME


DEFAULT_SERVER_SETTINGS = ServerSettings()
