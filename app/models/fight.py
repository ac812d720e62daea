from typing import Optional

from app.models.base import CamelModel


class Fight(CamelModel):
    """Pelea individual derivada de una "competition" de ESPN"""

    weight_class: str = "Unknown"
    fighter1: str = "TBA"
    fighter2: str = "TBA"
    winner: Optional[str] = None
    status: str = "scheduled"  # nombre de status de ESPN (STATUS_SCHEDULED, STATUS_FINAL, ...)
    order: int = 0  # posición en la lista cruda del evento (la última = main event)


class FighterEntry(CamelModel):
    name: str = "TBA"
    country: Optional[str] = None
    winner: bool = False


class FightCardEntry(CamelModel):
    """
    Pelea dentro de la cartelera

    fight_number es el índice ORIGINAL (1-based) en la lista de ESPN,
    aunque la cartelera se devuelva con el main event primero.
    """

    fight_number: int
    weight_class: str = "Unknown"
    fighter1: FighterEntry
    fighter2: FighterEntry
    status: str = "scheduled"
    is_main_event: bool = False
