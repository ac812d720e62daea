"""
Normalización de la data cruda de ESPN al modelo de dominio

ESPN devuelve JSON bastante heterogéneo (campos que faltan, objetos anidados
opcionales). Todo lo que falta se completa con los mismos defaults:
"TBA" para nombres/lugares, "Unknown" para la categoría y "scheduled" para el status.

Ojo con los competidores: ESPN no marca esquina, así que fighter1 es SIEMPRE
el slot 0 y fighter2 el slot 1 de `competitors`. Si ESPN cambiara el orden,
los peleadores quedarían invertidos sin ningún error visible.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from app.models import (
    CalendarEvent,
    DatedEvent,
    EventDetail,
    EventSearchResult,
    EventSummary,
    Fight,
    FightCardEntry,
    FighterEntry,
    Location,
)


def _competitor(comp: dict, slot: int) -> dict:
    competitors = comp.get("competitors") or []
    if len(competitors) > slot and competitors[slot]:
        return competitors[slot]
    return {}


def _athlete_name(competitor: dict) -> Optional[str]:
    return (competitor.get("athlete") or {}).get("displayName")


def _competitions(raw_event: dict) -> list[dict]:
    return raw_event.get("competitions") or []


def _venue(raw_event: dict) -> dict:
    competitions = _competitions(raw_event)
    if not competitions:
        return {}
    return competitions[0].get("venue") or {}


def _event_id(raw_event: dict) -> str:
    event_id = raw_event.get("id")
    return "" if event_id is None else str(event_id)


def parse_fight(comp: dict, order: int = 0) -> Fight:
    """Convierte una "competition" de ESPN en una Fight (slots posicionales)"""
    c1 = _competitor(comp, 0)
    c2 = _competitor(comp, 1)

    # Primero gana el slot 0, después el slot 1
    if c1.get("winner"):
        winner = _athlete_name(c1)
    elif c2.get("winner"):
        winner = _athlete_name(c2)
    else:
        winner = None

    return Fight(
        weight_class=(comp.get("type") or {}).get("abbreviation") or "Unknown",
        fighter1=_athlete_name(c1) or "TBA",
        fighter2=_athlete_name(c2) or "TBA",
        winner=winner,
        status=((comp.get("status") or {}).get("type") or {}).get("name") or "scheduled",
        order=order,
    )


def _fighter_entry(competitor: dict) -> FighterEntry:
    athlete = competitor.get("athlete") or {}
    return FighterEntry(
        name=athlete.get("displayName") or "TBA",
        country=(athlete.get("flag") or {}).get("alt") or None,
        winner=bool(competitor.get("winner")),
    )


def build_fight_card(raw_event: dict) -> list[FightCardEntry]:
    """
    Arma la cartelera completa de un evento

    Numera las peleas en el orden crudo de ESPN (1-based), marca la última
    como main event y recién después invierte la lista para mostrar el main
    event primero. Por eso fight_number queda en orden descendente.
    """
    competitions = _competitions(raw_event)
    last_idx = len(competitions) - 1

    card = []
    for idx, comp in enumerate(competitions):
        card.append(
            FightCardEntry(
                fight_number=idx + 1,
                weight_class=(comp.get("type") or {}).get("abbreviation") or "Unknown",
                fighter1=_fighter_entry(_competitor(comp, 0)),
                fighter2=_fighter_entry(_competitor(comp, 1)),
                status=((comp.get("status") or {}).get("type") or {}).get("name") or "scheduled",
                is_main_event=idx == last_idx,
            )
        )

    card.reverse()
    return card


def main_event(raw_event: dict) -> Optional[Fight]:
    """La última competition de la lista es el main event"""
    competitions = _competitions(raw_event)
    if not competitions or not competitions[-1]:
        return None
    return parse_fight(competitions[-1], order=len(competitions) - 1)


def fight_count(raw_event: dict) -> int:
    return len(_competitions(raw_event))


def parse_event_summary(raw_event: dict) -> EventSummary:
    venue = _venue(raw_event)
    return EventSummary(
        id=_event_id(raw_event),
        name=raw_event.get("name"),
        date=raw_event.get("date"),
        venue=venue.get("fullName") or "TBA",
        location=(venue.get("address") or {}).get("city") or "TBA",
    )


def parse_event_detail(raw_event: dict) -> EventDetail:
    venue = _venue(raw_event)
    fights = [parse_fight(comp, order=idx) for idx, comp in enumerate(_competitions(raw_event))]
    return EventDetail(
        event_id=_event_id(raw_event),
        name=raw_event.get("name"),
        date=raw_event.get("date"),
        venue=venue.get("fullName") or "TBA",
        location=venue.get("address") or {},
        fight_count=len(fights),
        fights=fights,
    )


def parse_search_result(raw_event: dict) -> EventSearchResult:
    return EventSearchResult(
        id=_event_id(raw_event),
        name=raw_event.get("name"),
        date=raw_event.get("date"),
        fight_count=fight_count(raw_event),
    )


def parse_dated_event(raw_event: dict) -> DatedEvent:
    return DatedEvent(
        id=_event_id(raw_event),
        name=raw_event.get("name"),
        date=raw_event.get("date"),
        venue=_venue(raw_event).get("fullName") or "TBA",
        fight_count=fight_count(raw_event),
        main_event=main_event(raw_event),
    )


def parse_calendar_event(raw_event: dict, status: str) -> CalendarEvent:
    venue = _venue(raw_event)
    address = venue.get("address") or {}
    return CalendarEvent(
        id=_event_id(raw_event),
        name=raw_event.get("name"),
        date=raw_event.get("date"),
        status=status,
        venue=venue.get("fullName") or "TBA",
        location=Location(
            city=address.get("city") or "TBA",
            country=address.get("country") or "TBA",
        ),
        main_event=main_event(raw_event),
        fight_count=fight_count(raw_event),
    )


def get_events(data: dict) -> list[dict]:
    return data.get("events") or []


def find_event(data: dict, event_id: str) -> Optional[dict]:
    """Busca un evento por id en un snapshot del scoreboard"""
    if not event_id:
        return None
    for raw_event in get_events(data):
        if _event_id(raw_event) == event_id:
            return raw_event
    return None


def parse_event_date(value: Any) -> Optional[datetime]:
    """
    Parsea la fecha ISO de ESPN (ej: "2026-01-31T23:00Z")

    Devuelve None si no viene o no se puede parsear. Las fechas sin zona
    horaria se asumen UTC.
    """
    if not isinstance(value, str) or not value:
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
