from app.models import EventSearchResult
from app.services.normalizer import parse_search_result


def _contains(value, query: str) -> bool:
    return isinstance(value, str) and query in value.lower()


def event_matches(raw_event: dict, query: str) -> bool:
    """True si el nombre del evento o algún peleador contiene el query (ya en minúsculas)"""
    if _contains(raw_event.get("name"), query):
        return True
    return any(
        _contains((competitor.get("athlete") or {}).get("displayName"), query)
        for comp in raw_event.get("competitions") or []
        for competitor in comp.get("competitors") or []
        if competitor
    )


def search_events(events: list[dict], query: str) -> list[EventSearchResult]:
    """
    Búsqueda case-insensitive por nombre de evento o de peleador

    Devuelve solo la proyección resumida (id, name, date, fight_count).
    """
    needle = query.lower()
    return [parse_search_result(e) for e in events if event_matches(e, needle)]
