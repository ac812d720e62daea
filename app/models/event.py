from typing import Optional

from app.models.base import CamelModel
from app.models.fight import Fight


class Location(CamelModel):
    city: str = "TBA"
    country: str = "TBA"


class EventSummary(CamelModel):
    """Proyección corta de un evento (overview)"""

    id: str
    name: Optional[str] = None
    date: Optional[str] = None  # ISO-8601 tal cual lo manda ESPN
    venue: str = "TBA"
    location: str = "TBA"  # solo la ciudad


class EventDetail(CamelModel):
    """Evento completo con todas sus peleas"""

    event_id: str
    name: Optional[str] = None
    date: Optional[str] = None
    venue: str = "TBA"
    location: dict = {}  # address crudo de ESPN ({} si no viene)
    fight_count: int
    fights: list[Fight]


class EventSearchResult(CamelModel):
    id: str
    name: Optional[str] = None
    date: Optional[str] = None
    fight_count: int


class DatedEvent(CamelModel):
    """Evento dentro de events-by-date, con su pelea estelar"""

    id: str
    name: Optional[str] = None
    date: Optional[str] = None
    venue: str = "TBA"
    fight_count: int
    main_event: Optional[Fight] = None


class CalendarEvent(CamelModel):
    id: str
    name: Optional[str] = None
    date: Optional[str] = None
    status: str  # upcoming | completed
    venue: str = "TBA"
    location: Location
    main_event: Optional[Fight] = None
    fight_count: int
