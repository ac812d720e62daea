from dataclasses import dataclass, field
from datetime import datetime

from app.models import CalendarEvent
from app.services.normalizer import parse_calendar_event, parse_event_date


@dataclass
class Calendar:
    upcoming: list[CalendarEvent] = field(default_factory=list)
    completed: list[CalendarEvent] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.upcoming) + len(self.completed)


def classify_event(raw_event: dict, now: datetime) -> str:
    """
    "completed" si la fecha ya pasó, "upcoming" en cualquier otro caso

    Una fecha faltante o inválida cuenta como upcoming.
    """
    event_date = parse_event_date(raw_event.get("date"))
    if event_date is not None and event_date < now:
        return "completed"
    return "upcoming"


def build_calendar(events: list[dict], limit: int, now: datetime) -> Calendar:
    """
    Arma el calendario con los primeros `limit` eventos de ESPN

    Primero se corta la lista (en el orden en que la manda ESPN) y después
    se separa en upcoming/completed. Si los primeros `limit` eventos ya
    pasaron, upcoming queda vacío aunque haya eventos futuros más adelante.
    """
    calendar = Calendar()
    for raw_event in events[:limit]:
        status = classify_event(raw_event, now)
        entry = parse_calendar_event(raw_event, status)
        if status == "upcoming":
            calendar.upcoming.append(entry)
        else:
            calendar.completed.append(entry)
    return calendar
