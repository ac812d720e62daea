from .base import CamelModel
from .event import (
    Location,
    EventSummary,
    EventDetail,
    EventSearchResult,
    DatedEvent,
    CalendarEvent,
)
from .fight import Fight, FighterEntry, FightCardEntry
from .transaction import Transaction, PaymentSummary
from .entrypoint import EntrypointDescriptor

__all__ = [
    "CamelModel",
    "Location",
    "EventSummary",
    "EventDetail",
    "EventSearchResult",
    "DatedEvent",
    "CalendarEvent",
    "Fight",
    "FighterEntry",
    "FightCardEntry",
    "Transaction",
    "PaymentSummary",
    "EntrypointDescriptor",
]
