"""
Schemas de input y output de cada entrypoint

Los inputs se validan con pydantic antes de llegar al handler.
Los outputs se serializan en camelCase (by_alias) para mantener el contrato JSON.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from app.models import (
    CalendarEvent,
    CamelModel,
    DatedEvent,
    EventDetail,
    EventSearchResult,
    EventSummary,
    FightCardEntry,
)


class EntrypointInput(BaseModel):
    """
    Base de los inputs: acepta eventId o event_id

    Modo estricto: "3" o true no pasan como enteros
    """

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        strict = True


# ==================== INPUTS ====================

class OverviewInput(EntrypointInput):
    pass


class EventInput(EntrypointInput):
    event_id: str = Field(..., description="ESPN event ID from overview")


class EventsByDateInput(EntrypointInput):
    date: str = Field(
        ...,
        pattern=r"^\d{8}$",
        description="Date in YYYYMMDD format (e.g., 20260131)",
    )


class SearchInput(EntrypointInput):
    query: str = Field(..., description="Search term (event name or fighter)")


class FightCardInput(EntrypointInput):
    event_id: str = Field(..., description="ESPN event ID")


class CalendarInput(EntrypointInput):
    limit: int = Field(10, ge=0, description="Number of events to return")


class AnalyticsInput(EntrypointInput):
    window_ms: Optional[int] = Field(None, ge=0, description="Time window in ms")


class AnalyticsTransactionsInput(EntrypointInput):
    window_ms: Optional[int] = Field(None, ge=0, description="Time window in ms")
    limit: int = Field(50, ge=0, description="Max transactions to return")


class AnalyticsCsvInput(EntrypointInput):
    window_ms: Optional[int] = Field(None, ge=0, description="Time window in ms")


# ==================== OUTPUTS ====================

class EventNotFoundOutput(CamelModel):
    """El eventId no está en el snapshot actual de ESPN (respuesta exitosa, no error)"""
    error: str = "Event not found"
    event_id: str


class OverviewOutput(CamelModel):
    events: list[EventSummary]
    fetched_at: datetime
    data_source: str = "ESPN UFC API (live)"
    note: str = "Use paid endpoints for full fight cards and results"


class EventOutput(EventDetail):
    fetched_at: datetime


class EventsByDateOutput(CamelModel):
    date: str
    event_count: int
    events: list[DatedEvent]
    fetched_at: datetime


class SearchOutput(CamelModel):
    query: str
    match_count: int
    events: list[EventSearchResult]
    fetched_at: datetime


class FightCardOutput(CamelModel):
    event_id: str
    event_name: Optional[str] = None
    date: Optional[str] = None
    venue: str = "TBA"
    total_fights: int
    fight_card: list[FightCardEntry]
    fetched_at: datetime


class CalendarOutput(CamelModel):
    total_events: int
    upcoming_count: int
    completed_count: int
    upcoming: list[CalendarEvent]
    completed: list[CalendarEvent]
    fetched_at: datetime


class AnalyticsSummaryOutput(CamelModel):
    """Totales como texto: los montos son enteros de precisión arbitraria"""
    outgoing_total: str
    incoming_total: str
    net_total: str
    outgoing_count: int
    incoming_count: int
    window_ms: Optional[int] = None


class AnalyticsUnavailableOutput(CamelModel):
    error: str = "Analytics not available"


class TransactionOutput(CamelModel):
    timestamp: datetime
    direction: str
    amount: str
    entrypoint_key: str


class AnalyticsTransactionsOutput(CamelModel):
    transactions: list[TransactionOutput]


class AnalyticsCsvOutput(CamelModel):
    csv: str
