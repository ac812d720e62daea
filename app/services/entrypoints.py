"""
Catálogo de entrypoints del gateway

1 entrypoint gratis con data de ESPN (overview), 5 pagos y 3 de analytics
(gratis). Cada llamada vuelve a pedir el scoreboard a ESPN: no hay cache.
"""

from datetime import datetime, timezone
from typing import Callable, Optional

from app.services.analytics_service import PaymentAnalyticsTracker
from app.services.calendar_service import build_calendar
from app.services.entrypoint_registry import EntrypointRegistry
from app.services.espn_client import EspnClient
from app.services.normalizer import (
    build_fight_card,
    find_event,
    get_events,
    parse_dated_event,
    parse_event_detail,
    parse_event_summary,
)
from app.services.payment_service import PaymentProcessor
from app.services.search_service import search_events
from app.schemas.entrypoints import (
    AnalyticsCsvInput,
    AnalyticsCsvOutput,
    AnalyticsInput,
    AnalyticsSummaryOutput,
    AnalyticsTransactionsInput,
    AnalyticsTransactionsOutput,
    AnalyticsUnavailableOutput,
    CalendarInput,
    CalendarOutput,
    EventInput,
    EventNotFoundOutput,
    EventOutput,
    EventsByDateInput,
    EventsByDateOutput,
    FightCardInput,
    FightCardOutput,
    OverviewInput,
    OverviewOutput,
    SearchInput,
    SearchOutput,
    TransactionOutput,
)


OVERVIEW_EVENT_LIMIT = 5

# Precios en unidades mínimas (1000 = $0.001)
PRICE_EVENT = 1000
PRICE_EVENTS_BY_DATE = 1000
PRICE_SEARCH = 2000
PRICE_FIGHT_CARD = 2000
PRICE_CALENDAR = 3000


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def build_registry(
    client: EspnClient,
    tracker: Optional[PaymentAnalyticsTracker] = None,
    payments: Optional[PaymentProcessor] = None,
    clock: Callable[[], datetime] = _utcnow,
) -> EntrypointRegistry:
    """
    Arma el registry con todos los entrypoints

    Args:
        client: Cliente de ESPN
        tracker: Ledger de pagos que leen los entrypoints de analytics
                 (si es None, analytics responde "no disponible")
        payments: Procesador de pagos para los entrypoints con precio
        clock: Reloj para fetchedAt y para el calendario
    """
    registry = EntrypointRegistry(payments=payments)

    # ==================== GRATIS ====================

    @registry.entrypoint(
        key="overview",
        description="Free overview of current UFC events and recent results",
        input_model=OverviewInput,
        price=0,
    )
    async def overview(_: OverviewInput):
        data = await client.fetch_scoreboard()
        events = get_events(data)[:OVERVIEW_EVENT_LIMIT]
        return OverviewOutput(
            events=[parse_event_summary(e) for e in events],
            fetched_at=clock(),
        )

    # ==================== PAGOS ====================

    @registry.entrypoint(
        key="event",
        description="Full fight card and results for a UFC event",
        input_model=EventInput,
        price=PRICE_EVENT,
    )
    async def event(input: EventInput):
        data = await client.fetch_scoreboard()
        raw_event = find_event(data, input.event_id)
        if raw_event is None:
            return EventNotFoundOutput(event_id=input.event_id)

        detail = parse_event_detail(raw_event)
        return EventOutput(**detail.model_dump(), fetched_at=clock())

    @registry.entrypoint(
        key="events-by-date",
        description="Get UFC events for a specific date (YYYYMMDD)",
        input_model=EventsByDateInput,
        price=PRICE_EVENTS_BY_DATE,
    )
    async def events_by_date(input: EventsByDateInput):
        data = await client.fetch_scoreboard(date_filter=input.date)
        events = [parse_dated_event(e) for e in get_events(data)]
        return EventsByDateOutput(
            date=input.date,
            event_count=len(events),
            events=events,
            fetched_at=clock(),
        )

    @registry.entrypoint(
        key="search",
        description="Search UFC events by name or fighter",
        input_model=SearchInput,
        price=PRICE_SEARCH,
    )
    async def search(input: SearchInput):
        data = await client.fetch_scoreboard()
        matches = search_events(get_events(data), input.query)
        return SearchOutput(
            query=input.query,
            match_count=len(matches),
            events=matches,
            fetched_at=clock(),
        )

    @registry.entrypoint(
        key="fight-card",
        description="Complete fight card with all matchups for an event",
        input_model=FightCardInput,
        price=PRICE_FIGHT_CARD,
    )
    async def fight_card(input: FightCardInput):
        data = await client.fetch_scoreboard()
        raw_event = find_event(data, input.event_id)
        if raw_event is None:
            return EventNotFoundOutput(event_id=input.event_id)

        summary = parse_event_summary(raw_event)
        card = build_fight_card(raw_event)
        return FightCardOutput(
            event_id=summary.id,
            event_name=summary.name,
            date=summary.date,
            venue=summary.venue,
            total_fights=len(card),
            fight_card=card,
            fetched_at=clock(),
        )

    @registry.entrypoint(
        key="calendar",
        description="UFC event calendar with upcoming and recent events",
        input_model=CalendarInput,
        price=PRICE_CALENDAR,
    )
    async def calendar(input: CalendarInput):
        data = await client.fetch_scoreboard()
        result = build_calendar(get_events(data), input.limit, clock())
        return CalendarOutput(
            total_events=result.total,
            upcoming_count=len(result.upcoming),
            completed_count=len(result.completed),
            upcoming=result.upcoming,
            completed=result.completed,
            fetched_at=clock(),
        )

    # ==================== ANALYTICS (GRATIS) ====================

    @registry.entrypoint(
        key="analytics",
        description="Payment analytics summary",
        input_model=AnalyticsInput,
        price=0,
    )
    async def analytics(input: AnalyticsInput):
        if tracker is None:
            return AnalyticsUnavailableOutput()

        summary = tracker.summary(input.window_ms)
        return AnalyticsSummaryOutput(
            outgoing_total=str(summary.outgoing_total),
            incoming_total=str(summary.incoming_total),
            net_total=str(summary.net_total),
            outgoing_count=summary.outgoing_count,
            incoming_count=summary.incoming_count,
            window_ms=summary.window_ms,
        )

    @registry.entrypoint(
        key="analytics-transactions",
        description="Recent payment transactions",
        input_model=AnalyticsTransactionsInput,
        price=0,
    )
    async def analytics_transactions(input: AnalyticsTransactionsInput):
        if tracker is None:
            return AnalyticsTransactionsOutput(transactions=[])

        txs = tracker.get_all_transactions(input.window_ms)[:input.limit]
        return AnalyticsTransactionsOutput(
            transactions=[
                TransactionOutput(
                    timestamp=tx.timestamp,
                    direction=tx.direction,
                    amount=str(tx.amount),
                    entrypoint_key=tx.entrypoint_key,
                )
                for tx in txs
            ]
        )

    @registry.entrypoint(
        key="analytics-csv",
        description="Export payment data as CSV",
        input_model=AnalyticsCsvInput,
        price=0,
    )
    async def analytics_csv(input: AnalyticsCsvInput):
        if tracker is None:
            return AnalyticsCsvOutput(csv="")
        return AnalyticsCsvOutput(csv=tracker.export_to_csv(input.window_ms))

    return registry
