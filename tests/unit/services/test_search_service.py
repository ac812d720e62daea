"""
Unit tests for event search
"""

from factories import make_competition, make_event
from app.services.search_service import search_events


class TestSearchEvents:
    """Test suite for search_events."""

    def test_matches_event_name_case_insensitive(self, scoreboard):
        results = search_events(scoreboard["events"], "ufc 324")

        assert [r.id for r in results] == ["600041234"]
        assert results[0].fight_count == 3

    def test_matches_fighter_name(self, scoreboard):
        results = search_events(scoreboard["events"], "PIMBLETT")
        assert [r.id for r in results] == ["600041234"]

        # Solo aparece como peleador, no en el nombre del evento
        results = search_events(scoreboard["events"], "hooker")
        assert [r.id for r in results] == ["600041300"]

    def test_matches_fighter2_slot(self, scoreboard):
        results = search_events(scoreboard["events"], "saint denis")
        assert [r.id for r in results] == ["600041300"]

    def test_no_match(self, scoreboard):
        assert search_events(scoreboard["events"], "jon jones") == []

    def test_matches_multiple_events(self, scoreboard):
        results = search_events(scoreboard["events"], "ufc")
        assert len(results) == 2

    def test_ignores_missing_names(self):
        event = make_event("1", None, "2026-01-01T00:00Z", [make_competition(None, None), {}])
        assert search_events([event], "x") == []

    def test_returns_summary_projection(self, scoreboard):
        result = search_events(scoreboard["events"], "volkanovski")[0]
        data = result.model_dump(by_alias=True)

        assert set(data) == {"id", "name", "date", "fightCount"}
