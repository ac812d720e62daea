"""
Unit tests for the ESPN normalizer
"""

from datetime import datetime, timezone

from factories import make_competition, make_event
from app.services.normalizer import (
    build_fight_card,
    find_event,
    main_event,
    parse_event_date,
    parse_event_detail,
    parse_event_summary,
    parse_fight,
)


class TestParseFight:
    """Test suite for parse_fight."""

    def test_positional_fighters(self):
        """fighter1 is always competitor slot 0, fighter2 slot 1."""
        fight = parse_fight(make_competition("Alex Pereira", "Magomed Ankalaev", "LHW"), order=4)

        assert fight.fighter1 == "Alex Pereira"
        assert fight.fighter2 == "Magomed Ankalaev"
        assert fight.weight_class == "LHW"
        assert fight.order == 4

    def test_defaults_when_fields_missing(self):
        fight = parse_fight({})

        assert fight.fighter1 == "TBA"
        assert fight.fighter2 == "TBA"
        assert fight.weight_class == "Unknown"
        assert fight.status == "scheduled"
        assert fight.winner is None

    def test_missing_athlete_name_is_tba(self):
        fight = parse_fight(make_competition(None, "Diego Lopes", weight_class=None, status=None))

        assert fight.fighter1 == "TBA"
        assert fight.fighter2 == "Diego Lopes"
        assert fight.weight_class == "Unknown"
        assert fight.status == "scheduled"

    def test_winner_slot_0(self):
        fight = parse_fight(make_competition("A", "B", winner=0))
        assert fight.winner == "A"

    def test_winner_slot_1(self):
        fight = parse_fight(make_competition("A", "B", winner=1))
        assert fight.winner == "B"

    def test_winner_checks_slot_0_first(self):
        """If both flags are set, slot 0 wins."""
        comp = make_competition("A", "B")
        comp["competitors"][0]["winner"] = True
        comp["competitors"][1]["winner"] = True

        assert parse_fight(comp).winner == "A"

    def test_status_from_espn(self):
        fight = parse_fight(make_competition("A", "B", status="STATUS_IN_PROGRESS"))
        assert fight.status == "STATUS_IN_PROGRESS"


class TestBuildFightCard:
    """Test suite for build_fight_card."""

    def test_main_event_first_with_original_numbers(self, sample_event):
        card = build_fight_card(sample_event)

        assert len(card) == 3
        # El main event (último en ESPN) queda primero pero conserva su número original
        assert [entry.fight_number for entry in card] == [3, 2, 1]
        assert card[0].is_main_event is True
        assert card[0].fighter1.name == "Justin Gaethje"
        assert [entry.is_main_event for entry in card[1:]] == [False, False]

    def test_fighter_details(self, sample_event):
        card = build_fight_card(sample_event)
        opener = card[-1]

        assert opener.fight_number == 1
        assert opener.weight_class == "FW"
        assert opener.fighter1.country == "England"
        assert opener.fighter1.winner is False
        assert opener.fighter2.name == "Jean Silva"
        assert opener.fighter2.country == "Brazil"
        assert opener.fighter2.winner is True

    def test_missing_country_is_none(self, sample_event):
        card = build_fight_card(sample_event)
        assert card[1].fighter1.country is None

    def test_empty_event(self):
        assert build_fight_card({"id": "1"}) == []

    def test_serializes_camel_case(self, sample_event):
        entry = build_fight_card(sample_event)[0].model_dump(by_alias=True)

        assert entry["fightNumber"] == 3
        assert entry["isMainEvent"] is True
        assert entry["weightClass"] == "LW"


class TestEventParsing:
    """Test suite for event summary/detail projections."""

    def test_summary_uses_first_competition_venue(self, sample_event):
        summary = parse_event_summary(sample_event)

        assert summary.id == "600041234"
        assert summary.name == "UFC 324: Gaethje vs. Pimblett"
        assert summary.venue == "T-Mobile Arena"
        assert summary.location == "Las Vegas"

    def test_summary_defaults_to_tba(self, upcoming_event):
        summary = parse_event_summary(upcoming_event)

        assert summary.venue == "TBA"
        assert summary.location == "TBA"

    def test_detail(self, sample_event):
        detail = parse_event_detail(sample_event)

        assert detail.event_id == "600041234"
        assert detail.fight_count == 3
        assert detail.location["city"] == "Las Vegas"
        assert [f.order for f in detail.fights] == [0, 1, 2]
        assert detail.fights[2].winner == "Justin Gaethje"

    def test_detail_without_venue(self, upcoming_event):
        detail = parse_event_detail(upcoming_event)

        assert detail.venue == "TBA"
        assert detail.location == {}

    def test_numeric_id_is_text(self):
        assert parse_event_summary({"id": 42}).id == "42"

    def test_missing_id_is_empty_and_not_found(self):
        data = {"events": [{"name": "UFC Fight Night"}]}

        assert parse_event_summary(data["events"][0]).id == ""
        assert find_event(data, "None") is None
        assert find_event(data, "") is None

    def test_main_event_is_last_competition(self, sample_event):
        fight = main_event(sample_event)

        assert fight.fighter1 == "Justin Gaethje"
        assert fight.order == 2

    def test_main_event_none_without_competitions(self):
        assert main_event(make_event("1", "Empty", "2026-01-01T00:00Z", [])) is None

    def test_find_event(self, scoreboard):
        assert find_event(scoreboard, "600041300")["name"] == "UFC 325: Volkanovski vs. Lopes 2"
        assert find_event(scoreboard, "nope") is None
        assert find_event({}, "600041300") is None


class TestParseEventDate:
    """Test suite for ESPN date parsing."""

    def test_espn_format(self):
        assert parse_event_date("2026-01-31T23:00Z") == datetime(2026, 1, 31, 23, 0, tzinfo=timezone.utc)

    def test_naive_is_utc(self):
        assert parse_event_date("2026-01-31T23:00:00").tzinfo == timezone.utc

    def test_invalid(self):
        assert parse_event_date("not a date") is None
        assert parse_event_date(None) is None
        assert parse_event_date("") is None
