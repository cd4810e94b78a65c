from datetime import datetime

import pytest
from sportsteams.core.errors import ReferentialViolation, ValidationError
from sportsteams.matches.models import Match
from sportsteams.matches.services.match_service import MatchService


def test_create_match_parses_date_string(seeded_db):
    match = MatchService(seeded_db).create_match(
        {"league_id": 2, "home_team_id": 4, "away_team_id": 3, "match_date": "2025-03-01 18:00:00", "venue": "Lotus stadium"}
    )

    assert match.match_id == 4
    assert match.match_date == datetime(2025, 3, 1, 18, 0)


def test_team_cannot_play_itself(seeded_db):
    with pytest.raises(ValidationError):
        MatchService(seeded_db).create_match({"league_id": 1, "home_team_id": 1, "away_team_id": 1})
    assert seeded_db.query(Match).count() == 3


def test_match_with_missing_team_is_rejected(seeded_db):
    with pytest.raises(ReferentialViolation):
        MatchService(seeded_db).create_match({"league_id": 1, "home_team_id": 1, "away_team_id": 99})


def test_bad_date_format_is_rejected(seeded_db):
    with pytest.raises(ValidationError):
        MatchService(seeded_db).create_match(
            {"league_id": 1, "home_team_id": 1, "away_team_id": 2, "match_date": "15/02/2025"}
        )


def test_update_cannot_turn_match_into_self_fixture(seeded_db):
    service = MatchService(seeded_db)

    with pytest.raises(ValidationError):
        service.update_matches({"match_id": 1}, {"away_team_id": 1})
    assert service.get_match(1).away_team_id == 2


def test_matches_between_dates(seeded_db):
    matches = MatchService(seeded_db).get_matches_between(datetime(2025, 2, 16), datetime(2025, 2, 28))
    assert [m.venue for m in matches] == ["Lotus stadium", "Mumbai football stadium"]


def test_delete_match_with_score_events_is_rejected(seeded_db):
    with pytest.raises(ReferentialViolation):
        MatchService(seeded_db).delete_matches({"match_id": 1})
    assert seeded_db.query(Match).count() == 3


def test_update_matches_filtered_by_date_string(seeded_db):
    service = MatchService(seeded_db)

    assert service.update_matches({"match_date": "2025-02-15 20:00:00"}, {"venue": "Salt Lake stadium"}) == 1
    assert service.get_match(1).venue == "Salt Lake stadium"
    assert service.get_match(2).venue == "Lotus stadium"


def test_delete_matches_filtered_by_date_string_checks_dependents(seeded_db):
    with pytest.raises(ReferentialViolation):
        MatchService(seeded_db).delete_matches({"match_date": "2025-02-15 20:00:00"})
    assert seeded_db.query(Match).count() == 3


def test_delete_unplayed_match_by_date(seeded_db):
    service = MatchService(seeded_db)
    service.create_match({"league_id": 2, "home_team_id": 4, "away_team_id": 3, "match_date": "2025-03-01 18:00:00"})

    assert service.delete_matches({"match_date": "2025-03-01T18:00:00"}) == 1
    assert seeded_db.query(Match).count() == 3
