import pytest
from sportsteams.core.errors import ReferentialViolation, ValidationError
from sportsteams.scores.services.score_service import ScoreService


def test_negative_goals_are_rejected_and_nothing_is_stored(seeded_db):
    service = ScoreService(seeded_db)

    for goals in (-1, -5):
        with pytest.raises(ValidationError):
            service.create_score({"match_id": 1, "team_id": 1, "goals_scored": goals, "player_id": 1, "minute_scored": 80})
    assert service.count_scores() == 5


def test_score_without_player(seeded_db):
    score = ScoreService(seeded_db).create_score({"match_id": 2, "team_id": 3, "goals_scored": 1, "minute_scored": 90})

    assert score.score_id == 6
    assert score.player_id is None


def test_goals_default_to_zero(seeded_db):
    score = ScoreService(seeded_db).create_score({"match_id": 2, "team_id": 3})
    assert score.goals_scored == 0


def test_score_with_missing_match_is_rejected(seeded_db):
    with pytest.raises(ReferentialViolation):
        ScoreService(seeded_db).create_score({"match_id": 9, "team_id": 1, "goals_scored": 1})


def test_batch_insert_is_all_or_nothing(seeded_db):
    service = ScoreService(seeded_db)
    rows = [
        {"match_id": 1, "team_id": 1, "goals_scored": 1, "player_id": 1, "minute_scored": 10},
        {"match_id": 1, "team_id": 2, "goals_scored": -1, "player_id": 2, "minute_scored": 20},
    ]

    with pytest.raises(ValidationError):
        service.create_scores(rows)
    assert service.count_scores() == 5


def test_batch_insert(seeded_db):
    scores = ScoreService(seeded_db).create_scores([
        {"match_id": 3, "team_id": 1, "goals_scored": 1, "player_id": 1, "minute_scored": 12},
        {"match_id": 3, "team_id": 5, "goals_scored": 0, "minute_scored": 88},
    ])

    assert [s.score_id for s in scores] == [6, 7]


def test_update_to_negative_goals_is_rejected(seeded_db):
    service = ScoreService(seeded_db)

    with pytest.raises(ValidationError):
        service.update_scores({"score_id": 1}, {"goals_scored": -2})
    assert service.get_score(1).goals_scored == 1


def test_delete_score_event(seeded_db):
    service = ScoreService(seeded_db)

    assert service.delete_scores({"score_id": 5}) == 1
    assert service.count_scores() == 4
