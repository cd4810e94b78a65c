import pytest
from sportsteams.core.errors import ReferentialViolation
from sportsteams.players.models import Player
from sportsteams.players.services.player_service import PlayerService


def test_insert_player_into_existing_team(seeded_db):
    service = PlayerService(seeded_db)
    player = service.create_player(
        {"player_name": "Arun", "team_id": 2, "position": "Forward", "age": 25, "nationality": "Indian"}
    )

    assert player.player_id == 6
    assert [p.player_name for p in service.find_players_by_name("Arun")] == ["Arun"]


def test_player_with_missing_team_is_rejected(seeded_db):
    with pytest.raises(ReferentialViolation):
        PlayerService(seeded_db).create_player({"player_name": "Ghost", "team_id": 404})
    assert seeded_db.query(Player).count() == 5


def test_increment_ages_for_nationality(seeded_db):
    service = PlayerService(seeded_db)
    service.create_player({"player_name": "Lukas", "team_id": 1, "age": 22, "nationality": "German"})

    assert service.increment_ages({"nationality": "Indian"}) == 5

    ages = {p.player_name: p.age for p in service.get_all_players()}
    assert ages["Siva"] == 27
    assert ages["Harish"] == 37
    assert ages["Lukas"] == 22


def test_increment_ages_rolls_back_as_a_unit(seeded_db, monkeypatch):
    service = PlayerService(seeded_db)

    def broken_commit():
        raise RuntimeError("connection lost")

    monkeypatch.setattr(seeded_db, "commit", broken_commit)
    with pytest.raises(RuntimeError):
        service.increment_ages({"nationality": "Indian"})
    monkeypatch.undo()

    assert [p.age for p in service.get_all_players()] == [26, 31, 36, 35, 29]


def test_update_players_matching_nothing_has_no_effect(seeded_db):
    service = PlayerService(seeded_db)

    assert service.update_players({"nationality": "Brazilian"}, {"age": 50}) == 0
    assert [p.age for p in service.get_all_players()] == [26, 31, 36, 35, 29]


def test_delete_player_with_score_events_is_rejected(seeded_db):
    with pytest.raises(ReferentialViolation):
        PlayerService(seeded_db).delete_players({"player_name": "Siva"})


def test_delete_player_without_score_events(seeded_db):
    service = PlayerService(seeded_db)
    service.create_player({"player_name": "Benchwarmer", "team_id": 1})

    assert service.delete_players({"player_name": "Benchwarmer"}) == 1
    assert service.find_players_by_name("Benchwarmer") == []
