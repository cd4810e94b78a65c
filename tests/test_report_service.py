from sportsteams.players.services.player_service import PlayerService
from sportsteams.reports.services.report_service import ReportService
from sportsteams.scores.services.score_service import ScoreService
from sportsteams.teams.services.team_service import TeamService


def test_match_report_covers_every_score_event(seeded_db):
    report = ReportService(seeded_db).get_match_report()

    assert len(report) == ScoreService(seeded_db).count_scores() == 5
    assert report[0] == {
        "match_id": 1,
        "league_name": "Premier League",
        "home_team": "Warrior",
        "away_team": "Rockers",
        "goals_scored": 1,
        "scorer": "Siva",
        "minute_scored": 30,
    }
    assert [row["match_id"] for row in report] == [1, 1, 2, 2, 3]


def test_match_report_keeps_events_without_scorer(seeded_db):
    ScoreService(seeded_db).create_score({"match_id": 1, "team_id": 2, "goals_scored": 1, "minute_scored": 89})

    report = ReportService(seeded_db).get_match_report()
    assert len(report) == 6
    assert report[2]["scorer"] is None
    assert report[2]["minute_scored"] == 89


def test_total_goals_per_team(seeded_db):
    service = ReportService(seeded_db)
    totals = {row["team_name"]: row["total_goals"] for row in service.get_total_goals_per_team()}
    assert totals == {"Warrior": 1, "Rockers": 2, "Legends": 1, "Emperors": 1, "Fireball": 2}

    ScoreService(seeded_db).delete_scores({"score_id": 5})

    totals = {row["team_name"]: row["total_goals"] for row in service.get_total_goals_per_team()}
    assert totals["Fireball"] == 0


def test_average_age_per_team(seeded_db):
    PlayerService(seeded_db).create_player({"player_name": "Arun", "team_id": 2, "age": 25})

    averages = {row["team_name"]: row["avg_age"] for row in ReportService(seeded_db).get_average_age_per_team()}
    assert averages == {"Warrior": 26.0, "Rockers": 28.0, "Legends": 36.0, "Emperors": 35.0, "Fireball": 29.0}


def test_teams_with_highest_scoring_event(seeded_db):
    assert ReportService(seeded_db).get_teams_with_highest_scoring_event() == ["Rockers", "Fireball"]


def test_teams_with_highest_scoring_event_on_empty_store(db):
    assert ReportService(db).get_teams_with_highest_scoring_event() == []


def test_oldest_team_roster(seeded_db):
    assert ReportService(seeded_db).get_oldest_team_roster() == [{"player_name": "Harish", "age": 36}]


def test_oldest_team_roster_tie_goes_to_lowest_team_id(seeded_db):
    # Emperors (team 4) averages 35; raising Yasar to 36 ties it with Legends (team 3)
    PlayerService(seeded_db).update_players({"player_name": "Yasar"}, {"age": 36})

    assert ReportService(seeded_db).get_oldest_team_roster() == [{"player_name": "Harish", "age": 36}]


def test_teams_by_league(seeded_db):
    assert ReportService(seeded_db).get_teams_by_league("Premier League") == [
        {"team_name": "Warrior", "coach_name": "Dinesh", "founded_year": 2021},
        {"team_name": "Rockers", "coach_name": "Rahul", "founded_year": 2023},
    ]


def test_teams_by_unknown_league_is_empty(seeded_db):
    assert ReportService(seeded_db).get_teams_by_league("Major League") == []


def test_every_team_listed_once_under_its_league(seeded_db):
    service = ReportService(seeded_db)
    for team in TeamService(seeded_db).get_all_teams():
        names = [row["team_name"] for row in service.get_teams_by_league(team.league.league_name)]
        assert names.count(team.team_name) == 1


def test_teamless_player_left_out_of_roster(seeded_db):
    player = PlayerService(seeded_db).create_player({"player_name": "Free Agent", "age": 30})
    service = ReportService(seeded_db)

    assert "Free Agent" not in [row["player_name"] for row in service.get_player_roster()]
    assert "Free Agent" not in [row["player_name"] for row in service.get_player_summary()]
    assert PlayerService(seeded_db).get_player(player.player_id).player_name == "Free Agent"


def test_player_summary_view_tracks_base_tables(seeded_db):
    service = ReportService(seeded_db)
    assert service.get_player_summary() == service.get_player_roster()

    TeamService(seeded_db).update_teams({"team_name": "Warrior"}, {"team_name": "Warriors"})

    summary = service.get_player_summary()
    assert summary[0]["team_name"] == "Warriors"
    assert summary == service.get_player_roster()
