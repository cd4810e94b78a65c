import logging
from datetime import datetime
from sqlalchemy.orm import Session
from sportsteams.core.database import transaction
from sportsteams.leagues.models import League
from sportsteams.teams.models import Team
from sportsteams.players.models import Player
from sportsteams.matches.models import Match
from sportsteams.scores.models import Score

logger = logging.getLogger(__name__)

LEAGUES = [
    ("Premier League", "Delhi"),
    ("La Liga", "Mumbai"),
    ("Serie A", "Chennai"),
    ("Bundesliga", "Kolkata"),
    ("Ligue 1", "Hyderabad"),
]

# (team_name, league index, coach_name, founded_year)
TEAMS = [
    ("Warrior", 0, "Dinesh", 2021),
    ("Rockers", 0, "Rahul", 2023),
    ("Legends", 1, "John", 2022),
    ("Emperors", 1, "Smith", 2024),
    ("Fireball", 3, "Rohit", 2025),
]

# (player_name, team index, position, age, nationality)
PLAYERS = [
    ("Siva", 0, "Forward", 26, "Indian"),
    ("Gowtham", 1, "Defender", 31, "Indian"),
    ("Harish", 2, "Goaly", 36, "Indian"),
    ("Yasar", 3, "Backward", 35, "Indian"),
    ("Rockey", 4, "Midfielder", 29, "Indian"),
]

# (league index, home team index, away team index, match_date, venue)
MATCHES = [
    (0, 0, 1, "2025-02-15 20:00:00", "Nehru stadium"),
    (1, 2, 3, "2025-02-18 21:00:00", "Lotus stadium"),
    (3, 4, 0, "2025-02-20 19:30:00", "Mumbai football stadium"),
]

# (match index, team index, goals_scored, player index, minute_scored)
SCORES = [
    (0, 0, 1, 0, 30),
    (0, 1, 2, 1, 45),
    (1, 2, 1, 2, 50),
    (1, 3, 1, 3, 70),
    (2, 4, 2, 4, 65),
]


def seed_database(db: Session) -> bool:
    """Load the sample club dataset in one transaction. Does nothing if leagues already exist."""
    if db.query(League).first():
        logger.info("Database already holds data, skipping seed")
        return False

    with transaction(db):
        leagues = [League(league_name=name, country=country) for name, country in LEAGUES]
        db.add_all(leagues)
        db.flush()

        teams = [
            Team(team_name=name, league_id=leagues[league].league_id, coach_name=coach, founded_year=founded)
            for name, league, coach, founded in TEAMS
        ]
        db.add_all(teams)
        db.flush()

        players = [
            Player(
                player_name=name,
                team_id=teams[team].team_id,
                position=position,
                age=age,
                nationality=nationality,
            )
            for name, team, position, age, nationality in PLAYERS
        ]
        db.add_all(players)
        db.flush()

        matches = [
            Match(
                league_id=leagues[league].league_id,
                home_team_id=teams[home].team_id,
                away_team_id=teams[away].team_id,
                match_date=datetime.strptime(match_date, "%Y-%m-%d %H:%M:%S"),
                venue=venue,
            )
            for league, home, away, match_date, venue in MATCHES
        ]
        db.add_all(matches)
        db.flush()

        db.add_all([
            Score(
                match_id=matches[match].match_id,
                team_id=teams[team].team_id,
                goals_scored=goals,
                player_id=players[player].player_id,
                minute_scored=minute,
            )
            for match, team, goals, player, minute in SCORES
        ])

    logger.info(
        f"Seeded {len(LEAGUES)} leagues, {len(TEAMS)} teams, {len(PLAYERS)} players, "
        f"{len(MATCHES)} matches and {len(SCORES)} score events"
    )
    return True
