from contextlib import contextmanager
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base, Session
from sqlalchemy.pool import StaticPool
from sqlalchemy.exc import IntegrityError
from sportsteams.core.config import settings
from sportsteams.core.utils import translate_integrity_error


def create_db_engine(database_url: str):
    """Build an engine; SQLite connections get foreign key enforcement switched on."""
    if database_url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in database_url or database_url == "sqlite://":
            # in-memory databases live on one shared connection
            options["poolclass"] = StaticPool
        db_engine = create_engine(database_url, **options)

        @event.listens_for(db_engine, "connect")
        def enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys = ON;")
            cursor.close()

        return db_engine

    # `pool_pre_ping=True` to prevent stale connections
    return create_engine(
        database_url,
        pool_pre_ping=True,   # tests connections before using them
        pool_recycle=1800,    # recycle every 30 min to avoid stale connections
    )


engine = create_db_engine(settings.DATABASE_URL)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for models
Base = declarative_base()

# Dependency to get DB session
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session):
    """Run a group of statements as one unit: commit on success, roll back on any error."""
    try:
        yield db
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise translate_integrity_error(e) from e
    except Exception:
        db.rollback()
        raise


# Function to initialize the database
def init_db(bind=None):
    # Import all models here
    from sportsteams.leagues.models.leagues_models import League
    from sportsteams.teams.models.team_model import Team
    from sportsteams.players.models.player_model import Player
    from sportsteams.matches.models.match_model import Match
    from sportsteams.scores.models.score_model import Score
    from sportsteams.reports.models.player_summary_model import create_player_summary_view

    # Use context manager to ensure connection is released
    with (bind or engine).begin() as conn:
        Base.metadata.create_all(bind=conn)
        create_player_summary_view(conn)
