from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from sportsteams.core.database import Base

class Team(Base):
    __tablename__ = "teams"

    team_id = Column(Integer, primary_key=True, autoincrement=True)
    team_name = Column(String(100), unique=True, nullable=False)
    league_id = Column(Integer, ForeignKey("leagues.league_id"))
    coach_name = Column(String(100))
    founded_year = Column(Integer)

    league = relationship("League", back_populates="teams")
    players = relationship("Player", back_populates="team")
    home_matches = relationship("Match", foreign_keys="[Match.home_team_id]", back_populates="home_team")
    away_matches = relationship("Match", foreign_keys="[Match.away_team_id]", back_populates="away_team")
    scores = relationship("Score", back_populates="team")
