from sqlalchemy import Column, Integer, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from sportsteams.core.database import Base

class Score(Base):
    __tablename__ = "scores"
    __table_args__ = (
        CheckConstraint("goals_scored >= 0", name="ck_scores_goals_non_negative"),
    )

    score_id = Column(Integer, primary_key=True, autoincrement=True)
    match_id = Column(Integer, ForeignKey("matches.match_id"))
    team_id = Column(Integer, ForeignKey("teams.team_id"))
    goals_scored = Column(Integer, default=0, nullable=False)
    player_id = Column(Integer, ForeignKey("players.player_id"))
    minute_scored = Column(Integer)

    match = relationship("Match", back_populates="scores")
    team = relationship("Team", back_populates="scores")
    player = relationship("Player", back_populates="scores")
