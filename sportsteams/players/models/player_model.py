from sqlalchemy import Column, Integer, String, ForeignKey, Index
from sqlalchemy.orm import relationship
from sportsteams.core.database import Base

class Player(Base):
    __tablename__ = "players"
    __table_args__ = (Index("idx_player_name", "player_name"),)

    player_id = Column(Integer, primary_key=True, autoincrement=True)
    player_name = Column(String(100), nullable=False)
    team_id = Column(Integer, ForeignKey("teams.team_id"))
    position = Column(String(50))
    age = Column(Integer)
    nationality = Column(String(50))

    team = relationship("Team", back_populates="players")
    scores = relationship("Score", back_populates="player")
