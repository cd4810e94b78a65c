from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from sportsteams.core.database import Base

class League(Base):
    __tablename__ = "leagues"

    league_id = Column(Integer, primary_key=True, autoincrement=True)
    league_name = Column(String(100), unique=True, nullable=False)
    country = Column(String(50))

    teams = relationship("Team", back_populates="league")
    matches = relationship("Match", back_populates="league")
