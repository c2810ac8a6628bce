from sqlalchemy import Column, Integer, String
from app.database import Base

class User(Base):
    """Owner of todos. Rows are provisioned outside this service."""
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), nullable=False, unique=True)
