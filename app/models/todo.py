from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, Text, false, func
from sqlalchemy.orm import relationship
from app.database import Base
from app.models.user import User

class Todo(Base):
    __tablename__ = "todos"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, nullable=False)
    completed = Column(Boolean, nullable=False, server_default=false())
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    owner = relationship(User, backref="todos")
