from datetime import datetime
from pydantic import BaseModel, ConfigDict

class TodoOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    completed: bool
    user_id: int
    created_at: datetime
    updated_at: datetime

class TodoWithEmail(TodoOut):
    email: str

class TodoDeleted(BaseModel):
    message: str = "Deleted"
    todo: TodoOut

class ErrorOut(BaseModel):
    error: str
