import json
from typing import Any
from sqlalchemy.ext.asyncio import AsyncSession
from app.repositories.todo_repo import TodoRepository
from app.schemas.todo import TodoOut, TodoWithEmail

# Columns a client may change through PUT, in the order they are applied.
UPDATABLE_FIELDS = ("name", "completed")


def pick_update_fields(body: dict[str, Any]) -> dict[str, Any]:
    """
    Fields present in the body, by key. A supplied null, false or "" counts
    as present; only a missing key is skipped.
    """
    return {key: body[key] for key in UPDATABLE_FIELDS if key in body}


def as_text(value: Any) -> str:
    """Text column value for a JSON scalar: 5 -> "5", true -> "true"."""
    return value if isinstance(value, str) else json.dumps(value)


class TodoService:
    def __init__(self):
        self.repo = TodoRepository()

    async def list_todos(self, db: AsyncSession) -> list[TodoWithEmail]:
        rows = await self.repo.list_with_email(db)
        return [
            TodoWithEmail(**TodoOut.model_validate(todo).model_dump(), email=email)
            for todo, email in rows
        ]

    async def create_todo(self, db: AsyncSession, name: Any, user_id: Any):
        return await self.repo.create(db, as_text(name), int(user_id))

    async def get_todo(self, db: AsyncSession, todo_id: int):
        return await self.repo.get(db, todo_id)

    async def update_todo(self, db: AsyncSession, todo_id: int, fields: dict[str, Any]):
        return await self.repo.update_fields(db, todo_id, fields)

    async def delete_todo(self, db: AsyncSession, todo_id: int):
        return await self.repo.delete(db, todo_id)
