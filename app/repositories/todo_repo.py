from typing import Any
from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from app.models.todo import Todo
from app.models.user import User

class TodoRepository:
    """Each method issues exactly one statement against the store."""

    async def list_with_email(self, db: AsyncSession):
        stmt = (
            select(Todo, User.email)
            .join(Todo.owner)
            .order_by(Todo.created_at.desc(), Todo.id.desc())
        )
        result = await db.execute(stmt)
        return result.all()

    async def create(self, db: AsyncSession, name: str, user_id: int) -> Todo:
        stmt = insert(Todo).values(name=name, user_id=user_id).returning(Todo)
        result = await db.execute(stmt)
        todo = result.scalar_one()
        await db.commit()
        return todo

    async def get(self, db: AsyncSession, todo_id: int) -> Todo | None:
        result = await db.execute(select(Todo).where(Todo.id == todo_id))
        return result.scalar_one_or_none()

    async def update_fields(self, db: AsyncSession, todo_id: int, fields: dict[str, Any]) -> Todo | None:
        stmt = (
            update(Todo)
            .where(Todo.id == todo_id)
            .values(**fields, updated_at=func.now())
            .returning(Todo)
            .execution_options(synchronize_session=False)
        )
        result = await db.execute(stmt)
        todo = result.scalar_one_or_none()
        await db.commit()
        return todo

    async def delete(self, db: AsyncSession, todo_id: int) -> Todo | None:
        stmt = (
            delete(Todo)
            .where(Todo.id == todo_id)
            .returning(Todo)
            .execution_options(synchronize_session=False)
        )
        result = await db.execute(stmt)
        todo = result.scalar_one_or_none()
        await db.commit()
        return todo
