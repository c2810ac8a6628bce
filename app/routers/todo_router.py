from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.body import read_json_body
from app.database import get_db
from app.dispatch import request_target
from app.schemas.todo import ErrorOut, TodoDeleted, TodoOut, TodoWithEmail
from app.services.todo_service import TodoService, pick_update_fields

router = APIRouter()
service = TodoService()

NOT_FOUND = {404: {"model": ErrorOut}}


def error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def todo_id_from(request: Request) -> int:
    # Second path segment, unvalidated; a bad id fails the cast here.
    return int(request_target(request).split("/")[2])


@router.get("", response_model=list[TodoWithEmail])
async def list_todos(db: AsyncSession = Depends(get_db)):
    return await service.list_todos(db)


@router.post("", response_model=TodoOut, status_code=201, responses={400: {"model": ErrorOut}})
async def create_todo(request: Request, db: AsyncSession = Depends(get_db)):
    body = await read_json_body(request)
    name, user_id = body.get("name"), body.get("user_id")
    if not name or not user_id:
        return error(400, "name and user_id required")
    return await service.create_todo(db, name, user_id)


@router.get("/{todo_path:path}", response_model=TodoOut, responses=NOT_FOUND)
async def get_todo(request: Request, db: AsyncSession = Depends(get_db)):
    todo = await service.get_todo(db, todo_id_from(request))
    if todo is None:
        return error(404, "Todo not found")
    return todo


@router.put("/{todo_path:path}", response_model=TodoOut, responses={400: {"model": ErrorOut}, **NOT_FOUND})
async def update_todo(request: Request, db: AsyncSession = Depends(get_db)):
    todo_id = todo_id_from(request)
    fields = pick_update_fields(await read_json_body(request))
    if not fields:
        return error(400, "No fields to update")
    todo = await service.update_todo(db, todo_id, fields)
    if todo is None:
        return error(404, "Todo not found")
    return todo


@router.delete("/{todo_path:path}", response_model=TodoDeleted, responses=NOT_FOUND)
async def delete_todo(request: Request, db: AsyncSession = Depends(get_db)):
    todo = await service.delete_todo(db, todo_id_from(request))
    if todo is None:
        return error(404, "Todo not found")
    return TodoDeleted(todo=TodoOut.model_validate(todo))
