from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from starlette.responses import Response

from ...application.mediator import Mediator
from ...application.todo import (
    CreateTodoListCommand,
    GetTodoListByIdQuery,
    GetTodoListsQuery,
)
from ..dependencies import get_mediator
from ..errors import to_http_response

router = APIRouter(prefix="/api/todolists", tags=["TodoLists"])

MediatorDep = Annotated[Mediator, Depends(get_mediator)]


class CreateTodoListRequest(BaseModel):
    title: str = ""
    colour: str | None = None


@router.get("")
async def get_todo_lists(mediator: MediatorDep) -> Response:
    """All todo lists, ordered by title."""
    return to_http_response(await mediator.send(GetTodoListsQuery()))


@router.get("/{list_id}")
async def get_todo_list(list_id: int, mediator: MediatorDep) -> Response:
    return to_http_response(await mediator.send(GetTodoListByIdQuery(list_id=list_id)))


@router.post("")
async def create_todo_list(body: CreateTodoListRequest, mediator: MediatorDep) -> Response:
    command = CreateTodoListCommand(title=body.title, colour=body.colour)
    return to_http_response(await mediator.send(command), success_status=201)
