from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from starlette.responses import Response

from ...application.mediator import Mediator
from ...application.todo import (
    CreateTodoItemCommand,
    DeleteTodoItemCommand,
    GetTodoItemsInListQuery,
    MarkTodoItemCompleteCommand,
)
from ..dependencies import get_mediator
from ..errors import to_http_response

router = APIRouter(prefix="/api/todolists/{list_id}/todoitems", tags=["TodoItems"])

MediatorDep = Annotated[Mediator, Depends(get_mediator)]


class CreateTodoItemRequest(BaseModel):
    title: str = ""
    note: str = ""


@router.get("")
async def get_todo_items(list_id: int, mediator: MediatorDep) -> Response:
    return to_http_response(
        await mediator.send(GetTodoItemsInListQuery(list_id=list_id))
    )


@router.post("")
async def create_todo_item(
    list_id: int, body: CreateTodoItemRequest, mediator: MediatorDep
) -> Response:
    """Requires the ``write:todo`` permission."""
    command = CreateTodoItemCommand(list_id=list_id, title=body.title, note=body.note)
    return to_http_response(await mediator.send(command), success_status=201)


@router.put("/{todo_id}/markcomplete")
async def mark_todo_item_complete(
    list_id: int, todo_id: int, mediator: MediatorDep
) -> Response:
    """Requires the ``write:todo`` permission."""
    command = MarkTodoItemCompleteCommand(list_id=list_id, todo_id=todo_id)
    return to_http_response(await mediator.send(command))


@router.delete("/{todo_id}")
async def delete_todo_item(list_id: int, todo_id: int, mediator: MediatorDep) -> Response:
    """Requires the ``delete:todo`` permission."""
    command = DeleteTodoItemCommand(list_id=list_id, todo_id=todo_id)
    return to_http_response(await mediator.send(command), success_status=204)
