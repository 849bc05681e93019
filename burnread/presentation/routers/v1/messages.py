from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status

from burnread.application.create_message import create_message
from burnread.application.read_message import read_message
from burnread.domain.errors import InvalidMessage
from burnread.domain.ports.entry_store import EntryStorePort
from burnread.presentation.dependencies import get_entry_store, get_max_message_length
from burnread.schemas.requests import MessageCreateIn
from burnread.schemas.responses import ErrorOut, MessageCreatedOut, MessageOut

router = APIRouter(prefix="/messages", tags=["Messages"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageCreatedOut,
    responses={400: {"model": ErrorOut}},
)
async def post_create_message(
    request: Request,
    body: MessageCreateIn,
    store: Annotated[EntryStorePort, Depends(get_entry_store)],
    max_length: Annotated[int, Depends(get_max_message_length)],
):
    try:
        message_id = await create_message(store, body.message, max_length)
    except InvalidMessage:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="invalid message"
        )

    link = str(request.url_for("get_message", message_id=message_id))
    return MessageCreatedOut(id=message_id, link=link)


@router.get(
    "/{message_id}",
    name="get_message",
    response_model=MessageOut,
    responses={404: {"model": ErrorOut}},
)
async def get_message(
    message_id: str,
    store: Annotated[EntryStorePort, Depends(get_entry_store)],
):
    content = await read_message(store, message_id)
    if content is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="message not found"
        )
    return MessageOut(message=content)
