"""
Message endpoints for API v1.

Creation and editing reject bad input with 400.  Reads and deletes never
fail from the caller's point of view: an unknown id, a non-numeric id
or a storage error all produce ``200`` with an empty body (or an empty
list for collection reads).
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import ValidationError

from social_media_api.app.api.dependencies import get_message_service
from social_media_api.app.schemas.message import Message, MessageCreate, MessageUpdate
from social_media_api.app.services.message_service import MessageService


logger = logging.getLogger(__name__)

router = APIRouter()


def _parse_id(raw: str) -> Optional[int]:
    try:
        return int(raw)
    except ValueError:
        return None


def _empty_ok() -> Response:
    return Response(status_code=status.HTTP_200_OK)


@router.post("/messages", response_model=Message)
async def create_message(request: Request, service: MessageService = Depends(get_message_service)):
    """Post a new message."""
    body = await request.body()
    try:
        candidate = MessageCreate.model_validate_json(body)
    except ValidationError as exc:
        logger.error("create_message received a malformed body: %s, error: %s", body, exc)
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    message = await service.create(candidate)
    if message is None:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)
    return message


@router.get("/messages", response_model=List[Message])
async def list_messages(service: MessageService = Depends(get_message_service)) -> List[Message]:
    """List every message."""
    return await service.list_all()


@router.get("/messages/{message_id}", response_model=Message)
async def get_message(message_id: str, service: MessageService = Depends(get_message_service)):
    """Retrieve a single message, or an empty body if it does not exist."""
    parsed_id = _parse_id(message_id)
    if parsed_id is None:
        logger.error("get_message received a non-numeric id: %s", message_id)
        return _empty_ok()
    message = await service.get_by_id(parsed_id)
    if message is None:
        return _empty_ok()
    return message


@router.patch("/messages/{message_id}", response_model=Message)
async def update_message(
    message_id: str,
    request: Request,
    service: MessageService = Depends(get_message_service),
):
    """Replace the text of a message.  Only ``message_text`` is read from the body."""
    parsed_id = _parse_id(message_id)
    if parsed_id is None:
        logger.error("update_message received a non-numeric id: %s", message_id)
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    body = await request.body()
    try:
        update = MessageUpdate.model_validate_json(body)
    except ValidationError as exc:
        logger.error("update_message received a malformed body: %s, error: %s", body, exc)
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    message = await service.update_text(parsed_id, update.message_text)
    if message is None:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)
    return message


@router.delete("/messages/{message_id}", response_model=Message)
async def delete_message(message_id: str, service: MessageService = Depends(get_message_service)):
    """Delete a message and return it, or an empty body if it did not exist."""
    parsed_id = _parse_id(message_id)
    if parsed_id is None:
        logger.error("delete_message received a non-numeric id: %s", message_id)
        return _empty_ok()
    message = await service.delete_by_id(parsed_id)
    if message is None:
        return _empty_ok()
    return message
