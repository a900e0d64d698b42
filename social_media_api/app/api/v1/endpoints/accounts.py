"""
Account endpoints for API v1.

``POST /register`` creates an account and ``POST /login`` checks a
username/password pair.  Both return the stored account on success.
``GET /accounts/{id}/messages`` lists the messages an account posted.
Failures carry no body: registration answers 400 and login answers 401,
including when the request body cannot be parsed.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import ValidationError

from social_media_api.app.api.dependencies import get_account_service, get_message_service
from social_media_api.app.schemas.account import Account, AccountCreate
from social_media_api.app.schemas.message import Message
from social_media_api.app.services.account_service import AccountService
from social_media_api.app.services.message_service import MessageService


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=Account)
async def register(request: Request, service: AccountService = Depends(get_account_service)):
    """Register a new account."""
    body = await request.body()
    try:
        candidate = AccountCreate.model_validate_json(body)
    except ValidationError as exc:
        logger.error("register received a malformed body: %s, error: %s", body, exc)
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    account = await service.register(candidate)
    if account is None:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)
    return account


@router.post("/login", response_model=Account)
async def login(request: Request, service: AccountService = Depends(get_account_service)):
    """Authenticate an account by username and password."""
    body = await request.body()
    try:
        credentials = AccountCreate.model_validate_json(body)
    except ValidationError as exc:
        logger.error("login received a malformed body: %s, error: %s", body, exc)
        return Response(status_code=status.HTTP_401_UNAUTHORIZED)

    account = await service.authenticate(credentials)
    if account is None:
        return Response(status_code=status.HTTP_401_UNAUTHORIZED)
    return account


@router.get("/accounts/{account_id}/messages", response_model=List[Message])
async def list_account_messages(
    account_id: str,
    service: MessageService = Depends(get_message_service),
) -> List[Message]:
    """List the messages posted by an account.

    An unknown or non-numeric account id yields an empty list.
    """
    try:
        parsed_id = int(account_id)
    except ValueError:
        logger.error("list_account_messages received a non-numeric id: %s", account_id)
        return []
    return await service.list_by_account(parsed_id)
