"""
HTTP routes for the homepage API.
"""

from __future__ import annotations

import logging
from typing import Callable

from fastapi import APIRouter, BackgroundTasks, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from homepage.config import Settings, get_settings
from homepage.dependencies import get_kv_store_factory, get_notification_dispatcher
from homepage.kv import KeyValueStore
from homepage.notifications import (
    CONTACT_EVENT,
    MESSAGE_EVENT,
    NotificationDispatcher,
)
from homepage.quotes import fetch_hitokoto
from homepage.records import (
    CONTACTS_KEY,
    MESSAGES_KEY,
    ContactSubmission,
    Message,
    RecordCollection,
    newest_first,
)
from homepage.schemas import (
    ContactPayload,
    ContactResponse,
    ErrorResponse,
    MessagePayload,
    MessageResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

HITOKOTO_FAILED = "获取一言失败"
LIST_MESSAGES_FAILED = "获取留言失败"
ADD_MESSAGE_FAILED = "添加留言失败"
CONTACT_FAILED = "提交联系表单失败"
MISSING_FIELDS = "缺少必填字段"
NOT_FOUND = "未找到请求的资源"


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def _append_record(
    store_factory: Callable[[], KeyValueStore], key: str, record: dict
) -> None:
    RecordCollection(store_factory(), key).append(record)


@router.get("/hitokoto", responses={500: {"model": ErrorResponse}})
def get_hitokoto(settings: Settings = Depends(get_settings)):
    try:
        data = fetch_hitokoto(settings.hitokoto_api_url, timeout=settings.request_timeout)
    except Exception:
        logger.exception("Failed to fetch hitokoto from %s", settings.hitokoto_api_url)
        return error_response(HITOKOTO_FAILED, 500)
    return JSONResponse(data)


@router.get(
    "/messages",
    responses={200: {"model": list[MessageResponse]}, 500: {"model": ErrorResponse}},
)
def list_messages(
    store_factory: Callable[[], KeyValueStore] = Depends(get_kv_store_factory),
):
    try:
        messages = RecordCollection(store_factory(), MESSAGES_KEY).load()
    except Exception:
        logger.exception("Failed to read %s", MESSAGES_KEY)
        return error_response(LIST_MESSAGES_FAILED, 500)
    return JSONResponse(newest_first(messages))


@router.post(
    "/messages",
    responses={
        200: {"model": MessageResponse},
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def add_message(
    request: Request,
    background_tasks: BackgroundTasks,
    store_factory: Callable[[], KeyValueStore] = Depends(get_kv_store_factory),
    notifier: NotificationDispatcher = Depends(get_notification_dispatcher),
):
    """
    Append a message to the wall. The notification runs after the response is sent.
    """
    try:
        data = await request.json()
        try:
            payload = MessagePayload.model_validate(data)
        except ValidationError:
            return error_response(MISSING_FIELDS, 400)
        if not payload.name or not payload.content:
            return error_response(MISSING_FIELDS, 400)

        message = Message.create(
            name=payload.name, content=payload.content, email=payload.email
        )
        record = message.as_dict()
        await run_in_threadpool(_append_record, store_factory, MESSAGES_KEY, record)
    except Exception:
        logger.exception("Failed to add message")
        return error_response(ADD_MESSAGE_FAILED, 500)

    background_tasks.add_task(notifier.dispatch, MESSAGE_EVENT, record)
    return JSONResponse(record)


@router.post(
    "/contact",
    responses={
        200: {"model": ContactResponse},
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def submit_contact(
    request: Request,
    background_tasks: BackgroundTasks,
    store_factory: Callable[[], KeyValueStore] = Depends(get_kv_store_factory),
    notifier: NotificationDispatcher = Depends(get_notification_dispatcher),
):
    try:
        data = await request.json()
        try:
            payload = ContactPayload.model_validate(data)
        except ValidationError:
            return error_response(MISSING_FIELDS, 400)
        if not payload.name or not payload.email or not payload.message:
            return error_response(MISSING_FIELDS, 400)

        submission = ContactSubmission.create(
            name=payload.name, email=payload.email, message=payload.message
        )
        record = submission.as_dict()
        await run_in_threadpool(_append_record, store_factory, CONTACTS_KEY, record)
    except Exception:
        logger.exception("Failed to record contact submission")
        return error_response(CONTACT_FAILED, 500)

    background_tasks.add_task(notifier.dispatch, CONTACT_EVENT, record)
    return JSONResponse({"success": True})
