from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Query, Request
from fastapi.concurrency import run_in_threadpool

from chat_functions.common.callable import CallableError, callable_result, read_callable_data
from chat_functions.common.error_envelope import error_response
from chat_functions.messages.service import MessagesError, MessagesValidationError, get_messages_service

router = APIRouter(tags=["messages"])


def _http_error(exc: MessagesError):
    status_code = 400 if isinstance(exc, MessagesValidationError) else 500
    details = {"reason": exc.details} if exc.details else None
    return error_response(exc.code, exc.message, status_code=status_code, details=details)


@router.post("/postMessage")
async def post_message(request: Request):
    data = await read_callable_data(request)
    try:
        result = await run_in_threadpool(get_messages_service().post_message, data)
    except MessagesError as exc:
        raise CallableError(exc.code, exc.message, exc.details) from exc
    return callable_result(result.model_dump())


@router.get("/getChat")
def get_chat(userId: Optional[str] = Query(None), chatId: Optional[str] = Query(None)):
    try:
        return get_messages_service().get_chat(userId, chatId)
    except MessagesError as exc:
        raise _http_error(exc) from exc


@router.api_route("/deleteChat", methods=["DELETE", "POST"])
def delete_chat(userId: Optional[str] = Query(None), chatId: Optional[str] = Query(None)):
    try:
        return get_messages_service().delete_chat(userId, chatId)
    except MessagesError as exc:
        raise _http_error(exc) from exc
