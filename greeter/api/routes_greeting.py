"""Greeting endpoint."""

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["greeting"])


@router.get("/", response_class=PlainTextResponse)
async def greet(request: Request):
    return f"Hello {request.app.state.settings.name}!"
