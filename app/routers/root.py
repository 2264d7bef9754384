from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from app.stores import AppState, get_app_state

router = APIRouter(tags=['root'])


@router.get("/", response_class=PlainTextResponse)
async def welcome(request: Request):
    return request.app.state.settings.GREETING


@router.get("/count", response_class=PlainTextResponse)
async def increment_count(
    state: AppState = Depends(get_app_state)
):
    count = await state.visit_counter.increment()
    return f"Visit count: {count}"
