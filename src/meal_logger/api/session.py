"""Session endpoints: snapshot reads and workflow events."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from meal_logger.api.session_models import (
    ConfigRequest,
    InputRequest,
    MicrosRequest,
    SessionSnapshot,
)
from meal_logger.domain.workflow import (
    Back,
    RemoveItem,
    SetConfig,
    SetInput,
    StartOver,
    ToggleMicros,
)

if TYPE_CHECKING:
    from meal_logger.services.sessions import SessionService

router = APIRouter(prefix="/session", tags=["session"])


def _session_service(request: Request) -> SessionService:
    return request.app.state.container.session_service


@router.get("")
async def get_session(request: Request) -> SessionSnapshot:
    """Return the current session snapshot."""
    return SessionSnapshot.from_session(_session_service(request).session)


@router.put("/input")
async def set_input(body: InputRequest, request: Request) -> SessionSnapshot:
    """Replace the meal description."""
    session = _session_service(request).dispatch(SetInput(body.text))
    return SessionSnapshot.from_session(session)


@router.put("/config")
async def set_config(body: ConfigRequest, request: Request) -> SessionSnapshot:
    """Update one configuration field."""
    session = _session_service(request).dispatch(SetConfig(body.field, body.value))
    return SessionSnapshot.from_session(session)


@router.put("/micros")
async def toggle_micros(body: MicrosRequest, request: Request) -> SessionSnapshot:
    """Show or hide micronutrients."""
    session = _session_service(request).dispatch(ToggleMicros(body.show))
    return SessionSnapshot.from_session(session)


@router.post("/submit")
async def submit(request: Request) -> SessionSnapshot:
    """Extract food items from the current description."""
    session = await _session_service(request).submit_description()
    return SessionSnapshot.from_session(session)


@router.post("/confirm")
async def confirm(request: Request) -> SessionSnapshot:
    """Look up nutrition for the confirmed items."""
    session = await _session_service(request).confirm()
    return SessionSnapshot.from_session(session)


@router.post("/back")
async def back(request: Request) -> SessionSnapshot:
    """Return to the description step."""
    session = _session_service(request).dispatch(Back())
    return SessionSnapshot.from_session(session)


@router.post("/start-over")
async def start_over(request: Request) -> SessionSnapshot:
    """Discard results and return to the description step."""
    session = _session_service(request).dispatch(StartOver())
    return SessionSnapshot.from_session(session)


@router.delete("/items/{index}")
async def remove_item(index: int, request: Request) -> SessionSnapshot:
    """Remove one resolved food item."""
    session = _session_service(request).dispatch(RemoveItem(index))
    return SessionSnapshot.from_session(session)
