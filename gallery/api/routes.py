"""Gallery session endpoint handlers."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Header, HTTPException, Request, Response, status
from sse_starlette.sse import EventSourceResponse

from gallery.api import service
from gallery.api.schemas import ScrollRequest, SessionCreated, SessionSnapshot
from gallery.session import GallerySession, SessionStore

router = APIRouter(prefix="/sessions")


def _get_store(request: Request) -> SessionStore:
    return request.app.state.sessions


def _get_session(session_id: str, store: SessionStore = Depends(_get_store)) -> GallerySession:
    session = store.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


@router.post("", status_code=status.HTTP_201_CREATED, response_model=SessionCreated)
async def create_session(store: SessionStore = Depends(_get_store)):
    session = service.open_session(store)
    return SessionCreated(session_id=session.session_id)


@router.get("/{session_id}", response_model=SessionSnapshot)
async def get_session(session: GallerySession = Depends(_get_session)):
    return service.snapshot(session)


@router.post("/{session_id}/scroll", status_code=status.HTTP_202_ACCEPTED)
async def report_scroll(body: ScrollRequest, session: GallerySession = Depends(_get_session)):
    service.report_scroll(session, body)
    return {"status": "accepted"}


@router.get("/{session_id}/events")
async def session_events(
    session: GallerySession = Depends(_get_session),
    last_event_id: str | None = Header(default=None, alias="Last-Event-ID"),
):
    return EventSourceResponse(service.stream_surface_events(session, last_event_id))


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(session_id: str, store: SessionStore = Depends(_get_store)):
    if not store.close(session_id):
        raise HTTPException(status_code=404, detail="Session not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
