"""Registre en mémoire des sessions d'édition (une par onglet éditeur)."""
from typing import Dict, Optional

from fastapi import HTTPException

from ..models import GeneratedDocument
from ..session import EditingSession

SESSIONS: Dict[str, EditingSession] = {}


def register_session(s: EditingSession) -> EditingSession:
    SESSIONS[s.session_id] = s
    return s


def open_session(document: Optional[GeneratedDocument] = None) -> EditingSession:
    return register_session(EditingSession(document))


def get_session(session_id: str) -> EditingSession:
    s = SESSIONS.get(session_id)
    if s is None:
        raise HTTPException(404, "Session introuvable")
    return s


def close_session(session_id: str) -> None:
    SESSIONS.pop(session_id, None)


def session_view(s: EditingSession, **extra) -> dict:
    return {
        "session_id": s.session_id,
        "document":   s.document.model_dump() if s.document else None,
        "html":       s.preview(),
        **extra,
    }
