from typing import List, Optional
from sqlalchemy.orm import joinedload
from .extract import ColorResult
from .models import ColorRequest
from .utils.logging import get_logger

log = get_logger(__name__)


def normalize_input(text: str) -> str:
    return (text or "").strip().lower()


def find_color(session, text: str) -> Optional[ColorResult]:
    key = normalize_input(text)
    row = (
        session.query(ColorRequest)
        .filter(ColorRequest.input_key == key)
        .order_by(ColorRequest.created_at.desc(), ColorRequest.id.desc())
        .first()
    )
    if not row:
        log.info(f"Cache miss for {text!r}")
        return None
    log.info(f"Cache hit for {text!r}")
    return ColorResult(color=row.hex_color, raw_output=row.raw_output, imagery=row.imagery)


def record_color(session, session_id: str, text: str, result: ColorResult) -> ColorRequest:
    row = ColorRequest(
        session_id=session_id,
        input_text=text,
        input_key=normalize_input(text),
        hex_color=result.color,
        raw_output=result.raw_output,
        imagery=result.imagery,
    )
    session.add(row)
    session.flush()
    return row


def recent_requests(session, limit: int = 100) -> List[ColorRequest]:
    return (
        session.query(ColorRequest)
        .options(joinedload(ColorRequest.session))
        .order_by(ColorRequest.created_at.desc(), ColorRequest.id.desc())
        .limit(limit)
        .all()
    )
