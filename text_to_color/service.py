from typing import Any, Dict, Optional, Sequence
from .db import session_scope
from .errors import InputValidationError, TextToColorError
from .extract import ColorResult
from .cache import find_color, record_color
from .sessions import ensure_session
from .utils.logging import get_logger

log = get_logger(__name__)

FALLBACK_COLOR = "#1f1f1f"


class ColorResolver:
    """Decides between the request cache and the completion client.

    Single-turn requests read and write the cache. Requests that keep
    conversation history always go to the completion client and are never
    stored.
    """

    def __init__(self, SessionLocal, completion_client):
        self.SessionLocal = SessionLocal
        self.completion_client = completion_client

    def resolve(
        self,
        session_id: Optional[str],
        text: Optional[str],
        keep_history: bool = False,
        history: Optional[Sequence[Dict[str, str]]] = None,
        client_ip: Optional[str] = None,
    ) -> Dict[str, Any]:
        if not text:
            raise InputValidationError("Text is required")
        if not session_id:
            raise InputValidationError("Session cookie is required")

        use_cache = not keep_history
        result: Optional[ColorResult] = None
        with session_scope(self.SessionLocal) as s:
            ensure_session(s, session_id, client_ip)
            if use_cache:
                result = find_color(s, text)

        if result:
            return _payload(result, from_cache=True)

        log.info(f"Calling completion service for {text!r}")
        result = self.completion_client.generate(text, history if keep_history else None, keep_history)

        if use_cache:
            with session_scope(self.SessionLocal) as s:
                record_color(s, session_id, text, result)
        return _payload(result, from_cache=False)


def error_payload(message: str) -> Dict[str, str]:
    return {"error": message, "color": FALLBACK_COLOR}


def resolve_or_fallback(resolver: ColorResolver, *args, **kwargs):
    """Run resolve() and collapse any failure into (status, error payload)."""
    try:
        return 200, resolver.resolve(*args, **kwargs)
    except TextToColorError as e:
        log.warning(f"{type(e).__name__}: {e}")
        return e.status_code, error_payload(str(e))
    except Exception:
        log.exception("Error processing text-to-color")
        return 500, error_payload("Internal error")


def _payload(result: ColorResult, from_cache: bool) -> Dict[str, Any]:
    return {
        "color": result.color,
        "rawOutput": result.raw_output,
        "imagery": result.imagery,
        "fromCache": from_cache,
    }
