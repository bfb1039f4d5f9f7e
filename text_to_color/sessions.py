from typing import Mapping, Optional
from .models import UserSession
from .utils.logging import get_logger

log = get_logger(__name__)


def ensure_session(session, session_id: str, client_ip: Optional[str] = None) -> UserSession:
    """Create the session row on first sight; an existing row is left as is."""
    existing = session.get(UserSession, session_id)
    if existing:
        return existing
    row = UserSession(id=session_id, ip_address=client_ip)
    session.add(row)
    session.flush()
    log.info(f"Created session {session_id}")
    return row


def client_ip(headers: Mapping[str, str], peer: Optional[str] = None) -> Optional[str]:
    forwarded_for = headers.get("x-forwarded-for")
    if forwarded_for:
        # proxies append, the client is the first entry
        return forwarded_for.split(",")[0].strip() or None
    real_ip = headers.get("x-real-ip")
    if real_ip:
        return real_ip.strip() or None
    return peer or None
