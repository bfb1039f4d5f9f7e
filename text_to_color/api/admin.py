import secrets
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from ..cache import recent_requests
from ..db import session_scope
from ..schemas import AdminRequestList

router = APIRouter()
security = HTTPBasic()


def require_basic_auth(request: Request, credentials: HTTPBasicCredentials = Depends(security)):
    settings = request.app.state.settings
    user_ok = secrets.compare_digest(credentials.username.encode("utf-8"), settings.admin_user.encode("utf-8"))
    pass_ok = secrets.compare_digest(credentials.password.encode("utf-8"), settings.admin_pass.encode("utf-8"))
    if not (user_ok and pass_ok):
        raise HTTPException(status_code=401, detail="Unauthorized", headers={"WWW-Authenticate": "Basic"})
    return True


@router.get("/requests", response_model=AdminRequestList)
def list_requests(request: Request, limit: int = Query(100, ge=1, le=500), _auth=Depends(require_basic_auth)):
    with session_scope(request.app.state.SessionLocal) as s:
        rows = recent_requests(s, limit)
        out = [
            {
                "id": r.id,
                "sessionId": r.session_id,
                "ipAddress": r.session.ip_address if r.session else None,
                "inputText": r.input_text,
                "color": r.hex_color,
                "rawOutput": r.raw_output,
                "imagery": r.imagery,
                "createdAt": r.created_at.isoformat() if r.created_at else None,
            }
            for r in rows
        ]
    return {"requests": out, "count": len(out)}
