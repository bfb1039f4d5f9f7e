from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse
from ..colors import color_mode, hsl_string, normalize_hex, rgb_string
from ..schemas import ColorInfo, ErrorResponse, TextToColorRequest, TextToColorResponse
from ..service import resolve_or_fallback
from ..sessions import client_ip

router = APIRouter()


@router.post(
    "/text-to-color",
    response_model=TextToColorResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
def text_to_color(body: TextToColorRequest, request: Request):
    settings = request.app.state.settings
    status, payload = resolve_or_fallback(
        request.app.state.resolver,
        request.cookies.get(settings.session_cookie_name),
        body.text,
        keep_history=body.keepHistory,
        history=[m.model_dump() for m in body.conversationHistory],
        client_ip=client_ip(request.headers, request.client.host if request.client else None),
    )
    if status != 200:
        return JSONResponse(status_code=status, content=payload)
    return payload


@router.get("/colors/{hex_value}", response_model=ColorInfo)
def color_info(hex_value: str):
    try:
        color = normalize_hex(hex_value)
    except ValueError:
        raise HTTPException(400, "Invalid hex color")
    return {"color": color, "rgb": rgb_string(color), "hsl": hsl_string(color), "mode": color_mode(color)}
