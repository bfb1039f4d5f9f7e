from pydantic import BaseModel, Field
from typing import List, Literal, Optional


class ChatMessage(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str


class TextToColorRequest(BaseModel):
    text: str = ""
    keepHistory: bool = False
    conversationHistory: List[ChatMessage] = []


class TextToColorResponse(BaseModel):
    color: str = Field(pattern=r"^#[0-9a-fA-F]{6}$")
    rawOutput: str
    imagery: Optional[str] = None
    fromCache: bool = False


class ErrorResponse(BaseModel):
    error: str
    color: str


class ColorInfo(BaseModel):
    color: str
    rgb: str
    hsl: str
    mode: Literal["light", "dark"]


class AdminColorRequest(BaseModel):
    id: int
    sessionId: str
    ipAddress: Optional[str] = None
    inputText: str
    color: str
    rawOutput: str
    imagery: Optional[str] = None
    createdAt: Optional[str] = None


class AdminRequestList(BaseModel):
    requests: List[AdminColorRequest]
    count: int
