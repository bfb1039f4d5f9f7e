from datetime import datetime
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from .db import Base


class UserSession(Base):
    __tablename__ = "session"
    id = Column(String, primary_key=True)
    ip_address = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    color_requests = relationship("ColorRequest", back_populates="session")


class ColorRequest(Base):
    __tablename__ = "color_request"
    id = Column(Integer, primary_key=True)
    session_id = Column(String, ForeignKey("session.id"), index=True, nullable=False)
    input_text = Column(Text, nullable=False)
    # trimmed + lowercased input_text, the cache lookup key
    input_key = Column(Text, index=True, nullable=False)
    hex_color = Column(String(7), nullable=False)
    raw_output = Column(Text, nullable=False)
    imagery = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    session = relationship("UserSession", back_populates="color_requests")
