from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel


class ToastKind(StrEnum):
    success = "success"
    error = "error"
    info = "info"


class ToastPhase(StrEnum):
    visible = "visible"
    fading = "fading"
    removed = "removed"


class Toast(BaseModel):
    id: str
    message: str
    kind: ToastKind = ToastKind.success
    created_at: datetime


class ToastView(BaseModel):
    id: str
    message: str
    kind: ToastKind
    phase: ToastPhase
