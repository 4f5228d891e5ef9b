from .phase import SessionPhase
from .runtime import RuntimeDeps
from .session import Session
from .settings import AppSettings
from .connection import ConnectionContext

__all__ = ["AppSettings", "ConnectionContext", "RuntimeDeps", "Session", "SessionPhase"]
