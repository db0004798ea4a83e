from .bridge import OracleBridge
from .events import Usage, Reasoning, MessageDelta, OracleEvent, SessionError, AssistantMessage
from .backend import OracleBackend
from .session import Attachment, OracleRequest, OracleSession
from .interpreter import ToolRequest, interpret

__all__ = [
    "AssistantMessage",
    "Attachment",
    "MessageDelta",
    "OracleBackend",
    "OracleBridge",
    "OracleEvent",
    "OracleRequest",
    "OracleSession",
    "Reasoning",
    "SessionError",
    "ToolRequest",
    "Usage",
    "interpret",
]
