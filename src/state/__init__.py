from .runtime import RuntimeDeps
from .session import SessionContext
from .settings import AppSettings
from .payloads import Payload, SpeakText, EnterDigits
from .fragments import Fragment, ErrorEvent, ChallengeEvent
from .validation import Constraint, Validation

__all__ = [
    "AppSettings",
    "ChallengeEvent",
    "Constraint",
    "EnterDigits",
    "ErrorEvent",
    "Fragment",
    "Payload",
    "RuntimeDeps",
    "SessionContext",
    "SpeakText",
    "Validation",
]
