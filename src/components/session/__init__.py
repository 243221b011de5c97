"""
Session component - Session gate and auth screen rules.

Handles login, signup, the public suggestion form and logout, and keeps
the persisted session flag.
"""

from ._impl import FLAG_KEY, FLAG_VALUE, SessionGate
from .component import (
    run,
    run_build_lead,
    run_check_credentials,
    run_validate_signup,
)
from .models import (
    ERROR_INVALID_CREDENTIALS,
    ERROR_NAME_REQUIRED,
    ERROR_PASSWORD_MISMATCH,
    ERROR_PASSWORD_TOO_SHORT,
    SUGGESTION_THANKS,
    AuthOutput,
    LoginInput,
    Screen,
    SignupInput,
    SubmitOutput,
    SuggestionInput,
    SuggestionOutput,
)
from .ports import KeyValueStorePort, LeadIntakePort, NotifyPort, SessionListener

__all__ = [
    # Entry points
    "run",
    "run_build_lead",
    "run_check_credentials",
    "run_validate_signup",
    # Service
    "SessionGate",
    "FLAG_KEY",
    "FLAG_VALUE",
    # Models
    "AuthOutput",
    "LoginInput",
    "Screen",
    "SignupInput",
    "SubmitOutput",
    "SuggestionInput",
    "SuggestionOutput",
    # Messages
    "ERROR_INVALID_CREDENTIALS",
    "ERROR_NAME_REQUIRED",
    "ERROR_PASSWORD_MISMATCH",
    "ERROR_PASSWORD_TOO_SHORT",
    "SUGGESTION_THANKS",
    # Ports
    "KeyValueStorePort",
    "LeadIntakePort",
    "NotifyPort",
    "SessionListener",
]
