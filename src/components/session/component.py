"""
Session component - credential and form rules for the auth screens.

Pure functions; the SessionGate applies their outcome to session state.

Invariants:
- Only the configured reference pair authenticates
- Signup checks confirmation before length, and both before any delay
"""

from __future__ import annotations

from datetime import datetime

from src.config.models import AuthSection
from src.domain.entities import Lead

from .models import (
    ERROR_INVALID_CREDENTIALS,
    ERROR_NAME_REQUIRED,
    ERROR_PASSWORD_MISMATCH,
    ERROR_PASSWORD_TOO_SHORT,
    AuthOutput,
    LoginInput,
    SignupInput,
    SuggestionInput,
    SuggestionOutput,
)


def run_check_credentials(inp: LoginInput, auth: AuthSection) -> AuthOutput:
    if inp.email == auth.reference_email and inp.password == auth.reference_password:
        return AuthOutput(success=True)
    return AuthOutput(success=False, error=ERROR_INVALID_CREDENTIALS)


def run_validate_signup(inp: SignupInput, auth: AuthSection) -> AuthOutput:
    if inp.password != inp.confirm_password:
        return AuthOutput(success=False, error=ERROR_PASSWORD_MISMATCH)

    if len(inp.password) < auth.min_password_length:
        return AuthOutput(
            success=False,
            error=ERROR_PASSWORD_TOO_SHORT.format(min_length=auth.min_password_length),
        )

    return AuthOutput(success=True)


def run_build_lead(inp: SuggestionInput, now: datetime) -> SuggestionOutput:
    name = inp.name.strip()
    if not name:
        return SuggestionOutput(success=False, error=ERROR_NAME_REQUIRED)

    lead = Lead(
        name=name,
        contact_channel=inp.contact_channel,
        location=inp.location.strip(),
        status="Sedang Diskusi",
        date=now,
        notes=inp.notes.strip(),
    )
    return SuggestionOutput(lead=lead, success=True)


def run(
    inp: LoginInput | SignupInput | SuggestionInput,
    *,
    auth: AuthSection | None = None,
    now: datetime | None = None,
) -> AuthOutput | SuggestionOutput:
    auth = auth or AuthSection()

    if isinstance(inp, LoginInput):
        return run_check_credentials(inp, auth)

    elif isinstance(inp, SignupInput):
        return run_validate_signup(inp, auth)

    elif isinstance(inp, SuggestionInput):
        return run_build_lead(inp, now or datetime.now())

    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
