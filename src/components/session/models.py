"""
Session component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from src.domain.entities import Lead

# --- Messages ---

ERROR_INVALID_CREDENTIALS = "Email atau kata sandi salah."
ERROR_PASSWORD_MISMATCH = "Kata sandi tidak cocok."
ERROR_PASSWORD_TOO_SHORT = "Kata sandi harus minimal {min_length} karakter."
ERROR_NAME_REQUIRED = "Nama wajib diisi."
SUGGESTION_THANKS = "Terima kasih! Saran Anda telah kami terima."


class Screen(str, Enum):
    """Top-level screen tree chosen by the gate."""

    APP = "app"
    LOGIN = "login"
    SIGNUP = "signup"
    SUGGESTION = "suggestion"


# --- Input Models ---


@dataclass(frozen=True)
class LoginInput:
    email: str
    password: str


@dataclass(frozen=True)
class SignupInput:
    full_name: str
    company_name: str
    email: str
    password: str
    confirm_password: str


@dataclass(frozen=True)
class SuggestionInput:
    name: str
    contact_channel: str = "Website"
    location: str = ""
    notes: str = ""


# --- Output Models ---


@dataclass(frozen=True)
class AuthOutput:
    success: bool = False
    error: str | None = None


@dataclass(frozen=True)
class SubmitOutput:
    """accepted means the simulated request started; it resolves later."""

    accepted: bool
    error: str | None = None


@dataclass(frozen=True)
class SuggestionOutput:
    lead: Lead | None = None
    success: bool = False
    error: str | None = None
