"""
SessionGate - authenticated / unauthenticated screen state.

Decides whether the authenticated shell or one of the public screens
(login, signup, suggestion) is shown, and keeps a durable flag so a restart
does not force a new login.

Invariants:
- The flag is written on every successful login/signup and removed on logout
- At most one login/signup request is in flight; the submit control stays
  disabled (pending) until it resolves
- Form errors never touch the flag or the authenticated state
- A request resolving after close() changes nothing
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from src.config.models import AuthSection

from .component import run_build_lead, run_check_credentials, run_validate_signup
from .models import (
    SUGGESTION_THANKS,
    LoginInput,
    Screen,
    SignupInput,
    SubmitOutput,
    SuggestionInput,
    SuggestionOutput,
)
from .ports import (
    ClockPort,
    KeyValueStorePort,
    LeadIntakePort,
    NotifyPort,
    SessionListener,
    TimerHandle,
    TimerPort,
)

logger = logging.getLogger(__name__)

FLAG_KEY = "isAuthenticated"
FLAG_VALUE = "true"


class SessionGate:
    """
    Session state machine for the console.

    Usage:
        gate = SessionGate(storage, timer, clock, add_lead=..., notify=...)
        gate.submit_login("admin@venapictures.com", "password123")
        # ... after the simulated delay
        assert gate.screen is Screen.APP
    """

    def __init__(
        self,
        storage: KeyValueStorePort,
        timer: TimerPort,
        clock: ClockPort,
        *,
        auth: AuthSection | None = None,
        flag_key: str = FLAG_KEY,
        add_lead: LeadIntakePort | None = None,
        notify: NotifyPort | None = None,
    ) -> None:
        """
        Initialize the gate from the persisted flag.

        Args:
            storage: Durable key-value store holding the session flag
            timer: Timer for the simulated request delay
            clock: Clock stamping suggestion leads
            auth: Credential and form rules
            flag_key: Storage key of the session flag
            add_lead: Receives leads from the suggestion form
            notify: Publishes the suggestion confirmation
        """
        self._storage = storage
        self._timer = timer
        self._clock = clock
        self._auth = auth or AuthSection()
        self._flag_key = flag_key
        self._add_lead = add_lead
        self._notify_port = notify

        self._lock = threading.RLock()
        self._authenticated = storage.get(flag_key) == FLAG_VALUE
        self._auth_screen = Screen.LOGIN
        self._error = ""
        self._pending = False
        self._handle: TimerHandle | None = None
        self._request = 0
        self._closed = False
        self._listeners: list[SessionListener] = []

        if self._authenticated:
            logger.info("Restored authenticated session")

    # --- State ---

    @property
    def authenticated(self) -> bool:
        return self._authenticated

    @property
    def screen(self) -> Screen:
        with self._lock:
            return Screen.APP if self._authenticated else self._auth_screen

    @property
    def error(self) -> str:
        """Inline message for the current form, or ""."""
        return self._error

    @property
    def pending(self) -> bool:
        """True while a login/signup request is in flight."""
        return self._pending

    def subscribe(self, listener: SessionListener) -> None:
        self._listeners.append(listener)

    def _changed(self) -> None:
        for listener in list(self._listeners):
            listener()

    # --- Screen switching ---

    def _switch(self, screen: Screen) -> None:
        with self._lock:
            if self._authenticated or self._closed:
                return
            self._auth_screen = screen
            self._error = ""
        self._changed()

    def show_login(self) -> None:
        self._switch(Screen.LOGIN)

    def show_signup(self) -> None:
        self._switch(Screen.SIGNUP)

    def show_suggestion(self) -> None:
        self._switch(Screen.SUGGESTION)

    # --- Login / Signup ---

    def _start_request(self, resolve: Callable[[int], None], delay_ms: int) -> SubmitOutput:
        with self._lock:
            if self._closed or self._authenticated:
                return SubmitOutput(accepted=False)
            if self._pending:
                return SubmitOutput(accepted=False)
            self._pending = True
            self._request += 1
            request = self._request
            self._error = ""
        self._changed()

        handle = self._timer.schedule(delay_ms, lambda: resolve(request))
        with self._lock:
            if self._pending and request == self._request:
                self._handle = handle
        return SubmitOutput(accepted=True)

    def submit_login(self, email: str, password: str) -> SubmitOutput:
        """Start a login request; the outcome lands after the configured delay."""
        inp = LoginInput(email=email, password=password)
        return self._start_request(
            lambda request: self._resolve_login(request, inp), self._auth.submit_delay_ms
        )

    def _in_flight(self, request: int) -> bool:
        return not self._closed and self._pending and request == self._request

    def _resolve_login(self, request: int, inp: LoginInput) -> None:
        with self._lock:
            if not self._in_flight(request):
                return
            self._pending = False
            self._handle = None
            out = run_check_credentials(inp, self._auth)
            if out.success:
                self._authenticate()
            else:
                self._error = out.error or ""
                logger.info("Login rejected for %s", inp.email)
        self._changed()

    def submit_signup(self, inp: SignupInput) -> SubmitOutput:
        """
        Validate the signup form, then start the signup request.

        Validation failures are reported synchronously and start nothing.
        """
        with self._lock:
            if self._closed or self._authenticated or self._pending:
                return SubmitOutput(accepted=False)
            out = run_validate_signup(inp, self._auth)
            if not out.success:
                self._error = out.error or ""

        if not out.success:
            self._changed()
            return SubmitOutput(accepted=False, error=out.error)

        return self._start_request(
            lambda request: self._resolve_signup(request, inp), self._auth.submit_delay_ms
        )

    def _resolve_signup(self, request: int, inp: SignupInput) -> None:
        with self._lock:
            if not self._in_flight(request):
                return
            self._pending = False
            self._handle = None
            logger.info("Signup successful for: %s (%s)", inp.email, inp.company_name)
            self._authenticate()
        self._changed()

    def _authenticate(self) -> None:
        self._storage.set(self._flag_key, FLAG_VALUE)
        self._authenticated = True
        self._auth_screen = Screen.LOGIN
        self._error = ""
        logger.info("Session authenticated")

    # --- Suggestion ---

    def submit_suggestion(self, inp: SuggestionInput) -> SuggestionOutput:
        """Record a visitor suggestion as a lead and return to login."""
        with self._lock:
            if self._closed or self._authenticated:
                return SuggestionOutput(success=False)

        out = run_build_lead(inp, self._clock.now())
        if not out.success or out.lead is None:
            self._error = out.error or ""
            self._changed()
            return out

        if self._add_lead is not None:
            self._add_lead(out.lead)
        if self._notify_port is not None:
            self._notify_port.publish(SUGGESTION_THANKS)

        logger.info("Suggestion received from %s", out.lead.name)
        self._switch(Screen.LOGIN)
        return out

    # --- Logout / teardown ---

    def logout(self) -> None:
        """End the session and drop any login or signup still in flight."""
        with self._lock:
            self._storage.remove(self._flag_key)
            self._authenticated = False
            self._auth_screen = Screen.LOGIN
            self._error = ""
            self._pending = False
            handle, self._handle = self._handle, None
        if handle is not None:
            handle.cancel()
        logger.info("Session ended")
        self._changed()

    def close(self) -> None:
        """Tear down; a request still in flight resolves to nothing."""
        with self._lock:
            self._closed = True
            self._pending = False
            handle, self._handle = self._handle, None
        if handle is not None:
            handle.cancel()
