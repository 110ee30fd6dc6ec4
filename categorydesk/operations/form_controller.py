"""
CategoryDesk Client - Form Controller Module

Validation and submission flow shared by the login and signup forms.

A submit validates the draft first; a draft that fails any rule never
reaches the network. Valid drafts are sent once, with at most one
request in flight per controller.

Author: CategoryDesk Project
"""

import logging
import threading
from typing import Any, Callable, Dict, Optional

from ..exceptions import CategoryDeskAPIError, GENERIC_ERROR_MESSAGE, server_message
from ..models import (
    LoginDraft,
    RegistrationDraft,
    SubmissionOutcome,
    SubmissionState,
    SubmissionStatus
)
from ..validation import LOGIN_SCHEMA, REGISTRATION_SCHEMA, ValidationErrors, ValidationSchema

# Configure logging
logger = logging.getLogger(__name__)

REGISTERED_MESSAGE = "You have successfully registered. Please log in."

_BUSY = (SubmissionStatus.VALIDATING, SubmissionStatus.SUBMITTING)


class FormController:
    """
    Base controller: owns the draft, the error set and the submission state.

    Subclasses provide the schema, the network call (_send) and the
    success handling (_succeeded).
    """

    schema: ValidationSchema = None
    name = "form"

    def __init__(self, api_client, draft,
                 on_state_change: Optional[Callable[[SubmissionState], None]] = None):
        """
        Args:
            api_client: CategoryDeskAPI instance
            draft: Draft object exposing to_payload() and reset()
            on_state_change: Optional callback receiving each new state
        """
        self.api = api_client
        self.draft = draft
        self.errors = ValidationErrors()
        self.on_state_change = on_state_change
        self._state = SubmissionState()
        self._lock = threading.Lock()

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def can_submit(self) -> bool:
        """False while a submission is being validated or is in flight."""
        return self._state.status not in _BUSY

    def _set_state(self, status: SubmissionStatus, message: Optional[str] = None):
        self._state = SubmissionState(status, message)
        if self.on_state_change:
            self.on_state_change(self._state)

    def submit(self, draft=None) -> SubmissionOutcome:
        """
        Validate the draft and, if every rule passes, send it.

        Args:
            draft: Replacement draft (defaults to the current one)

        Returns:
            SubmissionOutcome; accepted is False if a submission was
            already in progress and this call changed nothing
        """
        with self._lock:
            if not self.can_submit:
                logger.debug(f"Ignoring {self.name} submit - submission already in progress")
                return SubmissionOutcome(accepted=False, status=self._state.status)
            self._set_state(SubmissionStatus.VALIDATING)

        try:
            if draft is not None:
                self.draft = draft
            payload = self.draft.to_payload()
            self.errors = self.schema.validate(payload)
        except Exception:
            logger.exception(f"{self.name} validation failed unexpectedly")
            return self._failed_unexpectedly()

        if self.errors:
            logger.info(f"{self.name} rejected by validation: {', '.join(self.errors.fields())}")
            self._set_state(SubmissionStatus.IDLE)
            return SubmissionOutcome(accepted=True, status=SubmissionStatus.IDLE, errors=self.errors)

        self._set_state(SubmissionStatus.SUBMITTING)
        try:
            result = self._send(payload)
        except CategoryDeskAPIError as e:
            message = server_message(getattr(e, "payload", None), GENERIC_ERROR_MESSAGE)
            logger.error(f"{self.name} failed: {e}")
            self._set_state(SubmissionStatus.FAILED, message)
            return SubmissionOutcome(accepted=True, status=SubmissionStatus.FAILED, message=message)
        except Exception:
            logger.exception(f"{self.name} failed unexpectedly")
            return self._failed_unexpectedly()

        try:
            message = self._succeeded(result)
        except Exception:
            logger.exception(f"{self.name} response could not be handled")
            return self._failed_unexpectedly()
        self._set_state(SubmissionStatus.SUCCEEDED, message)
        self._after_success()
        return SubmissionOutcome(accepted=True, status=SubmissionStatus.SUCCEEDED, message=message)

    def _failed_unexpectedly(self) -> SubmissionOutcome:
        self._set_state(SubmissionStatus.FAILED, GENERIC_ERROR_MESSAGE)
        return SubmissionOutcome(accepted=True, status=SubmissionStatus.FAILED,
                                 message=GENERIC_ERROR_MESSAGE)

    def reset(self):
        """Empty the draft and errors, as on a fresh form. Ignored while busy."""
        with self._lock:
            if not self.can_submit:
                return
            self.draft.reset()
            self.errors = ValidationErrors()
            self._set_state(SubmissionStatus.IDLE)

    def dismiss_error(self):
        """Close the error message; the draft is kept for correction."""
        if self._state.status == SubmissionStatus.FAILED:
            self._set_state(SubmissionStatus.IDLE)

    def _send(self, payload: Dict[str, Any]) -> Any:
        raise NotImplementedError

    def _succeeded(self, result: Any) -> Optional[str]:
        return None

    def _after_success(self):
        pass


class LoginFormController(FormController):
    """
    Login form.

    A successful login stores the returned access token through the
    session manager and then calls on_authenticated.
    """

    schema = LOGIN_SCHEMA
    name = "Login"

    def __init__(self, api_client, session_manager, draft: Optional[LoginDraft] = None,
                 on_authenticated: Optional[Callable[[], None]] = None, on_state_change=None):
        super().__init__(api_client, draft or LoginDraft(), on_state_change)
        self.session = session_manager
        self.on_authenticated = on_authenticated

    def _send(self, payload):
        return self.api.login(payload["email"], payload["password"])

    def _succeeded(self, result):
        self.session.set_credential(result.access_token)
        logger.info(f"User successfully logged in: {result.user.email}")
        return None

    def _after_success(self):
        if self.on_authenticated:
            self.on_authenticated()


class SignupFormController(FormController):
    """
    Signup form.

    Success resets the draft and shows a confirmation; acknowledging it
    calls on_acknowledged (which routes to the login page).
    """

    schema = REGISTRATION_SCHEMA
    name = "Registration"

    def __init__(self, api_client, draft: Optional[RegistrationDraft] = None,
                 on_acknowledged: Optional[Callable[[], None]] = None, on_state_change=None):
        super().__init__(api_client, draft or RegistrationDraft(), on_state_change)
        self.on_acknowledged = on_acknowledged

    def _send(self, payload):
        return self.api.register(payload)

    def _succeeded(self, result):
        self.draft.reset()
        logger.info("User registered")
        return REGISTERED_MESSAGE

    def acknowledge(self) -> bool:
        """
        Close the registration confirmation.

        Returns:
            True if a confirmation was showing
        """
        if self._state.status != SubmissionStatus.SUCCEEDED:
            return False
        self._set_state(SubmissionStatus.IDLE)
        if self.on_acknowledged:
            self.on_acknowledged()
        return True
