"""Profile form state and the authenticated submission flow.

Kept Streamlit-free so the whole flow can be tested with a fake HTTP session,
an in-memory store and a static identity provider.

Lifecycle:
    IDLE -> SUBMITTING -> SUBMITTED   (2xx from the profile endpoint)
                       -> FAILED      (non-2xx, network error, token failure)
    FAILED -> SUBMITTING              (user resubmits; no automatic retry)

A profile already marked submitted in the store starts in SUBMITTED, where
only the confirmation view is shown.
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, Iterable, Optional

import requests

from errors import AuthRequired, SubmissionFailed, TokenAcquisitionFailed, ValidationFailed
from identity import IdentityProvider
from models import Notice, ProfileFormState
from storage.session_store import (
    PROFILE_SUBMITTED_KEY,
    SessionStore,
    is_flag_set,
    mark_profile_submitted,
)
from ui_core import DEFAULT_SETTINGS, request_timeout, users_endpoint

logger = logging.getLogger(__name__)

EDIT_PROFILE_PATH = "/edit"

SIGN_IN_NOTICE = Notice("warning", "Please sign in to submit your profile and add skills.")
FILL_ALL_FIELDS_NOTICE = Notice("error", "Please fill in all fields.")
IN_FLIGHT_NOTICE = Notice("info", "Your profile is already being submitted.")
SUCCESS_TOAST = Notice("success", "Profile created successfully", toast=True)
FAILURE_TOAST = Notice("error", "Error submitting profile", toast=True)


class SubmitStatus(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"
    FAILED = "failed"


@dataclass(frozen=True)
class ProfileSubmission:
    """Immutable snapshot of the profile page."""
    form: ProfileFormState = ProfileFormState()
    status: SubmitStatus = SubmitStatus.IDLE
    notice: Optional[Notice] = None  # Inline message above the form
    toast: Optional[Notice] = None  # One-shot notification
    submitting_since: Optional[float] = None

    @property
    def show_form(self) -> bool:
        return self.status != SubmitStatus.SUBMITTED

    @property
    def show_confirmation(self) -> bool:
        return self.status == SubmitStatus.SUBMITTED


def initial_submission(store: SessionStore) -> ProfileSubmission:
    """Snapshot for a fresh page load, honouring the durable submitted flag."""
    if is_flag_set(store, PROFILE_SUBMITTED_KEY):
        return ProfileSubmission(status=SubmitStatus.SUBMITTED)
    return ProfileSubmission()


def update_field(state: ProfileSubmission, name: str, value: str) -> ProfileSubmission:
    return replace(state, form=state.form.with_field(name, value))


def update_skills(state: ProfileSubmission, selected: Optional[Iterable[Any]]) -> ProfileSubmission:
    return replace(state, form=state.form.with_skills(selected))


def check_submittable(state: ProfileSubmission, authenticated: bool) -> None:
    """Raise AuthRequired / ValidationFailed if the form cannot be sent."""
    if not authenticated:
        raise AuthRequired("Sign in required to submit a profile")
    missing = state.form.missing_fields()
    if missing:
        raise ValidationFailed(missing)


def begin_submit(state: ProfileSubmission, now: float) -> ProfileSubmission:
    return replace(
        state,
        status=SubmitStatus.SUBMITTING,
        notice=None,
        toast=None,
        submitting_since=now,
    )


def complete_submit(state: ProfileSubmission) -> ProfileSubmission:
    return ProfileSubmission(status=SubmitStatus.SUBMITTED, toast=SUCCESS_TOAST)


def fail_submit(state: ProfileSubmission) -> ProfileSubmission:
    return replace(state, status=SubmitStatus.FAILED, toast=FAILURE_TOAST, submitting_since=None)


def build_multipart_fields(form: ProfileFormState) -> dict[str, tuple[None, str]]:
    """Multipart form fields; `(None, value)` makes requests send plain fields."""
    return {
        "name": (None, form.name),
        "email": (None, form.email),
        "college": (None, form.college),
        "interests": (None, form.interests),
        "skills": (None, json.dumps(form.skills_payload())),
    }


class ProfileFormController:
    """Drives the profile form against injected store, identity and HTTP session.

    Every operation returns the new snapshot and also keeps it on `self.state`.
    `on_state_change` is called with each snapshot as soon as it exists, so a
    caller can persist SUBMITTING before the network call starts.
    """

    def __init__(
        self,
        store: SessionStore,
        identity: IdentityProvider,
        *,
        settings: Optional[dict] = None,
        http: Any = None,
        navigate: Optional[Callable[[str], None]] = None,
        state: Optional[ProfileSubmission] = None,
        on_state_change: Optional[Callable[[ProfileSubmission], None]] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.store = store
        self.identity = identity
        self.settings = settings or DEFAULT_SETTINGS
        self.http = http if http is not None else requests.Session()
        self.navigate = navigate
        self.on_state_change = on_state_change
        self.clock = clock
        self.state = state if state is not None else initial_submission(store)

    def _set_state(self, state: ProfileSubmission) -> ProfileSubmission:
        self.state = state
        if self.on_state_change:
            self.on_state_change(state)
        return state

    @property
    def timeout(self) -> float:
        return request_timeout(self.settings)

    def update_field(self, name: str, value: str) -> ProfileSubmission:
        return self._set_state(update_field(self.state, name, value))

    def update_skills(self, selected: Optional[Iterable[Any]]) -> ProfileSubmission:
        return self._set_state(update_skills(self.state, selected))

    def is_submission_in_flight(self) -> bool:
        """True while a submit is running.

        A SUBMITTING snapshot older than the request timeout (plus a grace
        period) is stale, e.g. left behind by an interrupted rerun.
        """
        if self.state.status != SubmitStatus.SUBMITTING:
            return False
        started = self.state.submitting_since
        if started is None:
            return True
        return (self.clock() - started) < (self.timeout * 2 + 5)

    def submit(self) -> ProfileSubmission:
        """Validate, then POST the profile once. Never raises."""
        if self.state.status == SubmitStatus.SUBMITTED:
            return self.state
        if self.is_submission_in_flight():
            logger.info("Ignoring submit while a submission is in flight")
            return self._set_state(replace(self.state, notice=IN_FLIGHT_NOTICE, toast=None))

        try:
            check_submittable(self.state, self.identity.is_authenticated())
        except AuthRequired:
            return self._set_state(replace(self.state, notice=SIGN_IN_NOTICE, toast=None))
        except ValidationFailed as exc:
            logger.debug("Profile validation failed: %s", exc)
            return self._set_state(replace(self.state, notice=FILL_ALL_FIELDS_NOTICE, toast=None))

        self._set_state(begin_submit(self.state, self.clock()))

        try:
            result = self._post_profile(self.state.form)
        except SubmissionFailed as exc:
            logger.error("Profile submission failed: %s", exc)
            return self._set_state(fail_submit(self.state))

        logger.info("Profile submitted: %s", result)
        try:
            mark_profile_submitted(self.store)
        except OSError as exc:
            # The POST succeeded; only the local flag is lost
            logger.error("Could not persist submitted flag: %s", exc)
        return self._set_state(complete_submit(self.state))

    def _post_profile(self, form: ProfileFormState) -> Any:
        """Fetch a token and send one POST. Raises SubmissionFailed."""
        # TokenAcquisitionFailed is a SubmissionFailed; anything else from the
        # provider is wrapped so the page never sees it.
        try:
            token = self.identity.get_token()
        except TokenAcquisitionFailed:
            raise
        except Exception as exc:
            raise TokenAcquisitionFailed(f"Could not obtain token: {exc}") from exc

        url = users_endpoint(self.settings)
        try:
            resp = self.http.post(
                url,
                files=build_multipart_fields(form),
                headers={"Authorization": f"Bearer {token}"},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise SubmissionFailed(f"Request to {url} failed: {exc}") from exc

        if resp.status_code < 200 or resp.status_code >= 300:
            raise SubmissionFailed(
                f"Profile API error ({resp.status_code}): {str(resp.text)[:400]}",
                status_code=resp.status_code,
            )

        try:
            return resp.json()
        except ValueError as exc:
            raise SubmissionFailed(
                f"Profile API returned non-JSON response: {str(exc)[:200]}",
                status_code=resp.status_code,
            ) from exc

    def edit_profile(self) -> None:
        if self.navigate:
            self.navigate(EDIT_PROFILE_PATH)

    def clear_toast(self) -> ProfileSubmission:
        if self.state.toast is None:
            return self.state
        return self._set_state(replace(self.state, toast=None))
