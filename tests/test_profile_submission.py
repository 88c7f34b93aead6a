"""Tests for the profile form controller and submission flow."""

import json

import pytest
import requests

from conftest import FakeHttpSession, FakeResponse
from errors import TokenAcquisitionFailed
from identity import StaticIdentityProvider
from models import ProfileFormState, SkillOption
from profile_submission import (
    EDIT_PROFILE_PATH,
    FAILURE_TOAST,
    FILL_ALL_FIELDS_NOTICE,
    IN_FLIGHT_NOTICE,
    SIGN_IN_NOTICE,
    SUCCESS_TOAST,
    ProfileFormController,
    ProfileSubmission,
    SubmitStatus,
    build_multipart_fields,
    initial_submission,
)
from storage.session_store import PROFILE_SUBMITTED_KEY, MemorySessionStore
from ui_core import DEFAULT_SETTINGS


def _fill(controller, **overrides):
    values = {
        "name": "Ada",
        "email": "a@b.com",
        "college": "MIT",
        "interests": "AI",
    }
    values.update(overrides)
    skills = values.pop("skills", [{"label": "Python", "value": "python"}])
    for field, value in values.items():
        controller.update_field(field, value)
    controller.update_skills(skills)
    return controller


def _controller(store, http=None, authenticated=True, token="tok-123", **kwargs):
    return ProfileFormController(
        store,
        StaticIdentityProvider(authenticated=authenticated, token=token),
        http=http if http is not None else FakeHttpSession(),
        **kwargs,
    )


class TestFieldUpdates:

    def test_update_field_assigns_value(self, memory_store):
        controller = _controller(memory_store)
        state = controller.update_field("college", "MIT")
        assert state.form.college == "MIT"
        assert controller.state is state

    def test_update_field_rejects_unknown_field(self, memory_store):
        controller = _controller(memory_store)
        with pytest.raises(ValueError):
            controller.update_field("skills", "python")

    def test_update_skills_normalizes_widget_values(self, memory_store):
        controller = _controller(memory_store)
        state = controller.update_skills(
            [{"label": "Python", "value": "python"}, SkillOption("Go", "go"), "Elixir"]
        )
        assert state.form.skills == (
            SkillOption("Python", "python"),
            SkillOption("Go", "go"),
            SkillOption("Elixir", "Elixir"),
        )

    def test_update_skills_clears_on_none(self, memory_store):
        controller = _controller(memory_store)
        controller.update_skills(["Go"])
        assert controller.update_skills(None).form.skills == ()

    def test_duplicate_skills_are_kept(self, memory_store):
        controller = _controller(memory_store)
        state = controller.update_skills(["Go", "Go"])
        assert len(state.form.skills) == 2


class TestSubmitGuards:

    def test_unauthenticated_submit_makes_no_request(self, memory_store):
        http = FakeHttpSession()
        controller = _fill(_controller(memory_store, http=http, authenticated=False))
        before = controller.state.form

        state = controller.submit()

        assert http.calls == []
        assert state.notice == SIGN_IN_NOTICE
        assert state.form == before
        assert state.status == SubmitStatus.IDLE
        assert memory_store.get(PROFILE_SUBMITTED_KEY) is None

    @pytest.mark.parametrize("missing", ["name", "college", "interests"])
    def test_missing_required_field_makes_no_request(self, memory_store, missing):
        http = FakeHttpSession()
        controller = _fill(_controller(memory_store, http=http), **{missing: ""})

        state = controller.submit()

        assert http.calls == []
        assert state.notice == FILL_ALL_FIELDS_NOTICE
        assert state.status == SubmitStatus.IDLE

    def test_empty_skills_makes_no_request(self, memory_store):
        http = FakeHttpSession()
        controller = _fill(_controller(memory_store, http=http), skills=[])

        state = controller.submit()

        assert http.calls == []
        assert state.notice == FILL_ALL_FIELDS_NOTICE

    def test_email_is_optional(self, memory_store):
        http = FakeHttpSession()
        controller = _fill(_controller(memory_store, http=http), email="")

        state = controller.submit()

        assert len(http.calls) == 1
        assert state.status == SubmitStatus.SUBMITTED


class TestSubmitRequest:

    def test_success_flow(self, memory_store):
        http = FakeHttpSession(FakeResponse(200, {"ok": True}))
        controller = _fill(_controller(memory_store, http=http))

        state = controller.submit()

        assert len(http.calls) == 1
        assert state.toast == SUCCESS_TOAST
        assert state.notice is None
        assert memory_store.get(PROFILE_SUBMITTED_KEY) == "true"
        assert state.form == ProfileFormState()
        assert state.form.skills == ()
        assert state.status == SubmitStatus.SUBMITTED
        assert state.show_confirmation
        assert not state.show_form

    def test_request_shape(self, memory_store):
        http = FakeHttpSession()
        controller = _fill(_controller(memory_store, http=http, token="tok-123"))

        controller.submit()

        call = http.calls[0]
        assert call["url"] == "http://localhost:5001/api/users"
        assert call["headers"] == {"Authorization": "Bearer tok-123"}
        assert call["timeout"] == DEFAULT_SETTINGS["api"]["timeout_seconds"]
        fields = call["files"]
        assert fields["name"] == (None, "Ada")
        assert fields["email"] == (None, "a@b.com")
        assert fields["college"] == (None, "MIT")
        assert fields["interests"] == (None, "AI")
        assert json.loads(fields["skills"][1]) == [{"label": "Python", "value": "python"}]

    def test_endpoint_follows_settings(self, memory_store):
        http = FakeHttpSession()
        settings = {"api": {"base_url": "https://api.example.com/", "timeout_seconds": 500}}
        controller = _fill(_controller(memory_store, http=http, settings=settings))

        controller.submit()

        assert http.calls[0]["url"] == "https://api.example.com/api/users"
        # Timeout is clamped
        assert http.calls[0]["timeout"] == 60.0

    def test_server_error_keeps_form(self, memory_store):
        http = FakeHttpSession(FakeResponse(500, {"error": "boom"}))
        controller = _fill(_controller(memory_store, http=http))
        before = controller.state.form

        state = controller.submit()

        assert len(http.calls) == 1
        assert state.toast == FAILURE_TOAST
        assert state.status == SubmitStatus.FAILED
        assert memory_store.get(PROFILE_SUBMITTED_KEY) is None
        assert state.form == before
        assert state.form.name == "Ada"
        assert state.show_form

    def test_network_error_is_failure(self, memory_store):
        http = FakeHttpSession(exc=requests.ConnectionError("refused"))
        controller = _fill(_controller(memory_store, http=http))

        state = controller.submit()

        assert state.status == SubmitStatus.FAILED
        assert state.toast == FAILURE_TOAST
        assert memory_store.get(PROFILE_SUBMITTED_KEY) is None

    def test_timeout_is_failure(self, memory_store):
        http = FakeHttpSession(exc=requests.Timeout("slow"))
        controller = _fill(_controller(memory_store, http=http))

        assert controller.submit().status == SubmitStatus.FAILED

    def test_non_json_success_body_is_failure(self, memory_store):
        http = FakeHttpSession(FakeResponse(200, None, text="<html>"))
        controller = _fill(_controller(memory_store, http=http))

        state = controller.submit()

        assert state.status == SubmitStatus.FAILED
        assert memory_store.get(PROFILE_SUBMITTED_KEY) is None

    def test_token_failure_is_failure_without_request(self, memory_store):
        http = FakeHttpSession()
        controller = _fill(_controller(memory_store, http=http, token=None))
        before = controller.state.form

        state = controller.submit()

        assert http.calls == []
        assert state.status == SubmitStatus.FAILED
        assert state.toast == FAILURE_TOAST
        assert state.form == before

    def test_unexpected_token_error_is_failure(self, memory_store):
        class BrokenIdentity:
            def is_authenticated(self):
                return True

            def get_token(self):
                raise KeyError("session expired")

        http = FakeHttpSession()
        controller = _fill(ProfileFormController(memory_store, BrokenIdentity(), http=http))

        state = controller.submit()

        assert http.calls == []
        assert state.status == SubmitStatus.FAILED

    def test_resubmit_after_failure(self, memory_store):
        http = FakeHttpSession(FakeResponse(503, {"error": "busy"}))
        controller = _fill(_controller(memory_store, http=http))
        assert controller.submit().status == SubmitStatus.FAILED

        http.response = FakeResponse(201, {"id": 7})
        state = controller.submit()

        assert len(http.calls) == 2
        assert state.status == SubmitStatus.SUBMITTED

    def test_store_write_error_after_success_still_completes(self):
        class DiskFullStore(MemorySessionStore):
            def set(self, key, value):
                raise OSError("disk full")

        http = FakeHttpSession(FakeResponse(200, {"ok": True}))
        controller = _fill(_controller(DiskFullStore(), http=http))

        state = controller.submit()

        assert len(http.calls) == 1
        assert state.status == SubmitStatus.SUBMITTED
        assert state.toast == SUCCESS_TOAST
        assert not controller.is_submission_in_flight()


class TestLifecycle:

    def test_submitted_flag_at_mount_shows_confirmation(self, memory_store):
        memory_store.set(PROFILE_SUBMITTED_KEY, "true")

        state = initial_submission(memory_store)

        assert state.status == SubmitStatus.SUBMITTED
        assert state.show_confirmation
        assert not state.show_form

    def test_other_flag_values_do_not_count(self, memory_store):
        memory_store.set(PROFILE_SUBMITTED_KEY, "false")
        assert initial_submission(memory_store).show_form

    def test_submit_after_submitted_does_nothing(self, memory_store):
        memory_store.set(PROFILE_SUBMITTED_KEY, "true")
        http = FakeHttpSession()
        controller = _controller(memory_store, http=http)

        controller.submit()

        assert http.calls == []

    def test_reentrant_submit_is_rejected(self, memory_store):
        http = FakeHttpSession()
        now = 1000.0
        in_flight = ProfileSubmission(
            form=ProfileFormState(name="Ada", college="MIT", interests="AI").with_skills(["Go"]),
            status=SubmitStatus.SUBMITTING,
            submitting_since=now,
        )
        controller = _controller(memory_store, http=http, state=in_flight, clock=lambda: now + 1)

        state = controller.submit()

        assert http.calls == []
        assert state.notice == IN_FLIGHT_NOTICE
        assert state.status == SubmitStatus.SUBMITTING

    def test_stale_submitting_state_allows_submit(self, memory_store):
        http = FakeHttpSession()
        stale = ProfileSubmission(
            form=ProfileFormState(name="Ada", college="MIT", interests="AI").with_skills(["Go"]),
            status=SubmitStatus.SUBMITTING,
            submitting_since=0.0,
        )
        controller = _controller(memory_store, http=http, state=stale, clock=lambda: 10_000.0)

        assert controller.submit().status == SubmitStatus.SUBMITTED
        assert len(http.calls) == 1

    def test_submitting_state_is_published_before_request(self, memory_store):
        seen = []

        class RecordingSession(FakeHttpSession):
            def post(self, url, **kwargs):
                seen.append(statuses[-1])
                return super().post(url, **kwargs)

        statuses = []
        controller = _fill(
            _controller(
                memory_store,
                http=RecordingSession(),
                on_state_change=lambda s: statuses.append(s.status),
            )
        )

        controller.submit()

        assert seen == [SubmitStatus.SUBMITTING]
        assert statuses[-1] == SubmitStatus.SUBMITTED

    def test_edit_profile_navigates_to_edit_route(self, memory_store):
        visited = []
        controller = _controller(memory_store, navigate=visited.append)

        controller.edit_profile()

        assert visited == [EDIT_PROFILE_PATH]

    def test_clear_toast(self, memory_store):
        controller = _fill(_controller(memory_store))
        controller.submit()
        assert controller.state.toast is not None
        assert controller.clear_toast().toast is None


def test_multipart_fields_encode_skills_as_json():
    form = ProfileFormState(name="Ada").with_skills(["Go", {"label": "C++", "value": "cpp"}])
    fields = build_multipart_fields(form)
    assert set(fields) == {"name", "email", "college", "interests", "skills"}
    assert json.loads(fields["skills"][1]) == [
        {"label": "Go", "value": "Go"},
        {"label": "C++", "value": "cpp"},
    ]


def test_token_acquisition_failed_is_submission_failure():
    from errors import SubmissionFailed

    assert issubclass(TokenAcquisitionFailed, SubmissionFailed)
