"""
Sign-in and sign-up form controllers.

Why:
- Invalid input never triggers a request.
- Failures keep the typed values and show one general error.
- A successful sign-up clears the form, shows the success notice and only
  then hands over to sign-in.
"""

from __future__ import annotations

import anyio
import pytest

from app.auth import SignInForm, SignUpForm
from app.auth.base_form import NETWORK_ERROR_MESSAGE
from app.auth.sign_up_form import SIGN_UP_SUCCESS_MESSAGE, SUCCESS_REDIRECT_DELAY
from app.services.auth_api import ApiResponse, NetworkError
from app.state.forms import ValidationFailed


def _filled_sign_up(form: SignUpForm) -> SignUpForm:
    form.change("first_name", "John")
    form.change("last_name", "Doe")
    form.change("email", "john@example.com")
    form.change("password", "password123")
    form.change("confirm_password", "password123")
    form.change("user_type", "student")
    return form


def _filled_sign_in(form: SignInForm) -> SignInForm:
    form.change("email", "john@example.com")
    form.change("password", "password123")
    return form


# --- Sign up -------------------------------------------------------------------


@pytest.mark.anyio
async def test_sign_up_invalid_input_sends_nothing(fake_api, no_sleep):
    redirected = []
    form = SignUpForm(fake_api, on_sign_up_success=lambda: redirected.append(True), sleep=no_sleep)
    form.change("email", "not-an-email")

    result = await form.submit()

    assert result.ok is False
    assert fake_api.sign_up_calls == []
    assert form.state.error("email") == "Please enter a valid email address"
    assert form.state.error("first_name") == "First name is required"
    assert form.state.is_loading is False
    assert redirected == []


@pytest.mark.anyio
async def test_sign_up_success_clears_form_then_redirects_after_delay(fake_api):
    events = []

    async def sleep(seconds: float) -> None:
        # The notice is visible and the form already empty while waiting
        assert form.state.success_message == SIGN_UP_SUCCESS_MESSAGE
        assert all(v == "" for v in form.state.values.values())
        events.append(("sleep", seconds))

    form = _filled_sign_up(
        SignUpForm(fake_api, on_sign_up_success=lambda: events.append("redirect"), sleep=sleep)
    )

    result = await form.submit()

    assert result.ok is True
    assert events == [("sleep", SUCCESS_REDIRECT_DELAY), "redirect"]
    assert fake_api.sign_up_calls == [
        {
            "first_name": "John",
            "last_name": "Doe",
            "email": "john@example.com",
            "password": "password123",
            "user_type": "student",
        }
    ]
    assert form.state.is_loading is False
    assert form.state.general_error == ""


@pytest.mark.anyio
async def test_sign_up_server_error_keeps_values(fake_api, no_sleep):
    fake_api.sign_up_response = ApiResponse(400, {"error": "User already registered"})
    redirected = []
    form = _filled_sign_up(
        SignUpForm(fake_api, on_sign_up_success=lambda: redirected.append(True), sleep=no_sleep)
    )

    result = await form.submit()

    assert result.ok is False
    assert dict(result.errors) == {"general": "User already registered"}
    assert form.state.value("email") == "john@example.com"
    assert form.state.value("password") == "password123"
    assert form.state.is_loading is False
    assert form.state.success_message == ""
    assert redirected == []
    assert no_sleep.delays == []


@pytest.mark.anyio
async def test_sign_up_error_without_message_uses_fallback(fake_api, no_sleep):
    fake_api.sign_up_response = ApiResponse(500, {})
    form = _filled_sign_up(SignUpForm(fake_api, on_sign_up_success=lambda: None, sleep=no_sleep))

    await form.submit()

    assert form.state.general_error == "Failed to create account"


@pytest.mark.anyio
async def test_sign_up_network_failure_shows_network_message(fake_api, no_sleep):
    fake_api.sign_up_response = NetworkError("signup: ConnectError")
    form = _filled_sign_up(SignUpForm(fake_api, on_sign_up_success=lambda: None, sleep=no_sleep))

    await form.submit()

    assert form.state.general_error == NETWORK_ERROR_MESSAGE
    assert form.state.is_loading is False


def test_toggle_visibility_only_for_password_fields(fake_api):
    form = SignUpForm(fake_api, on_sign_up_success=lambda: None)

    form.toggle_password_visibility("confirm_password")

    assert form.state.revealed_passwords == frozenset({"confirm_password"})
    with pytest.raises(KeyError):
        form.toggle_password_visibility("email")


def test_typing_clears_field_error(fake_api):
    form = SignUpForm(fake_api, on_sign_up_success=lambda: None)
    form.dispatch(ValidationFailed({"email": "Email is required", "password": "Password is required"}))

    form.change("email", "j")

    assert form.state.error("email") == ""
    assert form.state.error("password") == "Password is required"


# --- Sign in -------------------------------------------------------------------


@pytest.mark.anyio
async def test_sign_in_success_hands_over_user_object_verbatim(fake_api):
    received = []
    form = _filled_sign_in(SignInForm(fake_api, on_sign_in_success=received.append))

    result = await form.submit()

    assert result.ok is True
    assert len(received) == 1
    assert received[0] is fake_api.sign_in_response.data["user"]
    assert fake_api.sign_in_calls == [{"email": "john@example.com", "password": "password123"}]


@pytest.mark.anyio
async def test_sign_in_failure_keeps_values_and_shows_error(fake_api):
    fake_api.sign_in_response = ApiResponse(400, {"error": "Invalid login credentials"})
    received = []
    form = _filled_sign_in(SignInForm(fake_api, on_sign_in_success=received.append))

    result = await form.submit()

    assert result.ok is False
    assert form.state.general_error == "Invalid login credentials"
    assert form.state.value("email") == "john@example.com"
    assert form.state.value("password") == "password123"
    assert received == []


@pytest.mark.anyio
async def test_sign_in_error_without_message_uses_fallback(fake_api):
    fake_api.sign_in_response = ApiResponse(500, {"message": "boom"})
    form = _filled_sign_in(SignInForm(fake_api, on_sign_in_success=lambda user: None))

    await form.submit()

    assert form.state.general_error == "Failed to sign in"


@pytest.mark.anyio
async def test_sign_in_invalid_input_sends_nothing(fake_api):
    form = SignInForm(fake_api, on_sign_in_success=lambda user: None)

    result = await form.submit()

    assert result.ok is False
    assert dict(result.errors) == {"email": "Email is required", "password": "Password is required"}
    assert fake_api.sign_in_calls == []


class BlockingApi:
    """Sign-in API that waits until the test releases it."""

    def __init__(self) -> None:
        self.calls = 0
        self.started = anyio.Event()
        self.release = anyio.Event()

    async def sign_in(self, **kwargs: str) -> ApiResponse:
        self.calls += 1
        self.started.set()
        await self.release.wait()
        return ApiResponse(200, {"user": {"id": "u-1"}})


@pytest.mark.anyio
async def test_second_submit_while_in_flight_is_ignored():
    api = BlockingApi()
    form = _filled_sign_in(SignInForm(api, on_sign_in_success=lambda user: None))

    async with anyio.create_task_group() as tg:
        tg.start_soon(form.submit)
        await api.started.wait()
        assert form.state.is_loading is True

        second = await form.submit()
        api.release.set()

    assert second.ok is False
    assert dict(second.errors) == {}
    assert api.calls == 1
    assert form.state.is_loading is False


def test_switch_callbacks(fake_api):
    calls = []
    sign_in = SignInForm(fake_api, on_sign_in_success=lambda user: None, on_switch_to_sign_up=lambda: calls.append("up"))
    sign_up = SignUpForm(fake_api, on_sign_up_success=lambda: None, on_switch_to_sign_in=lambda: calls.append("in"))

    sign_in.switch_to_sign_up()
    sign_up.switch_to_sign_in()

    assert calls == ["up", "in"]


@pytest.mark.anyio
@pytest.mark.parametrize(
    "field,value,expected",
    [
        ("password", "short12", "Password must be at least 8 characters"),
        ("confirm_password", "password124", "Passwords do not match"),
    ],
)
async def test_sign_up_password_rules_block_request(fake_api, no_sleep, field, value, expected):
    form = _filled_sign_up(SignUpForm(fake_api, on_sign_up_success=lambda: None, sleep=no_sleep))
    form.change(field, value)
    if field == "password":
        form.change("confirm_password", value)

    result = await form.submit()

    assert result.ok is False
    assert fake_api.sign_up_calls == []
    assert form.state.error(field) == expected
    assert form.state.is_loading is False


@pytest.mark.anyio
@pytest.mark.parametrize("user", [None, "u-1", ["u-1"]])
async def test_sign_in_without_user_object_fails(fake_api, user):
    fake_api.sign_in_response = ApiResponse(200, {"message": "Signed in successfully", "user": user})
    received = []
    form = _filled_sign_in(SignInForm(fake_api, on_sign_in_success=received.append))

    result = await form.submit()

    assert result.ok is False
    assert received == []
    assert form.state.general_error == "Failed to sign in"
    assert form.state.is_loading is False
    assert form.state.value("email") == "john@example.com"
