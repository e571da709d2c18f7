import asyncio
import json

import httpx
import pytest

from landing_api.client.form_controller import ContactFormController, SUBMIT_LABEL, SUBMITTING_LABEL
from landing_api.main import app
from landing_api.services.contact_service import ContactService, get_contact_service

ENDPOINT = "http://testserver/api/v1/contact"

VALID_FORM = {
    "firstName": "John",
    "lastName": "Doe",
    "email": "john@example.com",
    "message": "Hello there, interested in the data center.",
}


def make_form(handler, toasts):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    form = ContactFormController(ENDPOINT, notify=toasts.append, client=client)
    for field, value in VALID_FORM.items():
        form.set_value(field, value)
    return form


def unreachable(request):
    raise AssertionError("no request expected")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "field,value,error",
    [
        ("firstName", "J", "First name must be at least 2 characters"),
        ("lastName", "D", "Last name must be at least 2 characters"),
        ("email", "john@", "Please enter a valid email address"),
        ("email", "not an email", "Please enter a valid email address"),
        ("email", "John Doe <john@example.com>", "Please enter a valid email address"),
        ("email", " john@example.com ", "Please enter a valid email address"),
        ("message", "Too short", "Message must be at least 10 characters"),
    ],
)
async def test_invalid_fields_block_submission(field, value, error):
    toasts = []
    form = make_form(unreachable, toasts)
    form.set_value(field, value)

    assert await form.submit() is None
    assert form.errors == {field: error}
    assert toasts == []
    assert form.is_submitting is False


@pytest.mark.asyncio
async def test_successful_submit_resets_form():
    toasts = []
    seen = []

    def handler(request):
        seen.append((json.loads(request.content), form.is_submitting, form.submit_label))
        return httpx.Response(200, json={"message": "Email sent successfully", "success": True})

    form = make_form(handler, toasts)
    toast = await form.submit()

    assert seen == [(VALID_FORM, True, SUBMITTING_LABEL)]
    assert toast.kind == "success"
    assert toasts == [toast]
    assert form.values == {"firstName": "", "lastName": "", "email": "", "message": ""}
    assert form.is_submitting is False
    assert form.submit_label == SUBMIT_LABEL


@pytest.mark.asyncio
async def test_server_failure_keeps_values():
    toasts = []

    def handler(request):
        return httpx.Response(500, json={"error": "Failed to send email", "success": False})

    form = make_form(handler, toasts)
    toast = await form.submit()

    assert toast.kind == "error"
    assert toast.title == "Failed to send message"
    assert toast.description == "Failed to send email"
    assert form.values == VALID_FORM
    assert form.is_submitting is False


@pytest.mark.asyncio
async def test_success_false_payload_uses_fallback_message():
    toasts = []

    def handler(request):
        return httpx.Response(200, json={"success": False})

    form = make_form(handler, toasts)
    toast = await form.submit()

    assert toast.kind == "error"
    assert toast.description == "Please try again later."
    assert form.values == VALID_FORM


@pytest.mark.asyncio
async def test_transport_failure_shows_connectivity_toast():
    toasts = []

    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    form = make_form(handler, toasts)
    toast = await form.submit()

    assert toast.title == "Something went wrong"
    assert toast.description == "Please check your connection and try again."
    assert form.values == VALID_FORM
    assert form.is_submitting is False


@pytest.mark.asyncio
async def test_non_json_response_is_treated_as_unreachable():
    toasts = []

    def handler(request):
        return httpx.Response(502, text="<html>Bad Gateway</html>")

    form = make_form(handler, toasts)
    toast = await form.submit()

    assert toast.title == "Something went wrong"
    assert form.is_submitting is False


@pytest.mark.asyncio
async def test_second_submit_ignored_while_first_in_flight():
    toasts = []
    requests = []
    started = asyncio.Event()
    release = asyncio.Event()

    async def handler(request):
        requests.append(request)
        started.set()
        await release.wait()
        return httpx.Response(200, json={"message": "Email sent successfully", "success": True})

    form = make_form(handler, toasts)
    first = asyncio.create_task(form.submit())
    await started.wait()

    assert form.submit_disabled is True
    assert await form.submit() is None

    release.set()
    toast = await first

    assert len(requests) == 1
    assert toast.kind == "success"
    assert toasts == [toast]
    assert form.submit_disabled is False


def test_field_errors_update_on_blur_and_change():
    form = ContactFormController(ENDPOINT)
    form.set_value("firstName", "J")

    assert form.validate_field("firstName") == "First name must be at least 2 characters"
    form.set_value("firstName", "Jo")
    assert "firstName" not in form.errors


def test_unknown_field_is_rejected():
    form = ContactFormController(ENDPOINT)

    with pytest.raises(KeyError):
        form.set_value("company", "Acme")


class RecordingSender:
    def __init__(self):
        self.sent = []

    async def send(self, message):
        self.sent.append(message)


@pytest.mark.asyncio
async def test_submit_end_to_end_against_app():
    sender = RecordingSender()
    app.dependency_overrides[get_contact_service] = lambda: ContactService(
        sender, from_email="site@example.com", to_email="team@example.com"
    )
    toasts = []
    try:
        async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app)) as client:
            form = ContactFormController(ENDPOINT, notify=toasts.append, client=client)
            for field, value in VALID_FORM.items():
                form.set_value(field, value)
            toast = await form.submit()
    finally:
        app.dependency_overrides.clear()

    assert toast.kind == "success"
    assert len(sender.sent) == 1
    assert sender.sent[0].subject == "New contact from John Doe"
