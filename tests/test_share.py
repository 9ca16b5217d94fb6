from unittest.mock import AsyncMock, patch

import pytest

from notes_summarizer.routers.email import normalize_recipients


ACK = {"messageId": "<202610191200.1234@smtp-relay.mailin.fr>"}


def test_share(client, provider):
    provider.respond(201, json=ACK)
    response = client.post(
        "/share", json={"recipients": ["a@x.com", "b@x.com"], "content": "Summary"}
    )
    assert response.status_code == 200
    assert response.json() == {"message": "Email sent successfully", "brevo": ACK}

    request = provider.requests[0]
    assert request.headers["api-key"] == "xkeysib-test"
    assert request.headers["accept"] == "application/json"
    assert provider.last_json() == {
        "sender": {"name": "AI Notes Summarizer", "email": "notes@example.com"},
        "to": [{"email": "a@x.com"}, {"email": "b@x.com"}],
        "subject": "Meeting Summary",
        "textContent": "Summary",
    }


def test_share_comma_separated_recipients(client):
    with patch(
        "notes_summarizer.routers.email.send_email", new=AsyncMock(return_value=ACK)
    ) as send:
        response = client.post("/share", json={"recipients": "a@x.com, b@x.com"})
    assert response.status_code == 200
    args = send.await_args.args
    assert args == (["a@x.com", "b@x.com"], "Meeting Summary", "")


def test_share_missing_recipients(client, provider):
    for body in [{}, {"recipients": None}, {"recipients": ""}]:
        response = client.post("/share", json=body)
        assert response.status_code == 400
        assert response.json() == {"error": "No recipients provided"}
    assert provider.requests == []


@pytest.mark.parametrize("recipients", [[], " , ,", ","])
def test_share_empty_recipient_list(client, provider, recipients):
    response = client.post("/share", json={"recipients": recipients, "content": "x"})
    assert response.status_code == 400
    assert response.json() == {"error": "Recipients must be a non-empty list"}
    assert provider.requests == []


def test_share_provider_error(client, provider):
    provider.respond(400, text='{"code":"invalid_parameter","message":"email is not valid"}')
    response = client.post("/share", json={"recipients": "not-an-email"})
    assert response.status_code == 500
    assert response.json() == {
        "error": "Email failed",
        "details": 'Brevo API error: 400 {"code":"invalid_parameter","message":"email is not valid"}',
    }


def test_share_adapter_failure_details(client):
    with patch(
        "notes_summarizer.routers.email.send_email",
        new=AsyncMock(side_effect=RuntimeError("relay down")),
    ):
        response = client.post("/share", json={"recipients": "a@x.com"})
    assert response.status_code == 500
    assert response.json() == {"error": "Email failed", "details": "relay down"}


def test_share_missing_sender(client, provider, settings):
    from notes_summarizer.main import app
    from notes_summarizer.utils.config import get_settings

    app.dependency_overrides[get_settings] = lambda: settings.model_copy(
        update={"brevo_sender_email": ""}
    )
    response = client.post("/share", json={"recipients": "a@x.com"})
    assert response.status_code == 500
    assert response.json() == {
        "error": "Email failed",
        "details": "BREVO_SENDER_EMAIL missing (must be a verified sender in Brevo)",
    }
    assert provider.requests == []


def test_normalize_recipients():
    assert normalize_recipients("a@x.com, b@x.com") == ["a@x.com", "b@x.com"]
    assert normalize_recipients(" a@x.com ,, b@x.com , ") == ["a@x.com", "b@x.com"]
    assert normalize_recipients("b@x.com,a@x.com,b@x.com") == [
        "b@x.com",
        "a@x.com",
        "b@x.com",
    ]
    assert normalize_recipients(["a@x.com"]) == ["a@x.com"]
    assert normalize_recipients("") == []


def test_share_empty_body(client, provider):
    response = client.post("/share")
    assert response.status_code == 400
    assert response.json() == {"error": "No recipients provided"}
    assert provider.requests == []


@pytest.mark.parametrize("recipients", [False, 0])
def test_share_falsy_recipients(client, provider, recipients):
    response = client.post("/share", json={"recipients": recipients})
    assert response.status_code == 400
    assert response.json() == {"error": "No recipients provided"}
    assert provider.requests == []


@pytest.mark.parametrize("recipients", [5, True, {"email": "a@x.com"}, {}, [1, 2]])
def test_share_recipients_not_a_list(client, provider, recipients):
    response = client.post("/share", json={"recipients": recipients})
    assert response.status_code == 400
    assert response.json() == {"error": "Recipients must be a non-empty list"}
    assert provider.requests == []
