"""
Тести для HTTP клієнта Web UI

requests підмінено через monkeypatch, сервер не потрібен.
"""

import pytest
import requests

from medflow.web_ui import client as client_module
from medflow.web_ui.client import APIError, MedFlowClient


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON")
        return self._payload


class _Calls(list):
    pass


@pytest.fixture
def api(monkeypatch):
    recorded = _Calls()
    recorded.responses = []

    def fake_request(method, url, timeout=None, **kwargs):
        recorded.append((method, url, kwargs))
        if recorded.responses:
            return recorded.responses.pop(0)
        return FakeResponse(payload={})

    monkeypatch.setattr(client_module.requests, "request", fake_request)
    return recorded


def test_add_symptom_payload(api):
    client = MedFlowClient("http://api.test/")
    api.responses.append(FakeResponse(payload={"session_id": "abc"}))

    state = client.add_symptom("abc", "Headache", "3 days", severity=6)

    assert state == {"session_id": "abc"}
    method, url, kwargs = api[0]
    assert method == "POST"
    assert url == "http://api.test/api/sessions/abc/symptoms"
    assert kwargs["json"] == {
        "name": "Headache",
        "duration": "3 days",
        "severity": 6,
        "description": "",
    }


def test_stage_endpoints(api):
    client = MedFlowClient("http://api.test")

    client.submit_patient("s1", "Asthma")
    client.run_analysis("s1")
    client.run_knowledge("s1")
    client.select_specialist("s1", "cardiologist")
    client.consult("s1")
    client.advance("s1")
    client.reset("s1")

    assert [(m, u.replace("http://api.test", "")) for m, u, _ in api] == [
        ("POST", "/api/sessions/s1/patient/submit"),
        ("POST", "/api/sessions/s1/analysis"),
        ("POST", "/api/sessions/s1/knowledge"),
        ("POST", "/api/sessions/s1/specialist/select"),
        ("POST", "/api/sessions/s1/specialist/consult"),
        ("POST", "/api/sessions/s1/advance"),
        ("POST", "/api/sessions/s1/reset"),
    ]
    assert api[0][2]["json"] == {"medical_history": "Asthma"}
    assert api[3][2]["json"] == {"specialist": "cardiologist"}


def test_error_detail(api):
    client = MedFlowClient("http://api.test")
    api.responses.append(FakeResponse(400, {"detail": "Please enter your age"}))

    with pytest.raises(APIError) as exc_info:
        client.submit_patient("s1")

    assert exc_info.value.status_code == 400
    assert exc_info.value.detail == "Please enter your age"


def test_error_without_json(api):
    client = MedFlowClient("http://api.test")
    api.responses.append(FakeResponse(502, None, text="Bad Gateway"))

    with pytest.raises(APIError, match="Bad Gateway"):
        client.health()


def test_is_online(api, monkeypatch):
    client = MedFlowClient("http://api.test")
    api.responses.append(FakeResponse(payload={"status": "ok"}))
    assert client.is_online()

    def refuse(*args, **kwargs):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(client_module.requests, "request", refuse)
    assert not client.is_online()


def test_added_symptom_message():
    """Після додавання симптому показується його назва в тому вигляді, як зберіг сервер"""
    from medflow.web_ui.app import added_symptom_message

    state = {
        "patient_info": {
            "current_symptoms": [
                {"name": "Fever"},
                {"name": "Rash"},
            ]
        }
    }

    assert added_symptom_message(state) == "Added symptom: Rash"
