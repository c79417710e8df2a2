"""
MedFlow — HTTP клієнт для Web UI

Тонка обгортка над requests для endpoints /api/sessions.
Помилки API перетворюються на APIError з текстом з поля "detail".
"""

import os
from typing import Any, Dict, List, Optional

import requests

API_URL = os.getenv("MEDFLOW_API_URL", "http://localhost:8000")


class APIError(Exception):
    """Відповідь API з кодом помилки"""

    def __init__(self, status_code: int, detail: str):
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail


class MedFlowClient:
    """
    Клієнт API воркфлоу.

    Приклад:
        client = MedFlowClient()
        state = client.create_session()
        client.add_symptom(state["session_id"], "Headache", "3 days", severity=6)
    """

    def __init__(self, base_url: str = API_URL, timeout: float = 30.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _request(self, method: str, path: str, **kwargs) -> Any:
        response = requests.request(
            method, f"{self.base_url}{path}", timeout=self.timeout, **kwargs
        )

        if response.status_code >= 400:
            try:
                detail = response.json().get("detail") or response.text
            except ValueError:
                detail = response.text
            raise APIError(response.status_code, str(detail))

        return response.json()

    def _session(self, method: str, session_id: str, suffix: str = "", **kwargs) -> Any:
        return self._request(method, f"/api/sessions/{session_id}{suffix}", **kwargs)

    # ---------- Довідники ----------

    def is_online(self) -> bool:
        try:
            self._request("GET", "/health")
        except (requests.RequestException, APIError):
            return False
        return True

    def health(self) -> Dict[str, Any]:
        return self._request("GET", "/health")

    def specialists(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/specialists")["specialists"]

    def common_symptoms(self) -> List[str]:
        return self._request("GET", "/api/symptoms/common")

    # ---------- Сесія ----------

    def create_session(self) -> Dict[str, Any]:
        return self._request("POST", "/api/sessions")

    def get_session(self, session_id: str) -> Dict[str, Any]:
        return self._session("GET", session_id)

    def delete_session(self, session_id: str) -> None:
        self._session("DELETE", session_id)

    def update_patient(self, session_id: str, **fields) -> Dict[str, Any]:
        return self._session("PATCH", session_id, "/patient", json=fields)

    def add_symptom(
        self,
        session_id: str,
        name: str,
        duration: str,
        severity: int = 5,
        description: str = "",
    ) -> Dict[str, Any]:
        payload = {
            "name": name,
            "duration": duration,
            "severity": severity,
            "description": description,
        }
        return self._session("POST", session_id, "/symptoms", json=payload)

    def remove_symptom(self, session_id: str, symptom_id: str) -> Dict[str, Any]:
        return self._session("DELETE", session_id, f"/symptoms/{symptom_id}")

    def submit_patient(self, session_id: str, medical_history: str = "") -> Dict[str, Any]:
        return self._session(
            "POST", session_id, "/patient/submit",
            json={"medical_history": medical_history},
        )

    # ---------- Етапи ----------

    def run_analysis(self, session_id: str) -> Dict[str, Any]:
        return self._session("POST", session_id, "/analysis")

    def run_knowledge(self, session_id: str) -> Dict[str, Any]:
        return self._session("POST", session_id, "/knowledge")

    def select_specialist(self, session_id: str, specialist: str) -> Dict[str, Any]:
        return self._session(
            "POST", session_id, "/specialist/select", json={"specialist": specialist}
        )

    def consult(self, session_id: str) -> Dict[str, Any]:
        return self._session("POST", session_id, "/specialist/consult")

    def advance(self, session_id: str) -> Dict[str, Any]:
        return self._session("POST", session_id, "/advance")

    def summary(self, session_id: str) -> Dict[str, Any]:
        return self._session("GET", session_id, "/summary")

    def reset(self, session_id: str) -> Optional[Dict[str, Any]]:
        return self._session("POST", session_id, "/reset")
