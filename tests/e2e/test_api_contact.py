"""
test_api_contact.py - Contact API E2E 테스트

엔드포인트:
- POST /api/contact (JSON 본문, HTMX 폼 본문)
"""

from fastapi.testclient import TestClient

from src.app.routes.contact import SUCCESS_MESSAGE

CONTACT_BODY = {
    "name": "Kim",
    "email": "kim@example.com",
    "subject": "Collaboration",
    "message": "Hello REDUX",
}


class TestContactApi:
    """전체 앱 위에서 문의 제출 테스트."""

    def test_json_submission(self, client: TestClient):
        response = client.post("/api/contact", json=CONTACT_BODY)

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": SUCCESS_MESSAGE}

    def test_json_invalid_email(self, client: TestClient):
        response = client.post("/api/contact", json={**CONTACT_BODY, "email": "kim@"})

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid email address"}

    def test_htmx_form_submission(self, client: TestClient):
        response = client.post(
            "/api/contact",
            data=CONTACT_BODY,
            headers={"HX-Request": "true"},
        )

        assert response.status_code == 200
        assert "form-success" in response.text
