"""
Contact Routes: 문의 폼.

- GET /api/contact → 사용 안내
- POST /api/contact → JSON 또는 폼 제출 (필드 검증 후 로그 기록)

본문은 JSON 또는 폼(HTMX). HTMX 요청(HX-Request 헤더)이면 HTML 조각,
아니면 JSON 으로 응답.
"""

import html
import logging
import re
from datetime import UTC, datetime

from fastapi import APIRouter, Header, Request
from fastapi.responses import HTMLResponse, JSONResponse, Response

from src.domain.schemas import ContactSubmission

logger = logging.getLogger(__name__)

api_router = APIRouter()

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

SUCCESS_MESSAGE = "Thank you for your message! We'll get back to you soon."

SERVER_ERROR_MESSAGE = "Internal server error. Please try again later."

CONTACT_FIELDS = ("name", "email", "subject", "message")


def _client_ip(request: Request) -> str:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.headers.get("x-real-ip") or (
        request.client.host if request.client else "unknown"
    )


def validate_contact(name: str, email: str, subject: str, message: str) -> str | None:
    """
    문의 폼 검증.

    Returns:
        에러 메시지 (정상이면 None)
    """
    if not all(value.strip() for value in (name, email, subject, message)):
        return "All fields are required"
    if not EMAIL_PATTERN.match(email.strip()):
        return "Invalid email address"
    return None


def _respond(
    is_htmx: bool,
    status_code: int,
    message: str,
    success: bool,
) -> Response:
    if is_htmx:
        css_class = "form-success" if success else "form-error"
        return HTMLResponse(
            f"<p class='{css_class}'>{html.escape(message)}</p>",
            status_code=status_code,
        )
    if success:
        return JSONResponse({"success": True, "message": message}, status_code=status_code)
    return JSONResponse({"error": message}, status_code=status_code)


@api_router.get("")
async def contact_info() -> dict[str, str]:
    """사용 안내."""
    return {"message": "Contact form endpoint. Use POST to submit."}


async def _read_fields(request: Request) -> dict[str, str]:
    """
    JSON 또는 폼 본문에서 문의 필드 추출.

    Raises:
        ValueError: JSON 파싱 실패 또는 객체가 아닌 JSON
    """
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        payload = await request.json()
        if not isinstance(payload, dict):
            raise ValueError("Contact body must be a JSON object")
    else:
        payload = await request.form()

    fields = {}
    for key in CONTACT_FIELDS:
        value = payload.get(key)
        fields[key] = value if isinstance(value, str) else ""
    return fields


@api_router.post("")
async def submit_contact(
    request: Request,
    hx_request: str | None = Header(None),
) -> Response:
    """문의 제출. 현재는 로그로만 기록 (메일 발송 없음)."""
    is_htmx = hx_request is not None

    try:
        fields = await _read_fields(request)
    except ValueError as e:
        logger.error(f"Contact form error: {e}")
        return _respond(is_htmx, 500, SERVER_ERROR_MESSAGE, success=False)

    name = fields["name"]
    email = fields["email"]
    subject = fields["subject"]
    message = fields["message"]

    error = validate_contact(name, email, subject, message)
    if error:
        return _respond(is_htmx, 400, error, success=False)

    submission = ContactSubmission(
        name=name.strip(),
        email=email.strip(),
        subject=subject.strip(),
        message=message.strip(),
        submitted_at=datetime.now(UTC).isoformat(),
        ip=_client_ip(request),
    )
    logger.info(
        f"Contact form submission: name={submission.name!r} "
        f"email={submission.email!r} subject={submission.subject!r} "
        f"ip={submission.ip} at={submission.submitted_at}"
    )

    return _respond(is_htmx, 200, SUCCESS_MESSAGE, success=True)
