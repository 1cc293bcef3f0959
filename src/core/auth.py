"""
Admin auth: 단일 관리자 계정 + Fernet 토큰.

- 비밀번호: werkzeug 해시 (ADMIN_PASSWORD_HASH)
- 토큰: SECRET_KEY 에서 유도한 Fernet 키로 암호화한 JSON payload
  - access 24시간, refresh 7일 (Fernet ttl 로 만료 검사)
- 서버 세션 없음 → 로그아웃은 클라이언트가 토큰을 버리는 것으로 끝
"""

import base64
import hashlib
import json
import logging
from typing import Any

from cryptography.fernet import Fernet, InvalidToken
from werkzeug.security import check_password_hash

from src.core.config import AdminSettings
from src.domain.constants import (
    ACCESS_TOKEN_TTL_SECONDS,
    REFRESH_TOKEN_TTL_SECONDS,
    TOKEN_TYPE_ACCESS,
    TOKEN_TYPE_REFRESH,
)
from src.domain.errors import ErrorCodes, SiteError
from src.domain.schemas import AdminUser, TokenPair

logger = logging.getLogger(__name__)

ADMIN_USER_ID = "1"


def _derive_fernet_key(secret: str) -> bytes:
    digest = hashlib.sha256(secret.encode("utf-8")).digest()
    return base64.urlsafe_b64encode(digest)


class AdminAuth:
    """
    관리자 인증.

    Usage:
        auth = AdminAuth(settings.admin, settings.secret_key)
        pair = auth.login("admin", "password")
        user = auth.verify_access_token(pair.token)
    """

    def __init__(self, admin: AdminSettings, secret_key: str | None) -> None:
        self.admin = admin
        self._fernet = Fernet(_derive_fernet_key(secret_key)) if secret_key else None

    @property
    def user(self) -> AdminUser:
        return AdminUser(
            id=ADMIN_USER_ID,
            email=self.admin.email,
            name=self.admin.name,
        )

    def _require_fernet(self) -> Fernet:
        if self._fernet is None or not self.admin.password_hash:
            raise SiteError(
                ErrorCodes.AUTH_NOT_CONFIGURED,
                "Admin authentication is not configured",
                500,
            )
        return self._fernet

    # -------------------------------------------------------------------------
    # Tokens
    # -------------------------------------------------------------------------

    def _issue(self, token_type: str) -> str:
        payload = {"sub": ADMIN_USER_ID, "role": "admin", "type": token_type}
        return self._require_fernet().encrypt(json.dumps(payload).encode()).decode()

    def _decode(self, token: str, token_type: str, ttl: int) -> dict[str, Any] | None:
        fernet = self._require_fernet()
        try:
            raw = fernet.decrypt(token.encode(), ttl=ttl)
            payload: dict[str, Any] = json.loads(raw)
        except (InvalidToken, ValueError):
            return None
        if payload.get("type") != token_type or payload.get("sub") != ADMIN_USER_ID:
            return None
        return payload

    def issue_tokens(self) -> TokenPair:
        return TokenPair(
            user=self.user,
            token=self._issue(TOKEN_TYPE_ACCESS),
            refresh_token=self._issue(TOKEN_TYPE_REFRESH),
        )

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def login(self, username: str, password: str) -> TokenPair:
        """
        자격 증명 확인 후 토큰 발급.

        Raises:
            SiteError: 잘못된 사용자명/비밀번호 (401 INVALID_CREDENTIALS)
        """
        self._require_fernet()
        if username != self.admin.username or not check_password_hash(
            self.admin.password_hash or "", password
        ):
            logger.warning(f"Failed admin login attempt for username={username!r}")
            raise SiteError(
                ErrorCodes.INVALID_CREDENTIALS,
                "Invalid username or password",
                401,
            )
        logger.info("Admin logged in")
        return self.issue_tokens()

    def verify_access_token(self, token: str) -> AdminUser:
        """
        Raises:
            SiteError: 토큰 없음/만료/위조 (401 UNAUTHORIZED)
        """
        if not token or self._decode(token, TOKEN_TYPE_ACCESS, ACCESS_TOKEN_TTL_SECONDS) is None:
            raise SiteError(ErrorCodes.UNAUTHORIZED, "Authentication required", 401)
        return self.user

    def refresh(self, refresh_token: str) -> TokenPair:
        """
        Raises:
            SiteError: refresh 토큰 만료/위조 (401 TOKEN_INVALID)
        """
        if self._decode(refresh_token, TOKEN_TYPE_REFRESH, REFRESH_TOKEN_TTL_SECONDS) is None:
            raise SiteError(
                ErrorCodes.TOKEN_INVALID,
                "Invalid or expired refresh token",
                401,
            )
        return self.issue_tokens()
