"""
Theme store: 현재 디자이너 테마, 다크모드, 로딩 플래그.

불변식:
- current_theme 은 None 이거나 허용된 디자이너 key 중 하나
- 저장소는 프로세스 메모리에만 존재 (세션 범위, 영속성 없음)
"""

import threading
import uuid
from collections import OrderedDict
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from src.domain.errors import ErrorCodes, SiteError
from src.domain.schemas import DesignerTheme


@dataclass
class ThemeState:
    """ThemeStore 스냅샷."""
    current_theme: str | None = None
    is_dark_mode: bool = True
    is_loading: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "current_theme": self.current_theme,
            "is_dark_mode": self.is_dark_mode,
            "is_loading": self.is_loading,
        }


class ThemeStore:
    """
    테마 상태 저장소.

    Usage:
        store = ThemeStore(catalog.theme_map())
        store.set_theme("kimbomin")
        store.toggle_dark_mode()
    """

    def __init__(self, themes: dict[str, DesignerTheme]) -> None:
        self._themes = dict(themes)
        self._state = ThemeState()

    @property
    def current_theme(self) -> str | None:
        return self._state.current_theme

    @property
    def is_dark_mode(self) -> bool:
        return self._state.is_dark_mode

    @property
    def is_loading(self) -> bool:
        return self._state.is_loading

    @property
    def allowed_themes(self) -> Iterable[str]:
        return self._themes.keys()

    def set_theme(self, theme: str | None) -> None:
        """
        현재 테마 설정. None 이면 기본 테마로 초기화.

        Raises:
            SiteError: 알 수 없는 테마 key (INVALID_THEME)
        """
        if theme is not None and theme not in self._themes:
            raise SiteError(
                ErrorCodes.INVALID_THEME,
                f"Unknown theme: {theme}",
                400,
                allowed=sorted(self._themes),
            )
        self._state.current_theme = theme

    def toggle_dark_mode(self) -> bool:
        """다크모드 반전. 변경 후 값 반환."""
        self._state.is_dark_mode = not self._state.is_dark_mode
        return self._state.is_dark_mode

    def set_loading(self, loading: bool) -> None:
        self._state.is_loading = bool(loading)

    def theme_descriptor(self) -> DesignerTheme | None:
        """현재 테마의 디스크립터 (테마 없으면 None)."""
        if self._state.current_theme is None:
            return None
        return self._themes[self._state.current_theme]

    def snapshot(self) -> ThemeState:
        return ThemeState(
            current_theme=self._state.current_theme,
            is_dark_mode=self._state.is_dark_mode,
            is_loading=self._state.is_loading,
        )

    def to_dict(self) -> dict[str, Any]:
        descriptor = self.theme_descriptor()
        return {
            **self._state.to_dict(),
            "theme": descriptor.to_dict() if descriptor else None,
        }


class ThemeStoreRegistry:
    """
    세션 ID → ThemeStore.

    세션 ID 는 서버가 발급한 불투명 문자열 (쿠키로 전달). 발급한 적 없는 ID 는
    받아들이지 않고 새로 발급한다. 서버 재시작 시 모두 사라진다.

    최대 세션 수를 넘으면 가장 오래 사용되지 않은 세션부터 제거 (LRU).
    """

    def __init__(self, themes: dict[str, DesignerTheme], max_sessions: int = 10_000) -> None:
        self._themes = dict(themes)
        self._max_sessions = max_sessions
        self._stores: OrderedDict[str, ThemeStore] = OrderedDict()
        self._lock = threading.Lock()

    @staticmethod
    def new_session_id() -> str:
        return uuid.uuid4().hex

    def get(self, session_id: str | None) -> tuple[str, ThemeStore]:
        """
        세션의 저장소 반환 (없으면 생성).

        Returns:
            (session_id, store) - 새 세션이면 새로 발급된 ID
        """
        with self._lock:
            if session_id and session_id in self._stores:
                self._stores.move_to_end(session_id)
                return session_id, self._stores[session_id]

            if len(self._stores) >= self._max_sessions:
                self._stores.popitem(last=False)

            new_id = self.new_session_id()
            store = ThemeStore(self._themes)
            self._stores[new_id] = store
            return new_id, store

    def peek(self, session_id: str | None) -> ThemeStore | None:
        """기존 세션 저장소 조회 (생성하지 않음)."""
        if not session_id:
            return None
        with self._lock:
            store = self._stores.get(session_id)
            if store is not None:
                self._stores.move_to_end(session_id)
            return store

    def __len__(self) -> int:
        return len(self._stores)
