"""
test_theme.py - 테마 저장소 테스트

DoD:
- set_theme 후 조회하면 같은 값
- 다크모드 두 번 토글하면 원래 값
- 허용되지 않은 테마 key → INVALID_THEME
- 세션별 저장소 분리
"""

import pytest

from src.core.content import ContentCatalog
from src.core.theme import ThemeState, ThemeStore, ThemeStoreRegistry
from src.domain.errors import ErrorCodes, SiteError


@pytest.fixture
def store(catalog: ContentCatalog) -> ThemeStore:
    return ThemeStore(catalog.theme_map())


# =============================================================================
# ThemeStore
# =============================================================================


class TestThemeStoreDefaults:
    """초기 상태 테스트."""

    def test_initial_state(self, store: ThemeStore):
        assert store.current_theme is None
        assert store.is_dark_mode is True
        assert store.is_loading is False

    def test_no_descriptor_without_theme(self, store: ThemeStore):
        assert store.theme_descriptor() is None


class TestSetTheme:
    """set_theme 테스트."""

    @pytest.mark.parametrize(
        "key",
        ["kimbomin", "parkparang", "leetaehyeon", "choieunsol", "hwangjinsu", "kimgyeongsu"],
    )
    def test_set_then_get(self, store: ThemeStore, key: str):
        """설정한 값이 그대로 조회됨."""
        store.set_theme(key)

        assert store.current_theme == key
        assert store.snapshot().current_theme == key

    def test_descriptor_matches_designer(self, store: ThemeStore):
        store.set_theme("kimbomin")

        descriptor = store.theme_descriptor()
        assert descriptor is not None
        assert descriptor.name == "bomin"
        assert descriptor.primary_color == "#FF1493"

    def test_reset_to_none(self, store: ThemeStore):
        store.set_theme("parkparang")
        store.set_theme(None)

        assert store.current_theme is None

    def test_unknown_theme_rejected(self, store: ThemeStore):
        """허용 목록 밖의 key 는 거부, 상태 유지."""
        store.set_theme("choieunsol")

        with pytest.raises(SiteError) as exc_info:
            store.set_theme("nobody")

        assert exc_info.value.code == ErrorCodes.INVALID_THEME
        assert exc_info.value.status_code == 400
        assert store.current_theme == "choieunsol"


class TestToggleDarkMode:
    """toggle_dark_mode 테스트."""

    def test_toggle_flips(self, store: ThemeStore):
        assert store.toggle_dark_mode() is False
        assert store.is_dark_mode is False

    def test_toggle_twice_restores(self, store: ThemeStore):
        original = store.is_dark_mode

        store.toggle_dark_mode()
        store.toggle_dark_mode()

        assert store.is_dark_mode == original


class TestSetLoading:
    """set_loading 테스트."""

    def test_set_loading(self, store: ThemeStore):
        store.set_loading(True)
        assert store.is_loading is True

        store.set_loading(False)
        assert store.is_loading is False


class TestToDict:
    """직렬화 테스트."""

    def test_to_dict_with_theme(self, store: ThemeStore):
        store.set_theme("hwangjinsu")

        data = store.to_dict()

        assert data["current_theme"] == "hwangjinsu"
        assert data["is_dark_mode"] is True
        assert data["theme"]["name"] == "jinsu"

    def test_snapshot_is_copy(self, store: ThemeStore):
        """스냅샷은 이후 변경에 영향받지 않음."""
        snapshot = store.snapshot()
        store.toggle_dark_mode()

        assert snapshot == ThemeState()


# =============================================================================
# ThemeStoreRegistry
# =============================================================================


class TestThemeStoreRegistry:
    """세션 레지스트리 테스트."""

    def test_new_session_issued(self, catalog: ContentCatalog):
        registry = ThemeStoreRegistry(catalog.theme_map())

        session_id, store = registry.get(None)

        assert session_id
        assert isinstance(store, ThemeStore)
        assert len(registry) == 1

    def test_same_session_same_store(self, catalog: ContentCatalog):
        registry = ThemeStoreRegistry(catalog.theme_map())
        session_id, store = registry.get(None)
        store.set_theme("kimbomin")

        again_id, again = registry.get(session_id)

        assert again_id == session_id
        assert again is store
        assert again.current_theme == "kimbomin"

    def test_sessions_isolated(self, catalog: ContentCatalog):
        registry = ThemeStoreRegistry(catalog.theme_map())
        _, first = registry.get(None)
        _, second = registry.get(None)

        first.toggle_dark_mode()

        assert second.is_dark_mode is True

    def test_peek_does_not_create(self, catalog: ContentCatalog):
        registry = ThemeStoreRegistry(catalog.theme_map())

        assert registry.peek("unknown") is None
        assert registry.peek(None) is None
        assert len(registry) == 0

    def test_oldest_session_evicted(self, catalog: ContentCatalog):
        registry = ThemeStoreRegistry(catalog.theme_map(), max_sessions=2)
        first_id, _ = registry.get(None)
        registry.get(None)
        registry.get(None)

        assert len(registry) == 2
        assert registry.peek(first_id) is None

    def test_recently_used_session_survives(self, catalog: ContentCatalog):
        registry = ThemeStoreRegistry(catalog.theme_map(), max_sessions=2)
        first_id, _ = registry.get(None)
        second_id, _ = registry.get(None)
        registry.get(first_id)

        registry.get(None)

        assert registry.peek(first_id) is not None
        assert registry.peek(second_id) is None

    def test_peek_refreshes_session(self, catalog: ContentCatalog):
        registry = ThemeStoreRegistry(catalog.theme_map(), max_sessions=2)
        first_id, _ = registry.get(None)
        second_id, _ = registry.get(None)
        registry.peek(first_id)

        registry.get(None)

        assert registry.peek(first_id) is not None
        assert registry.peek(second_id) is None

    def test_unknown_session_id_replaced(self, catalog: ContentCatalog):
        registry = ThemeStoreRegistry(catalog.theme_map())

        session_id, _ = registry.get("forged-session-id")

        assert session_id != "forged-session-id"
        assert registry.peek("forged-session-id") is None
        assert len(registry) == 1
