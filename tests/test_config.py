from __future__ import annotations

import pytest

from vimode import EditorConfig, Mode, create_editor


def test_defaults() -> None:
    config = EditorConfig()

    assert config.tab_width == 4
    assert config.tab_text == "    "
    assert config.initial_mode is Mode.NORMAL
    assert config.history_limit is None


def test_initial_mode_accepts_names() -> None:
    assert EditorConfig(initial_mode="visual_line").initial_mode is Mode.VISUAL_LINE  # type: ignore[arg-type]
    assert EditorConfig(initial_mode="insert").initial_mode is Mode.INSERT  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "kwargs",
    [{"tab_width": 0}, {"history_limit": 0}, {"initial_mode": "command"}],
)
def test_invalid_values_raise(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        EditorConfig(**kwargs)


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VIMODE_TAB_WIDTH", "2")
    monkeypatch.setenv("VIMODE_INITIAL_MODE", "insert")
    monkeypatch.setenv("VIMODE_HISTORY_LIMIT", "50")

    config = EditorConfig.from_env()

    assert config == EditorConfig(
        tab_width=2, initial_mode=Mode.INSERT, history_limit=50
    )


def test_from_env_falls_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("TAB_WIDTH", "INITIAL_MODE", "HISTORY_LIMIT"):
        monkeypatch.delenv(f"VIMODE_{name}", raising=False)

    assert EditorConfig.from_env() == EditorConfig()


def test_controller_uses_config_initial_mode() -> None:
    controller = create_editor("abc", config=EditorConfig(initial_mode=Mode.INSERT))

    assert controller.get_mode() is Mode.INSERT


def test_explicit_initial_mode_wins_over_config() -> None:
    controller = create_editor(
        "abc",
        initial_mode="normal",
        config=EditorConfig(initial_mode=Mode.INSERT),
    )

    assert controller.get_mode() is Mode.NORMAL


def test_initial_cursor_is_clamped() -> None:
    controller = create_editor("ab\ncd", initial_cursor=(9, 9))

    assert controller.get_cursor_position() == (1, 2)
