"""Tests for configuration models."""

from pathlib import Path
from textwrap import dedent

import pytest

from session_picker.config import PickerConfig, config_search_paths


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SESSION_PICKER_SHOW_PLUGINS", raising=False)
    monkeypatch.delenv("SESSION_PICKER_TMUX_SOCKET", raising=False)


class TestPickerConfig:
    """Tests for PickerConfig."""

    def test_default_values(self) -> None:
        """Should have sensible defaults."""
        config = PickerConfig()

        assert config.show_plugins is False
        assert config.reserved_rows == 3
        assert config.tmux_binary == "tmux"
        assert config.tmux_socket is None
        assert config.keybindings == {}
        assert config.log_level == "WARNING"
        assert config.log_file is None

    def test_from_dict_basic(self) -> None:
        data = {
            "show_plugins": True,
            "reserved_rows": 1,
            "tmux_socket": "work",
        }

        config = PickerConfig.from_dict(data)

        assert config.show_plugins is True
        assert config.reserved_rows == 1
        assert config.tmux_socket == "work"
        assert config.tmux_binary == "tmux"

    def test_from_dict_keybindings_stringified(self) -> None:
        config = PickerConfig.from_dict({"keybindings": {"delete": ["x", 9]}})

        assert config.keybindings == {"delete": ["x", "9"]}

    def test_from_dict_null_keybindings(self) -> None:
        assert PickerConfig.from_dict({"keybindings": None}).keybindings == {}

    def test_from_yaml_string(self) -> None:
        yaml_content = dedent("""
            show_plugins: true
            keybindings:
              up: [k, up]
            log_level: DEBUG
        """)

        config = PickerConfig.from_yaml_string(yaml_content)

        assert config.show_plugins is True
        assert config.keybindings == {"up": ["k", "up"]}
        assert config.log_level == "DEBUG"

    def test_from_empty_yaml_string(self) -> None:
        assert PickerConfig.from_yaml_string("") == PickerConfig()

    def test_from_yaml_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("tmux_binary: /opt/bin/tmux\nlog_file: /tmp/picker.log\n")

        config = PickerConfig.from_yaml(config_file)

        assert config.tmux_binary == "/opt/bin/tmux"
        assert config.log_file == "/tmp/picker.log"

    def test_to_dict_round_trips(self) -> None:
        config = PickerConfig(show_plugins=True, keybindings={"left": ["a"]}, tmux_socket="s")

        assert PickerConfig.from_dict(config.to_dict()) == config

    def test_to_dict_copies_keybindings(self) -> None:
        config = PickerConfig(keybindings={"left": ["a"]})
        data = config.to_dict()
        data["keybindings"]["left"].append("b")

        assert config.keybindings == {"left": ["a"]}


class TestLoad:
    """Tests for PickerConfig.load and environment overrides."""

    def test_explicit_path(self, tmp_path: Path) -> None:
        config_file = tmp_path / "picker.yaml"
        config_file.write_text("reserved_rows: 5\n")

        assert PickerConfig.load(config_file).reserved_rows == 5

    def test_missing_path_uses_defaults(self, tmp_path: Path) -> None:
        assert PickerConfig.load(tmp_path / "nope.yaml") == PickerConfig()

    def test_search_path_in_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        (tmp_path / "session-picker.yaml").write_text("show_plugins: true\n")

        assert config_search_paths()[0] == tmp_path / "session-picker.yaml"
        assert PickerConfig.load().show_plugins is True

    @pytest.mark.parametrize(("value", "expected"), [("1", True), ("yes", True), ("0", False), ("off", False)])
    def test_env_show_plugins(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, value: str, expected: bool
    ) -> None:
        config_file = tmp_path / "picker.yaml"
        config_file.write_text(f"show_plugins: {str(not expected).lower()}\n")
        monkeypatch.setenv("SESSION_PICKER_SHOW_PLUGINS", value)

        assert PickerConfig.load(config_file).show_plugins is expected

    def test_env_tmux_socket(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SESSION_PICKER_TMUX_SOCKET", "other")

        assert PickerConfig.load(tmp_path / "nope.yaml").tmux_socket == "other"
