"""Tests for command line configuration loading."""

from deformat import config as config_module
from deformat.config import CliConfig, config_locations


class TestConfigLocations:
    def test_default_order(self, isolated):
        home, work = isolated
        assert config_locations() == [
            home / ".config" / "deformat" / "config.yaml",
            work / ".deformat" / "config.yaml",
        ]

    def test_env_var_first(self, isolated, monkeypatch, tmp_path):
        monkeypatch.setenv(config_module.ENV_VAR, str(tmp_path / "custom.yaml"))
        assert config_locations()[0] == tmp_path / "custom.yaml"


class TestCliConfig:
    def test_defaults_without_files(self, isolated):
        config = CliConfig.load()
        assert config.output == "text"
        assert config.show_categories is True
        assert config.log_level == "WARNING"
        assert config.source is None

    def test_user_config_beats_project_config(self, isolated):
        home, work = isolated
        user = home / ".config" / "deformat" / "config.yaml"
        user.parent.mkdir(parents=True)
        user.write_text("output: json\n", encoding="utf-8")
        project = work / ".deformat" / "config.yaml"
        project.parent.mkdir()
        project.write_text("output: text\nshow_categories: false\n", encoding="utf-8")

        config = CliConfig.load()

        assert config.source == user
        assert config.output == "json"
        assert config.show_categories is True

    def test_explicit_path(self, isolated, tmp_path):
        path = tmp_path / "deformat.yaml"
        path.write_text("show_categories: false\nlog_level: debug\n", encoding="utf-8")

        config = CliConfig.load(path)

        assert config.show_categories is False
        assert config.log_level == "DEBUG"

    def test_explicit_missing_path(self, isolated, tmp_path, caplog):
        config = CliConfig.load(tmp_path / "nope.yaml")
        assert config.output == "text"
        assert "not found" in caplog.text

    def test_invalid_yaml_keeps_defaults(self, tmp_path, caplog):
        path = tmp_path / "bad.yaml"
        path.write_text("output: [unclosed\n", encoding="utf-8")

        config = CliConfig.from_file(path)

        assert config.output == "text"
        assert "Ignoring config file" in caplog.text

    def test_non_mapping_keeps_defaults(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- json\n", encoding="utf-8")
        assert CliConfig.from_file(path).output == "text"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert CliConfig.from_file(path) == CliConfig(source=path)

    def test_invalid_values_ignored(self, caplog):
        config = CliConfig()
        config.apply({"output": "xml", "show_categories": "yes", "log_level": "loud", "extra": 1})

        assert config.output == "text"
        assert config.show_categories is True
        assert config.log_level == "WARNING"
        assert "Invalid output mode" in caplog.text
