"""Unit tests for the config module."""

import pytest

from envprinter.core.scan import EnvUsageScanner, FilesystemResourceWalker
from envprinter.utils.config import (
    EnvPrinterSettings,
    ExclusionStrategy,
    get_config_paths,
    load_settings,
    normalize_key,
    read_application_config,
    read_application_yaml,
    read_properties,
)
from envprinter.utils.errors import ConfigurationError


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Run every test from an empty directory with no override files."""
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    return workdir


class TestEnvPrinterSettings:
    """Tests for EnvPrinterSettings model."""

    def test_default_values(self):
        """Test default values."""
        settings = EnvPrinterSettings()
        assert settings.enabled is True
        assert settings.endpoint_enabled is True
        assert settings.project_only is True
        assert settings.show_values is False
        assert settings.exclusion_strategy == ExclusionStrategy.CATALOG
        assert settings.exclude_prefixes == []
        assert settings.include_patterns == []
        assert settings.search_path == ["."]

    def test_frozen(self):
        """Test that settings cannot change after creation."""
        settings = EnvPrinterSettings()
        with pytest.raises(Exception):
            settings.show_values = True

    def test_comma_separated_lists(self):
        """Test that list settings accept comma-separated strings."""
        settings = EnvPrinterSettings(exclude_prefixes="AWS_, K8S_,,", include_patterns="APP_")
        assert settings.exclude_prefixes == ["AWS_", "K8S_"]
        assert settings.include_patterns == ["APP_"]

    def test_unknown_key_rejected(self):
        """Test that unknown settings are rejected."""
        with pytest.raises(Exception):
            EnvPrinterSettings.model_validate({"show_secrets": True})


class TestNormalizeKey:
    """Tests for normalize_key."""

    @pytest.mark.parametrize("key", ["project-only", "projectOnly", "project_only", "PROJECT_ONLY"])
    def test_relaxed_forms(self, key):
        """Test that kebab, camel and snake forms map to the field name."""
        assert normalize_key(key) == "project_only"


class TestApplicationFiles:
    """Tests for reading env.printer keys from application config files."""

    def test_read_properties(self, tmp_path):
        """Test reading env.printer.* keys from a properties file."""
        path = tmp_path / "application.properties"
        path.write_text(
            "# comment\n"
            "server.port=8080\n"
            "env.printer.project-only=false\n"
            "env.printer.showValues: true\n"
            "env.printer.exclude-prefixes=AWS_,K8S_\n"
        )
        assert read_properties(path) == {
            "project_only": "false",
            "show_values": "true",
            "exclude_prefixes": "AWS_,K8S_",
        }

    def test_read_application_yaml(self, tmp_path):
        """Test reading the env.printer section of a multi-document YAML file."""
        path = tmp_path / "application.yml"
        path.write_text(
            "env:\n"
            "  printer:\n"
            "    show-values: true\n"
            "---\n"
            "env:\n"
            "  printer:\n"
            "    include-patterns: [APP_, DB_]\n"
        )
        assert read_application_yaml(path) == {
            "show_values": True,
            "include_patterns": ["APP_", "DB_"],
        }

    def test_read_application_yaml_invalid(self, tmp_path, caplog):
        """Test that an unparseable application file is skipped with a warning."""
        path = tmp_path / "application.yml"
        path.write_text("env: [unclosed\n")
        with caplog.at_level("WARNING", logger="envprinter"):
            assert read_application_yaml(path) == {}
        assert "Skipping settings" in caplog.text

    def test_build_tokens_do_not_break_loading(self, tmp_path):
        """Test that Maven-style @...@ tokens do not make settings fatal."""
        (tmp_path / "application.yml").write_text(
            "info:\n  version: @project.version@\ndb: ${DB_HOST}\n"
        )
        settings = load_settings(search_path=[str(tmp_path)])
        assert settings == EnvPrinterSettings(search_path=[str(tmp_path)])

        scanner = EnvUsageScanner(FilesystemResourceWalker(settings.search_path))
        assert scanner.scan() == {"DB_HOST"}

    def test_read_properties_latin1(self, tmp_path):
        """Test that ISO-8859-1 properties files are read."""
        path = tmp_path / "application.properties"
        path.write_bytes("greeting=caf\xe9\nenv.printer.show-values=true\n".encode("latin-1"))
        assert read_properties(path) == {"show_values": "true"}
        assert load_settings(search_path=[str(tmp_path)]).show_values is True

    def test_yaml_overrides_properties(self, tmp_path):
        """Test that YAML files are read after properties files."""
        (tmp_path / "application.properties").write_text("env.printer.show-values=false\n")
        (tmp_path / "application.yaml").write_text("env:\n  printer:\n    show-values: true\n")
        assert read_application_config([str(tmp_path)])["show_values"] is True

    def test_missing_directory(self, tmp_path):
        """Test that a missing search path entry contributes nothing."""
        assert read_application_config([str(tmp_path / "nope")]) == {}


class TestLoadSettings:
    """Tests for load_settings."""

    def test_defaults_without_files(self):
        """Test loading with no config files anywhere."""
        assert load_settings() == EnvPrinterSettings()

    def test_from_application_properties(self, tmp_path):
        """Test settings taken from application.properties on the search path."""
        (tmp_path / "application.properties").write_text(
            "env.printer.project-only=false\nenv.printer.exclusion-strategy=policy-list\n"
        )
        settings = load_settings(search_path=[str(tmp_path)])
        assert settings.project_only is False
        assert settings.exclusion_strategy == ExclusionStrategy.POLICY_LIST
        assert settings.search_path == [str(tmp_path)]

    def test_override_file_wins(self, tmp_path):
        """Test that the explicit config file overrides application files."""
        (tmp_path / "application.properties").write_text("env.printer.show-values=false\n")
        config = tmp_path / "override.yaml"
        config.write_text(f"show-values: true\nsearch-path: [{tmp_path}]\n")
        settings = load_settings(config_path=config)
        assert settings.show_values is True
        assert settings.search_path == [str(tmp_path)]

    def test_default_override_location(self, isolated_cwd):
        """Test that .env-printer.yaml in the working directory is used."""
        (isolated_cwd / ".env-printer.yaml").write_text("endpoint_enabled: false\n")
        assert load_settings().endpoint_enabled is False

    def test_keyword_overrides_win(self, tmp_path):
        """Test that explicit overrides beat files and None is ignored."""
        (tmp_path / "application.properties").write_text("env.printer.show-values=true\n")
        settings = load_settings(search_path=[str(tmp_path)], show_values=False, project_only=None)
        assert settings.show_values is False
        assert settings.project_only is True

    def test_missing_config_file(self, tmp_path):
        """Test that an explicit missing file is an error."""
        with pytest.raises(ConfigurationError, match="not found"):
            load_settings(config_path=tmp_path / "missing.yaml")

    def test_non_mapping_config_file(self, tmp_path):
        """Test that a config file must hold a mapping."""
        config = tmp_path / "list.yaml"
        config.write_text("- a\n- b\n")
        with pytest.raises(ConfigurationError):
            load_settings(config_path=config)

    def test_unknown_key(self, tmp_path):
        """Test that unknown keys surface as ConfigurationError."""
        (tmp_path / "application.properties").write_text("env.printer.colour=red\n")
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings(search_path=[str(tmp_path)])
        assert exc_info.value.details["config_key"] == "colour"

    def test_invalid_value(self, tmp_path):
        """Test that a bad value surfaces as ConfigurationError."""
        config = tmp_path / "bad.yaml"
        config.write_text("exclusion_strategy: sometimes\n")
        with pytest.raises(ConfigurationError):
            load_settings(config_path=config)

    def test_invalid_override_yaml(self, tmp_path):
        """Test that invalid YAML in the override file is still an error."""
        config = tmp_path / "broken.yaml"
        config.write_text("show-values: @project.version@\n")
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_settings(config_path=config)

    def test_empty_config_file(self, tmp_path):
        """Test that an empty config file means defaults."""
        config = tmp_path / "empty.yaml"
        config.write_text("")
        assert load_settings(config_path=config).project_only is True


class TestConfigPaths:
    """Tests for get_config_paths."""

    def test_includes_working_directory(self, isolated_cwd):
        """Test that the working directory is searched first."""
        paths = get_config_paths()
        assert paths[0] == isolated_cwd / ".env-printer.yaml"
