"""Tests for configuration loading and sandboxing."""

from ansitext.config import AnsiTextConfig, get_config_path, get_init_script_path, load_config


class TestAnsiTextConfig:
    def test_defaults(self):
        c = AnsiTextConfig()
        assert c.fullscreen is False
        assert c.show_footer is False
        assert c.normalize_line_endings is True
        assert c.log_file is None


class TestConfigPaths:
    def test_xdg_config_home(self, monkeypatch, tmp_path):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert get_config_path() == tmp_path / "ansitext"
        assert get_init_script_path() == tmp_path / "ansitext" / "init.py"

    def test_default_location(self, monkeypatch, tmp_path):
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))
        assert get_config_path() == tmp_path / ".config" / "ansitext"


class TestLoadConfig:
    def test_no_config_file(self, monkeypatch, tmp_config_dir):
        """When no init.py exists, should return defaults with no error."""
        monkeypatch.setattr("ansitext.config.get_init_script_path", lambda: tmp_config_dir / "init.py")
        config, error = load_config()
        assert error is None
        assert config.fullscreen is False

    def test_valid_config(self, monkeypatch, tmp_config_dir):
        init_file = tmp_config_dir / "init.py"
        init_file.write_text(
            'config.fullscreen = True\n'
            'config.normalize_line_endings = False\n'
            'config.log_file = "/tmp/view.log"\n'
        )
        monkeypatch.setattr("ansitext.config.get_init_script_path", lambda: init_file)
        config, error = load_config()
        assert error is None
        assert config.fullscreen is True
        assert config.normalize_line_endings is False
        assert config.log_file == "/tmp/view.log"

    def test_sandbox_blocks_import(self, monkeypatch, tmp_config_dir):
        """The sandbox should prevent __import__ calls."""
        init_file = tmp_config_dir / "init.py"
        init_file.write_text("import os\n")
        monkeypatch.setattr("ansitext.config.get_init_script_path", lambda: init_file)
        config, error = load_config()
        assert error is not None
        assert "Error" in error

    def test_sandbox_blocks_open(self, monkeypatch, tmp_config_dir):
        init_file = tmp_config_dir / "init.py"
        init_file.write_text("f = open('/etc/passwd')\n")
        monkeypatch.setattr("ansitext.config.get_init_script_path", lambda: init_file)
        config, error = load_config()
        assert error is not None

    def test_syntax_error_returns_defaults(self, monkeypatch, tmp_config_dir):
        init_file = tmp_config_dir / "init.py"
        init_file.write_text("config.fullscreen = (\n")
        monkeypatch.setattr("ansitext.config.get_init_script_path", lambda: init_file)
        config, error = load_config()
        assert error is not None
        assert config.fullscreen is False
