"""
Tests for configuration loading and saving
"""

from dglog.colorlog import LEVEL_COLOR_SCHEME
from dglog.colors import ColorScheme
from dglog.config import Config


class TestConfig:
    """Tests for Config"""

    def test_defaults(self):
        cfg = Config()
        assert cfg.level == "DEBUG"
        assert cfg.stream == "stdout"
        assert cfg.report_caller is True
        assert cfg.message_width == 120
        assert cfg.base_dir == ""
        assert cfg.color_scheme == LEVEL_COLOR_SCHEME

    def test_save_and_load(self, tmp_path):
        filename = str(tmp_path / "dglog.toml")
        cfg = Config(level="INFO", stream="stderr", color_scheme=ColorScheme(info_level_style="green+b"))
        cfg.save(filename)
        assert Config.load(filename) == cfg

    def test_missing_file(self, tmp_path):
        assert Config.load(str(tmp_path / "missing.toml")) == Config()

    def test_broken_file(self, tmp_path, caplog):
        filename = tmp_path / "broken.toml"
        filename.write_text("level = [unterminated\n", encoding="utf-8")
        assert Config.load(str(filename)) == Config()
        assert "using configuration defaults" in caplog.text

    def test_partial_color_scheme(self, tmp_path):
        filename = tmp_path / "dglog.toml"
        filename.write_text(
            'level = "WARN"\n\n[color_scheme]\ninfo_level_style = "cyan"\n',
            encoding="utf-8",
        )
        cfg = Config.load(str(filename))
        assert cfg.level == "WARN"
        assert cfg.color_scheme == ColorScheme(info_level_style="cyan")
