"""
Tests for textbar.config — config loading and Bar defaults.
"""

from textbar.bar import Bar
from textbar.config import bar_from_config, load_config


class TestLoadConfig:
    def test_missing_file_returns_empty(self, tmp_path):
        missing = tmp_path / "nonexistent" / "config.toml"
        assert load_config(path=missing) == {}

    def test_default_path_used_when_none_given(self, isolated_config_path):
        isolated_config_path.parent.mkdir(parents=True)
        isolated_config_path.write_text("width = 7\n")
        assert load_config() == {"width": 7}

    def test_all_keys(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text(
            'start = "["\n'
            'end = "]"\n'
            'filled = "#"\n'
            'empty = "-"\n'
            "width = 24\n"
            "max = 1.5\n"
        )
        assert load_config(path=cfg) == {
            "start": "[",
            "end": "]",
            "filled": "#",
            "empty": "-",
            "width": 24,
            "max": 1.5,
        }

    def test_integer_max_becomes_float(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text("max = 250\n")
        result = load_config(path=cfg)
        assert result == {"max": 250.0}
        assert isinstance(result["max"], float)

    def test_malformed_toml_returns_empty(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text("width = [not valid toml\n")
        assert load_config(path=cfg) == {}

    def test_non_utf8_returns_empty(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_bytes(b'start = "\xff"\n')
        assert load_config(path=cfg) == {}

    def test_multi_character_cell_is_dropped(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text('filled = "##"\nempty = "-"\n')
        assert load_config(path=cfg) == {"empty": "-"}

    def test_non_string_token_is_dropped(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text('start = 5\nend = "]"\n')
        assert load_config(path=cfg) == {"end": "]"}

    def test_boolean_width_is_dropped(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text("width = true\n")
        assert load_config(path=cfg) == {}

    def test_float_width_is_dropped(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text("width = 2.5\n")
        assert load_config(path=cfg) == {}

    def test_string_max_is_dropped(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text('max = "100"\n')
        assert load_config(path=cfg) == {}

    def test_unknown_keys_ignored(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text('title = "my config"\nwidth = 3\n')
        assert load_config(path=cfg) == {"width": 3}

    def test_negative_width_is_kept(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text("width = -4\n")
        assert load_config(path=cfg) == {"width": -4}

    def test_comments_in_toml(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text(
            "# This is a comment\n"
            'filled = "#"  # inline comment\n'
        )
        assert load_config(path=cfg) == {"filled": "#"}

    def test_unreadable_file_returns_empty(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text("width = 3\n")
        cfg.chmod(0o000)
        try:
            result = load_config(path=cfg)
        finally:
            cfg.chmod(0o644)  # restore for cleanup
        # root can still read a 000 file
        assert result in ({}, {"width": 3})


class TestBarFromConfig:
    def test_empty_config_gives_default_bar(self):
        assert bar_from_config({}) == Bar()

    def test_overrides_apply(self):
        bar = bar_from_config({"start": "[", "end": "]", "filled": "#", "empty": "-", "width": 4})
        assert str(bar.with_value(50)) == "[##--]"

    def test_loaded_config_round_trip(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text('filled = "="\nempty = " "\nwidth = 5\nmax = 10\n')
        bar = bar_from_config(load_config(path=cfg)).with_value(5)
        # ceil(5 × 0.5) = 3
        assert str(bar) == "|===  |"
