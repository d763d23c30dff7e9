"""Tests for flashcards.config."""

import pathlib

from flashcards.config import _parse_toml_simple, get_config_dir, load_settings


def test_parse_toml_simple_basic():
    text = 'import_from = "cards.json"\nseed = 42'
    assert _parse_toml_simple(text) == {"import_from": "cards.json", "seed": 42}


def test_parse_toml_simple_comments_blanks_and_booleans():
    text = "# comment\n\nflag = true\nother = false\nneg = -3\n"
    assert _parse_toml_simple(text) == {"flag": True, "other": False, "neg": -3}


def test_get_config_dir_from_env(monkeypatch):
    monkeypatch.setenv("FLASHCARDS_CONFIG_DIR", "/tmp/fc-config")
    assert get_config_dir() == pathlib.Path("/tmp/fc-config")


def test_get_config_dir_default(monkeypatch, tmp_path):
    monkeypatch.delenv("FLASHCARDS_CONFIG_DIR", raising=False)
    monkeypatch.setattr(pathlib.Path, "home", lambda: tmp_path)
    assert get_config_dir() == tmp_path / ".config" / "flashcards"


def test_load_settings_default(tmp_path):
    settings = load_settings(tmp_path)
    assert settings == {"import_from": "", "export_to": "", "seed": None}


def test_load_settings_with_file(tmp_path):
    (tmp_path / "settings.toml").write_text('export_to = "out.json"\nseed = 3')
    settings = load_settings(tmp_path)
    assert settings["export_to"] == "out.json"
    assert settings["seed"] == 3
    assert settings["import_from"] == ""


def test_load_settings_unreadable(tmp_path, capsys):
    (tmp_path / "settings.toml").mkdir()
    settings = load_settings(tmp_path)
    assert settings["export_to"] == ""
    assert "Warning" in capsys.readouterr().err


def test_parse_toml_simple_trailing_comments():
    text = 'import_from = "cards.json"  # my deck\nseed = 7 # fixed\nexport_to = "a#b.json"'
    assert _parse_toml_simple(text) == {
        "import_from": "cards.json", "seed": 7, "export_to": "a#b.json",
    }


def test_parse_toml_simple_skips_lines_without_value():
    assert _parse_toml_simple("just words\n[section]\nk = v") == {"k": "v"}


def test_load_settings_numeric_paths_become_strings(tmp_path):
    (tmp_path / "settings.toml").write_text("import_from = 2024\nexport_to = 7")
    settings = load_settings(tmp_path)
    assert settings["import_from"] == "2024"
    assert settings["export_to"] == "7"


def test_load_settings_drops_non_path_values(tmp_path, capsys):
    (tmp_path / "settings.toml").write_text("export_to = true")
    settings = load_settings(tmp_path)
    assert settings["export_to"] == ""
    assert "Warning" in capsys.readouterr().err
