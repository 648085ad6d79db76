import json

import pytest

from src.snake import config


@pytest.fixture(autouse=True)
def _restore_config():
    yield
    config.reload_config()


def test_defaults_without_file(tmp_path):
    data = config._load_json_config(tmp_path / "missing.json")
    assert data["game"]["tickIntervalMs"] == 400
    assert data["game"]["startLength"] == 3
    assert data["colors"]["snakeHead"] == [154, 205, 50]


def test_file_is_deep_merged(tmp_path):
    path = tmp_path / "appconfig.json"
    path.write_text(json.dumps({"game": {"tickIntervalMs": 150}, "colors": {"food": [1, 2, 3]}}), encoding="utf-8")
    data = config._load_json_config(path)
    assert data["game"]["tickIntervalMs"] == 150
    assert data["game"]["startLength"] == 3
    assert data["colors"]["food"] == [1, 2, 3]
    assert data["colors"]["snakeBody"] == [0, 128, 0]


def test_broken_file_keeps_defaults(tmp_path):
    path = tmp_path / "appconfig.json"
    path.write_text("{not json", encoding="utf-8")
    assert config._load_json_config(path) == config._default_config()


def test_env_overrides_tick_interval(tmp_path, monkeypatch):
    monkeypatch.setenv("SNAKE_TICK_MS", "250")
    assert config._load_json_config(tmp_path / "missing.json")["game"]["tickIntervalMs"] == 250
    monkeypatch.setenv("SNAKE_TICK_MS", "fast")
    assert config._load_json_config(tmp_path / "missing.json")["game"]["tickIntervalMs"] == 400


def test_reload_updates_constants_and_getter(tmp_path):
    path = tmp_path / "appconfig.json"
    path.write_text(json.dumps({"game": {"startLength": 5}, "window": {"title": "Snek"}}), encoding="utf-8")
    config.reload_config(path)
    assert config.START_LENGTH == 5
    assert config.WINDOW_TITLE == "Snek"
    assert config.cfg("game.startLength") == 5
    assert config.cfg("game.nope", "fallback") == "fallback"
    assert config.color("snakeHead") == (154, 205, 50)


def test_board_is_fixed():
    assert (config.BOARD_WIDTH, config.BOARD_HEIGHT) == (400, 400)
    assert config.CELL_SIZE == 20


def test_undecodable_file_keeps_defaults(tmp_path):
    path = tmp_path / "appconfig.json"
    path.write_bytes(b'{"game": {"tickIntervalMs": 150}, "x": "\xff\xfe"}')
    assert config._load_json_config(path) == config._default_config()
