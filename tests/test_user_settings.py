import pytest

from snakegrid.model import Dim
from snakegrid.user_settings import GameSpeed, GridSize, UserSettings


@pytest.fixture
def settings():
    return UserSettings()


def test_speed_options_exist(settings):
    options = settings.game_speed_options()
    assert len(options) == 3
    for name in ("Worm", "Snake", "Python"):
        assert name in options


def test_grid_size_options_exist(settings):
    assert settings.grid_size_options() == ["30x10", "50x15", "80x20"]


@pytest.mark.parametrize(
    "name, speed",
    [("Worm", GameSpeed.WORM), ("Snake", GameSpeed.SNAKE), ("Python", GameSpeed.PYTHON)],
)
def test_speed_found_by_name(settings, name, speed):
    assert settings.game_speed_by_name(name) is speed


def test_speed_defaults_when_name_unknown(settings):
    assert settings.game_speed_by_name("xxxxxxxxxxxx") is GameSpeed.SNAKE


@pytest.mark.parametrize(
    "name, size",
    [("30x10", GridSize.SIZE_30x10), ("50x15", GridSize.SIZE_50x15), ("80x20", GridSize.SIZE_80x20)],
)
def test_grid_size_found_by_name(settings, name, size):
    assert settings.grid_size_by_name(name) is size


def test_grid_size_defaults_when_name_unknown(settings):
    assert settings.grid_size_by_name("1x1") is GridSize.SIZE_50x15


@pytest.mark.parametrize(
    "name, speed_type, speed",
    [("Worm", GameSpeed.WORM, 0.3), ("Snake", GameSpeed.SNAKE, 0.1), ("Python", GameSpeed.PYTHON, 0.05)],
)
def test_speed_settings_can_be_saved(settings, name, speed_type, speed):
    settings.save(speed_type, GridSize.SIZE_30x10)
    assert settings.current_game_speed_option() == name
    assert settings.game_speed == pytest.approx(speed)


def test_grid_size_can_be_saved(settings):
    settings.save(GameSpeed.WORM, GridSize.SIZE_80x20)
    assert settings.current_grid_size_option() == "80x20"
    assert settings.grid_size == Dim(80, 20)


def test_defaults(settings):
    assert settings.current_game_speed_option() == "Snake"
    assert settings.game_speed == pytest.approx(0.1)
    assert settings.current_grid_size_option() == "50x15"
    assert settings.grid_size == Dim(50, 15)