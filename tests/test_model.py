import dataclasses

import pytest

from snakegrid.model import (
    CellType,
    Dim,
    GameplayEvent,
    Input,
    Position,
    Settings,
    SnakeSettings,
)


def test_position_zero():
    assert Position.ZERO == Position(0, 0)


def test_position_add_position():
    assert Position(3, 4) + Position(1, 2) == Position(4, 6)


def test_position_add_input_allows_negative_step():
    assert Position(5, 5) + Input(-1, 0) == Position(4, 5)
    assert Position(5, 5) + Input(0, -1) == Position(5, 4)


def test_position_add_zero_is_identity():
    pos = Position(7, 9)
    assert pos + Position.ZERO == pos


def test_position_add_rejects_other_types():
    with pytest.raises(TypeError):
        Position(1, 1) + 3


def test_position_is_immutable():
    pos = Position(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        pos.x = 5
    assert pos == Position(1, 2)
    assert (pos.x, pos.y) == (1, 2)


def test_input_default():
    assert Input.DEFAULT == Input(1, 0)


@pytest.mark.parametrize(
    "a, b",
    [(Input(1, 0), Input(-1, 0)), (Input(-1, 0), Input(1, 0)),
     (Input(0, 1), Input(0, -1)), (Input(0, -1), Input(0, 1))],
)
def test_input_opposite(a, b):
    assert a.opposite(b)
    assert b.opposite(a)


@pytest.mark.parametrize(
    "a, b",
    [(Input(1, 0), Input(1, 0)), (Input(1, 0), Input(0, 1)),
     (Input(0, 1), Input(-1, 0)), (Input(0, 1), Input(0, 1))],
)
def test_input_not_opposite(a, b):
    assert not a.opposite(b)


def test_cell_type_values():
    assert [c.value for c in CellType] == [0, 1, 2, 3]
    assert CellType(0) is CellType.EMPTY


def test_gameplay_event_order():
    assert GameplayEvent(0) is GameplayEvent.GAME_OVER
    assert GameplayEvent(1) is GameplayEvent.GAME_COMPLETED
    assert GameplayEvent(2) is GameplayEvent.FOOD_TAKEN
    with pytest.raises(ValueError):
        GameplayEvent(3)


def test_settings_defaults():
    settings = Settings()
    assert settings.grid_dims == Dim(40, 10)
    assert settings.snake.default_size == 4
    assert settings.snake.start_position == Position.ZERO
    assert settings.game_speed == 1.0


def test_settings_snake_not_shared():
    first, second = Settings(), Settings()
    first.snake.default_size = 7
    assert second.snake.default_size == SnakeSettings().default_size


def test_dim_fields():
    dim = Dim(12, 10)
    assert (dim.width, dim.height) == (12, 10)