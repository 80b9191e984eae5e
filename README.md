# snakegrid

The building blocks of a grid snake game. It provides a playing field with walls, a snake that moves and grows, food, empty-cell selection for placing food, player settings for speed and grid size, and helpers that format HUD text and place objects in world space. It draws nothing itself.

## Installation

```
pip install .
```

To run the test suite, use `pip install .[test]` and then `pytest`.

## Usage

```python
from snakegrid.food import Food
from snakegrid.grid import Grid
from snakegrid.model import CellType, Dim, Input, SnakeSettings
from snakegrid.snake import Snake

grid = Grid(Dim(10, 10))
snake = Snake(SnakeSettings(default_size=4, start_position=Grid.center(10, 10)))
grid.update_links(snake.links, CellType.SNAKE)

food = Food()
spot = grid.random_empty_position()
if spot is not None:
    food.position = spot
    grid.update_position(food.position, CellType.FOOD)

snake.move(Input(0, 1))
if grid.hit_test(snake.head, CellType.WALL) or grid.hit_test(snake.head, CellType.SNAKE):
    print("crashed")
elif grid.hit_test(snake.head, CellType.FOOD):
    snake.increase()
grid.update_links(snake.links, CellType.SNAKE)

print("\n".join(grid.debug_lines()))
```

### Model types (`snakegrid.model`)

- `Dim(width, height)`
- `Position(x, y)`. Positions can be added to a `Position` or an `Input`. `Position.ZERO` is the origin.
- `Input(x, y)` is a direction. `Input.DEFAULT` is `Input(1, 0)`. `opposite(other)` tells whether two directions point opposite ways.
- `CellType` has the members `EMPTY`, `WALL`, `SNAKE` and `FOOD`.
- `GameplayEvent` has the members `GAME_OVER`, `GAME_COMPLETED` and `FOOD_TAKEN`.
- `SnakeSettings(default_size=4, start_position=Position.ZERO)`
- `Settings(grid_dims=Dim(40, 10), snake=SnakeSettings(), game_speed=1.0)`

### Grid (`snakegrid.grid`)

`Grid(dim, randomizer=None)` puts a one-cell wall around the playing area, so `Grid(Dim(12, 10)).dim` is `Dim(14, 12)`. `Grid.center(width, height)` gives the centre cell of a playing area.

- `update_position(position, cell_type)` clears every cell of that type and then marks the given position.
- `update_links(positions, cell_type)` clears every cell of that type and then marks each of the given positions.
- `hit_test(position, cell_type)` checks what a cell holds. A position outside the grid raises `IndexError`.
- `random_empty_position()` returns a free `Position`, or `None` when the grid is full.
- `debug_lines()` returns the grid as text rows. The symbols are `0` for empty, `*` for wall, `+` for snake and `F` for food.

### Randomizers (`snakegrid.randomizer`)

`PositionRandomizer(rng=None)` starts at a random cell and scans forward, wrapping around, until it finds an empty cell. You can pass in any object that has `randint`, such as a seeded `random.Random`. To get deterministic placement, subclass `PositionRandomizerBase` and implement `generate_position(dim, cells)`.

### Snake (`snakegrid.snake`)

`Snake(settings)` lays out `default_size` links in a row, running left from `start_position`. A size below 4 raises `ValueError`.

- `move(direction)` advances the snake one cell. A direction opposite to the current one is ignored.
- `increase()` adds a link at the tail.
- `head` is the position of the head.
- `links` is the `DoubleLinkedList` of positions, ordered from head to tail.

### Linked list (`snakegrid.linked_list`)

`DoubleLinkedList` supports `add_head`, `add_tail`, `insert(value, before)`, `remove`, `remove_node`, `clear`, `find_node`, `nodes()`, `move_tail_after_head`, `len()`, `in` and iteration over values. Each list position is held in a `Node`, which has `value`, `next` and `prev`.

### User settings (`snakegrid.user_settings`)

```python
from snakegrid.user_settings import GameSpeed, GridSize, UserSettings

user = UserSettings()
user.game_speed_options()          # ["Worm", "Snake", "Python"]
user.save(GameSpeed.PYTHON, GridSize.SIZE_80x20)
user.current_game_speed_option()   # "Python"
user.game_speed                    # 0.05
user.grid_size                     # Dim(width=80, height=20)
user.game_speed_by_name("nope")    # GameSpeed.SNAKE
```

### Display helpers (`snakegrid.world_utils`)

- `format_seconds(seconds)` returns `"MM:SS"`, for example `"01:05"`.
- `format_score(score)` returns at least two digits, for example `"07"`.
- `link_position_to_vector(position, cell_size, dims)` returns the world location of the centre of a cell.
- `camera_location(dim, cell_size, viewport_width, viewport_height, fov_degrees, origin)` returns the location for a top-down camera that fits the whole grid in the viewport. It returns `None` if the viewport height or the grid height is zero.

## What it does not do

The package has no game loop. It does not handle timing between moves, scoring or game-over detection. It also never dispatches `GameplayEvent` values. You combine the grid, the snake and the food yourself, as shown above. There is also no command-line program, no rendering and no storage for settings.