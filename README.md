# cadastros

A set of small menu-driven terminal programs for keeping records and for
watching a robot walk across a grid. Prompts and messages are in Portuguese.
Nothing beyond the Python standard library is needed.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Record keepers

Each one shows a menu and reads a single letter per choice (upper or lower
case). Ending the input (Ctrl-D) leaves the program.

- `condominio [file]`: apartment registry. Insert (`I`), list (`L`), delete
  (`D`), edit (`E`) and quit (`S`). Records are read from the data file
  (`Condominio.dat` in the current directory unless another path is given)
  on start and written back to it on quit with `S`. Blocks must be `A`, `B`,
  `C` or `D`. Deleting a record moves the id of every record after it down
  by one.
- `frota`: car fleet. Asks for the initial number of cars, then offers
  insert, delete by position (counted from 0), list and quit.
- `biblioteca`: library. Asks for the initial number of books, then offers
  insert, delete by position, search by exact title, author or publisher,
  list and quit.
- `alunos`: students. Asks for the initial number of students, then offers
  insert, delete by position, list (with the average of the three grades),
  enter grades by registration number, and quit.

The same logic is usable from Python:

```python
from cadastros.library import Book, Library, format_book

library = Library()
library.add(Book("Dom Casmurro", "Machado de Assis", "Garnier", 1899, "Romance"))
for book in library.find_by_author("Machado de Assis"):
    print(format_book(book))
```

The other modules follow the same shape:

- `cadastros.condominio`: `Apartment`, `Registry` (`add`, `remove`,
  `replace`, `load`, `save`), `parse_block`, `format_apartment`.
- `cadastros.fleet`: `Car`, `Fleet` (`add`, `remove_at`), `format_car`.
- `cadastros.students`: `Student` (with an `average` property), `Roster`
  (`add`, `remove_at`, `set_grades`), `format_student`.

Invalid positions raise `IndexError`; unknown ids or registration numbers
raise `KeyError`.

## Robot on a grid

All three ask for a grid of at least 3 x 3, then for positions, and print
the grid with the path marked `X`, obstacles `O` and the positions by letter.

- `robo-normal`: a single hole sits at the centre of the grid; the robot
  walks from `A` to `B` around it (`cadastros.grid.walk_around_hole`).
- `robo-obstaculos`: asks how many obstacles to place at random (at least
  one, at most `cadastros.obstacles.obstacle_limit(rows, cols)`), never on
  the first row or column, and walks from `A` to `B`
  (`cadastros.obstacles.walk_with_obstacles`).
- `robo-posicoes`: like the previous one, but the robot walks from `A` to
  `B` and then on to `C` (`cadastros.waypoints.walk_via`).

The walking functions return the grid as a list of rows of one-character
strings; `cadastros.grid.render` turns it into the printed text. They raise
`ValueError` for a grid smaller than 3 x 3, a position outside the grid or a
position on the hole or an obstacle. `random_obstacles` takes an optional
`random.Random` so placements can be reproduced.

## What it does not do

Only `condominio` keeps its records between runs. `frota`, `biblioteca` and
`alunos` hold their records in memory, and they are lost on quit. The robot
walk follows fixed stepping rules rather than searching for a path, so it is
not guaranteed to find the shortest route.