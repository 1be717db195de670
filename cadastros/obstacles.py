"""Robot walk on a grid with randomly placed obstacles."""

from __future__ import annotations

import argparse
import random
from typing import Iterable, Sequence

from .grid import GOAL, MIN_SIZE, PATH, START, Position, make_grid, render

OBSTACLE = "O"


def obstacle_limit(rows: int, cols: int) -> int:
    """Largest number of obstacles allowed on a rows x cols grid."""
    cells = rows * cols
    return cells // 6 if cells % 2 == 0 else cells // 5


def _check_size(rows: int, cols: int) -> None:
    if rows < MIN_SIZE or cols < MIN_SIZE:
        raise ValueError("Tamanho inválido")


def random_obstacles(
    rows: int, cols: int, count: int, rng: random.Random | None = None
) -> list[Position]:
    """Place count obstacles at random, never on the first row or the first column."""
    _check_size(rows, cols)
    limit = obstacle_limit(rows, cols)
    if not 1 <= count <= limit:
        raise ValueError(f"Quantidade inválida: deve estar entre 1 e {limit}")
    if rng is None:
        rng = random.Random()
    obstacle_rows = [rng.randrange(1, rows) for _ in range(count)]
    obstacle_cols = [rng.randrange(1, cols) for _ in range(count)]
    return list(zip(obstacle_rows, obstacle_cols))


def _inside(rows: int, cols: int, position: Position) -> bool:
    row, col = position
    return 0 <= row < rows and 0 <= col < cols


def _validate(
    rows: int, cols: int, obstacles: Sequence[Position], positions: Iterable[Position]
) -> None:
    _check_size(rows, cols)
    for obstacle in obstacles:
        if not _inside(rows, cols, obstacle):
            raise ValueError(f"Obstáculo fora da matriz: {obstacle[0]} , {obstacle[1]}")
    blocked = set(obstacles)
    for position in positions:
        if not _inside(rows, cols, position):
            raise ValueError("Posição fora da matriz")
        if position in blocked:
            raise ValueError(f"A posição {position[0]} , {position[1]} já está ocupada")


def _obstacle_grid(rows: int, cols: int, obstacles: Iterable[Position]) -> list[list[str]]:
    grid = make_grid(rows, cols)
    for row, col in obstacles:
        grid[row][col] = OBSTACLE
    return grid


def _walk_segment(grid: list[list[str]], start: Position, goal: Position) -> Position:
    """Mark the path from start to goal on the grid, stepping around obstacles."""
    rows, cols = len(grid), len(grid[0])
    row, col = start
    goal_row, goal_col = goal

    def blocked(r: int, c: int) -> bool:
        return grid[r][c] == OBSTACLE

    while (row, col) != goal:
        if col == goal_col:
            # same column: one step vertically, marking beside an obstacle
            mark_col = col
            if row < goal_row:
                row += 1
                if blocked(row, col):
                    mark_col = col + 1 if col + 1 < cols else col - 1
            else:
                row -= 1
                if blocked(row, col):
                    mark_col = col - 1 if col > 0 else col + 1
            grid[row][mark_col] = PATH
        elif row == goal_row:
            # same row: one step horizontally, marking beside an obstacle
            mark_row = row
            if col < goal_col:
                col += 1
                if blocked(row, col):
                    mark_row = row + 1 if row + 1 < rows else row - 1
            else:
                col -= 1
                if blocked(row, col):
                    mark_row = row - 1 if row > 0 else row + 1
            grid[mark_row][col] = PATH
        elif row < goal_row:
            while row != goal_row and col != goal_col:
                row += 1
                col += 1 if col < goal_col else -1
                if blocked(row, col):
                    row -= 1
                grid[row][col] = PATH
        else:
            while row != goal_row and col != goal_col:
                row -= 1
                if col < goal_col:
                    col += 1
                    if blocked(row, col):
                        row += 1
                else:
                    col -= 1
                    if blocked(row, col):
                        col += 1
                grid[row][col] = PATH
    return row, col


def walk_with_obstacles(
    rows: int,
    cols: int,
    obstacles: Iterable[Position],
    start: Position,
    goal: Position,
) -> list[list[str]]:
    """Walk from start to goal among the obstacles and return the marked grid."""
    obstacles = list(obstacles)
    _validate(rows, cols, obstacles, (start, goal))
    grid = _obstacle_grid(rows, cols, obstacles)
    _walk_segment(grid, start, goal)
    grid[start[0]][start[1]] = START
    grid[goal[0]][goal[1]] = GOAL
    return grid


def _clear() -> None:
    print("\033[H\033[J", end="")


def _ask_int(prompt: str) -> int:
    while True:
        try:
            return int(input(prompt).strip())
        except ValueError:
            print("Valor inválido !!!")


def _ask_size(prompt: str) -> int:
    while True:
        value = _ask_int(prompt)
        if value >= MIN_SIZE:
            return value
        print("Tamanho inválido, digite novamente ")


def _ask_index(prompt: str, limit: int, error: str) -> int:
    while True:
        value = _ask_int(prompt)
        if 0 <= value < limit:
            return value
        print(error)


def _ask_position(
    rows: int, cols: int, row_error: str = "Linha inválida, digite novamente "
) -> Position:
    row = _ask_index("Linha: ", rows, row_error)
    col = _ask_index("Coluna: ", cols, "Coluna inválida, digite novamente ")
    return row, col


def _ask_grid_size() -> tuple[int, int]:
    print("Menu matriz")
    print("Regras da matriz: ")
    print("Tamanho minimo: 3 x 3")
    print("Tamanho máximo: use com sabedoria ")
    return _ask_size("Linha: "), _ask_size("Coluna: ")


def _ask_obstacles(rows: int, cols: int) -> list[Position]:
    limit = obstacle_limit(rows, cols)
    _clear()
    print("Menu obstáculos:")
    print(" Regras: ")
    print("É necessário ter pelo menos 1 obstáculo ")
    print(f"Não pode ter mais que {limit} obstáculos")
    while True:
        count = _ask_int("Digite a quantidade de obstáculos: ")
        if 1 <= count <= limit:
            return random_obstacles(rows, cols, count)
        print("Quantidade inválida, digite novamente ")


def _list_obstacles(obstacles: Sequence[Position], first: int = 1, trailer: str = "") -> None:
    print("Obstáculos: ")
    for number, (row, col) in enumerate(obstacles, start=first):
        print(f"{number}: {row} , {col}{trailer}")


def _report_blocked(position: Position, obstacles: Sequence[Position], message: str) -> bool:
    hits = obstacles.count(position)
    for _ in range(hits):
        print(message.format(*position))
    return hits > 0


def _ask_start(rows: int, cols: int, obstacles: Sequence[Position]) -> Position:
    while True:
        print("Digite a posição incial")
        start = _ask_position(rows, cols, "Linha invalida, digite novamente ")
        if not _report_blocked(start, obstacles, "O local {} , {} ja esta ocupado com obstáculo"):
            return start


def main(argv=None) -> int:
    """Run the interactive walk between random obstacles."""
    argparse.ArgumentParser(
        prog="obstaculos", description="Caminho de A até B entre obstáculos."
    ).parse_args(argv)
    try:
        rows, cols = _ask_grid_size()
        obstacles = _ask_obstacles(rows, cols)
        _clear()
        print("Menu posição inicial ")
        print("Regras: ")
        print(f"A linha não pode ser menor que 0 e maior que: {rows - 1}")
        print(f"A coluna não pode ser menor que 0 e maior que: {cols - 1} ")
        _list_obstacles(obstacles)
        start = _ask_start(rows, cols, obstacles)
        _clear()
        print("Menu posição final")
        print("Regras: ")
        print("A posição final não pode ser igual a posição inicial")
        print(f"Posição inicial: {start[0]},{start[1]}")
        print(f"A linha não pode ser menor que 0 e maior que {rows - 1}")
        print(f"A coluna não pode ser menor que 0 e maior que {cols - 1}")
        _list_obstacles(obstacles)
        while True:
            print("Digite a posição final ")
            goal = _ask_position(rows, cols)
            if not _report_blocked(goal, obstacles, "A posição {} , {} já está ocupada "):
                break
        _clear()
        print(f"Tamanho matriz: {rows} x {cols}")
        print(f"Posição inicial A: {start[0]} , {start[1]}")
        print(f"Posição inicial B: {goal[0]} , {goal[1]}")
        _list_obstacles(obstacles, first=0, trailer=" ")
        print(render(walk_with_obstacles(rows, cols, obstacles, start, goal)), end="")
        return 0
    except EOFError:
        return 0