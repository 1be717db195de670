"""Robot walk through a middle point to a final point among random obstacles."""

from __future__ import annotations

import argparse
from typing import Iterable

from .grid import GOAL, START, Position, render
from .obstacles import (
    _ask_grid_size,
    _ask_obstacles,
    _ask_position,
    _ask_start,
    _clear,
    _list_obstacles,
    _obstacle_grid,
    _report_blocked,
    _validate,
    _walk_segment,
)

FINAL = "C"


def walk_via(
    rows: int,
    cols: int,
    obstacles: Iterable[Position],
    start: Position,
    middle: Position,
    goal: Position,
) -> list[list[str]]:
    """Walk from start to middle and on to goal among the obstacles; return the marked grid."""
    obstacles = list(obstacles)
    _validate(rows, cols, obstacles, (start, middle, goal))
    if middle == start:
        raise ValueError("A posição B não pode ser igual a posição A")
    if goal in (start, middle):
        raise ValueError("A posição C não pode ser igual a posição A ou B")
    grid = _obstacle_grid(rows, cols, obstacles)
    _walk_segment(grid, start, middle)
    _walk_segment(grid, middle, goal)
    grid[start[0]][start[1]] = START
    grid[middle[0]][middle[1]] = GOAL
    grid[goal[0]][goal[1]] = FINAL
    return grid


def main(argv=None) -> int:
    """Run the interactive walk through three positions."""
    argparse.ArgumentParser(
        prog="tres-posicoes", description="Caminho de A até C passando por B."
    ).parse_args(argv)
    try:
        rows, cols = _ask_grid_size()
        obstacles = _ask_obstacles(rows, cols)
        _clear()
        print("Menu posição A ")
        print("Regras: ")
        print(f"A linha não pode ser menor que 0 e maior que: {rows - 1}")
        print(f"A coluna não pode ser menor que 0 e maior que: {cols - 1} ")
        _list_obstacles(obstacles)
        start = _ask_start(rows, cols, obstacles)

        _clear()
        print("Menu posição B")
        print("Regras: ")
        print("A posição B não pode ser igual a posição A")
        print(f"Posição A: {start[0]},{start[1]}")
        print(f"A linha não pode ser menor que 0 e maior que {rows - 1}")
        print(f"A coluna não pode ser menor que 0 e maior que {cols - 1}")
        _list_obstacles(obstacles)
        while True:
            print("Digite a posição B ")
            middle = _ask_position(rows, cols)
            repeated = middle == start
            if repeated:
                print("Posição inválida, digite novamente ")
            blocked = _report_blocked(middle, obstacles, "A posição {} , {} já está ocupada ")
            if not repeated and not blocked:
                break

        _clear()
        print("Menu posição C")
        print("Regras: ")
        print("A posição C não pode ser igual a posição A ou B")
        print(f"Posição A: {start[0]},{start[1]}")
        print(f"Posição B: {middle[0]},{middle[1]}")
        print(f"A linha não pode ser menor que 0 e maior que {rows - 1}")
        print(f"A coluna não pode ser menor que 0 e maior que {cols - 1}")
        _list_obstacles(obstacles)
        while True:
            print("Digite a posição final ")
            goal = _ask_position(rows, cols)
            repeated = goal in (start, middle)
            if repeated:
                print("Posição inválida, digite novamente ")
            blocked = _report_blocked(goal, obstacles, "A posição {} , {} já está ocupada ")
            if not repeated and not blocked:
                break

        _clear()
        print(f"Tamanho matriz: {rows} x {cols}")
        print(f"Posição inicial A: {start[0]} , {start[1]}")
        print(f"Posição inicial B: {middle[0]} , {middle[1]}")
        print(f"Posição inicial C: {goal[0]} , {goal[1]}")
        _list_obstacles(obstacles, first=0, trailer=" ")
        print(render(walk_via(rows, cols, obstacles, start, middle, goal)), end="")
        return 0
    except EOFError:
        return 0