"""Robot walk on a grid with a single hole in the centre."""

from __future__ import annotations

import argparse
import subprocess
import sys

EMPTY = "#"
HOLE = "O"
PATH = "X"
START = "A"
GOAL = "B"
MIN_SIZE = 3
_CLEAR_SEQUENCE = "\033[H\033[J"

Position = tuple[int, int]


def make_grid(rows: int, cols: int) -> list[list[str]]:
    """A rows x cols grid with every cell empty."""
    return [[EMPTY] * cols for _ in range(rows)]


def render(grid: list[list[str]]) -> str:
    """Text of the grid, each cell followed by ' - ', one line per row."""
    return "".join("".join(f"{cell} - " for cell in row) + "\n" for row in grid)


def _hole(rows: int, cols: int) -> Position:
    return rows // 2, cols // 2


def _check(rows: int, cols: int, start: Position, goal: Position) -> None:
    if rows < MIN_SIZE or cols < MIN_SIZE:
        raise ValueError("Tamanho inválido")
    for row, col in (start, goal):
        if not (0 <= row < rows and 0 <= col < cols):
            raise ValueError("Posição fora da matriz")
    hole = _hole(rows, cols)
    if start == hole or goal == hole:
        raise ValueError("Posição inválida")
    if start == goal:
        raise ValueError("Posição ocupada")


def walk_around_hole(rows: int, cols: int, start: Position, goal: Position) -> list[list[str]]:
    """Walk from start to goal, stepping around the hole, and return the marked grid."""
    _check(rows, cols, start, goal)
    grid = make_grid(rows, cols)
    hole = _hole(rows, cols)
    row, col = start
    goal_row, goal_col = goal

    while (row, col) != goal:
        if col == goal_col:
            # same column: one step vertically, sidestepping the hole
            row += 1 if row < goal_row else -1
            mark_col = col
            if (row, col) == hole:
                mark_col += 1 if row > start[0] or goal_row > row else -1
            grid[row][mark_col] = PATH
        elif row == goal_row:
            # same row: one step horizontally, sidestepping the hole
            col += 1 if col < goal_col else -1
            mark_row = row
            if (row, col) == hole:
                mark_row += 1 if col <= goal_col and col > start[1] or goal_col > col else -1
            grid[mark_row][col] = PATH
        else:
            # diagonal steps until the row or the column lines up
            down = row < goal_row
            while row != goal_row and col != goal_col:
                right = col < goal_col
                next_row = row + (1 if down else -1)
                next_col = col + (1 if right else -1)
                if (next_row, next_col) == hole:
                    if down or right:
                        next_row = row
                    else:
                        next_col = col
                row, col = next_row, next_col
                grid[row][col] = PATH

    grid[hole[0]][hole[1]] = HOLE
    grid[start[0]][start[1]] = START
    grid[goal_row][goal_col] = GOAL
    return grid


def _clear() -> None:
    """Clear the terminal: run clear on a terminal, else emit the clear sequence."""
    if sys.stdout.isatty():
        try:
            subprocess.run(["clear"], check=False)
            return
        except OSError:
            pass
    sys.stdout.write(_CLEAR_SEQUENCE)
    sys.stdout.flush()


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


def _ask_position(rows: int, cols: int) -> Position:
    row = _ask_index("Linha: ", rows, "Linha inválida, digite novamente ")
    col = _ask_index("Coluna: ", cols, "Coluna inválida, digite novamente ")
    return row, col


def main(argv=None) -> int:
    """Run the interactive grid walk."""
    argparse.ArgumentParser(prog="robozinho", description="Caminho de A até B.").parse_args(argv)
    try:
        print("Menu matriz")
        print("Regras da matriz: ")
        print("Tamanho minimo: 3 x 3")
        print("Tamanho máximo: use com sabedoria ")
        rows = _ask_size("Linha: ")
        cols = _ask_size("Coluna: ")
        hole = _hole(rows, cols)
        _clear()
        print("Menu posição inicial ")
        print("Regras: ")
        print(f"A posição inicial não pode ser: {hole[0]}, {hole[1]} ")
        print(f"A linha não pode ser menor que 0 e maior que: {rows - 1}")
        print(f"A coluna não pode ser menor que 0 e maior que: {cols - 1} ")
        while True:
            print("Digite a posição incial")
            start = _ask_position(rows, cols)
            if start != hole:
                break
            print("Posição inválida , digite novamente ")
        _clear()
        print("Menu posição final")
        print("Regras: ")
        print("A posição final não pode ser igual a posição inicial")
        print(f"Posição inicial: {start[0]},{start[1]}")
        print(f"A posição final não pode ser {hole[0]}, {hole[1]}")
        print(f"A linha não pode ser menor que 0 e maior que {rows - 1}")
        print(f"A coluna não pode ser menor que 0 e maior que {cols - 1}")
        while True:
            print("Digite a posição final ")
            goal = _ask_position(rows, cols)
            if goal == hole:
                print("Posição inválida, digite novamente ")
            if goal == start:
                print("Posição ocupada, digite novamente")
            if goal not in (hole, start):
                break
        _clear()
        print(f"Posição inicial A: {start[0]}, {start[1]}")
        print(f"Posição inicial B: {goal[0]}, {goal[1]}")
        print(f"Buraco O: {hole[0]}, {hole[1]}")
        print(render(walk_around_hole(rows, cols, start, goal)), end="")
        return 0
    except EOFError:
        return 0