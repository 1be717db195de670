"""In-memory register of students, their course code and three grades."""

from __future__ import annotations

import argparse
import subprocess
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator

SEPARATOR = "-" * 38
_CLEAR_SEQUENCE = "\033[H\033[J"

MENU = "Menu\n(I) Inserir\n(E) Excluir\n(L) Listar\n(N) Notas\n(S) Sair"


@dataclass
class Student:
    """One student with the three grades of the course."""

    registration: int
    name: str
    course: int
    grades: tuple[float, float, float] = (0.0, 0.0, 0.0)

    @property
    def average(self) -> float:
        """Arithmetic mean of the three grades."""
        return sum(self.grades) / 3


def format_student(student: Student) -> str:
    """Render a student the way the listing shows it."""
    first, second, third = student.grades
    return "\n".join(
        [
            SEPARATOR,
            f"Matricula: {student.registration}",
            f"Nome: {student.name}",
            f"Código da disciplina: {student.course}",
            f"Nota 1: {first:.2f}",
            f"Nota 2: {second:.2f}",
            f"Nota 3: {third:.2f}",
            f"Média: {student.average:.2f}",
            SEPARATOR,
        ]
    )


class Roster:
    """The students, in the order they were registered."""

    def __init__(self, students: Iterable[Student] = ()):
        self.students: list[Student] = list(students)

    def __len__(self) -> int:
        return len(self.students)

    def __iter__(self) -> Iterator[Student]:
        return iter(self.students)

    def add(self, student: Student) -> None:
        """Append a student to the roster."""
        self.students.append(student)

    def remove_at(self, position: int) -> Student:
        """Remove and return the student at this absolute position."""
        if not 0 <= position < len(self.students):
            raise IndexError("Posição inválida !!!")
        return self.students.pop(position)

    def set_grades(self, registration: int, first: float, second: float, third: float) -> int:
        """Give these grades to every student with this registration; return how many."""
        matched = [s for s in self.students if s.registration == registration]
        if not matched:
            raise KeyError(registration)
        for student in matched:
            student.grades = (float(first), float(second), float(third))
        return len(matched)


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


def _ask_float(prompt: str) -> float:
    while True:
        try:
            return float(input(prompt).strip().replace(",", "."))
        except ValueError:
            print("Valor inválido !!!")


def _read_student() -> Student:
    registration = _ask_int("Matricula: ")
    name = input("Nome: ")
    course = _ask_int("Código da disciplina: ")
    return Student(registration, name, course)


def main(argv=None) -> int:
    """Run the interactive student menu."""
    argparse.ArgumentParser(prog="alunos", description="Cadastro de alunos.").parse_args(argv)
    roster = Roster()
    try:
        initial = _ask_int("Tamanho inicial de alunos que seram cadastrados: ")
        for _ in range(initial):
            roster.add(_read_student())
            _clear()
        while True:
            print(MENU)
            option = input()[:1].upper()
            if option == "I":
                roster.add(_read_student())
                _clear()
            elif option == "E":
                position = _ask_int("Posição absoluta que deseja excluir: ")
                try:
                    roster.remove_at(position)
                except IndexError:
                    print("Posição inválida !!!")
                else:
                    _clear()
            elif option == "L":
                if roster.students:
                    for student in roster:
                        print(format_student(student))
                else:
                    print("Nenhum aluno cadastrado ")
            elif option == "N":
                registration = _ask_int("Matricula do aluno: ")
                if any(s.registration == registration for s in roster):
                    first = _ask_float("Nota 1: ")
                    second = _ask_float("Nota 2: ")
                    third = _ask_float("nota 3: ")
                    roster.set_grades(registration, first, second, third)
                    _clear()
                else:
                    print("Matricula não encontrada ")
            elif option == "S":
                print("Bye")
                return 0
            else:
                print("Opção inválida !!!")
    except EOFError:
        return 0