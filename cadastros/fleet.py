"""In-memory register of a fleet of cars."""

from __future__ import annotations

import argparse
import subprocess
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator

SEPARATOR = "-" * 26
_CLEAR_SEQUENCE = "\033[H\033[J"

MENU = "Menu \n(I) Inserir\n(E) Excluir\n(L) Listar \n(S) Sair"


@dataclass
class Car:
    """One car of the fleet."""

    model: str
    brand: str
    plate: str
    year: int
    color: str


def format_car(car: Car) -> str:
    """Render a car the way the listing shows it."""
    return "\n".join(
        [
            SEPARATOR,
            f"Modelo: {car.model}",
            f"Marca: {car.brand}",
            f"Placa: {car.plate}",
            f"Ano: {car.year}",
            f"Cor: {car.color}",
            SEPARATOR,
        ]
    )


class Fleet:
    """The cars, in the order they were registered."""

    def __init__(self, cars: Iterable[Car] = ()):
        self.cars: list[Car] = list(cars)

    def __len__(self) -> int:
        return len(self.cars)

    def __iter__(self) -> Iterator[Car]:
        return iter(self.cars)

    def add(self, car: Car) -> None:
        """Append a car to the fleet."""
        self.cars.append(car)

    def remove_at(self, position: int) -> Car:
        """Remove and return the car at this absolute position."""
        if not 0 <= position < len(self.cars):
            raise IndexError("Posição inválida")
        return self.cars.pop(position)


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


def _read_car() -> Car:
    model = input("Modelo: ")
    brand = input("Marca: ")
    plate = input("Placa: ")
    year = _ask_int("Ano: ")
    color = input("Cor: ")
    return Car(model, brand, plate, year, color)


def main(argv=None) -> int:
    """Run the interactive fleet menu."""
    argparse.ArgumentParser(prog="frota", description="Cadastro de frota de carros.").parse_args(argv)
    fleet = Fleet()
    try:
        initial = _ask_int("Número inicial de automóveis a serem cadastrados: ")
        for _ in range(initial):
            fleet.add(_read_car())
        _clear()
        while True:
            print(MENU)
            option = input()[:1].upper()
            if option == "I":
                fleet.add(_read_car())
                _clear()
            elif option == "E":
                position = _ask_int("Posição absoluta que deseja excluir: ")
                try:
                    fleet.remove_at(position)
                except IndexError:
                    print("Posição inválida ")
                else:
                    _clear()
            elif option == "L":
                if fleet.cars:
                    for car in fleet:
                        print(format_car(car))
                else:
                    print("Nenhuma automóvel cadastrado")
            elif option == "S":
                print("Bye")
                return 0
            else:
                print("Opção inválida !!!")
    except EOFError:
        return 0