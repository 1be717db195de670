"""Apartment registry for a condominium, kept in a binary data file."""

from __future__ import annotations

import argparse
import struct
import subprocess
import sys
from dataclasses import dataclass
from dataclasses import replace as _with
from pathlib import Path
from typing import Iterable, Iterator

DEFAULT_FILE = "Condominio.dat"
BLOCKS = "ABCD"
SEPARATOR = "-" * 38
_CLEAR_SEQUENCE = "\033[H\033[J"

# id, owner[100], resident[100], block, padding, number, rooms, area, floor, residents
_RECORD = struct.Struct("<i100s100sc3xiifii")
_TEXT_SIZE = 100

MENU = (
    "Menu\n"
    "(I) Inserir registro\n"
    "(L) Listar registros\n"
    "(D) Deletar registro\n"
    "(E) Editar registro\n"
    "(S) Sair"
)


@dataclass
class Apartment:
    """One apartment record."""

    owner: str
    resident: str
    block: str
    number: int
    rooms: int
    area: float
    floor: int
    residents: int
    id: int = 0


def parse_block(text: str) -> str:
    """Return the block letter typed, which must be A, B, C or D in either case."""
    block = text.strip()
    if len(block) != 1 or block.upper() not in BLOCKS:
        raise ValueError("Bloco inválido !!!")
    return block


def format_apartment(apartment: Apartment) -> str:
    """Render an apartment the way the listing shows it."""
    return "\n".join(
        [
            f"ID: {apartment.id}",
            f"Proprietário: {apartment.owner}",
            f"Residente: {apartment.resident}",
            f"Bloco: {apartment.block}",
            f"Número do apartamento: {apartment.number}",
            f"Quantidade de quartos: {apartment.rooms}",
            f"Metragem: {apartment.area:.2f} metros quadrados",
            f"Andar: {apartment.floor}",
            f"Número de residentes: {apartment.residents}",
            SEPARATOR,
        ]
    )


def _encode_text(text: str) -> bytes:
    return text.encode("utf-8")[: _TEXT_SIZE - 1]


def _decode_text(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="ignore")


def _pack(apartment: Apartment) -> bytes:
    return _RECORD.pack(
        apartment.id,
        _encode_text(apartment.owner),
        _encode_text(apartment.resident),
        apartment.block.encode("ascii", errors="replace")[:1] or b"\0",
        apartment.number,
        apartment.rooms,
        apartment.area,
        apartment.floor,
        apartment.residents,
    )


def _unpack(fields: tuple) -> Apartment:
    ident, owner, resident, block, number, rooms, area, floor, residents = fields
    return Apartment(
        owner=_decode_text(owner),
        resident=_decode_text(resident),
        block=block.decode("ascii", errors="replace").strip("\0"),
        number=number,
        rooms=rooms,
        area=area,
        floor=floor,
        residents=residents,
        id=ident,
    )


class Registry:
    """The apartments of the condominium and the next identifier to hand out."""

    def __init__(self, apartments: Iterable[Apartment] = (), next_id: int | None = None):
        self.apartments: list[Apartment] = list(apartments)
        self.next_id = len(self.apartments) + 1 if next_id is None else next_id

    def __len__(self) -> int:
        return len(self.apartments)

    def __iter__(self) -> Iterator[Apartment]:
        return iter(self.apartments)

    def add(self, apartment: Apartment) -> Apartment:
        """Store the apartment under the next identifier and return the stored record."""
        stored = _with(apartment, id=self.next_id)
        self.next_id += 1
        self.apartments.append(stored)
        return stored

    def remove(self, apartment_id: int) -> None:
        """Delete the record with this id; records after it move down one id."""
        if not any(apartment.id == apartment_id for apartment in self.apartments):
            raise KeyError(apartment_id)
        kept = []
        shifted = False
        for apartment in self.apartments:
            if apartment.id == apartment_id:
                shifted = True
                continue
            kept.append(_with(apartment, id=apartment.id - 1) if shifted else apartment)
        self.apartments = kept

    def replace(self, apartment_id: int, apartment: Apartment) -> Apartment:
        """Overwrite the record with this id, keeping the id, and return it."""
        for index, current in enumerate(self.apartments):
            if current.id == apartment_id:
                updated = _with(apartment, id=apartment_id)
                self.apartments[index] = updated
                return updated
        raise KeyError(apartment_id)

    @classmethod
    def load(cls, path) -> "Registry":
        """Read every complete record from the data file; a missing file is empty."""
        try:
            data = Path(path).read_bytes()
        except FileNotFoundError:
            data = b""
        usable = len(data) - len(data) % _RECORD.size
        return cls(_unpack(fields) for fields in _RECORD.iter_unpack(data[:usable]))

    def save(self, path) -> None:
        """Write every record to the data file, replacing what was there."""
        Path(path).write_bytes(b"".join(_pack(apartment) for apartment in self.apartments))


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


def _ask_block(prompt: str) -> str:
    while True:
        try:
            return parse_block(input(prompt))
        except ValueError as error:
            print(error)


def _read_apartment() -> Apartment:
    print("Digite os dados do apartamento")
    owner = input("Nome do proprietário: ")
    resident = input("Nome do residente: ")
    block = _ask_block("Bloco: ")
    return Apartment(
        owner=owner,
        resident=resident,
        block=block,
        number=_ask_int("Número do apartamento: "),
        rooms=_ask_int("Quantidade de quartos no apartamento: "),
        area=_ask_float("Metragem(Metros quadrados): "),
        floor=_ask_int("Andar: "),
        residents=_ask_int("Número de residentes: "),
    )


def _edit_apartment(current: Apartment) -> Apartment:
    print(f"Nome do proprietario atual: {current.owner}")
    owner = input("Novo nome: ")
    _clear()
    print(f"Nome do residente atual: {current.resident}")
    resident = input("Novo nome: ")
    _clear()
    print(f"Bloco atual: {current.block}")
    block = _ask_block("Novo bloco: ")
    _clear()
    print(f"Número do apartamento atual: {current.number}")
    number = _ask_int("Novo número: ")
    _clear()
    print(f"Número de quartos atual: {current.rooms}")
    rooms = _ask_int("Novo número de quartos: ")
    _clear()
    print(f"Metragem atual: {current.area:.2f}")
    area = _ask_float("Nova metragem: ")
    _clear()
    print(f"Andar atual: {current.floor}")
    floor = _ask_int("Novo andar: ")
    _clear()
    print(f"Número de residentes atuais: {current.residents}")
    residents = _ask_int("Novo número: ")
    return Apartment(owner, resident, block, number, rooms, area, floor, residents)


def main(argv=None) -> int:
    """Run the interactive condominium menu."""
    parser = argparse.ArgumentParser(prog="condominio", description="Cadastro de apartamentos.")
    parser.add_argument("file", nargs="?", default=DEFAULT_FILE, help="arquivo de dados")
    args = parser.parse_args(argv)
    registry = Registry.load(args.file)
    try:
        while True:
            print(MENU)
            option = input()[:1].upper()
            if option == "I":
                _clear()
                registry.add(_read_apartment())
            elif option == "L":
                _clear()
                if registry.apartments:
                    for apartment in registry:
                        print(format_apartment(apartment))
                else:
                    print("Nenhum registro cadastrado !!!")
            elif option == "D":
                apartment_id = _ask_int("ID do registro que deseja excluir: ")
                try:
                    registry.remove(apartment_id)
                except KeyError:
                    print("ID não encontrado")
                else:
                    _clear()
                    print("Registro deletado com sucesso")
            elif option == "E":
                _clear()
                apartment_id = _ask_int("ID: ")
                current = next((a for a in registry if a.id == apartment_id), None)
                if current is None:
                    print("Id não encontrado !!!")
                else:
                    registry.replace(apartment_id, _edit_apartment(current))
                    _clear()
                    print("Registro editado com sucesso")
            elif option == "S":
                registry.save(args.file)
                print("Registros salvos com sucesso ")
                print("BYE BYE")
                return 0
            else:
                print("Opção inválida !!!")
    except EOFError:
        return 0