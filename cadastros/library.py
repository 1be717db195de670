"""In-memory catalogue of the books of a library."""

from __future__ import annotations

import argparse
import subprocess
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator

SEPARATOR = "-" * 32
_CLEAR_SEQUENCE = "\033[H\033[J"

MENU = "Menu \n(I) Inserir\n(E) Excluir\n(B) Busca\n(L) Listar\n(S) Sair"
SEARCH_MENU = "Busca por: \n(T) Titulo \n(A) Autor\n(E) Editora\n(V) Voltar"


@dataclass
class Book:
    """One book of the catalogue."""

    title: str
    author: str
    publisher: str
    year: int
    subject: str


def format_book(book: Book) -> str:
    """Render a book the way listings and searches show it."""
    return "\n".join(
        [
            SEPARATOR,
            f"Titulo: {book.title}",
            f"Autor: {book.author}",
            f"Editora: {book.publisher}",
            f"Ano: {book.year}",
            f"Assunto do livro: {book.subject}",
            SEPARATOR,
        ]
    )


class Library:
    """The books, in the order they were registered."""

    def __init__(self, books: Iterable[Book] = ()):
        self.books: list[Book] = list(books)

    def __len__(self) -> int:
        return len(self.books)

    def __iter__(self) -> Iterator[Book]:
        return iter(self.books)

    def add(self, book: Book) -> None:
        """Append a book to the catalogue."""
        self.books.append(book)

    def remove_at(self, position: int) -> Book:
        """Remove and return the book at this absolute position."""
        if not 0 <= position < len(self.books):
            raise IndexError("Posição inválida")
        return self.books.pop(position)

    def find_by_title(self, title: str) -> list[Book]:
        """Books whose title is exactly this one."""
        return [book for book in self.books if book.title == title]

    def find_by_author(self, author: str) -> list[Book]:
        """Books whose author is exactly this one."""
        return [book for book in self.books if book.author == author]

    def find_by_publisher(self, publisher: str) -> list[Book]:
        """Books whose publisher is exactly this one."""
        return [book for book in self.books if book.publisher == publisher]


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


def _read_book() -> Book:
    title = input("Titulo: ")
    author = input("Autor: ")
    publisher = input("Editora: ")
    year = _ask_int("Ano de lançamento: ")
    subject = input("Assunto do livro: ")
    return Book(title, author, publisher, year, subject)


def _show(books: list[Book], missing: str) -> None:
    for book in books:
        print(format_book(book))
    if not books:
        print(missing)


def _search(library: Library) -> None:
    print(SEARCH_MENU)
    option = input()[:1].upper()
    if option == "T":
        _show(library.find_by_title(input("Titulo: ")), "Titulo não encontrado ")
    elif option == "A":
        _show(library.find_by_author(input("Autor: ")), "Autor não encontrado")
    elif option == "E":
        _show(library.find_by_publisher(input("Editora: ")), "Editora não encontrada ")
    elif option != "V":
        print("Opção inválida !!!")


def main(argv=None) -> int:
    """Run the interactive library menu."""
    argparse.ArgumentParser(prog="biblioteca", description="Cadastro de livros.").parse_args(argv)
    library = Library()
    try:
        initial = _ask_int("Tamanho inicial de livros a serem cadastrados: ")
        for _ in range(initial):
            library.add(_read_book())
            _clear()
        while True:
            print(MENU)
            option = input()[:1].upper()
            if option == "I":
                library.add(_read_book())
                _clear()
            elif option == "E":
                position = _ask_int("Posição absoluta que deseja excluir: ")
                try:
                    library.remove_at(position)
                except IndexError:
                    print("Posição inválida !!!")
                else:
                    _clear()
            elif option == "B":
                _search(library)
            elif option == "L":
                _show(library.books, "Titulo não encontrado ")
            elif option == "S":
                print("Bye")
                return 0
            else:
                print("Opção inválida !!!")
    except EOFError:
        return 0