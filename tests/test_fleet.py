import io

import pytest

from cadastros.fleet import Car, Fleet, format_car, main


def make(model="Uno", plate="XXX0000"):
    return Car(model=model, brand="Marca", plate=plate, year=2010, color="Azul")


def test_add_keeps_order():
    fleet = Fleet()
    fleet.add(make("a"))
    fleet.add(make("b"))
    assert [car.model for car in fleet] == ["a", "b"]
    assert len(fleet) == 2


def test_remove_at_returns_removed_car():
    fleet = Fleet([make("a"), make("b"), make("c")])
    removed = fleet.remove_at(1)
    assert removed.model == "b"
    assert [car.model for car in fleet] == ["a", "c"]


@pytest.mark.parametrize("position", [3, 10, -1])
def test_remove_at_invalid_position(position):
    fleet = Fleet([make("a"), make("b"), make("c")])
    with pytest.raises(IndexError):
        fleet.remove_at(position)
    assert len(fleet) == 3


def test_format_car():
    text = format_car(make())
    lines = text.split("\n")
    assert lines[1:6] == [
        "Modelo: Uno",
        "Marca: Marca",
        "Placa: XXX0000",
        "Ano: 2010",
        "Cor: Azul",
    ]
    assert lines[0] == lines[-1] == "-" * 26


def run_main(monkeypatch, capsys, lines):
    monkeypatch.setattr("sys.stdin", io.StringIO("\n".join(lines) + "\n"))
    result = main([])
    return result, capsys.readouterr().out


def test_main_insert_remove_list(monkeypatch, capsys):
    lines = [
        "1", "Uno", "Fiat", "XXX0000", "2010", "Azul",
        "I", "Gol", "VW", "YYY0000", "abc", "2012", "Preto",
        "E", "0",
        "L",
        "S",
    ]
    result, out = run_main(monkeypatch, capsys, lines)
    assert result == 0
    assert "Modelo: Gol" in out
    assert "Modelo: Uno" not in out
    assert "Ano: 2012" in out
    assert out.rstrip().endswith("Bye")


def test_main_invalid_position_and_empty_list(monkeypatch, capsys):
    _, out = run_main(monkeypatch, capsys, ["0", "E", "0", "L", "X", "S"])
    assert "Posição inválida" in out
    assert "Nenhuma automóvel cadastrado" in out
    assert "Opção inválida !!!" in out