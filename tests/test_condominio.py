import io

import pytest

from cadastros.condominio import (
    Apartment,
    Registry,
    format_apartment,
    main,
    parse_block,
)


def make(owner="Ana", block="A", area=70.5):
    return Apartment(
        owner=owner,
        resident="Bia",
        block=block,
        number=101,
        rooms=3,
        area=area,
        floor=1,
        residents=2,
    )


@pytest.mark.parametrize("text", ["A", "a", "b", "C", "d", " D "])
def test_parse_block_accepts_valid_blocks(text):
    assert parse_block(text) == text.strip()


@pytest.mark.parametrize("text", ["E", "", "AB", "1", "z"])
def test_parse_block_rejects_invalid(text):
    with pytest.raises(ValueError):
        parse_block(text)


def test_add_assigns_sequential_ids():
    registry = Registry()
    ids = [registry.add(make(owner=name)).id for name in ("x", "y", "z")]
    assert ids == [1, 2, 3]
    assert [a.owner for a in registry] == ["x", "y", "z"]


def test_remove_shifts_following_ids_and_keeps_next_id():
    registry = Registry()
    for name in ("x", "y", "z"):
        registry.add(make(owner=name))
    next_id = registry.next_id
    registry.remove(2)
    assert [(a.id, a.owner) for a in registry] == [(1, "x"), (2, "z")]
    assert registry.next_id == next_id


def test_remove_missing_raises():
    registry = Registry()
    registry.add(make())
    with pytest.raises(KeyError):
        registry.remove(7)
    assert len(registry) == 1


def test_replace_keeps_id():
    registry = Registry()
    registry.add(make(owner="x"))
    registry.add(make(owner="y"))
    updated = registry.replace(2, make(owner="w", block="c"))
    assert updated.id == 2
    assert [(a.id, a.owner, a.block) for a in registry] == [(1, "x", "A"), (2, "w", "c")]


def test_replace_missing_raises():
    with pytest.raises(KeyError):
        Registry().replace(1, make())


def test_save_load_round_trip(tmp_path):
    path = tmp_path / "Condominio.dat"
    registry = Registry()
    registry.add(make(owner="João"))
    registry.add(make(owner="Maria", block="d", area=42.25))
    registry.save(path)
    loaded = Registry.load(path)
    assert loaded.apartments == registry.apartments
    assert loaded.next_id == len(loaded) + 1


def test_records_have_fixed_size(tmp_path):
    one, two = tmp_path / "one.dat", tmp_path / "two.dat"
    single = Registry()
    single.add(make())
    single.save(one)
    double = Registry()
    double.add(make(owner="a"))
    double.add(make(owner="bbbbbbbbbb"))
    double.save(two)
    assert two.stat().st_size == 2 * one.stat().st_size


def test_load_missing_file_is_empty(tmp_path):
    registry = Registry.load(tmp_path / "absent.dat")
    assert len(registry) == 0
    assert registry.next_id == 1


def test_load_ignores_partial_trailing_record(tmp_path):
    path = tmp_path / "Condominio.dat"
    registry = Registry()
    registry.add(make())
    registry.save(path)
    with path.open("ab") as handle:
        handle.write(b"xx")
    assert Registry.load(path).apartments == registry.apartments


def test_long_names_are_truncated(tmp_path):
    path = tmp_path / "Condominio.dat"
    registry = Registry()
    registry.add(make(owner="n" * 150))
    registry.save(path)
    owner = Registry.load(path).apartments[0].owner
    assert owner == "n" * 99


def test_format_apartment():
    apartment = make()
    apartment.id = 5
    text = format_apartment(apartment)
    assert text.startswith("ID: 5\nProprietário: Ana\nResidente: Bia\nBloco: A")
    assert "Metragem: 70.50 metros quadrados" in text
    assert text.endswith("-" * 38)


def run_main(monkeypatch, capsys, lines, path):
    monkeypatch.setattr("sys.stdin", io.StringIO("\n".join(lines) + "\n"))
    result = main([str(path)])
    return result, capsys.readouterr().out


def test_main_insert_and_save(monkeypatch, capsys, tmp_path):
    path = tmp_path / "Condominio.dat"
    lines = ["I", "Ana", "Bia", "x", "b", "101", "3", "70,5", "2", "4", "L", "S"]
    result, out = run_main(monkeypatch, capsys, lines, path)
    assert result == 0
    assert "Bloco inválido !!!" in out
    assert "Registros salvos com sucesso" in out
    saved = Registry.load(path).apartments
    assert saved == [Apartment("Ana", "Bia", "b", 101, 3, 70.5, 2, 4, id=1)]


def test_main_delete_and_edit(monkeypatch, capsys, tmp_path):
    path = tmp_path / "Condominio.dat"
    registry = Registry()
    registry.add(make(owner="x"))
    registry.add(make(owner="y"))
    registry.save(path)
    lines = ["D", "1", "E", "1", "Novo", "Res", "c", "5", "2", "30", "3", "1", "D", "9", "S"]
    _, out = run_main(monkeypatch, capsys, lines, path)
    assert "Registro deletado com sucesso" in out
    assert "Registro editado com sucesso" in out
    assert "ID não encontrado" in out
    saved = Registry.load(path).apartments
    assert saved == [Apartment("Novo", "Res", "c", 5, 2, 30.0, 3, 1, id=1)]


def test_main_invalid_option_and_empty_list(monkeypatch, capsys, tmp_path):
    _, out = run_main(monkeypatch, capsys, ["Q", "L", "S"], tmp_path / "c.dat")
    assert "Opção inválida !!!" in out
    assert "Nenhum registro cadastrado !!!" in out