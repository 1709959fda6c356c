import io

import pytest

from tdalib.historic_date import HistoricDate, main


def test_default_is_year_zero_without_events():
    date = HistoricDate()
    assert date.year == 0
    assert len(date) == 0
    assert str(date) == "0#0#"


def test_str_format():
    date = HistoricDate(1945, ["A", "B"])
    assert str(date) == "1945#2#A#B#"


def test_duplicates_dropped_in_constructor():
    date = HistoricDate(10, ["x", "y", "x", "z", "y"])
    assert list(date) == ["x", "y", "z"]
    assert len(date) == 3


def test_add_event_ignores_duplicate():
    date = HistoricDate(5, ["one"])
    date.add_event("two")
    date.add_event("one")
    assert date.events == ("one", "two")


@pytest.mark.parametrize("year", [-9999, 0, 9999])
def test_year_limits_accepted(year):
    assert HistoricDate(year).year == year


@pytest.mark.parametrize("year", [-10000, 10000])
def test_year_out_of_range(year):
    with pytest.raises(ValueError):
        HistoricDate(year)


def test_addition_joins_without_duplicates():
    left = HistoricDate(19, ["a", "b"])
    right = HistoricDate(19, ["b", "c"])
    total = left + right
    assert total.year == 19
    assert list(total) == ["a", "b", "c"]
    assert list(left) == ["a", "b"]


def test_addition_of_different_years_fails():
    with pytest.raises(ValueError):
        HistoricDate(1) + HistoricDate(2)


def test_search_returns_matching_events():
    date = HistoricDate(19, ["EVENTO UNO", "OTRA COSA", "EVENTO DOS"])
    found = date.search("EV")
    assert found.year == 19
    assert list(found) == ["EVENTO UNO", "EVENTO DOS"]


def test_search_without_match_keeps_year():
    date = HistoricDate(19, ["alpha"])
    found = date.search("ANTONIO")
    assert len(found) == 0
    assert str(found) == "19#0#"


def test_parse_round_trip():
    date = HistoricDate(-44, ["idus", "marzo"])
    assert HistoricDate.parse(str(date)) == date


def test_parse_skips_whitespace_inside_events():
    date = HistoricDate.parse("19#1#ab cd#")
    assert list(date) == ["abcd"]


def test_parse_drops_repeated_events():
    date = HistoricDate.parse("7#3#a#b#a#")
    assert list(date) == ["a", "b"]


def test_parse_rejects_trailing_text():
    with pytest.raises(ValueError):
        HistoricDate.parse("7#1#a#extra")


@pytest.mark.parametrize("text", ["", "7", "7#2#a#", "x#1#a#", "7#-1#", "7!1#a#"])
def test_parse_rejects_malformed(text):
    with pytest.raises(ValueError):
        HistoricDate.parse(text)


def test_read_consumes_one_record():
    stream = io.StringIO("1#1#a#\n2#2#b#c#\n")
    first = HistoricDate.read(stream)
    second = HistoricDate.read(stream)
    assert first == HistoricDate(1, ["a"])
    assert second == HistoricDate(2, ["b", "c"])
    with pytest.raises(EOFError):
        HistoricDate.read(stream)


def test_main_wrong_arguments(capsys):
    assert main(["only-one"]) == 0
    assert "Dime el nombre" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "missing.txt"
    assert main([str(missing), str(missing), str(missing)]) == 0
    assert f"No puedo abrir el fichero {missing}" in capsys.readouterr().err


def test_main_runs_on_files(tmp_path, capsys):
    paths = []
    for name, text in [("a", "19#1#EVA#"), ("b", "19#2#EVX#YAY#"), ("c", "19#1#ZZ#")]:
        path = tmp_path / f"{name}.txt"
        path.write_text(text, encoding="utf-8")
        paths.append(str(path))
    assert main(paths) == 0
    out = capsys.readouterr().out
    assert "fh1 = 19#1#EVA#" in out
    assert "fh3 + fh4 = fh5 = 19#3#EVX#YAY#ZZ#" in out
    assert "fh6 = 19#1#EVX#" in out
    assert "fh7 = 19#1#YAY#" in out
    assert "No se ha encontrado la clave 'ANTONIO' en fh5: " in out
    assert "fh8 = 19#0#" in out