import io

import pytest

from tdalib.dictionary import Dictionary, Entry, main

SAMPLE = "2\nperro\n2\nanimal\namigo\ncasa\n1\nhogar\n"


def test_keys_are_kept_in_ascending_order():
    d = Dictionary()
    for key in ["m", "c", "x", "a"]:
        d.insert(key, [key + "1"])
    keys = [entry.key for entry in d]
    assert keys == sorted(keys)
    assert len(d) == 4


def test_insert_existing_key_appends_information():
    d = Dictionary()
    d.insert("casa", ["hogar"])
    d.insert("casa", ["edificio"])
    assert len(d) == 1
    assert d.get_info("casa") == ["hogar", "edificio"]


def test_add_meaning_adds_missing_key_and_appends():
    d = Dictionary()
    d.add_meaning("sol", "estrella")
    d.add_meaning("sol", "luz")
    assert "sol" in d
    assert d.get_info("sol") == ["estrella", "luz"]


def test_get_info_of_missing_key_is_empty():
    d = Dictionary()
    d.insert("a", ["b"])
    assert d.get_info("z") == []
    assert "z" not in d


def test_get_info_returns_a_copy():
    d = Dictionary()
    d.insert("a", ["b"])
    info = d.get_info("a")
    info.append("c")
    assert d.get_info("a") == ["b"]


def test_copy_is_independent():
    d = Dictionary()
    d.insert("a", ["b"])
    duplicate = d.copy()
    assert duplicate == d
    duplicate.add_meaning("a", "c")
    duplicate.add_meaning("q", "r")
    assert d.get_info("a") == ["b"]
    assert len(d) == 1
    assert duplicate != d


def test_iteration_yields_entries():
    d = Dictionary()
    d.insert("b", ["2"])
    d.insert("a", ["1"])
    assert list(d) == [Entry("a", ["1"]), Entry("b", ["2"])]


def test_str_format():
    d = Dictionary()
    d.insert("casa", ["hogar"])
    assert str(d) == (
        "\nPalabra: casa\nInformación asociada:\nhogar"
        "**************************************"
    )


def test_str_of_empty_dictionary_is_empty():
    assert str(Dictionary()) == ""


def test_parse_sample():
    d = Dictionary.parse(SAMPLE)
    assert [entry.key for entry in d] == ["casa", "perro"]
    assert d.get_info("perro") == ["animal", "amigo"]
    assert d.get_info("casa") == ["hogar"]


def test_parse_merges_repeated_keys():
    d = Dictionary.parse("2\nx\n1\nuno\nx\n1\ndos\n")
    assert len(d) == 1
    assert d.get_info("x") == ["uno", "dos"]


def test_read_leaves_the_rest_of_the_stream():
    stream = io.StringIO(SAMPLE + "perro\n")
    d = Dictionary.read(stream)
    assert len(d) == 2
    assert stream.read().strip() == "perro"


@pytest.mark.parametrize(
    "text",
    ["", "abc\n", "1\nclave\n", "1\nclave\n2\nuno\n", "1\nclave\nx\n", "-1\n", SAMPLE + "sobra"],
)
def test_parse_rejects_bad_input(text):
    with pytest.raises(ValueError):
        Dictionary.parse(text)


def test_read_empty_stream_raises_eof():
    with pytest.raises(EOFError):
        Dictionary.read(io.StringIO(""))


def test_main_prints_meanings(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(SAMPLE + "perro\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Palabra: perro" in out
    assert out.endswith("Introduce una palabra\nanimal\namigo\n")


def test_main_reports_missing_word(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(SAMPLE + "gato\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.endswith("Palabra no encontrada.\n")


def test_main_rejects_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("no es un numero\n"))
    assert main([]) == 1
    assert capsys.readouterr().err