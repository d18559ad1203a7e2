import io

import pytest

from evolearn import fileio


def test_divide_single_character():
    assert fileio.divide("a.b.c", ".") == ["a", "b", "c"]


def test_divide_without_separator_returns_whole():
    assert fileio.divide("plain", ",") == ["plain"]


def test_divide_multi_character_keeps_tail():
    assert fileio.divide("a::b", "::") == ["a", ":b"]


def test_divide_empty_separator_rejected():
    with pytest.raises(ValueError):
        fileio.divide("abc", "")


def test_convert_matrix_numbers_and_strings():
    assert fileio.convert_matrix([["1.5", "2"]], float) == [[1.5, 2.0]]
    assert fileio.convert_matrix([["first second"]], str) == [["first"]]
    assert fileio.convert_matrix([["7"]], int) == [[7]]


def test_convert_matrix_unparseable_becomes_zero():
    assert fileio.convert_matrix([["x"]], float) == [[0.0]]


def test_detect_separator():
    assert fileio.detect_separator("data.csv") == ","
    assert fileio.detect_separator("sheet.v2.xls") == "\t"


def test_detect_separator_unknown_extension():
    with pytest.raises(fileio.UnrecognizedExtensionError) as info:
        fileio.detect_separator("notes.txt")
    assert info.value.extension == "txt"


def test_write_then_read_2d_round_trip(tmp_path):
    path = str(tmp_path / "grid.csv")
    data = [[1.0, 2.5], [3.0, -4.25]]
    fileio.write_vector(data, path)
    assert fileio.read2(path) == data


def test_write_then_read_tab_separated(tmp_path):
    path = str(tmp_path / "grid.xls")
    data = [[0.5, 6.0, 7.0]]
    fileio.write_vector(data, path, separator="\t")
    assert fileio.read2(path) == data


def test_write_1d_contents(tmp_path):
    path = tmp_path / "row.csv"
    fileio.write_vector([1, 2, 3], str(path))
    assert path.read_text() == "1,2,3,"


def test_write_3d_flattens_each_outer_row(tmp_path):
    path = str(tmp_path / "cube.csv")
    fileio.write_vector([[[1.0, 2.0], [3.0]], [[4.0], [5.0, 6.0]]], path)
    assert fileio.read2(path) == [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]


def test_append_starts_with_newline(tmp_path):
    path = tmp_path / "log.csv"
    fileio.write_vector([[1.0, 2.0]], str(path))
    first = path.read_text()
    fileio.write_vector([[3.0, 4.0]], str(path), overwrite=False)
    assert path.read_text().startswith(first + "\n")
    assert fileio.read2(str(path)) == [[1.0, 2.0], [3.0, 4.0]]


def test_read2_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        fileio.read2(str(tmp_path / "absent.csv"))


def test_read_pairs_round_trip(tmp_path):
    path = str(tmp_path / "pairs.csv")
    pairs = [(1.0, 2.0), (3.5, 4.0)]
    fileio.write_pairs(pairs, path)
    assert fileio.read_pairs(path) == pairs


def test_read_pairs_with_factory(tmp_path):
    path = str(tmp_path / "pairs.csv")
    fileio.write_pairs([(1.0, 2.0)], path)
    assert fileio.read_pairs(path, factory=complex) == [complex(1.0, 2.0)]


def test_read_pairs_rejects_triples(tmp_path):
    path = str(tmp_path / "triples.csv")
    fileio.write_vector([[1.0, 2.0, 3.0]], path)
    with pytest.raises(fileio.NotPairError):
        fileio.read_pairs(path)


def test_write_pairs_from_mapping(tmp_path):
    path = str(tmp_path / "map.csv")
    fileio.write_pairs({"alpha": 1, "beta": 2}, path)
    assert fileio.read2(path, kind=str) == [["alpha", "1"], ["beta", "2"]]


def test_read_variable_file_first_entry_wins(tmp_path):
    path = tmp_path / "vars.csv"
    path.write_text("alpha,0.5\nbeta,2\n\nalpha,9\n")
    assert fileio.read_variable_file(str(path)) == {"alpha": 0.5, "beta": 2.0}


def test_read_variable_file_missing_value(tmp_path):
    path = tmp_path / "vars.csv"
    path.write_text("alpha\n")
    with pytest.raises(fileio.FileFormatError):
        fileio.read_variable_file(str(path))


def test_file_exists(tmp_path):
    present = tmp_path / "here.csv"
    present.write_text("1,")
    assert fileio.file_exists(str(present)) is True
    assert fileio.file_exists(str(tmp_path / "gone.csv")) is False


def test_strip_file_path():
    assert fileio.strip_file_path("dir/sub/file.csv") == "file.csv"
    assert fileio.strip_file_path("file.csv") == "file.csv"
    assert fileio.strip_file_path("dir/") == ""


def test_strip_extension():
    assert fileio.strip_extension("file.tar.gz") == "file"
    with pytest.raises(ValueError):
        fileio.strip_extension("noext")


def test_format_vector_1d_with_label():
    text = fileio.format_vector([1, 2], label="xs")
    assert text.startswith("xs:\n")
    assert text.endswith("\n")
    assert "1,2," in text


def test_format_vector_2d_rows():
    text = fileio.format_vector([[1, 2], [3, 4]])
    lines = text.split("\n")
    assert lines[:2] == ["1,2,", "3,4,"]
    assert text.endswith("\n\n")


def test_print_vector_writes_formatted(capsys):
    fileio.print_vector([5, 6], separator=";")
    assert capsys.readouterr().out == fileio.format_vector([5, 6], separator=";")


def test_get_yes_no_retries_until_valid():
    answers = iter(["maybe", "", "n"])
    out = io.StringIO()
    result = fileio.get_yes_no("Go?", input_func=lambda: next(answers), output=out)
    assert result is False
    assert out.getvalue().count("Go? (y/n)\t") == 2
    assert "Unrecognized entry. " in out.getvalue()


def test_get_yes_no_accepts_yes():
    out = io.StringIO()
    assert fileio.get_yes_no("Save?", input_func=lambda: "y", output=out) is True