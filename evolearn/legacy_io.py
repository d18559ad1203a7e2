"""Older helpers for plain lists, tab and comma tables, config files and console output."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any, NoReturn

from evolearn.fileio import FileFormatError, convert_matrix, strip_extension, strip_file_path


class FatalError(RuntimeError):
    """An unrecoverable failure, carrying the error number it was raised with."""

    def __init__(self, error_num: int, function_name: str, hint: str) -> None:
        super().__init__(f"FATAL{error_num}: {function_name}(...) {hint} Exiting.")
        self.error_num = error_num
        self.function_name = function_name
        self.hint = hint


class VariableNotFoundError(LookupError):
    """A named variable does not appear in a table."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Variable {name} not found!")
        self.name = name


def fatal(error_num: int, function_name: str, hint: str) -> NoReturn:
    """Raise a :class:`FatalError` describing where and why processing stopped."""
    raise FatalError(error_num, function_name, hint)


def format_number(value: Any) -> str:
    """Render a number with six significant digits, integers exactly."""
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def strip_file_paths(file_names: Iterable[str]) -> list[str]:
    """Return each name with its directory part removed."""
    return [strip_file_path(name) for name in file_names]


def strip_extensions(file_names: Iterable[str]) -> list[str]:
    """Return each name cut at its first '.'."""
    return [strip_extension(name) for name in file_names]


def _extension(file_name: str) -> str:
    found = file_name.find(".")
    if found == -1:
        raise ValueError(f"{file_name!r} has no extension")
    return file_name[found:]


def remove_except(extension: str, file_names: Iterable[str]) -> list[str]:
    """Keep only the names whose extension, from the first '.', equals ``extension``."""
    return [name for name in file_names if _extension(name) == extension]


def _read_lines(file_name: str) -> list[str]:
    with open(file_name, encoding="utf-8") as handle:
        return handle.read().split("\n")


def _split_fields(line: str, delimiter: str) -> list[str]:
    """Split like repeated line reads on ``delimiter``: a trailing empty field is dropped."""
    if not line:
        return []
    fields = line.split(delimiter)
    if fields[-1] == "":
        fields.pop()
    return fields


def import_list(file_name: str) -> list[str]:
    """Read the non-empty lines of a file."""
    return [line for line in _read_lines(file_name) if line]


def export_list(file_name: str, contents: Iterable[str]) -> None:
    """Write items one per line, with no newline after the last."""
    with open(file_name, "w", encoding="utf-8") as handle:
        handle.write("\n".join(contents))


def import_xls(file_name: str) -> list[list[str]]:
    """Read a tab-separated file into rows of strings, skipping blank lines."""
    rows = (_split_fields(line, "\t") for line in _read_lines(file_name))
    return [row for row in rows if row]


def import_config_file(file_name: str) -> list[list[str]]:
    """Read ``NAME = VALUE UNITS`` lines, skipping the first two (comment) rows.

    Words are separated by single spaces and '=' words are dropped.
    """
    rows = []
    for line in _read_lines(file_name):
        words = [word for word in _split_fields(line, " ") if word != "="]
        if words:
            rows.append(words)
    if len(rows) < 2:
        raise FileFormatError(f"{file_name} lacks the two leading comment rows")
    return rows[2:]


def _unquote(word: str) -> str:
    if word.startswith('"') and (len(word) == 1 or (len(word) >= 3 and word.endswith('"'))):
        return word[1:-1]
    return word


def import_csv(file_name: str, start_phrase: str = "", end_phrase: str = "") -> list[list[str]]:
    """Read a comma-separated file with quoted fields.

    Recording starts at a field equal to ``start_phrase`` (or at once when it
    is empty) and stops at a field equal to ``end_phrase``.
    """
    rows = []
    entering = start_phrase == ""
    for text in _read_lines(file_name):
        line = []
        switched = False
        for raw in _split_fields(text, ","):
            word = _unquote(raw) if raw else raw
            if word and word == start_phrase:
                entering = switched = True
            if word and word == end_phrase:
                entering = False
                switched = True
            if entering:
                line.append(word)
        if line and (entering or switched):
            rows.append(line)
    return rows


def export_csv(rows: Iterable[Iterable[str]], file_name: str = "unnamed-from-program.csv",
               separator: str = ",") -> None:
    """Write rows of strings, each cell followed by ``separator``, echoing them to stdout."""
    with open(file_name, "w", encoding="utf-8") as handle:
        for row in rows:
            line = "".join(f"{cell}{separator}" for cell in row)
            sys.stdout.write(line + "\n")
            handle.write(line + "\n")


def scrape_variable(rows: Sequence[Sequence[str]], name: str,
                    kind: Callable[[str], Any] = float) -> Any:
    """Return the cell after the first cell equal to ``name``, converted to ``kind``."""
    for row in rows:
        for position, cell in enumerate(row):
            if cell != name:
                continue
            if position + 1 >= len(row):
                raise FileFormatError(f"variable {name} has no value")
            raw = row[position + 1]
            if kind is str:
                return raw
            return convert_matrix([[raw]], kind)[0][0]
    raise VariableNotFoundError(name)


def format_array(values: Sequence[float], dim1: int, dim2: int | None = None, label: str = "") -> str:
    """Render a flat array as one row, or as ``dim1`` rows of ``dim2`` values.

    Row ``i`` starts at offset ``i * dim1``.
    """
    header = f"Showing {label}:\n\n"
    if dim2 is None:
        return header + "".join(f"{values[i]:f}, " for i in range(dim1)) + "\n\n"
    lines = (
        "".join(f"{values[i * dim1 + j]:f}, " for j in range(dim2)) + "\n"
        for i in range(dim1)
    )
    return header + "".join(lines) + "\n\n"


def _label(label: str) -> str:
    return f"{label}:\n" if label else ""


def _line(items: Iterable[Any], separator: str) -> str:
    return "".join(f"{format_number(item)}{separator}" for item in items)


def format_1d(data: Iterable[Any], label: str = "", separator: str = ",") -> str:
    """Render a flat container on one line, optionally under a label."""
    return _label(label) + _line(data, separator) + "\n"


def format_2d(data: Iterable[Iterable[Any]], label: str = "", separator: str = ",") -> str:
    """Render a nested container one row per line, followed by a blank line."""
    return _label(label) + "".join(_line(row, separator) + "\n" for row in data) + "\n"


def write_pairs(data: Mapping[Any, Any] | Iterable[tuple[Any, Any]], file_name: str,
                separator: str = ",") -> None:
    """Write numeric pairs in fixed six-decimal notation, one pair per line."""
    pairs = data.items() if isinstance(data, Mapping) else data
    with open(file_name, "w", encoding="utf-8") as handle:
        for first, second in pairs:
            handle.write(f"{first:f}{separator}{second:f}{separator}\n")


def write_file_1d(data: Iterable[Any], file_name: str, separator: str = ",") -> None:
    """Write the items of a container, each followed by ``separator``."""
    with open(file_name, "w", encoding="utf-8") as handle:
        handle.write(_line(data, separator))


def write_file_2d(data: Iterable[Iterable[Any]], file_name: str, separator: str = ",") -> None:
    """Write a nested container, one row per line."""
    with open(file_name, "w", encoding="utf-8") as handle:
        for row in data:
            handle.write(_line(row, separator) + "\n")


def wait_for_key(silent: bool = False, input_func: Callable[[], str] | None = None) -> str:
    """Pause until a line is entered and return it."""
    sys.stdout.write("\n" if silent else "\nPress ENTER to continue...\n")
    sys.stdout.flush()
    read = input_func if input_func is not None else input
    return read()