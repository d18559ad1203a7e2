"""Reading and writing delimited numeric files, plus small console helpers."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Iterable, Mapping
from typing import Any, TextIO

_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"[+-]?\d+")

_SEPARATORS_BY_EXTENSION = {"csv": ",", "xls": "\t"}


class FileFormatError(ValueError):
    """A data file does not have the expected layout."""


class UnrecognizedExtensionError(FileFormatError):
    """The separator cannot be inferred from a file's extension."""

    def __init__(self, extension: str) -> None:
        super().__init__(
            f"Unknown extension {extension}: please specify separator type."
        )
        self.extension = extension


class NotPairError(FileFormatError):
    """A file expected to hold two values per row holds something else."""

    def __init__(self, file_name: str) -> None:
        super().__init__(f"{file_name} does not contain pair values.")
        self.file_name = file_name


def _format_value(value: Any) -> str:
    """Render a value the way it is written into data files."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, float):
        return repr(value)
    return str(value)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _flatten(item: Any) -> Iterable[Any]:
    if _is_sequence(item):
        for inner in item:
            yield from _flatten(inner)
    else:
        yield item


def _join(items: Iterable[Any], separator: str) -> str:
    return "".join(f"{_format_value(item)}{separator}" for item in items)


def _convert_element(value: Any, kind: Callable[[str], Any]) -> Any:
    """Convert one value by reading the first whitespace-delimited token."""
    if kind in (int, float) and isinstance(value, (int, float)):
        return kind(value)
    text = value if isinstance(value, str) else _format_value(value)
    tokens = text.split()
    token = tokens[0] if tokens else ""
    if kind is str:
        return token
    if kind is float:
        match = _FLOAT_PREFIX.match(token)
        return float(match.group()) if match else 0.0
    if kind is int:
        match = _INT_PREFIX.match(token)
        return int(match.group()) if match else 0
    return kind(token)


def divide(text: str, separator: str) -> list[str]:
    """Split ``text`` at each occurrence of ``separator``.

    After each cut only one character is consumed, so a multi-character
    separator leaves its tail at the start of the following piece.
    """
    if not separator:
        raise ValueError("separator must not be empty")
    pieces = []
    found = text.find(separator)
    while found != -1:
        pieces.append(text[:found])
        text = text[found + 1:]
        found = text.find(separator)
    pieces.append(text)
    return pieces


def convert_matrix(rows: Iterable[Iterable[Any]], kind: Callable[[str], Any]) -> list[list[Any]]:
    """Convert every element of a 2-D table to ``kind``."""
    return [[_convert_element(value, kind) for value in row] for row in rows]


def detect_separator(file_name: str) -> str:
    """Infer the field separator from the file's extension."""
    extension = divide(file_name, ".")[-1]
    try:
        return _SEPARATORS_BY_EXTENSION[extension]
    except KeyError:
        raise UnrecognizedExtensionError(extension) from None


def _split_fields(line: str, delimiter: str) -> list[str]:
    if not line:
        return []
    fields = line.split(delimiter)
    if fields[-1] == "":
        fields.pop()
    return fields


def read2(file_name: str, separator: str | None = None, kind: Callable[[str], Any] = float) -> list[list[Any]]:
    """Read a delimited 2-D data file, skipping blank lines."""
    if separator is None:
        separator = detect_separator(file_name)
    if not separator:
        raise ValueError("separator must not be empty")
    delimiter = separator[0]
    with open(file_name, encoding="utf-8") as handle:
        text = handle.read()
    rows = [
        fields
        for fields in (_split_fields(line, delimiter) for line in text.split("\n"))
        if fields
    ]
    result = convert_matrix(rows, kind)
    print(f"... Successfully read in file {file_name}.")
    return result


def read_pairs(
    file_name: str,
    factory: Callable[[float, float], Any] | None = None,
    separator: str | None = None,
) -> list[Any]:
    """Read a file of two numbers per row, building each row with ``factory``."""
    build = factory if factory is not None else (lambda first, second: (first, second))
    pairs = []
    for row in read2(file_name, separator):
        if len(row) != 2:
            raise NotPairError(file_name)
        pairs.append(build(row[0], row[1]))
    return pairs


def read_variable_file(file_name: str) -> dict[str, float]:
    """Read ``name,value`` rows into a mapping; the first entry of a name wins."""
    variables: dict[str, float] = {}
    for row in read2(file_name, kind=str):
        if len(row) < 2:
            raise FileFormatError(f"{file_name}: row {row!r} has no value")
        name, raw = row[0], row[1]
        match = _FLOAT_PREFIX.match(raw.strip())
        if match is None:
            raise ValueError(f"{file_name}: value {raw!r} for {name} is not a number")
        variables.setdefault(name, float(match.group()))
    return variables


def file_exists(file_name: str) -> bool:
    """Return whether ``file_name`` can be opened for reading."""
    try:
        with open(file_name, "rb"):
            return True
    except OSError:
        return False


def _render(data: Iterable[Any], separator: str) -> str:
    items = list(data)
    if any(_is_sequence(item) for item in items):
        return "".join(_join(_flatten(item), separator) + "\n" for item in items)
    return _join(items, separator)


def _open_for_output(file_name: str, overwrite: bool) -> TextIO:
    handle = open(file_name, "w" if overwrite else "a", encoding="utf-8")
    if not overwrite:
        handle.write("\n")
    return handle


def write_vector(data: Iterable[Any], file_name: str, overwrite: bool = True, separator: str = ",") -> None:
    """Write a 1-, 2- or 3-D nested list to a file.

    Every value is followed by ``separator``; each top-level row of a 2-D or
    3-D list ends with a newline, a 3-D row being written flat.  When
    appending, a newline is written first.
    """
    with _open_for_output(file_name, overwrite) as handle:
        handle.write(_render(data, separator))
    print(f"... Successfully wrote to file {file_name}.")


def write_pairs(data: Mapping[Any, Any] | Iterable[tuple[Any, Any]], file_name: str,
                overwrite: bool = True, separator: str = ",") -> None:
    """Write a mapping or a sequence of pairs, one pair per line."""
    pairs = data.items() if isinstance(data, Mapping) else data
    with _open_for_output(file_name, overwrite) as handle:
        for first, second in pairs:
            handle.write(f"{_format_value(first)}{separator}{_format_value(second)}{separator}\n")
    print(f"... Successfully wrote to file {file_name}.")


def strip_file_path(file_name: str) -> str:
    """Return the part of a path after its last '/'."""
    return file_name.rsplit("/", 1)[-1]


def strip_extension(file_name: str) -> str:
    """Return the name up to its first '.'."""
    found = file_name.find(".")
    if found == -1:
        raise ValueError(f"{file_name!r} has no extension")
    return file_name[:found]


def format_vector(data: Iterable[Any], label: str = "", separator: str = ",") -> str:
    """Render a 1-D or 2-D list for the screen, optionally under a label."""
    items = list(data)
    parts = [f"{label}:\n"] if label else []
    if any(_is_sequence(item) for item in items):
        parts.extend(_join(row, separator) + "\n" for row in items)
        parts.append("\n")
    else:
        parts.append(_join(items, separator) + "\n")
    return "".join(parts)


def print_vector(data: Iterable[Any], label: str = "", separator: str = ",") -> None:
    """Print a 1-D or 2-D list to standard output."""
    sys.stdout.write(format_vector(data, label, separator))


def get_yes_no(question: str, input_func: Callable[[], str] | None = None,
               output: TextIO | None = None) -> bool:
    """Ask ``question`` until the answer is 'y' or 'n'."""
    read = input_func if input_func is not None else input
    out = output if output is not None else sys.stdout
    while True:
        out.write(f"{question} (y/n)\t")
        out.flush()
        tokens = read().split()
        while not tokens:
            tokens = read().split()
        if tokens[0] == "y":
            return True
        if tokens[0] == "n":
            return False
        out.write("Unrecognized entry. ")