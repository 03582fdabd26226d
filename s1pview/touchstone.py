"""Reader for one-port Touchstone (``.s1p``) files."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import PurePath
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

_WRONG_EXTENSION = "Incorrect file format: You can download only S1P files."


@dataclass(frozen=True)
class Sample:
    """One data line: frequency and the complex reflection coefficient."""

    frequency: float = 0.0
    real: float = 0.0
    imag: float = 0.0


class ParseError(Exception):
    """Raised when a Touchstone file cannot be read."""


class FileOpenError(ParseError):
    """Raised when the file cannot be opened."""


class FileFormatError(ParseError):
    """Raised when the file name or contents are not valid S1P data."""


def is_s1p_file(path: PathLike) -> bool:
    """Return whether the file name ends in ``.s1p``, ignoring case."""
    name = PurePath(path).name
    _, dot, extension = name.rpartition(".")
    return bool(dot) and extension.lower() == "s1p"


def _to_float(text: str) -> float:
    if "_" in text:
        raise ValueError(f"not a number: {text!r}")
    return float(text)


def _samples(lines: Iterable[str]) -> Iterator[Sample]:
    number = 0
    for raw in lines:
        line = raw.removesuffix("\n")
        if not line or line.startswith(("#", "!")):
            continue

        parts = [part for part in line.split(" ") if part]
        if len(parts) != 3:
            raise FileFormatError(
                f"Incorrect file format: in the line {number}: \n{line}"
            )

        try:
            frequency, real, imag = (_to_float(part) for part in parts)
        except ValueError:
            raise FileFormatError(
                "Incorrect file format: can't convert to a number "
                f"in line {number}: \n{line}"
            ) from None

        yield Sample(frequency, real, imag)
        number += 1


class TouchstoneParser:
    """Parses the data lines of an S1P file into ``Sample`` values."""

    def __init__(self, file_path: PathLike = "") -> None:
        self.file_path = file_path
        self.data: list[Sample] = []

    def parse(self) -> list[Sample]:
        """Read ``file_path`` and return its samples, also kept in ``data``."""
        path = self.file_path
        if not is_s1p_file(path):
            raise FileFormatError(_WRONG_EXTENSION)

        try:
            handle = open(path, encoding="utf-8", errors="replace")
        except OSError as exc:
            raise FileOpenError(f"Can't open the file: {os.fspath(path)}") from exc

        self.data = []
        with handle:
            samples = list(_samples(handle))
        self.data = samples
        return list(samples)