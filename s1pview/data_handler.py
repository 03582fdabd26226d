"""Combines a parser and a processor into plottable series."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional, Protocol

from .processing import DataProcessor
from .touchstone import Sample


class _Parser(Protocol):
    file_path: str

    def parse(self) -> Sequence[Sample]:
        ...


class DataHandler:
    """Keeps a file path in step with a parser and processes its samples."""

    def __init__(
        self,
        file_path: str = "",
        parser: Optional[_Parser] = None,
        processor: Optional[DataProcessor] = None,
    ) -> None:
        self._file_path = file_path
        self._parser: Optional[_Parser] = None
        self.processor = processor
        self.parser = parser

    @property
    def file_path(self) -> str:
        return self._file_path

    @file_path.setter
    def file_path(self, value: str) -> None:
        self._file_path = value
        if self._parser is not None:
            self._parser.file_path = value

    @property
    def parser(self) -> Optional[_Parser]:
        return self._parser

    @parser.setter
    def parser(self, parser: Optional[_Parser]) -> None:
        # Assigning None leaves the current parser in place.
        if parser is None:
            return
        self._parser = parser
        if not parser.file_path or self._file_path:
            parser.file_path = self._file_path
        else:
            self._file_path = parser.file_path

    def processed_data(self) -> tuple[list[float], list[float]]:
        """Parse the file and return the frequencies and processed values."""
        if self._parser is None:
            raise RuntimeError("no parser is set")
        if self.processor is None:
            raise RuntimeError("no processor is set")

        samples = self._parser.parse()
        frequencies = [sample.frequency for sample in samples]
        values = [self.processor.process(sample.real, sample.imag) for sample in samples]
        return frequencies, values