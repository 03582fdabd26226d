"""Connects file selection, data processing and chart display."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from typing import Optional, Protocol
from urllib.parse import unquote, urlsplit

from .data_handler import DataHandler
from .touchstone import ParseError

_DRIVE_PATH = re.compile(r"^/[A-Za-z]:")


class _UiHandler(Protocol):
    def set_data(self, x_axis: Iterable[float], y_axis: Iterable[float]) -> None:
        ...


def file_url_to_path(url: str) -> str:
    """Return the local path of a ``file:`` URL, or ``""`` for any other URL."""
    parts = urlsplit(url)
    if parts.scheme.lower() != "file":
        return ""
    path = unquote(parts.path)
    if parts.netloc and parts.netloc.lower() != "localhost":
        return f"//{parts.netloc}{path}"
    if _DRIVE_PATH.match(path):
        path = path[1:]
    return path


class DataUiManager:
    """Loads a newly chosen file and hands its processed data to the chart."""

    def __init__(
        self,
        data_handler: Optional[DataHandler] = None,
        ui_handler: Optional[_UiHandler] = None,
        on_error: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.data_handler = data_handler if data_handler is not None else DataHandler()
        self.ui_handler = ui_handler
        self.on_error = on_error

    def file_path_changed(self, file_path: str) -> None:
        """Load ``file_path`` and show its data; errors go to ``on_error``."""
        if not file_path and self.ui_handler is not None:
            self.ui_handler.set_data([], [])

        self.data_handler.file_path = file_path
        x_axis, y_axis = self._load()

        if self.ui_handler is not None:
            self.ui_handler.set_data(x_axis, y_axis)

    def _load(self) -> tuple[list[float], list[float]]:
        handler = self.data_handler
        if handler.parser is None or handler.processor is None:
            return [], []
        try:
            return handler.processed_data()
        except ParseError as exc:
            self._report(str(exc))
            return [], []

    def _report(self, message: str) -> None:
        if self.on_error is not None:
            self.on_error(message)