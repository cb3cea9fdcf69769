# Shared fixtures for building throwaway <root>/<lang>.lproj/<table>.strings trees.

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Optional

import pytest

from domain.models import ParsedStrings


def render_strings(entries: Dict[str, str]) -> str:
    return "".join(f'"{k}" = "{v}";\n' for k, v in entries.items())


@pytest.fixture()
def make_strings(tmp_path: Path) -> Callable[..., Path]:
    """Write a strings file below ``tmp_path`` and return its path."""

    def _make(
        root: str,
        lang: str,
        entries: Optional[Dict[str, str]] = None,
        *,
        filename: str = "Localizable.strings",
        content: Optional[str] = None,
        encoding: str = "utf-8",
    ) -> Path:
        lang_dir = tmp_path / root / f"{lang}.lproj"
        lang_dir.mkdir(parents=True, exist_ok=True)
        text = content if content is not None else render_strings(entries or {})
        path = lang_dir / filename
        path.write_bytes(text.encode(encoding))
        return path

    return _make


class FakeLoader:
    """In-memory loader: maps path -> entries dict, a ParsedStrings, or an exception to raise."""

    def __init__(self, files: Dict[str, object]):
        self.files = files
        self.loaded: list[str] = []

    def exists(self, path: str) -> bool:
        return path in self.files

    def load(self, path: str) -> ParsedStrings:
        self.loaded.append(path)
        value = self.files[path]
        if isinstance(value, Exception):
            raise value
        if isinstance(value, ParsedStrings):
            return value
        return ParsedStrings(entries=dict(value), encoding="utf-8")  # type: ignore[arg-type]


@pytest.fixture()
def fake_loader() -> Callable[[Dict[str, object]], FakeLoader]:
    return FakeLoader
