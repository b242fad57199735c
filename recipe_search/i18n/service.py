"""File-based catalog of user-facing console strings."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


class I18nService:
    """Looks up ``key`` in ``<locale>.json`` files.

    ``pt-BR`` falls back to ``pt`` and then to the default locale; an unknown
    key renders as the key itself.
    """

    def __init__(self, *, locales_path: str | Path | None = None, default_locale: str = "en") -> None:
        self.locales_path = Path(locales_path or Path(__file__).with_name("locales"))
        self.default_locale = default_locale.lower()
        self._catalogs: dict[str, dict[str, str]] = {}

    def gettext(self, key: str, *, locale: str | None = None, **kwargs: Any) -> str:
        text = key
        for candidate in self._fallback_chain(locale):
            found = self._catalog(candidate).get(key)
            if found is not None:
                text = found
                break
        return text.format(**kwargs) if kwargs else text

    def _fallback_chain(self, locale: str | None) -> list[str]:
        chain: list[str] = []
        if locale:
            normalized = locale.replace("_", "-").lower()
            chain.append(normalized)
            language = normalized.split("-", 1)[0]
            if language != normalized:
                chain.append(language)
        if self.default_locale not in chain:
            chain.append(self.default_locale)
        return chain

    def _catalog(self, locale: str) -> dict[str, str]:
        if locale not in self._catalogs:
            file_path = self.locales_path / f"{locale}.json"
            if file_path.exists():
                with file_path.open("r", encoding="utf-8") as fp:
                    self._catalogs[locale] = json.load(fp)
            else:
                self._catalogs[locale] = {}
        return self._catalogs[locale]


__all__ = ["I18nService"]
