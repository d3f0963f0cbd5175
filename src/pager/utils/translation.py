"""Localization of navigation labels."""

from collections.abc import Mapping
from typing import Any, Protocol


class TranslateFunc(Protocol):
    """Protocol for callables that localize a message template."""

    def __call__(self, message: str, **params: Any) -> str: ...


class Translator:
    """Translate message templates through an optional catalogue.

    The catalogue maps English templates to localized templates. Templates
    use `str.format` placeholders, e.g. "Page {current} of {total}".
    Messages missing from the catalogue fall back to the English template.

    Example:
        translate = Translator({"First": "Erste"})
        translate("First") → "Erste"
    """

    def __init__(self, catalogue: Mapping[str, str] | None = None) -> None:
        self.catalogue: dict[str, str] = dict(catalogue or {})

    def __call__(self, message: str, **params: Any) -> str:
        template = self.catalogue.get(message, message)
        return template.format(**params) if params else template


default_translator = Translator()
