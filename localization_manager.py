"""
Localization Manager for UI strings.
"""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class LocalizationManager:
    """
    Loads string tables from locales/<lang>.json.

    Missing keys fall back to English, then to the key itself.
    """

    _strings: dict[str, str] = {}
    _fallback_strings: dict[str, str] = {}
    _current_lang: str = "en"
    _locale_dir: Path = Path(__file__).resolve().parent / "locales"

    @classmethod
    def _load_file(cls, file_path: Path) -> dict[str, str]:
        """Load a locale JSON file into a dict of strings."""
        try:
            with open(file_path, encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("Locale file must contain a JSON object")
            return {str(k): str(v) for k, v in data.items()}
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.error("Failed to load locale file %s: %s", file_path, e)
            return {}

    @classmethod
    def load_language(cls, lang_code: str):
        """Load a language file, falling back to English."""
        if not isinstance(lang_code, str) or any(
            sep in lang_code for sep in ("..", "/", "\\")
        ):
            logger.warning("Invalid language code %r, using English", lang_code)
            lang_code = "en"

        lang_code = lang_code.strip().lower() or "en"
        cls._current_lang = lang_code
        cls._strings = {}
        cls._fallback_strings = {}

        file_path = cls._locale_dir / f"{lang_code}.json"
        if not file_path.exists():
            logger.warning("Locale file not found: %s", file_path)
            if lang_code == "en":
                return
            cls._current_lang = "en"
            file_path = cls._locale_dir / "en.json"

        cls._strings = cls._load_file(file_path)
        logger.debug("Loaded locale: %s", cls._current_lang)

        if cls._current_lang != "en":
            fallback_path = cls._locale_dir / "en.json"
            if fallback_path.exists():
                cls._fallback_strings = cls._load_file(fallback_path)

    @classmethod
    def get(cls, key: str, *args) -> str:
        """
        Get a localized string.
        Positional args are applied with str.format.
        """
        val = cls._strings.get(key)
        if val is None:
            val = cls._fallback_strings.get(key, key)

        if val == key and key:
            logger.debug(
                "Missing localization key: %s (lang=%s)", key, cls._current_lang
            )

        if args:
            try:
                return val.format(*args)
            except (IndexError, KeyError, ValueError):
                return val
        return val
