# -*- coding: utf-8 -*-
"""Centralized Translation Manager for i18n support."""

from utils.logger import get_logger

logger = get_logger(__name__)

FALLBACK_LANGUAGE = "es"


class TranslationManager:
    """Singleton Translation Manager."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._translations = {}
            cls._instance._load_translations()
            cls._instance._current_language = cls._instance._initial_language()
        return cls._instance

    def _load_translations(self):
        from services.translations.es import ES_TRANSLATIONS
        from services.translations.en import EN_TRANSLATIONS
        self._translations = {
            "es": ES_TRANSLATIONS,
            "en": EN_TRANSLATIONS,
        }

    def _initial_language(self) -> str:
        from app.config import Config
        if Config.DEFAULT_LANGUAGE in self._translations:
            return Config.DEFAULT_LANGUAGE
        return FALLBACK_LANGUAGE

    def set_language(self, lang_code: str):
        if lang_code not in self._translations:
            logger.warning(f"Unknown language '{lang_code}', using {FALLBACK_LANGUAGE}")
            lang_code = FALLBACK_LANGUAGE
        if self._current_language != lang_code:
            self._current_language = lang_code
            logger.info(f"Language changed to: {lang_code}")

    def tr(self, key: str, **kwargs) -> str:
        translation = self._translations.get(self._current_language, {}).get(key)
        if translation is None:
            translation = self._translations.get(FALLBACK_LANGUAGE, {}).get(key)
        if translation is None:
            return key
        if kwargs:
            try:
                translation = translation.format(**kwargs)
            except (KeyError, ValueError):
                logger.warning(f"Bad format arguments for translation '{key}'")
        return translation


_translator = TranslationManager()


def tr(key: str, **kwargs) -> str:
    return _translator.tr(key, **kwargs)


def set_language(lang_code: str):
    _translator.set_language(lang_code)
