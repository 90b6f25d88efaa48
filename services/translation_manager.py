# -*- coding: utf-8 -*-
"""
Translation Manager - English and Hindi messages for the storefront.

Messages are looked up by dotted key ("validation.required") and
formatted with keyword arguments. A key missing from the active language
falls back to English; a key missing everywhere is returned as-is.
"""

from typing import Callable, List

from app.config import Config, Vocabularies
from utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_LANGUAGE = "en"
SUPPORTED_LANGUAGES = ("en", "hi")


class TranslationManager:
    """Singleton holding the active language and the message tables."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._current_language = DEFAULT_LANGUAGE
            instance._listeners: List[Callable] = []
            instance._translations = cls._load_translations()
            cls._instance = instance
            instance.set_language(Config.LANGUAGE)
        return cls._instance

    @staticmethod
    def _load_translations() -> dict:
        from services.translations.en import EN_TRANSLATIONS
        from services.translations.hi import HI_TRANSLATIONS
        return {"en": EN_TRANSLATIONS, "hi": HI_TRANSLATIONS}

    def on_language_changed(self, callback: Callable):
        """Register callback(lang_code), called after every language switch."""
        self._listeners.append(callback)

    def set_language(self, lang_code: str):
        if lang_code not in SUPPORTED_LANGUAGES:
            logger.warning(f"Unsupported language '{lang_code}', using {DEFAULT_LANGUAGE}")
            lang_code = DEFAULT_LANGUAGE
        if lang_code == self._current_language:
            return
        self._current_language = lang_code
        logger.info(f"Language changed to: {lang_code}")
        for callback in list(self._listeners):
            try:
                callback(lang_code)
            except Exception as e:
                logger.error(f"Language change callback error: {e}")

    def get_language(self) -> str:
        return self._current_language

    def tr(self, key: str, **kwargs) -> str:
        message = self._translations[self._current_language].get(key)
        if message is None:
            message = self._translations[DEFAULT_LANGUAGE].get(key)
        if message is None:
            logger.debug(f"Missing translation key: {key}")
            return key
        if not kwargs:
            return message
        try:
            return message.format(**kwargs)
        except (KeyError, ValueError):
            logger.warning(f"Bad format arguments for '{key}': {sorted(kwargs)}")
            return message

    def vocabulary_label(self, vocabulary: list, code: str) -> str:
        """Display label of a Vocabularies entry in the active language."""
        return Vocabularies.get_label(vocabulary, code, hindi=self._current_language == "hi")


_translator = TranslationManager()


def tr(key: str, **kwargs) -> str:
    return _translator.tr(key, **kwargs)


def set_language(lang_code: str):
    _translator.set_language(lang_code)


def get_language() -> str:
    return _translator.get_language()


def vocabulary_label(vocabulary: list, code: str) -> str:
    return _translator.vocabulary_label(vocabulary, code)
