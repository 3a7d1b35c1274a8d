"""i18n system - internationalization and localization framework.

Provides translation management and message interpolation, including
inflection markers resolved per locale.

Main components:
- models: TranslationKey, TranslationCatalog
- loader: TranslationLoader and YAMLTranslationLoader
- translator: Translator service with inflection and variable interpolation
- factory: create_translator and create_inflected_translate
"""

from infrastructure.i18n.loader import TranslationLoader, YAMLTranslationLoader
from infrastructure.i18n.models import TranslationCatalog, TranslationKey
from infrastructure.i18n.translator import Translator

__all__ = [
    "TranslationKey",
    "TranslationCatalog",
    "TranslationLoader",
    "YAMLTranslationLoader",
    "Translator",
]
