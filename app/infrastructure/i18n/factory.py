"""Factory functions for creating i18n components.

Provides convenience functions for initializing translators and the
inflected translate wrapper with configurations read from settings.
"""

from pathlib import Path
from typing import Optional

from infrastructure.configuration import settings
from infrastructure.i18n.loader import YAMLTranslationLoader
from infrastructure.i18n.translator import Translator
from infrastructure.inflection.declarations import MethodRegistry, method_registry
from infrastructure.inflection.translate import InflectedTranslate
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def create_translator(
    translations_dir: Optional[Path] = None,
    fallback_locale: Optional[str] = None,
    default_locale: Optional[str] = None,
    use_cache: Optional[bool] = None,
    preload: Optional[bool] = None,
) -> Translator:
    """Create and configure a Translator instance.

    Arguments left as None are taken from ``settings.i18n``. Without a
    configured directory the bundled app/locales directory is used.

    Args:
        translations_dir: Path to YAML translation files.
        fallback_locale: Locale to use when translations not found.
        default_locale: Locale used when a call names none.
        use_cache: Whether loader should cache parsed YAML.
        preload: Whether to load all locales immediately.

    Returns:
        Translator: Configured translator instance

    Raises:
        ValueError: If translations_dir does not exist
        InflectionConfigurationError: If inflection data of a locale is invalid

    Usage:
        # Use defaults (settings, preload all)
        translator = create_translator()

        # Lazy loading
        translator = create_translator(preload=False)
        translator.load_locale("en-US")
    """
    config = settings.i18n
    if translations_dir is None:
        if config.TRANSLATIONS_DIR:
            translations_dir = Path(config.TRANSLATIONS_DIR)
        else:
            # This file is at .../app/infrastructure/i18n/factory.py
            app_root = Path(__file__).resolve().parents[2]
            translations_dir = app_root / "locales"

    loader = YAMLTranslationLoader(
        translations_dir=translations_dir,
        use_cache=config.USE_CACHE if use_cache is None else use_cache,
    )
    translator = Translator(
        loader=loader,
        fallback_locale=fallback_locale or config.FALLBACK_LOCALE,
        default_locale=default_locale or config.DEFAULT_LOCALE,
        inflections_key=config.INFLECTIONS_KEY,
    )

    if config.PRELOAD if preload is None else preload:
        translator.load_all()
        logger.info(
            "translator_created_with_preload",
            translations_dir=str(translations_dir),
            locale_count=len(translator.get_available_locales()),
        )
    else:
        logger.info(
            "translator_created_lazy",
            translations_dir=str(translations_dir),
        )

    return translator


def create_inflected_translate(
    translator: Optional[Translator] = None,
    declarations: MethodRegistry = method_registry,
) -> InflectedTranslate:
    """Wrap a Translator's translate() with inflection option collection.

    Args:
        translator: Translator to wrap (default: create_translator()).
        declarations: Registry holding method-to-kind declarations.

    Returns:
        InflectedTranslate ready to assign to InflectionMethods classes.

    Usage:
        class UserController(InflectionMethods):
            inflected_translate = create_inflected_translate(translator)
    """
    translator = translator or create_translator()
    return InflectedTranslate(
        translator.translate,
        declarations=declarations,
        is_inflected_locale=translator.is_inflected_locale,
        default_locale=lambda: translator.default_locale,
    )
