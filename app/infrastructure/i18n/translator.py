"""Translation service for retrieving and interpolating translated messages.

Messages may contain inflection markers (``@{m:Sir|f:Lady|Guest}``) and
``{{variable}}`` placeholders. Markers are resolved first, using the
call's variables as ``kind -> token`` options, then placeholders are
substituted.
"""

import re
from typing import Any, Dict, List, Mapping, Optional

from infrastructure.i18n.loader import TranslationLoader
from infrastructure.i18n.models import TranslationCatalog, TranslationKey
from infrastructure.inflection.kinds import InflectionRegistry
from infrastructure.inflection.patterns import interpolate as interpolate_inflections
from infrastructure.logging import get_module_logger

logger = get_module_logger()

LOCALE_OPTION = "locale"


class Translator:
    """Service for translating messages with inflection and variables.

    Manages catalogs and inflection registries for multiple locales.

    Attributes:
        loader: TranslationLoader for loading translation files.
        catalogs: Cache of loaded TranslationCatalogs by locale.
        inflections: InflectionRegistry by locale, built with the catalogs.
        fallback_locale: Locale to use when key not found.
        default_locale: Locale used by translate() when none is given.
        inflections_key: Dotted catalog path of the inflection data.
    """

    def __init__(
        self,
        loader: TranslationLoader,
        fallback_locale: str = "en-US",
        default_locale: Optional[str] = None,
        inflections_key: str = "i18n.inflections",
    ):
        """Initialize Translator.

        Args:
            loader: TranslationLoader instance for loading translations.
            fallback_locale: Locale to use when key not found (default: en-US).
            default_locale: Locale for calls naming none (default: fallback).
            inflections_key: Catalog path of inflection kinds.
        """
        self.loader = loader
        self.fallback_locale = fallback_locale
        self.default_locale = default_locale or fallback_locale
        self.inflections_key = TranslationKey.from_string(inflections_key)
        self.catalogs: Dict[str, TranslationCatalog] = {}
        self.inflections: Dict[str, InflectionRegistry] = {}
        logger.info(
            "initialized_translator",
            fallback_locale=fallback_locale,
            default_locale=self.default_locale,
        )

    def _register(self, locale: str, catalog: TranslationCatalog) -> None:
        """Store a catalog and build its inflection registry.

        Raises:
            InflectionConfigurationError: If the inflection data is invalid.
        """
        registry = InflectionRegistry.from_data(
            catalog.lookup(self.inflections_key), locale=locale
        )
        self.catalogs[locale] = catalog
        self.inflections[locale] = registry

    def load_all(self) -> None:
        """Load all available locales from loader."""
        for locale, catalog in self.loader.load_all().items():
            self._register(locale, catalog)
        logger.info(
            "loaded_all_translations",
            locale_count=len(self.catalogs),
            inflected_locales=self.inflected_locales(),
        )

    def load_locale(self, locale: str) -> None:
        """Load specific locale from loader.

        Args:
            locale: Locale to load.

        Raises:
            FileNotFoundError: If translation files not found.
        """
        self._register(locale, self.loader.load(locale))
        logger.info("loaded_locale_translations", locale=locale)

    def translate_message(
        self,
        key: TranslationKey,
        locale: str,
        variables: Optional[Mapping[str, Any]] = None,
    ) -> str:
        """Retrieve and interpolate a translated message.

        Inflection markers are resolved with the registry of the locale
        the message was found in, using ``variables`` as inflection
        options. Then {{variable_name}} placeholders are substituted.
        Falls back to fallback_locale if key not found in requested locale.

        Args:
            key: TranslationKey identifying the message.
            locale: Locale to translate to.
            variables: Optional dict of variables and inflection options.

        Returns:
            Translated and interpolated message string.

        Raises:
            KeyError: If key not found in requested locale or fallback locale.
            ValueError: If a placeholder variable is missing.
        """
        variables = dict(variables or {})
        source_locale = locale

        catalog = self.catalogs.get(locale)
        message = catalog.get_message(key) if catalog else None

        if message is None and locale != self.fallback_locale:
            fallback_catalog = self.catalogs.get(self.fallback_locale)
            message = fallback_catalog.get_message(key) if fallback_catalog else None

            if message is not None:
                source_locale = self.fallback_locale
                logger.info(
                    "used_fallback_translation",
                    key=str(key),
                    requested_locale=locale,
                    fallback_locale=self.fallback_locale,
                )

        if message is None:
            logger.error(
                "translation_not_found",
                key=str(key),
                locale=locale,
                fallback_locale=self.fallback_locale,
            )
            raise KeyError(
                f"Translation not found for key {key} in {locale} or fallback {self.fallback_locale}"
            )

        registry = self.inflections.get(source_locale)
        if registry:
            message = interpolate_inflections(message, variables, registry)

        # Always call to validate required variables
        return self._interpolate(message, variables)

    def translate(self, key: str, options: Optional[Mapping[str, Any]] = None) -> str:
        """Translate a dotted key with a single options mapping.

        This is the lookup primitive wrapped by InflectedTranslate.

        Args:
            key: Dotted translation key (e.g., "welcome").
            options: Variables and inflection options; an optional
                ``locale`` entry overrides default_locale.

        Returns:
            Translated message string.
        """
        variables = dict(options or {})
        locale = variables.pop(LOCALE_OPTION, None) or self.default_locale
        return self.translate_message(
            TranslationKey.from_string(key), locale, variables
        )

    def has_message(self, key: TranslationKey, locale: str) -> bool:
        """Check if translation exists for key in locale."""
        catalog = self.catalogs.get(locale)
        return catalog.has_message(key) if catalog else False

    def get_available_locales(self) -> List[str]:
        """Get list of loaded locales."""
        return list(self.catalogs.keys())

    def get_inflections(self, locale: str) -> InflectionRegistry:
        """Inflection registry of a locale (empty if not loaded)."""
        return self.inflections.get(locale) or InflectionRegistry(locale=locale)

    def is_inflected_locale(self, locale: Optional[str]) -> bool:
        """Whether a loaded locale defines at least one inflection kind."""
        if locale is None:
            locale = self.default_locale
        return bool(self.inflections.get(locale))

    def inflected_locales(self) -> List[str]:
        """Loaded locales that define inflection kinds."""
        return [locale for locale, registry in self.inflections.items() if registry]

    def _interpolate(self, message: str, variables: Dict[str, Any]) -> str:
        """Perform variable interpolation in message string.

        Replaces {{variable_name}} and {variable_name} with the
        corresponding value from variables dict.

        Args:
            message: Message string with {{variable}} placeholders.
            variables: Dict of variable name -> value.

        Returns:
            Message with variables interpolated.

        Raises:
            ValueError: If variable not found in variables dict.
        """
        double_pattern = r"\{\{(\w+)\}\}"
        single_pattern = r"\{(\w+)\}"

        double_matches = re.findall(double_pattern, message)
        single_matches = re.findall(single_pattern, message)

        all_vars = []
        for m in double_matches + single_matches:
            if m not in all_vars:
                all_vars.append(m)

        for var_name in all_vars:
            if var_name not in variables:
                logger.error(
                    "missing_interpolation_variable",
                    variable=var_name,
                    available_variables=list(variables.keys()),
                )
                raise ValueError(f"Missing interpolation variable: {var_name}")

        # Double-brace placeholders first
        for var_name in double_matches:
            message = message.replace(f"{{{{{var_name}}}}}", str(variables[var_name]))

        for var_name in single_matches:
            message = message.replace(f"{{{var_name}}}", str(variables[var_name]))

        return message

    def get_catalog(self, locale: str) -> Optional[TranslationCatalog]:
        """Get complete catalog for a locale."""
        return self.catalogs.get(locale)

    def reload(self) -> None:
        """Reload all translations and inflection data from loader."""
        self.catalogs.clear()
        self.inflections.clear()
        if hasattr(self.loader, "clear_cache"):
            self.loader.clear_cache()
        self.load_all()
        logger.info("reloaded_all_translations")
