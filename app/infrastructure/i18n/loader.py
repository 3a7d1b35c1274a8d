"""Translation loading interface and implementations.

Defines the contract for loading translations and provides YAML-based loader.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List

import yaml

from infrastructure.i18n.models import TranslationCatalog, deep_merge, validate_locale
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations must define how to load and parse translation files
    for different locales.
    """

    @abstractmethod
    def load(self, locale: str) -> TranslationCatalog:
        """Load translations for a specific locale.

        Args:
            locale: Locale to load translations for.

        Returns:
            TranslationCatalog with loaded messages.

        Raises:
            FileNotFoundError: If translation files not found.
            ValueError: If translation format is invalid.
        """
        pass

    @abstractmethod
    def load_all(self) -> Dict[str, TranslationCatalog]:
        """Load translations for all available locales.

        Returns:
            Dict mapping locale to TranslationCatalog.
        """
        pass


class YAMLTranslationLoader(TranslationLoader):
    """Loader for YAML-based translation files.

    Expects files named <locale>.yml or <domain>.<locale>.yml in the
    translations directory. All files of a locale are deep-merged in file
    name order.

    Attributes:
        translations_dir: Path to directory containing YAML files.
        cache: Optional cache of loaded catalogs (locale -> catalog).
    """

    def __init__(
        self,
        translations_dir: Path,
        use_cache: bool = True,
    ):
        """Initialize YAML translation loader.

        Args:
            translations_dir: Path to directory with YAML translation files.
            use_cache: Whether to cache loaded catalogs in memory.
        """
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[str, TranslationCatalog] = {}

        if not self.translations_dir.exists():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_loader",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    def _files_for(self, locale: str) -> List[Path]:
        return sorted(
            path
            for path in self.translations_dir.glob("*.yml")
            if path.stem.split(".")[-1] == locale
        )

    def load(self, locale: str) -> TranslationCatalog:
        """Load translations for a locale from YAML files.

        Args:
            locale: Locale to load.

        Returns:
            TranslationCatalog with loaded messages.

        Raises:
            FileNotFoundError: If no YAML files found for locale.
            ValueError: If YAML parsing fails.
        """
        if self.use_cache and locale in self.cache:
            logger.info("loaded_from_cache", locale=locale)
            return self.cache[locale]

        catalog = TranslationCatalog(
            locale=locale,
            loaded_at=datetime.now(timezone.utc).isoformat(),
        )
        yaml_files = self._files_for(locale)

        if not yaml_files:
            raise FileNotFoundError(
                f"No translation files found for locale {locale} in {self.translations_dir}"
            )

        for yaml_file in yaml_files:
            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
                    if data:
                        self._merge_yaml_data(catalog, data, yaml_file)
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
                raise ValueError(f"Failed to parse {yaml_file}: {e}") from e

        logger.info(
            "loaded_translations",
            locale=locale,
            file_count=len(yaml_files),
            namespace_count=len(catalog.messages),
        )

        if self.use_cache:
            self.cache[locale] = catalog

        return catalog

    def load_all(self) -> Dict[str, TranslationCatalog]:
        """Load translations for all locales found in the directory.

        Returns:
            Dict mapping each locale to its TranslationCatalog.

        Raises:
            ValueError: If no translation files found at all.
        """
        locales_found = set()
        for yaml_file in self.translations_dir.glob("*.yml"):
            # "incident.en-US.yml" -> "en-US", "en-US.yml" -> "en-US"
            locale_str = yaml_file.stem.split(".")[-1]
            try:
                locales_found.add(validate_locale(locale_str))
            except ValueError:
                logger.warning("skipped_translation_file", file=str(yaml_file))

        if not locales_found:
            raise ValueError(f"No translation files found in {self.translations_dir}")

        result = {}
        for locale in sorted(locales_found):
            try:
                result[locale] = self.load(locale)
            except FileNotFoundError:
                logger.warning("could_not_load_locale", locale=locale)

        return result

    def _merge_yaml_data(
        self,
        catalog: TranslationCatalog,
        data: Dict,
        source_file: Path,
    ) -> None:
        """Deep-merge YAML data into catalog.

        Expected format: a mapping at the top level; nested mappings and
        leaf strings below it.

        Args:
            catalog: TranslationCatalog to merge into.
            data: Parsed YAML data.
            source_file: Source file (for logging).
        """
        if not isinstance(data, dict):
            logger.warning(
                "invalid_yaml_format", file=str(source_file), expected="dict"
            )
            return

        deep_merge(catalog.messages, data)

    def clear_cache(self) -> None:
        """Clear all cached translations."""
        self.cache.clear()
        logger.info("cleared_translation_cache")
