"""Infrastructure modules for the i18n-inflector application.

Centralized infrastructure components:
- configuration: Settings management (settings, I18nSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Translation catalogs, YAML loading and the Translator
- inflection: Inflection markers, kinds, declarations and the
  InflectedTranslate wrapper
"""
