"""
Root-level conftest.py for integration tests.

Provides a real Translator over YAML files so integration tests exercise
loading, inflection data, declarations and the translate wrapper together.
"""

import pytest
import yaml

from infrastructure.i18n import Translator, YAMLTranslationLoader
from infrastructure.i18n.factory import create_inflected_translate
from tests.factories.inflection import make_translation_messages


@pytest.fixture
def inflected_translations_dir(tmp_path):
    """Directory holding an inflected "xx" locale and a plain "yy" locale."""
    with open(tmp_path / "app.xx.yml", "w") as f:
        yaml.dump(make_translation_messages(), f)
    with open(tmp_path / "app.yy.yml", "w") as f:
        yaml.dump({"welcome": "Welcome @{f:Lady|m:Sir|All}!"}, f)
    return tmp_path


@pytest.fixture
def translator(inflected_translations_dir):
    """Translator with "xx" as fallback and default locale."""
    translator = Translator(
        YAMLTranslationLoader(inflected_translations_dir, use_cache=False),
        fallback_locale="xx",
    )
    translator.load_all()
    return translator


@pytest.fixture
def inflected_translate(translator):
    """InflectedTranslate wrapping the translator with the global declarations."""
    return create_inflected_translate(translator)
