"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_translation_catalog,
    make_translation_key,
)
from tests.factories.inflection import (
    make_inflection_data,
    make_kind,
    make_translation_messages,
)

__all__ = [
    "make_translation_catalog",
    "make_translation_key",
    "make_inflection_data",
    "make_kind",
    "make_translation_messages",
]
