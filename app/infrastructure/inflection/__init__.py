"""Inflection system - token-based branch selection in translated strings.

Translated strings embed markers such as ``@{f:Lady|m:Sir|n:You|All}``.
At render time the branch matching a supplied inflection value (gender,
person...) is kept, with aliases (``masculine`` -> ``m``) and defaults.

Main components:
- kinds: Kind and InflectionRegistry (tokens and aliases per locale)
- patterns: marker parsing and interpolate()
- declarations: MethodRegistry mapping accessor methods to kinds
- collector: collect_options() gathering kind -> token from an object
- translate: InflectedTranslate wrapper and InflectionMethods mixin
"""

from infrastructure.inflection.collector import collect_options
from infrastructure.inflection.declarations import (
    MethodDeclaration,
    MethodRegistry,
    method_registry,
)
from infrastructure.inflection.exceptions import (
    BadDeclaration,
    InflectionConfigurationError,
    InflectionError,
)
from infrastructure.inflection.kinds import InflectionRegistry, Kind
from infrastructure.inflection.patterns import interpolate, parse_markers
from infrastructure.inflection.translate import InflectedTranslate, InflectionMethods

__all__ = [
    "BadDeclaration",
    "InflectionConfigurationError",
    "InflectionError",
    "Kind",
    "InflectionRegistry",
    "interpolate",
    "parse_markers",
    "MethodDeclaration",
    "MethodRegistry",
    "method_registry",
    "collect_options",
    "InflectedTranslate",
    "InflectionMethods",
]
