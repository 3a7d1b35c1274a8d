"""Inflection kinds, tokens and aliases for a single locale.

Inflection data is read from the translation catalog of a locale, under
``i18n.inflections`` by default::

    i18n:
      inflections:
        gender:
          m: male
          f: female
          n: neuter
          masculine: "@m"
          neutral: "@neuter"
          neuter: "@n"
          default: neutral

Plain entries declare tokens (the value is a human readable description),
entries starting with ``@`` declare aliases and the ``default`` entry names
the token used when a supplied value matches nothing.
"""

from dataclasses import dataclass, field
from enum import Enum
from itertools import chain
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from infrastructure.inflection.exceptions import InflectionConfigurationError
from infrastructure.logging import get_module_logger

logger = get_module_logger()

ALIAS_PREFIX = "@"
DEFAULT_ALIAS = "default"


def normalize_token(value: Any) -> str:
    """Convert a supplied inflection value to a token name.

    Enum members contribute their value; everything else is stringified
    and stripped.

    Args:
        value: Raw value (string, Enum member, number...).

    Returns:
        Normalized token name, "" for None.
    """
    if value is None:
        return ""
    if isinstance(value, Enum):
        value = value.value
    return str(value).strip()


@dataclass(frozen=True)
class Kind:
    """A named inflection category such as ``gender`` or ``person``.

    Frozen with read-only mappings so that a loaded kind can be shared by
    concurrent readers.

    Attributes:
        name: Kind name.
        tokens: Token name -> description.
        aliases: Alias name -> fully resolved token name.
        default: Token selected by the ``default`` alias, if any.
    """

    name: str
    tokens: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    aliases: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    default: Optional[str] = None

    @classmethod
    def from_entries(cls, name: str, entries: Mapping[Any, Any]) -> "Kind":
        """Build a kind from raw translation data.

        Args:
            name: Kind name.
            entries: Mapping of token/alias names to descriptions or
                ``@target`` references.

        Returns:
            Kind with every alias chain fully resolved.

        Raises:
            InflectionConfigurationError: If the entries are malformed, an
                alias chain loops or points at an unknown name.
        """
        if not isinstance(entries, Mapping):
            raise InflectionConfigurationError(
                f"Inflection kind '{name}' must be a mapping, got {type(entries).__name__}",
                kind=name,
            )

        tokens: Dict[str, str] = {}
        targets: Dict[str, str] = {}
        default_target: Optional[str] = None

        for raw_name, raw_value in entries.items():
            entry = normalize_token(raw_name)
            if not entry:
                raise InflectionConfigurationError(
                    f"Empty token name in kind '{name}'", kind=name
                )
            if raw_value is None or isinstance(raw_value, (Mapping, list, tuple)):
                raise InflectionConfigurationError(
                    f"Invalid value for '{entry}' in kind '{name}': {raw_value!r}",
                    kind=name,
                )
            value = str(raw_value)

            if entry == DEFAULT_ALIAS:
                default_target = value.strip().removeprefix(ALIAS_PREFIX)
            elif value.startswith(ALIAS_PREFIX):
                targets[entry] = value[len(ALIAS_PREFIX) :].strip()
            else:
                tokens[entry] = value

        if not tokens:
            raise InflectionConfigurationError(
                f"Inflection kind '{name}' declares no tokens", kind=name
            )

        aliases = {
            alias: _follow_alias(name, alias, tokens, targets) for alias in targets
        }

        default = None
        if default_target is not None:
            if default_target in tokens:
                default = default_target
            elif default_target in aliases:
                default = aliases[default_target]
            else:
                raise InflectionConfigurationError(
                    f"Default of kind '{name}' points at unknown token '{default_target}'",
                    kind=name,
                )

        return cls(
            name=name,
            tokens=MappingProxyType(tokens),
            aliases=MappingProxyType(aliases),
            default=default,
        )

    def resolve(self, value: str) -> Optional[str]:
        """Resolve a normalized name to a token of this kind.

        Returns:
            The token itself, the token an alias points at, the default
            token for ``default``, or None.
        """
        if value in self.tokens:
            return value
        if value in self.aliases:
            return self.aliases[value]
        if value == DEFAULT_ALIAS:
            return self.default
        return None


def _follow_alias(
    kind: str, alias: str, tokens: Mapping[str, str], targets: Mapping[str, str]
) -> str:
    """Walk an alias chain until it reaches a token."""
    chain_seen = [alias]
    current = targets[alias]
    while current not in tokens:
        if current in chain_seen:
            path = " -> ".join(chain_seen + [current])
            raise InflectionConfigurationError(
                f"Alias cycle in kind '{kind}': {path}", kind=kind
            )
        if current not in targets:
            raise InflectionConfigurationError(
                f"Alias '{alias}' in kind '{kind}' points at unknown token '{current}'",
                kind=kind,
            )
        chain_seen.append(current)
        current = targets[current]
    return current


class InflectionRegistry:
    """Token and alias lookups over the kinds of one locale.

    Built once when a locale is loaded and never mutated afterwards, so it
    can be read concurrently without locks.

    Attributes:
        locale: Locale the inflection data belongs to (informational).
    """

    def __init__(
        self,
        kinds: Optional[Iterable[Kind]] = None,
        locale: Optional[str] = None,
    ):
        """Initialize the registry.

        Args:
            kinds: Kinds in load order. When two kinds declare the same
                token or alias name, the first kind keeps it for marker
                kind inference.
            locale: Locale identifier for logging and introspection.
        """
        self.locale = locale
        self._kinds: Mapping[str, Kind] = MappingProxyType(
            {kind.name: kind for kind in kinds or ()}
        )

        index: Dict[str, str] = {}
        for kind in self._kinds.values():
            for name in chain(kind.tokens, kind.aliases):
                owner = index.setdefault(name, kind.name)
                if owner != kind.name:
                    logger.warning(
                        "ambiguous_inflection_token",
                        locale=locale,
                        token=name,
                        kept_kind=owner,
                        ignored_kind=kind.name,
                    )
        self._index: Mapping[str, str] = MappingProxyType(index)

    @classmethod
    def from_data(
        cls, data: Optional[Mapping[Any, Any]], locale: Optional[str] = None
    ) -> "InflectionRegistry":
        """Build a registry from ``{kind: {token: description, ...}}`` data.

        Args:
            data: Inflection data of one locale, None for no kinds.
            locale: Locale identifier.

        Returns:
            InflectionRegistry instance.

        Raises:
            InflectionConfigurationError: If the data is malformed.
        """
        if data is None:
            return cls(locale=locale)
        if not isinstance(data, Mapping):
            raise InflectionConfigurationError(
                f"Inflection data for locale {locale} must be a mapping"
            )

        kinds = []
        for raw_name, entries in data.items():
            name = normalize_token(raw_name)
            if not name:
                raise InflectionConfigurationError(
                    f"Empty inflection kind name in locale {locale}"
                )
            kinds.append(Kind.from_entries(name, entries))

        registry = cls(kinds, locale=locale)
        logger.info(
            "built_inflection_registry",
            locale=locale,
            kinds=list(registry.kinds),
            token_count=sum(len(k.tokens) for k in kinds),
        )
        return registry

    @property
    def kinds(self) -> Tuple[str, ...]:
        """Kind names in load order."""
        return tuple(self._kinds)

    def has_kind(self, kind: str) -> bool:
        return kind in self._kinds

    def get_kind(self, kind: str) -> Optional[Kind]:
        return self._kinds.get(kind)

    def resolve(self, kind: str, raw_value: Any) -> Optional[str]:
        """Resolve a supplied value to a token of ``kind``.

        Args:
            kind: Kind name.
            raw_value: Supplied value (token, alias, ``default``, Enum member).

        Returns:
            Resolved token, or None if the kind is unknown or nothing matches.
        """
        entry = self._kinds.get(normalize_token(kind))
        if entry is None:
            return None
        return entry.resolve(normalize_token(raw_value))

    def default_token(self, kind: str) -> Optional[str]:
        """Token the ``default`` alias of ``kind`` points at, if any."""
        entry = self._kinds.get(kind)
        return entry.default if entry else None

    def kind_of(self, name: str) -> Optional[str]:
        """Kind declaring ``name`` as a token or alias."""
        return self._index.get(name)

    def tokens(self, kind: str) -> Mapping[str, str]:
        entry = self._kinds.get(kind)
        return entry.tokens if entry else MappingProxyType({})

    def aliases(self, kind: str) -> Mapping[str, str]:
        entry = self._kinds.get(kind)
        return entry.aliases if entry else MappingProxyType({})

    def is_token(self, kind: str, name: str) -> bool:
        return name in self.tokens(kind)

    def is_alias(self, kind: str, name: str) -> bool:
        return name in self.aliases(kind)

    def description(self, kind: str, name: str) -> Optional[str]:
        """Description of a token, following aliases.

        Returns:
            Description string, or None if ``name`` is unknown in ``kind``.
        """
        token = self.resolve(kind, name)
        if token is None:
            return None
        return self.tokens(kind)[token]

    def __len__(self) -> int:
        return len(self._kinds)

    def __repr__(self) -> str:
        return f"InflectionRegistry(locale={self.locale!r}, kinds={list(self._kinds)!r})"
