"""Translation models for i18n system.

Defines core data structures for managing translations and locales.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

LOCALE_PATTERN = re.compile(r"^[A-Za-z]{2,3}(-[A-Za-z0-9]{2,8})*$")


def validate_locale(locale_str: str) -> str:
    """Check a locale identifier.

    Uses IETF BCP 47 style tags (e.g., en-US, fr-FR, pl).

    Args:
        locale_str: Locale string.

    Returns:
        The locale string, stripped.

    Raises:
        ValueError: If the string is not a locale tag.
    """
    value = (locale_str or "").strip()
    if not LOCALE_PATTERN.match(value):
        raise ValueError(f"Unsupported locale: {locale_str}")
    return value


@dataclass(frozen=True)
class TranslationKey:
    """Represents a translation key for accessing translated messages.

    Keys are hierarchical dotted paths of any depth (e.g., "welcome",
    "incident.created", "i18n.inflections.gender"). Frozen to ensure
    immutability and hashability for caching.

    Attributes:
        parts: Path segments from the catalog root.
    """

    parts: Tuple[str, ...]

    def __post_init__(self):
        if not self.parts or any(not part for part in self.parts):
            raise ValueError(f"Invalid translation key: {self.parts!r}")

    def __str__(self) -> str:
        """Return full dot-separated key path."""
        return ".".join(self.parts)

    @property
    def namespace(self) -> str:
        """Top-level segment, "" for single-segment keys."""
        return self.parts[0] if len(self.parts) > 1 else ""

    @property
    def message_key(self) -> str:
        return self.parts[-1]

    @classmethod
    def from_string(cls, key_string: str) -> "TranslationKey":
        """Create TranslationKey from dot-separated string.

        Args:
            key_string: Dot-separated key (e.g., "incident.created").

        Returns:
            TranslationKey instance.

        Raises:
            ValueError: If key_string is empty or has empty segments.
        """
        if not key_string:
            raise ValueError("Translation key must not be empty")
        return cls(parts=tuple(key_string.split(".")))


@dataclass
class TranslationCatalog:
    """Container for translations in a specific locale.

    Attributes:
        locale: Locale identifier this catalog is for.
        messages: Nested dict structure {segment: {segment: ... message}}.
        loaded_at: Timestamp (ISO 8601) when translations were loaded.
    """

    locale: str
    messages: Dict[str, Any] = field(default_factory=dict)
    loaded_at: Optional[str] = None

    def lookup(self, key: TranslationKey) -> Any:
        """Walk the nested messages along ``key``.

        Returns:
            The stored value (string or nested dict), or None if not found.
        """
        node: Any = self.messages
        for part in key.parts:
            if not isinstance(node, dict) or part not in node:
                return None
            node = node[part]
        return node

    def get_message(self, key: TranslationKey) -> Optional[str]:
        """Retrieve a translation message by key.

        Args:
            key: TranslationKey to look up.

        Returns:
            Translated message string, or None if not found or not a leaf.
        """
        value = self.lookup(key)
        if value is None or isinstance(value, dict):
            return None
        return str(value)

    def set_message(self, key: TranslationKey, message: str) -> None:
        """Set a translation message, creating intermediate levels."""
        node = self.messages
        for part in key.parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
        node[key.parts[-1]] = message

    def has_message(self, key: TranslationKey) -> bool:
        return self.get_message(key) is not None

    def get_namespace(self, namespace: str) -> Dict[str, Any]:
        """Get all messages for a top-level namespace."""
        value = self.messages.get(namespace, {})
        return value if isinstance(value, dict) else {}

    def merge(self, other: "TranslationCatalog") -> None:
        """Merge another catalog into this one.

        Nested levels are merged recursively; later entries override
        earlier ones.

        Args:
            other: TranslationCatalog to merge.
        """
        deep_merge(self.messages, other.messages)


def deep_merge(target: Dict[str, Any], source: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``source`` into ``target`` in place."""
    for key, value in source.items():
        existing = target.get(key)
        if isinstance(existing, dict) and isinstance(value, dict):
            deep_merge(existing, value)
        elif isinstance(value, dict):
            target[key] = deep_merge({}, value)
        else:
            target[key] = value
    return target
