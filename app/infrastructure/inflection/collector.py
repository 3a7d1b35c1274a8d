"""Collects inflection options from an object's declared accessors."""

import inspect
from enum import Enum
from typing import Any, Dict

from infrastructure.inflection.declarations import MethodRegistry, method_registry


def stringify_value(value: Any) -> str:
    """Token string of an accessor result (Enum members use their value)."""
    if value is None:
        return ""
    if isinstance(value, Enum):
        value = value.value
    return str(value)


def _find_accessor(instance: Any, name: str) -> Any:
    """Attribute ``name`` of ``instance``, None when it does not exist.

    Presence is checked statically so an AttributeError raised inside a
    property getter reaches the caller.
    """
    try:
        inspect.getattr_static(instance, name)
    except AttributeError:
        # Attributes served by __getattr__
        return getattr(instance, name, None)
    return getattr(instance, name)


def collect_options(
    instance: Any, registry: MethodRegistry = method_registry
) -> Dict[str, str]:
    """Build ``kind -> token`` options by calling declared accessors.

    Declared methods missing from ``instance`` (or not callable) are
    skipped. Exceptions raised by accessors or transforms propagate.

    Args:
        instance: Object whose class carries declarations.
        registry: Registry holding the declarations.

    Returns:
        Inflection options for a translate call.
    """
    options: Dict[str, str] = {}
    for method_name, declaration in registry.effective_declarations(
        type(instance)
    ).items():
        accessor = _find_accessor(instance, method_name)
        if not callable(accessor):
            continue
        value = accessor()
        if declaration.proc is not None:
            value = declaration.proc(method_name, declaration.kind, value, instance)
        options[declaration.kind] = stringify_value(value)
    return options
