"""Method-to-kind declarations for classes that supply inflection values.

A class declares which of its accessor methods return inflection tokens
and the kind each one feeds::

    method_registry.declare(UserController, {"users_gender": "gender"})

Declarations are inherited: the effective declarations of a class merge
those of its bases (root first) with its own, later entries replacing
earlier ones by method name.
"""

import threading
import weakref
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from infrastructure.inflection.exceptions import BadDeclaration
from infrastructure.inflection.kinds import normalize_token
from infrastructure.logging import get_module_logger

logger = get_module_logger()

# (method_name, kind, value, instance) -> new value
Transform = Callable[[str, str, Any, Any], Any]


@dataclass(frozen=True)
class MethodDeclaration:
    """Kind assigned to an accessor method, with an optional transform.

    Attributes:
        kind: Inflection kind the method's result is passed as.
        proc: Optional callable ``(method_name, kind, value, instance)``
            whose result replaces the method's return value.
    """

    kind: str
    proc: Optional[Transform] = None

    def as_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "proc": self.proc}


class MethodRegistry:
    """Per-class store of method-to-kind declarations.

    Writes happen while classes are being defined and take a lock. The
    merged view of a class is computed on first read, under the same lock,
    and cached until the next declaration.
    """

    def __init__(self):
        self._own: Dict[type, Dict[str, MethodDeclaration]] = {}
        # Merged views hold their classes weakly
        self._effective: weakref.WeakKeyDictionary = weakref.WeakKeyDictionary()
        self._lock = threading.Lock()

    def declare(
        self,
        owner: type,
        assignment: Optional[Mapping] = None,
        transform: Optional[Transform] = None,
    ) -> None:
        """Assign accessor methods of ``owner`` to inflection kinds.

        Args:
            owner: Class the declaration belongs to.
            assignment: Mapping of method name -> kind name.
            transform: Optional callable applied to each assigned method's
                result, see MethodDeclaration.

        Raises:
            BadDeclaration: If the assignment is missing, not a mapping,
                empty, or has an empty key or value. Nothing is recorded.
        """
        if assignment is None or not isinstance(assignment, Mapping) or not assignment:
            raise BadDeclaration(assignment)
        if transform is not None and not callable(transform):
            raise BadDeclaration(f"transform {transform!r} is not callable")

        entries: Dict[str, MethodDeclaration] = {}
        for method, kind in assignment.items():
            method_name = normalize_token(method)
            kind_name = normalize_token(kind)
            if not method_name or not kind_name:
                raise BadDeclaration(f"{method!r} => {kind!r}")
            entries[method_name] = MethodDeclaration(kind=kind_name, proc=transform)

        with self._lock:
            self._own.setdefault(owner, {}).update(entries)
            # Subclasses of owner may have cached views
            self._effective.clear()

        logger.debug(
            "declared_inflection_methods",
            owner=owner.__qualname__,
            methods={name: entry.kind for name, entry in entries.items()},
        )

    def own_declarations(self, owner: type) -> Dict[str, MethodDeclaration]:
        """Declarations made directly on ``owner``."""
        return dict(self._own.get(owner, {}))

    def effective_declarations(self, owner: type) -> Dict[str, MethodDeclaration]:
        """Declarations of ``owner`` merged with those of its bases.

        Args:
            owner: Class to inspect.

        Returns:
            Method name -> MethodDeclaration; empty when nothing applies.
        """
        cached = self._effective.get(owner)
        if cached is None:
            with self._lock:
                cached = {}
                for klass in reversed(owner.__mro__):
                    cached.update(self._own.get(klass, {}))
                self._effective[owner] = cached
        return dict(cached)

    def has_declarations(self, owner: type) -> bool:
        return bool(self.effective_declarations(owner))

    def clear(self, owner: Optional[type] = None) -> None:
        """Forget declarations of ``owner``, or of every class."""
        with self._lock:
            if owner is None:
                self._own.clear()
            else:
                self._own.pop(owner, None)
            self._effective.clear()


# Default registry used by InflectionMethods classes
method_registry = MethodRegistry()
