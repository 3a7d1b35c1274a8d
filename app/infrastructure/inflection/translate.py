"""Translate wrapper feeding declared inflection values into lookups.

``InflectedTranslate`` decorates an existing translate/lookup callable.
Given the object a translation is rendered for (a controller, a view...),
it collects ``kind -> token`` options from the object's declared accessors
and passes them along with the caller's own options::

    inflected = InflectedTranslate(
        translator.translate,
        is_inflected_locale=translator.is_inflected_locale,
        default_locale="en-US",
    )

    class UserController(InflectionMethods):
        inflected_translate = inflected

        def users_gender(self):
            return self.user.gender

    UserController.inflection_method({"users_gender": "gender"})
    UserController().translate("welcome")  # "Dear Sir!"
"""

from collections.abc import Mapping
from typing import Any, Callable, Dict, Optional, Union

from infrastructure.inflection.collector import collect_options
from infrastructure.inflection.declarations import (
    MethodDeclaration,
    MethodRegistry,
    Transform,
    method_registry,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()

LOCALE_OPTION = "locale"


class InflectedTranslate:
    """Decorator over a lookup callable adding collected inflection options.

    Attributes:
        lookup: Wrapped callable; its last positional argument may be an
            options mapping.
        declarations: Registry holding method-to-kind declarations.
    """

    def __init__(
        self,
        lookup: Callable[..., str],
        *,
        declarations: MethodRegistry = method_registry,
        is_inflected_locale: Optional[Callable[[Optional[str]], bool]] = None,
        default_locale: Union[str, Callable[[], Optional[str]], None] = None,
    ):
        """Initialize the wrapper.

        Args:
            lookup: Underlying translate callable.
            declarations: Registry holding method-to-kind declarations.
            is_inflected_locale: Predicate telling whether a locale has
                inflection data; every locale qualifies when omitted.
            default_locale: Locale (or zero-argument callable returning
                one) used when the call's options name none.
        """
        self.lookup = lookup
        self.declarations = declarations
        self._is_inflected_locale = is_inflected_locale
        self._default_locale = default_locale

    def current_locale(self) -> Optional[str]:
        if callable(self._default_locale):
            return self._default_locale()
        return self._default_locale

    def is_inflected_locale(self, locale: Optional[str]) -> bool:
        if self._is_inflected_locale is None:
            return True
        return self._is_inflected_locale(locale)

    def translate(self, context: Any, *args: Any) -> str:
        """Translate on behalf of ``context``.

        Args:
            context: Object whose declared accessors supply inflection
                values, None for none.
            *args: Arguments for the lookup; a trailing mapping is treated
                as options and may carry a ``locale`` override.

        Returns:
            Result of the lookup, called with collected options merged
            under the explicit ones when any were collected.
        """
        if context is None or not self.declarations.has_declarations(type(context)):
            return self.lookup(*args)

        options = args[-1] if args and isinstance(args[-1], Mapping) else None
        locale = options.get(LOCALE_OPTION) if options is not None else None
        if locale is None:
            locale = self.current_locale()

        if not self.is_inflected_locale(locale):
            logger.debug("skipped_inflection_for_locale", locale=locale)
            return self.lookup(*args)

        subopts = collect_options(context, self.declarations)
        if not subopts:
            return self.lookup(*args)

        positional = args[:-1] if options is not None else args
        merged: Dict[str, Any] = {**subopts, **(options or {})}
        return self.lookup(*positional, merged)

    t = translate


class InflectionMethods:
    """Mixin for host framework classes that render translations.

    Class attributes:
        inflected_translate: InflectedTranslate used by ``translate``.
        inflection_registry: Registry receiving declarations.
    """

    inflected_translate: Optional[InflectedTranslate] = None
    inflection_registry: MethodRegistry = method_registry

    @classmethod
    def inflection_method(
        cls,
        assignment: Optional[Mapping] = None,
        transform: Optional[Transform] = None,
    ) -> None:
        """Assign accessor methods of this class to inflection kinds.

        Args:
            assignment: Mapping of method name -> kind name.
            transform: Optional ``(method_name, kind, value, instance)``
                callable whose result replaces the accessor's value.

        Raises:
            BadDeclaration: If the assignment is missing or malformed.
        """
        cls.inflection_registry.declare(cls, assignment, transform)

    inflection_methods = inflection_method

    @classmethod
    def i18n_inflector_methods(cls) -> Dict[str, MethodDeclaration]:
        """Effective declarations, including inherited ones."""
        return cls.inflection_registry.effective_declarations(cls)

    def translate(self, *args: Any) -> str:
        if self.inflected_translate is None:
            raise RuntimeError(
                f"{type(self).__name__} has no inflected_translate configured"
            )
        return self.inflected_translate.translate(self, *args)

    t = translate
