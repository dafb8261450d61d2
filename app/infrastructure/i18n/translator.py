"""Translation helpers bound to one loaded language.

A LoadedLocale wraps the runtime catalog of a language and exposes the
singular and plural translation functions handed to routes and templates.
"""

from typing import Any, Callable, Dict, Optional, Sequence, Tuple

from babel.support import Translations

from infrastructure.logging import get_module_logger

logger = get_module_logger()

TranslateFn = Callable[..., str]
LogFn = Callable[..., Any]

HELPER_NAMES = ("tr", "__", "trn", "_n")


def compact_helper_args(args: Sequence[Any], leading: int) -> Tuple[Any, ...]:
    """Strip the bookkeeping arguments a template layer appends to helper calls.

    The template convention calls helpers with the message arguments first and
    an extra trailing argument. When the call carries more than the bare
    message arguments, the first ``leading`` slots and the last slot are
    dropped and falsy values are removed from what remains.

    Args:
        args: Every positional argument of the helper call.
        leading: Number of message slots (1 for ``tr``, 2 for ``trn``).

    Returns:
        Substitution values for string formatting.
    """
    if len(args) < leading + 2:
        return ()
    return tuple(arg for arg in args[leading:-1] if arg)


class LoadedLocale:
    """Translation functions for a single language.

    Attributes:
        code: Language code of the locale.
        translations: Runtime catalog, or None when no catalog is available.
            Without a catalog the source text is formatted directly.
    """

    def __init__(
        self,
        code: str,
        translations: Optional[Translations] = None,
        log_error: Optional[LogFn] = None,
    ):
        self.code = code
        self.translations = translations
        self._log_error = log_error or logger.error

    def __repr__(self) -> str:
        return f"LoadedLocale(code={self.code!r}, has_catalog={self.translations is not None})"

    def translate(self, text: str, *args: Any) -> str:
        """Translate a text and substitute positional arguments.

        Args:
            text: Message id to translate.
            *args: Values for ``%`` placeholders in the translated text.

        Returns:
            The translated, formatted string. If formatting fails the
            unformatted translation is returned.
        """
        if self.translations is not None:
            template = self.translations.gettext(text)
        else:
            template = text
        return self._format(template, args)

    def translate_plural(self, singular: str, plural: str, count: int, *args: Any) -> str:
        """Translate a text taking the count and the plural rule into account.

        Args:
            singular: Singular message id.
            plural: Plural message id.
            count: Number selecting the plural form.
            *args: Values for ``%`` placeholders in the selected text.

        Returns:
            The translated string in the correct form.
        """
        if self.translations is not None:
            template = self.translations.ngettext(singular, plural, count)
        else:
            template = singular if count == 1 else plural
        return self._format(template, args)

    @property
    def helpers(self) -> Dict[str, TranslateFn]:
        """Translation functions under both naming conventions."""
        return {
            "tr": self.translate,
            "__": self.translate,
            "trn": self.translate_plural,
            "_n": self.translate_plural,
        }

    def legacy_helpers(self) -> Dict[str, TranslateFn]:
        """Helpers following the template layer's calling convention.

        See ``compact_helper_args`` for how bookkeeping arguments are removed.
        Missing arguments never raise: an empty call yields "", a missing
        plural falls back to the singular and a missing count to 1.
        """

        def tr(*args: Any) -> str:
            if not args:
                return ""
            return self.translate(args[0], *compact_helper_args(args, 1))

        def trn(*args: Any) -> str:
            if not args:
                return ""
            singular = args[0]
            plural = args[1] if len(args) > 1 else singular
            count = args[2] if len(args) > 2 and args[2] is not None else 1
            return self.translate_plural(
                singular, plural, count, *compact_helper_args(args, 2)
            )

        return {"tr": tr, "__": tr, "trn": trn, "_n": trn}

    def _format(self, template: str, args: Tuple[Any, ...]) -> str:
        if not args:
            return template
        try:
            return template % args
        except (TypeError, ValueError, KeyError) as e:
            self._log_error(
                "translation_format_failed",
                code=self.code,
                template=template,
                error=str(e),
            )
            return template
