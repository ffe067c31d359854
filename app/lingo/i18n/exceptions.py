"""Custom exceptions for the i18n system.

Provides the error kinds surfaced by locale parsing, catalog publication,
message resolution and template formatting.
"""

from typing import Optional


class I18nError(Exception):
    """Base exception for all i18n errors.

    Example:
        try:
            source.get_message("incident.created", "fr-CA")
        except I18nError as e:
            logger.error("i18n_error", error=str(e))
    """

    pass


class InvalidLocale(I18nError, ValueError):
    """Raised when a tag does not have the ``language`` or ``language-region`` shape.

    Example:
        >>> Locale.parse("zh-Hant-TW")
        Traceback (most recent call last):
        ...
        InvalidLocale: Invalid locale tag: 'zh-Hant-TW'
    """

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"Invalid locale tag: {tag!r}")


class InvalidCatalogSet(I18nError):
    """Raised when a catalog set would break the store invariants.

    The store keeps serving its previous catalog set when this is raised.
    """

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid catalog set: {reason}")


class MissingKey(I18nError, KeyError):
    """Raised when no catalog in the fallback search defines the key.

    Example:
        >>> engine.resolve(ResolutionRequest("nope", LocalePreference()))
        Traceback (most recent call last):
        ...
        MissingKey: "Message key not found: 'nope'"
    """

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Message key not found: {key!r}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]


class MalformedTemplate(I18nError, ValueError):
    """Raised when a template cannot be formatted with the given arguments.

    Attributes:
        template: The offending template text.
        index: Placeholder index with no matching argument, or None for a
            stray or unterminated brace.
        key: Message key the template was resolved for, when known.
        locale: Canonical tag of the catalog the template came from, or
            "default", when known.
    """

    def __init__(
        self,
        template: str,
        index: Optional[int],
        key: Optional[str] = None,
        locale: Optional[str] = None,
        detail: Optional[str] = None,
    ):
        self.template = template
        self.index = index
        self.key = key
        self.locale = locale
        self.detail = detail
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.index is not None:
            problem = f"placeholder {{{self.index}}} has no argument"
        else:
            problem = self.detail or "unbalanced brace"
        where = ""
        if self.key is not None:
            where = f" in {self.key!r}"
            if self.locale is not None:
                where += f" ({self.locale})"
        return f"Malformed template{where}: {problem}"

    def with_context(self, key: str, locale: str) -> "MalformedTemplate":
        """Return a copy annotated with the message key and locale."""
        return MalformedTemplate(
            self.template,
            self.index,
            key=key,
            locale=locale,
            detail=self.detail,
        )
