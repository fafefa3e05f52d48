"""Configuration errors raised while building a ``LanguageConfig``.

All of them are fatal: an engine is never created from a rejected config.
"""

from __future__ import annotations


class LanguageConfigError(ValueError):
    """Base class for invalid negotiation configurations."""


class NoLanguagesError(LanguageConfigError):
    def __init__(self) -> None:
        super().__init__("At least one language must be configured")


class InvalidLanguageError(LanguageConfigError):
    def __init__(self, language: str, reason: str) -> None:
        self.language = language
        super().__init__(f"Invalid language code {language!r}: {reason}")


class NoMethodsError(LanguageConfigError):
    def __init__(self) -> None:
        super().__init__("At least one negotiation method must be enabled")


class ConflictingPathMethodsError(LanguageConfigError):
    def __init__(self) -> None:
        super().__init__(
            "Path prefix and subdomain negotiation cannot both be enabled"
        )


class AmbiguousRedirectTargetError(LanguageConfigError):
    def __init__(self) -> None:
        super().__init__(
            "Redirecting on a header match requires path prefix or "
            "subdomain negotiation to redirect to"
        )
