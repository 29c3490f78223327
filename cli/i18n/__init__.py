"""
cli/i18n/__init__.py - Internationalization (i18n) Module

Provides translation support for the CLI.
Korean (ko) is the default language, with English (en) as an option.

Architecture:
    - Messages are organized by namespace (cli, rules)
    - Translation function t() supports format string interpolation
    - Current language is held in a context variable

Usage:
    from cli.i18n import t, set_lang, get_lang

    # Basic translation
    print(t("rules.family_text"))  # "텍스트" or "Text"

    # With interpolation
    print(t("cli.saved_to", path="out.xlsx"))  # "Saved: out.xlsx"

    # Get localized text based on language
    set_lang("en")
    print(t("cli.icon_sets_title"))  # "Icon Sets"
"""

from __future__ import annotations

import contextlib
from contextvars import ContextVar
from typing import Any

# Default language context
_current_lang: ContextVar[str] = ContextVar("lang", default="ko")

# Supported languages
SUPPORTED_LANGS = ("ko", "en")
DEFAULT_LANG = "ko"


def get_lang() -> str:
    """Get current language from context variable."""
    return _current_lang.get()


def set_lang(lang: str) -> None:
    """Set current language in context variable.

    Args:
        lang: Language code ("ko" or "en")
    """
    if lang not in SUPPORTED_LANGS:
        lang = DEFAULT_LANG
    _current_lang.set(lang)


def t(key: str, lang: str | None = None, **kwargs: Any) -> str:
    """Translate a message key to the current language.

    Args:
        key: Message key in namespace.key format (e.g., "cli.saved_to")
        lang: Optional language override. If not provided, uses context variable.
        **kwargs: Format string arguments for interpolation

    Returns:
        Translated string, or key if translation not found

    Examples:
        >>> t("rules.family_rank")
        "순위"  # when lang="ko"

        >>> t("cli.saved_to", lang="en", path="out.xlsx")
        "Saved: out.xlsx"
    """
    from cli.i18n.messages import MESSAGES

    if lang is None:
        lang = get_lang()

    if lang not in SUPPORTED_LANGS:
        lang = DEFAULT_LANG

    msg_dict = MESSAGES.get(key)
    if msg_dict is None:
        # Key not found, return key as-is
        return key

    text = msg_dict.get(lang)
    if text is None:
        # Fallback to Korean if English not available
        text = msg_dict.get(DEFAULT_LANG, key)

    if kwargs:
        with contextlib.suppress(KeyError, ValueError):
            text = text.format(**kwargs)

    return text


def get_text(ko: str, en: str, lang: str | None = None) -> str:
    """Get text based on language without using message registry.

    Example:
        >>> get_text("저장됨", "Saved", lang="en")
        "Saved"
    """
    if lang is None:
        lang = get_lang()
    return en if lang == "en" else ko


__all__ = [
    "t",
    "get_text",
    "get_lang",
    "set_lang",
    "SUPPORTED_LANGS",
    "DEFAULT_LANG",
]
