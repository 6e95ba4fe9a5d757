"""
Summary: Derive filesystem-safe album directory names from titles.
Why: Album directories must be named deterministically from human-readable titles.
"""

from __future__ import annotations

import re
import unicodedata
from typing import ClassVar, final

from unidecode import unidecode


@final
class Slugifier:
    """Turn titles into lowercase hyphen-separated slugs."""

    # Apostrophes are dropped so "Don't" becomes "dont" rather than "don-t"
    REMOVE_APOSTROPHE: ClassVar[re.Pattern[str]] = re.compile(r"'")

    # Everything that is not an ASCII letter or digit becomes a separator
    REPLACE_WITH_HYPHEN: ClassVar[re.Pattern[str]] = re.compile(r"[^a-z0-9]+")

    MAX_SLUG_LENGTH: ClassVar[int] = 90

    # Directory name used when a title slugs to nothing
    UNTITLED_SLUG: ClassVar[str] = "untitled"

    @classmethod
    def slugify(cls, title: str | None) -> str:
        """Slug ``title``.

        Rules:
            1. NFKC-normalize and transliterate to ASCII (``é`` → ``e``)
            2. Lowercase
            3. Remove apostrophes
            4. Collapse every run of other characters into one hyphen
            5. Strip hyphens at both ends and truncate to ``MAX_SLUG_LENGTH``

        Returns ``UNTITLED_SLUG`` when nothing survives.
        """
        if not title:
            return cls.UNTITLED_SLUG

        text = unidecode(unicodedata.normalize("NFKC", title)).lower()
        text = cls.REMOVE_APOSTROPHE.sub("", text)
        text = cls.REPLACE_WITH_HYPHEN.sub("-", text).strip("-")

        if len(text) > cls.MAX_SLUG_LENGTH:
            text = text[: cls.MAX_SLUG_LENGTH].rstrip("-")

        return text or cls.UNTITLED_SLUG


def slugify(title: str | None) -> str:
    """Module-level shortcut for ``Slugifier.slugify``."""

    return Slugifier.slugify(title)


__all__ = ["Slugifier", "slugify"]
