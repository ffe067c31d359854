"""Locale negotiation for client language preferences.

Turns an ``Accept-Language`` style expression into an ordered list of
candidate locales. Client input is untrusted: malformed entries are dropped
rather than failing the whole request.
"""

import math
from typing import List, Optional, Tuple

from lingo.core.logging import get_module_logger
from lingo.i18n.exceptions import InvalidLocale
from lingo.i18n.models import Locale, LocalePreference, PreferenceEntry

logger = get_module_logger()


class LocaleNegotiator:
    """Parses raw preference expressions into a LocalePreference.

    Accepts the wire form ``language[-region][;q=value](,...)*``, e.g.
    ``"fr-CA,fr;q=0.9,en;q=0.5"``.
    """

    def parse(self, raw: Optional[str]) -> LocalePreference:
        """Parse a raw preference expression.

        Args:
            raw: Preference expression (e.g., an Accept-Language header value).

        Returns:
            LocalePreference sorted by descending quality, ties in input
            order. Empty when the input is empty or entirely malformed.
        """
        if not raw:
            return LocalePreference()

        candidates: List[Tuple[Locale, float]] = []
        dropped = 0
        for part in raw.split(","):
            if not part.strip():
                continue
            parsed = self._parse_entry(part)
            if parsed is None:
                dropped += 1
                continue
            candidates.append(parsed)

        if dropped:
            logger.debug("dropped_malformed_preferences", count=dropped)

        # sorted() is stable, so equal qualities keep their input order
        ordered = sorted(candidates, key=lambda c: c[1], reverse=True)

        seen = set()
        entries = []
        for locale, quality in ordered:
            if locale in seen:
                continue
            seen.add(locale)
            entries.append(PreferenceEntry(locale, quality))

        return LocalePreference(tuple(entries))

    def _parse_entry(self, part: str) -> Optional[Tuple[Locale, float]]:
        tag, *params = part.split(";")
        try:
            locale = Locale.parse(tag)
        except InvalidLocale:
            return None

        quality = 1.0
        for param in params:
            name, sep, value = param.partition("=")
            if not sep or name.strip().lower() != "q":
                continue
            try:
                quality = float(value.strip())
            except ValueError:
                return None
            if math.isnan(quality):
                return None
            quality = min(max(quality, 0.0), 1.0)

        return locale, quality
