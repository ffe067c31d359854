"""Positional template formatting.

Templates use ``{N}`` placeholders for positional arguments and doubled
braces (``{{`` and ``}}``) for literal braces. Formatting is strict: any
placeholder without an argument, and any stray brace, raises
MalformedTemplate.
"""

import re
from typing import Any, List, Sequence

from lingo.i18n.exceptions import MalformedTemplate

_PLACEHOLDER = re.compile(r"\{([0-9]+)\}")


class FormatEngine:
    """Substitutes positional arguments into templates."""

    def format(self, template: str, args: Sequence[Any] = ()) -> str:
        """Format a template with positional arguments.

        Args:
            template: Template text, e.g. "Incident {0} created by {1}".
            args: Values for the placeholders, rendered with ``str()``.

        Returns:
            The formatted text.

        Raises:
            MalformedTemplate: If a placeholder index has no argument, or a
                brace is neither escaped nor part of a placeholder.
        """
        out: List[str] = []
        pos = 0
        length = len(template)

        while pos < length:
            brace = self._next_brace(template, pos)
            if brace < 0:
                out.append(template[pos:])
                break

            out.append(template[pos:brace])
            char = template[brace]
            following = template[brace + 1 : brace + 2]

            # Escapes are consumed before placeholder matching
            if following == char:
                out.append(char)
                pos = brace + 2
                continue

            if char == "}":
                raise MalformedTemplate(
                    template, None, detail=f"unescaped '}}' at offset {brace}"
                )

            match = _PLACEHOLDER.match(template, brace)
            if match is None:
                raise MalformedTemplate(
                    template, None, detail=f"invalid placeholder at offset {brace}"
                )

            index = int(match.group(1))
            if index >= len(args):
                raise MalformedTemplate(template, index)

            out.append(str(args[index]))
            pos = match.end()

        return "".join(out)

    @staticmethod
    def _next_brace(template: str, start: int) -> int:
        opening = template.find("{", start)
        closing = template.find("}", start)
        if opening < 0:
            return closing
        if closing < 0:
            return opening
        return min(opening, closing)
