"""Identifier registry for icon names, CSS classes and code points.

All allocation is deterministic: given the same sequence of candidates the
registry hands out the same identifiers. Sets only grow during a run.
"""

import math
from dataclasses import dataclass, field

from iconforge.config.settings import DEFAULT_START_UNICODE

MAX_UNICODE = 0x10FFFF
SURROGATES = range(0xD800, 0xE000)


def is_scalar_value(code: int) -> bool:
    """Check that *code* is a Unicode scalar value (in range, not a surrogate)."""
    return 0 <= code <= MAX_UNICODE and code not in SURROGATES


def allocate_unique_string(candidate: str, used: set[str]) -> str:
    """Register and return a string not yet present in *used*.

    A free candidate is returned unchanged. Otherwise ``candidate-2``,
    ``candidate-3``, ... are tried in order.

    Args:
        candidate: Preferred value
        used: Values already handed out (updated in place)

    Returns:
        The registered value
    """
    value = candidate
    if value in used:
        counter = 2
        while f"{candidate}-{counter}" in used:
            counter += 1
        value = f"{candidate}-{counter}"
    used.add(value)
    return value


def allocate_unicode(candidate: object, used: set[int]) -> int:
    """Register and return a code point not yet present in *used*.

    A missing or non-numeric candidate, or one that is not a Unicode scalar
    value, falls back to ``0xEA01``. Taken code points and surrogates are
    skipped by counting upwards.

    Args:
        candidate: Preferred code point (any value; invalid ones are replaced)
        used: Code points already handed out (updated in place)

    Returns:
        The registered code point
    """
    if isinstance(candidate, bool) or not isinstance(candidate, (int, float)):
        code = DEFAULT_START_UNICODE
    elif isinstance(candidate, float) and not math.isfinite(candidate):
        code = DEFAULT_START_UNICODE
    else:
        code = int(candidate)
    if not is_scalar_value(code):
        code = DEFAULT_START_UNICODE
    while code in used or code in SURROGATES:
        code += 1
    used.add(code)
    return code


@dataclass
class IdentifierRegistry:
    """Per-compile allocator of icon identities.

    Attributes:
        used_names: Icon names handed out
        used_class_names: CSS class names handed out
        used_unicodes: Code points handed out
        next_unicode: Where automatic code point allocation continues from
    """

    used_names: set[str] = field(default_factory=set)
    used_class_names: set[str] = field(default_factory=set)
    used_unicodes: set[int] = field(default_factory=set)
    next_unicode: int = DEFAULT_START_UNICODE

    def allocate_name(self, candidate: str) -> str:
        """Allocate a unique icon name."""
        return allocate_unique_string(candidate, self.used_names)

    def allocate_class_name(self, candidate: str) -> str:
        """Allocate a unique CSS class name."""
        return allocate_unique_string(candidate, self.used_class_names)

    def allocate_explicit_unicode(self, candidate: object) -> int:
        """Allocate the code point an icon asked for (or the next free one).

        The automatic cursor is left untouched.
        """
        return allocate_unicode(candidate, self.used_unicodes)

    def allocate_auto_unicode(self) -> int:
        """Allocate the next free code point from the cursor.

        The cursor moves to the allocated point, so later automatic icons
        continue from the highest point reached.
        """
        self.next_unicode = allocate_unicode(self.next_unicode, self.used_unicodes)
        return self.next_unicode
