"""Variable reference scanning.

A reference is ``{{`` followed by one or more characters that are not
``}``, closed by ``}}``. The inner text is trimmed to get the variable
name; references whose trimmed name is empty are ignored and left as
plain text.

Names are never compiled into a pattern, so dots, stars, brackets and
other regex metacharacters in a name match literally.

Both renderers go through :func:`split_references` so the plain and the
annotated output always agree on which spans were substituted.
"""

import re
from collections.abc import Iterator

REFERENCE_PATTERN = re.compile(r"\{\{([^}]+)\}\}")


def iter_reference_names(text: str) -> Iterator[str]:
    """Yield variable names referenced in ``text``, left to right.

    Repeated names are yielded each time they occur.
    """
    for match in REFERENCE_PATTERN.finditer(text):
        name = match.group(1).strip()
        if name:
            yield name


def split_references(text: str) -> Iterator[tuple[str, str | None]]:
    """Split ``text`` into literal runs and variable references.

    Yields ``(literal, None)`` for template text and
    ``(reference_text, name)`` for each reference, in order, scanning
    the text once. Joining the first items reproduces ``text`` exactly.
    """
    literal_start = 0
    for match in REFERENCE_PATTERN.finditer(text):
        name = match.group(1).strip()
        if not name:
            # Blank reference, stays in the surrounding literal run
            continue
        if match.start() > literal_start:
            yield text[literal_start : match.start()], None
        yield match.group(0), name
        literal_start = match.end()

    if literal_start < len(text):
        yield text[literal_start:], None
