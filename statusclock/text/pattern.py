from typing import NamedTuple

# Private-use code points, never produced by the formatter itself.
SENTINEL_OPEN = "\uef00"
SENTINEL_CLOSE = "\uef01"

SPECIFIER = "a"
QUOTE = "'"


class SpecifierPosition(NamedTuple):
    index: int  # the specifier character itself
    start: int  # first whitespace character before it (== index when none)


def locate_specifier(template, specifier=SPECIFIER):
    """
    Finds the first occurrence of ``specifier`` outside quoted literals.

    Returns None when every occurrence is quoted (or there is none).
    """
    quoted = False
    for i, c in enumerate(template):
        if c == QUOTE:
            quoted = not quoted
        if not quoted and c == specifier:
            start = i
            while start > 0 and template[start - 1].isspace():
                start -= 1
            return SpecifierPosition(i, start)
    return None


def wrap_specifier(template, start, index):
    """Brackets ``template[start:index + 1]`` with the sentinel pair."""
    return (
        template[:start]
        + SENTINEL_OPEN
        + template[start:index]
        + template[index]
        + SENTINEL_CLOSE
        + template[index + 1:]
    )


def annotate(template, specifier=SPECIFIER):
    """Returns the template with its specifier wrapped, or unchanged if none is found."""
    pos = locate_specifier(template, specifier)
    if pos is None:
        return template
    return wrap_specifier(template, pos.start, pos.index)
