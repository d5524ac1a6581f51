from .pattern import SENTINEL_CLOSE, SENTINEL_OPEN

Span = tuple[int, int]


def find_sentinels(rendered, opener=SENTINEL_OPEN, closer=SENTINEL_CLOSE):
    """
    Returns (open_index, close_index) of the sentinel pair in ``rendered``.

    Both markers must be present and the closer must follow the opener,
    otherwise the segment counts as absent.
    """
    open_idx = rendered.find(opener)
    close_idx = rendered.find(closer)
    if open_idx >= 0 and close_idx > open_idx:
        return open_idx, close_idx
    return None


def find_label(rendered, needle):
    # First occurrence to the end of the last one
    if not needle:
        return None
    first = rendered.find(needle)
    if first < 0:
        return None
    last = rendered.rfind(needle)
    return first, last + len(needle)
