DARK = "#000000"
LIGHT = "#ffffff"

LUMA_THRESHOLD = 128

# "<colour>|<colour>|<index of the active colour>", colours as AARRGGBB hex.
COLOR_DELIMITER = "|"
DEFAULT_BAR_COLOR = "FF191919|FF191919|0"


def luma(rgb):
    r, g, b = rgb
    return round((r * 299 + g * 587 + b * 114) / 1000)


def sample(rgb):
    """Black text on bright backgrounds, white text on dark ones."""
    return DARK if luma(rgb) >= LUMA_THRESHOLD else LIGHT


def parse_color_setting(setting):
    # Assumed well-formed; empty means the default bar colour
    colors = (setting or DEFAULT_BAR_COLOR).split(COLOR_DELIMITER)
    current = colors[int(colors[2])]
    return int(current[2:4], 16), int(current[4:6], 16), int(current[6:8], 16)


def foreground_for_setting(setting):
    return sample(parse_color_setting(setting))


def to_css(rgb):
    return "#{:02x}{:02x}{:02x}".format(*rgb)
