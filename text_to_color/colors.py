import colorsys
from typing import Tuple
import webcolors


def normalize_hex(value: str) -> str:
    value = (value or "").strip()
    if not value.startswith("#"):
        value = "#" + value
    try:
        return webcolors.normalize_hex(value)
    except ValueError:
        raise ValueError(f"invalid hex color: {value!r}")


def hex_to_rgb(value: str) -> Tuple[int, int, int]:
    return tuple(webcolors.hex_to_rgb(normalize_hex(value)))


def hex_to_hsl(value: str) -> Tuple[float, float, float]:
    """Return (hue degrees, saturation %, lightness %)."""
    r, g, b = (c / 255 for c in hex_to_rgb(value))
    h, l, s = colorsys.rgb_to_hls(r, g, b)
    return h * 360, s * 100, l * 100


def hsl_to_hex(h: float, s: float, l: float) -> str:
    r, g, b = colorsys.hls_to_rgb((h % 360) / 360, l / 100, s / 100)
    return webcolors.rgb_to_hex((round(r * 255), round(g * 255), round(b * 255)))


def rgb_string(value: str) -> str:
    r, g, b = hex_to_rgb(value)
    return f"rgb({r}, {g}, {b})"


def hsl_string(value: str) -> str:
    h, s, l = hex_to_hsl(value)
    return f"hsl({round(h)}, {round(s)}%, {round(l)}%)"


def color_mode(value: str) -> str:
    # BT.601 luma weights
    r, g, b = hex_to_rgb(value)
    luma = (0.299 * r + 0.587 * g + 0.114 * b) / 255
    return "light" if luma > 0.5 else "dark"
