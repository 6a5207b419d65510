"""Theme colors and color utilities for the UI."""


class NeonColors:
    """Dark neon palette: glowing cyan walls on a near-black field."""

    BG_TOP = "#05060f"
    BG_BOTTOM = "#10122a"

    WALL = "#00ffff"
    PLAYER = "#ff00ff"
    GOAL = "#00ff00"

    PANEL_BG = "rgba(10, 12, 30, 0.88)"
    PANEL_BORDER = "rgba(0, 255, 255, 0.35)"

    TEXT_PRIMARY = "#e8fdff"
    TEXT_SECONDARY = "#8fb8c8"
    TEXT_MUTED = "#52667a"

    LOCKED = "#2a2f45"
    COMPLETED = "#00c853"


def blend_hex(a: str, b: str, t: float) -> str:
    """Blend two #RRGGBB colors. t=0 -> a, t=1 -> b."""
    a = a.strip()
    b = b.strip()
    if not (a.startswith("#") and b.startswith("#") and len(a) == 7 and len(b) == 7):
        return a
    try:
        ar, ag, ab = int(a[1:3], 16), int(a[3:5], 16), int(a[5:7], 16)
        br, bg, bb = int(b[1:3], 16), int(b[3:5], 16), int(b[5:7], 16)
    except ValueError:
        return a
    t = max(0.0, min(1.0, float(t)))
    r = int(ar + (br - ar) * t)
    g = int(ag + (bg - ag) * t)
    bl = int(ab + (bb - ab) * t)
    return f"#{r:02X}{g:02X}{bl:02X}"
