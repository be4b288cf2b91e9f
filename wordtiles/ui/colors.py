"""Theme colors and color utilities for the UI."""

from wordtiles.core.levels import Role


class HomeColors:
    """Light theme palette."""

    BG_TOP = "#eef2ff"
    BG_BOTTOM = "#f1f5f9"

    PRIMARY = "#4f46e5"
    PRIMARY_LIGHT = "#818cf8"
    PRIMARY_DARK = "#3730a3"

    SUCCESS = "#059669"
    ERROR = "#dc2626"
    AMBER = "#f59e0b"

    CARD_BG = "rgba(255, 255, 255, 0.92)"
    CARD_BORDER = "rgba(148, 163, 184, 0.45)"

    TEXT_PRIMARY = "#1e293b"
    TEXT_SECONDARY = "#475569"
    TEXT_MUTED = "#94a3b8"

    TILE_BG = "#ffffff"
    TILE_BORDER = "#cbd5e1"
    TILE_TEXT = "#1e293b"
    TILE_ERROR_BG = "#fef2f2"
    TILE_ERROR_BORDER = "#ef4444"


# (background, text, border) per tile role, shown once a sentence is correct
ROLE_COLORS: dict[Role, tuple[str, str, str]] = {
    Role.SUBJECT: ("#dbeafe", "#1e40af", "#60a5fa"),
    Role.VERB: ("#fee2e2", "#991b1b", "#f87171"),
    Role.OBJECT: ("#dcfce7", "#166534", "#4ade80"),
    Role.PLACE: ("#e5e7eb", "#1f2937", "#9ca3af"),
    Role.TIME: ("#f3e8ff", "#6b21a8", "#c084fc"),
}


def role_colors(role: Role) -> tuple[str, str, str]:
    """Return (background, text, border) for *role*, neutral if unknown."""
    return ROLE_COLORS.get(role, (HomeColors.TILE_BG, HomeColors.TILE_TEXT, HomeColors.TILE_BORDER))


def blend_hex(a: str, b: str, t: float) -> str:
    """Blend two #RRGGBB colors. t=0 -> a, t=1 -> b."""
    try:
        a = a.strip()
        b = b.strip()
        if not (a.startswith("#") and b.startswith("#") and len(a) == 7 and len(b) == 7):
            return a
        t = max(0.0, min(1.0, float(t)))
        ar, ag, ab = int(a[1:3], 16), int(a[3:5], 16), int(a[5:7], 16)
        br, bg, bb = int(b[1:3], 16), int(b[3:5], 16), int(b[5:7], 16)
        r = int(ar + (br - ar) * t)
        g = int(ag + (bg - ag) * t)
        bl = int(ab + (bb - ab) * t)
        return f"#{r:02X}{g:02X}{bl:02X}"
    except ValueError:
        return a


def hover_shade(color: str, amount: float = 0.08) -> str:
    """Darken *color* slightly for a hover state."""
    return blend_hex(color, "#000000", amount)
