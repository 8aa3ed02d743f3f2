"""
Options de thème (couleur d'accent, polices, tailles) + assainissement avant substitution CSS.

Les valeurs invalides ne lèvent jamais : elles retombent sur le défaut.
"""
import math, os, re
from typing import Any, Optional

from pydantic import BaseModel

DEFAULT_ACCENT       = os.getenv("DEFAULT_ACCENT", "#6366f1")
DEFAULT_HEADING_SIZE = 42
DEFAULT_BODY_SIZE    = 18
HEADING_SIZE_RANGE   = (20, 72)
BODY_SIZE_RANGE      = (12, 28)

_HEX_RE  = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_FONT_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9 \-]{0,63}$")


class ThemeOptions(BaseModel):
    """Thème saisi par l'utilisateur ou dérivé de la marque. Jamais stocké dans un bloc."""
    accent_color: Optional[str] = None
    heading_font: Optional[str] = None
    body_font: Optional[str] = None
    heading_size: Optional[Any] = None
    body_size: Optional[Any] = None


class ResolvedTheme(BaseModel):
    """Thème prêt à substituer : toutes les valeurs sont sûres."""
    accent_color: str
    accent_rgb: str
    heading_font: str
    body_font: str
    heading_size: int
    body_size: int


def _hex(value) -> str:
    if isinstance(value, str) and _HEX_RE.match(value.strip()):
        return value.strip().lower()
    return DEFAULT_ACCENT if _HEX_RE.match(DEFAULT_ACCENT) else "#6366f1"


def hex_to_rgb(hex_color: str) -> str:
    """'#6366f1' → '99, 102, 241' (fallback indigo si illisible)."""
    h = hex_color.lstrip("#")
    if len(h) == 3:
        h = "".join(c * 2 for c in h)
    try:
        return f"{int(h[0:2], 16)}, {int(h[2:4], 16)}, {int(h[4:6], 16)}"
    except ValueError:
        return "99, 102, 241"


def _font(value) -> str:
    if isinstance(value, str) and _FONT_RE.match(value.strip()):
        return f"'{value.strip()}', sans-serif"
    return "inherit"


def clamp_size(value, default: int, bounds: tuple) -> int:
    """Taille en px : non numérique, non finie ou hors bornes → default."""
    if isinstance(value, bool):
        return default
    if isinstance(value, str):
        value = value.strip().removesuffix("px")
        try:
            value = float(value)
        except ValueError:
            return default
    if not isinstance(value, (int, float)) or not math.isfinite(value):
        return default
    lo, hi = bounds
    return int(round(value)) if lo <= value <= hi else default


def resolve_theme(theme: Optional[ThemeOptions] = None) -> ResolvedTheme:
    t = theme or ThemeOptions()
    accent = _hex(t.accent_color)
    return ResolvedTheme(
        accent_color=accent,
        accent_rgb=hex_to_rgb(accent),
        heading_font=_font(t.heading_font),
        body_font=_font(t.body_font),
        heading_size=clamp_size(t.heading_size, DEFAULT_HEADING_SIZE, HEADING_SIZE_RANGE),
        body_size=clamp_size(t.body_size, DEFAULT_BODY_SIZE, BODY_SIZE_RANGE),
    )


def css_variables(theme: ResolvedTheme) -> str:
    """Bloc de variables CSS scoppé sur .adv-content."""
    return f""".adv-content {{
  --adv-accent:       {theme.accent_color};
  --adv-accent-rgb:   {theme.accent_rgb};
  --adv-accent-soft:  rgba({theme.accent_rgb}, 0.08);
  --adv-accent-line:  rgba({theme.accent_rgb}, 0.25);
  --adv-font-heading: {theme.heading_font};
  --adv-font-body:    {theme.body_font};
  --adv-size-h1:      {theme.heading_size}px;
  --adv-size-h2:      {round(theme.heading_size * 0.7)}px;
  --adv-size-h3:      {round(theme.heading_size * 0.55)}px;
  --adv-size-body:    {theme.body_size}px;
  --adv-text:         #374151;
  --adv-text-light:   #6b7280;
  --adv-border:       #e5e7eb;
  --adv-bg-subtle:    #f9fafb;
}}"""
