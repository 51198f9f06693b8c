"""Table statique des thèmes visuels du calendrier de Ramadan.

Chaque thème est un jeu fermé de constantes (couleurs, opacités, épaisseurs, facteurs d'échelle)
consommé tel quel par le compositeur SVG. Le motif décoratif optionnel est la seule partie
géométrique propre à un thème.
"""

from __future__ import annotations

from dataclasses import dataclass

from wallpaper.domain.entities import RamadanTheme


@dataclass(frozen=True)
class BackgroundTokens:
    start: str
    mid: str
    end: str


@dataclass(frozen=True)
class VignetteTokens:
    inner: str
    inner_opacity: float
    mid: str
    mid_opacity: float
    outer: str
    outer_opacity: float


@dataclass(frozen=True)
class GrainTokens:
    a: str
    a_opacity: float
    b: str
    b_opacity: float
    c: str
    c_opacity: float
    d: str
    d_opacity: float


@dataclass(frozen=True)
class CardTokens:
    start: str
    end: str
    border_start: str
    border_mid: str
    border_end: str
    border_width: float
    inner_stroke: str
    inner_stroke_opacity: float
    outer_radius_scale: float
    inner_radius_scale: float
    glow_color: str
    glow_opacity: float
    glow_std_deviation: float


@dataclass(frozen=True)
class TextTokens:
    gold_start: str
    gold_mid: str
    gold_end: str
    header_sub: str
    mode_title: str
    col_label: str
    col_value: str


@dataclass(frozen=True)
class MosqueTokens:
    stroke: str
    width: float
    linecap: str
    linejoin: str
    opacity: float


@dataclass(frozen=True)
class MotifTokens:
    star_color: str
    star_opacity: float
    crescent_color: str
    crescent_opacity: float


@dataclass(frozen=True)
class ThemeTokens:
    """Ensemble complet des constantes visuelles d'un thème."""

    id: RamadanTheme
    background: BackgroundTokens
    vignette: VignetteTokens
    grain: GrainTokens
    card: CardTokens
    text: TextTokens
    icon_stroke: str
    mosque: MosqueTokens
    motif: MotifTokens


CLASSIC_TOKENS = ThemeTokens(
    id="classic",
    background=BackgroundTokens(start="#030509", mid="#071226", end="#020307"),
    vignette=VignetteTokens(
        inner="#15294D",
        inner_opacity=0.26,
        mid="#070D1C",
        mid_opacity=0.14,
        outer="#000000",
        outer_opacity=0.55,
    ),
    grain=GrainTokens(
        a="#FFFFFF",
        a_opacity=0.02,
        b="#C8D4F2",
        b_opacity=0.015,
        c="#FFFFFF",
        c_opacity=0.018,
        d="#9CB2DD",
        d_opacity=0.012,
    ),
    card=CardTokens(
        start="#12213B",
        end="#0A1426",
        border_start="#8D6C3B",
        border_mid="#DAB887",
        border_end="#8A6838",
        border_width=1.35,
        inner_stroke="#D9BA86",
        inner_stroke_opacity=0.11,
        outer_radius_scale=0.14,
        inner_radius_scale=0.12,
        glow_color="#DAB887",
        glow_opacity=0.08,
        glow_std_deviation=1.1,
    ),
    text=TextTokens(
        gold_start="#9A7742",
        gold_mid="#E1C28F",
        gold_end="#9A7742",
        header_sub="#B89E70",
        mode_title="#AC946A",
        col_label="#C3A36D",
        col_value="#F8EFD9",
    ),
    icon_stroke="#C5A164",
    mosque=MosqueTokens(stroke="#B58E52", width=3.6, linecap="round", linejoin="round", opacity=0.94),
    motif=MotifTokens(
        star_color="#DAB887", star_opacity=0, crescent_color="#DAB887", crescent_opacity=0
    ),
)

GIRLY_TOKENS = ThemeTokens(
    id="girly",
    background=BackgroundTokens(start="#241327", mid="#3A1C3F", end="#160A1B"),
    vignette=VignetteTokens(
        inner="#6A3F78",
        inner_opacity=0.3,
        mid="#2A1332",
        mid_opacity=0.18,
        outer="#07020A",
        outer_opacity=0.56,
    ),
    grain=GrainTokens(
        a="#FFE9F5",
        a_opacity=0.018,
        b="#FFD5E6",
        b_opacity=0.014,
        c="#FFF3DE",
        c_opacity=0.016,
        d="#F3C8D9",
        d_opacity=0.012,
    ),
    card=CardTokens(
        start="#4A294F",
        end="#2C1636",
        border_start="#D6AFC4",
        border_mid="#F1D7C1",
        border_end="#C38AA9",
        border_width=1.2,
        inner_stroke="#F0C6D9",
        inner_stroke_opacity=0.2,
        outer_radius_scale=0.19,
        inner_radius_scale=0.16,
        glow_color="#F6C1D5",
        glow_opacity=0.22,
        glow_std_deviation=1.75,
    ),
    text=TextTokens(
        gold_start="#D9A6BF",
        gold_mid="#F5DEC4",
        gold_end="#D9A6BF",
        header_sub="#E8BFD3",
        mode_title="#D7ADC1",
        col_label="#F0CADB",
        col_value="#FFF1E5",
    ),
    icon_stroke="#F1C9DC",
    mosque=MosqueTokens(stroke="#E7BCD0", width=4.6, linecap="round", linejoin="round", opacity=0.9),
    motif=MotifTokens(
        star_color="#FCE3EF", star_opacity=0.62, crescent_color="#F6C8DB", crescent_opacity=0.09
    ),
)

RAMADAN_THEME_TOKENS: dict[str, ThemeTokens] = {
    "classic": CLASSIC_TOKENS,
    "girly": GIRLY_TOKENS,
}


def get_theme_tokens(theme: RamadanTheme) -> ThemeTokens:
    return RAMADAN_THEME_TOKENS.get(theme, CLASSIC_TOKENS)


def _star(width: float, height: float, x0: float, x1: float, x2: float, y: float, dy: float) -> str:
    return (
        f'<path class="theme-star" d="M {width * x0:.2f} {height * y:.2f} '
        f"L {width * x1:.2f} {height * (y + dy):.2f} "
        f"L {width * x2:.2f} {height * y:.2f} "
        f'L {width * x1:.2f} {height * (y - dy):.2f} Z" fill="currentColor" />'
    )


def create_theme_motif(theme: RamadanTheme, width: float, height: float) -> str:
    """Calque décoratif (croissant + étoiles) du thème `girly`; chaîne vide sinon."""
    if theme != "girly":
        return ""

    crescent_cx = width * 0.84
    crescent_cy = height * 0.22
    crescent_r = width * 0.102
    inner_cx = crescent_cx + width * 0.038
    inner_cy = crescent_cy - width * 0.008
    inner_r = width * 0.086

    return (
        "\n  <g>\n"
        f'    <circle class="theme-crescent" cx="{crescent_cx:.2f}" cy="{crescent_cy:.2f}" '
        f'r="{crescent_r:.2f}" fill="currentColor" />\n'
        f'    <circle cx="{inner_cx:.2f}" cy="{inner_cy:.2f}" r="{inner_r:.2f}" fill="url(#bgMain)" />\n'
        f"    {_star(width, height, 0.17, 0.178, 0.186, 0.2, 0.014)}\n"
        f"    {_star(width, height, 0.24, 0.247, 0.255, 0.14, 0.012)}\n"
        f"    {_star(width, height, 0.77, 0.777, 0.785, 0.1, 0.012)}\n"
        "  </g>"
    )
