"""
Compositeur SVG des fonds d'écran.

Fonctions pures: une configuration normalisée, un instant de rendu et (pour le Ramadan) les
horaires du jour produisent un document SVG autonome, sans référence externe. Deux appels avec
les mêmes entrées produisent exactement les mêmes octets.

Toutes les coordonnées calculées sont émises avec deux décimales.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from wallpaper.domain.entities import LifeConfig, RamadanConfig, RamadanTimings
from wallpaper.domain.ramadan_theme import (
    CardTokens,
    MosqueTokens,
    create_theme_motif,
    get_theme_tokens,
)

LIFE_EXPECTANCY_YEARS = 100
WEEKS_PER_YEAR = 52
TOTAL_WEEKS = LIFE_EXPECTANCY_YEARS * WEEKS_PER_YEAR

RAMADAN_SUBTITLE = "رمضان کریم"
MOSQUE_BASE_SIZE = 512

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_CLOCK_RE = re.compile(r"([0-9]{1,2}):([0-9]{2})")

# (libellé, champ de RamadanTimings, symbole d'icône), ordre fixe quel que soit le thème
PRAYER_ENTRIES: tuple[tuple[str, str, str], ...] = (
    ("Sehri", "sehri", "icon-sehri"),
    ("Fajr", "fajr", "icon-fajr"),
    ("Zohar", "dhuhr", "icon-zohar"),
    ("Asr", "asr", "icon-asr"),
    ("Maghrib", "maghrib", "icon-maghrib"),
    ("Isha", "isha", "icon-isha"),
)

_ICON_NUDGE = {"Fajr": 0.012, "Maghrib": 0.012, "Sehri": 0.006, "Zohar": 0.006, "Asr": 0.006}


def escape_xml(value: str) -> str:
    return (
        value.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#39;")
    )


def _round_px(value: float) -> int:
    return int(math.floor(value + 0.5))


def _localize(now: datetime, time_zone: str) -> datetime:
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(ZoneInfo(time_zone))


def date_label(now: datetime, time_zone: str) -> str:
    """Libellé court en anglais, ex. `Mon, Jan 1`, dans le fuseau configuré."""
    local = _localize(now, time_zone)
    return f"{_WEEKDAYS[local.weekday()]}, {_MONTHS[local.month - 1]} {local.day}"


def time_label(now: datetime, time_zone: str) -> str:
    """Horloge 24h `HH:MM` dans le fuseau configuré."""
    return _localize(now, time_zone).strftime("%H:%M")


def weeks_lived(date_of_birth: str, time_zone: str, now: datetime) -> int:
    """Nombre de semaines entières écoulées entre la naissance et le jour local de `now`.

    Les deux dates sont comparées en jours calendaires; le résultat est borné à [0, 5200].
    """
    birth = date.fromisoformat(date_of_birth)
    today = _localize(now, time_zone).date()
    elapsed_days = (today - birth).days
    return min(max(elapsed_days, 0) // 7, TOTAL_WEEKS)


def to_12_hour_label(value: str) -> str:
    """Convertit `HH:MM` (24h) en `H:MM AM/PM`; toute autre valeur est rendue telle quelle."""
    match = _CLOCK_RE.fullmatch(value)
    if not match:
        return value
    hour24 = int(match.group(1))
    suffix = "PM" if hour24 >= 12 else "AM"
    hour12 = hour24 % 12 or 12
    return f"{hour12}:{match.group(2)} {suffix}"


def render_life(config: LifeConfig, *, width: int, height: int, now: datetime) -> str:
    """Construit le SVG du calendrier de vie (52 colonnes x 100 lignes)."""
    cols = WEEKS_PER_YEAR
    rows = LIFE_EXPECTANCY_YEARS
    lived = weeks_lived(config.date_of_birth, config.time_zone, now)
    current_week = min(max(lived - 1, 0), TOTAL_WEEKS - 1)

    unit = min(width * 0.82 / cols, height * 0.47 / rows)
    dot_size = max(3.0, unit * 0.65)
    dot_offset = (unit - dot_size) / 2
    radius = max(1.8, dot_size * 0.18)
    grid_left = (width - cols * unit) / 2
    grid_top = height * 0.372

    dots: list[str] = []
    for row in range(rows):
        for col in range(cols):
            idx = row * cols + col
            x = grid_left + col * unit + dot_offset
            y = grid_top + row * unit + dot_offset
            is_done = idx < lived
            is_current = idx == current_week and lived > 0
            if is_current:
                fill = "#8d9299"
            elif is_done:
                fill = "#e6e8ec"
            else:
                fill = "#050608"
            stroke = "none" if is_done else "#2a2d32"
            dots.append(
                f'<rect x="{x:.2f}" y="{y:.2f}" width="{dot_size:.2f}" height="{dot_size:.2f}" '
                f'rx="{radius:.2f}" fill="{fill}" stroke="{stroke}" stroke-width="1.2" />'
            )

    center_x = f"{width / 2:.2f}"
    caption = f"{lived:,} of {TOTAL_WEEKS:,} weeks lived"
    dots_markup = "".join(dots)

    return f"""<?xml version="1.0" encoding="UTF-8"?>
<svg width="{width}" height="{height}" viewBox="0 0 {width} {height}" fill="none" xmlns="http://www.w3.org/2000/svg">
  <defs>
    <linearGradient id="bg" x1="0" y1="0" x2="{width}" y2="{height}" gradientUnits="userSpaceOnUse">
      <stop offset="0%" stop-color="#030405" />
      <stop offset="100%" stop-color="#000000" />
    </linearGradient>
    <style>
      .top-date {{ font-family: "SF Pro Display", "Avenir Next", "Noto Sans", sans-serif; font-size: {_round_px(width * 0.053)}px; font-weight: 700; fill: #7a7d83; text-anchor: middle; }}
      .clock {{ font-family: "SF Pro Display", "Avenir Next Condensed", "Noto Sans", sans-serif; font-size: {_round_px(width * 0.335)}px; font-weight: 680; fill: #4b4f55; text-anchor: middle; letter-spacing: 2px; }}
      .title {{ font-family: "SF Pro Display", "Avenir Next", "Noto Sans", sans-serif; font-size: {_round_px(width * 0.056)}px; font-weight: 520; fill: #f1f3f7; text-anchor: middle; letter-spacing: 8px; }}
      .meta {{ font-family: "SF Pro Text", "Avenir Next", "Noto Sans", sans-serif; font-size: {_round_px(width * 0.022)}px; font-weight: 500; fill: #676d75; text-anchor: middle; }}
    </style>
  </defs>
  <rect x="0" y="0" width="{width}" height="{height}" fill="url(#bg)" />
  <text x="{center_x}" y="{height * 0.098:.2f}" class="top-date">{escape_xml(date_label(now, config.time_zone))}</text>
  <text x="{center_x}" y="{height * 0.257:.2f}" class="clock">{escape_xml(time_label(now, config.time_zone))}</text>
  <text x="{center_x}" y="{height * 0.312:.2f}" class="title">{escape_xml(config.title)}</text>
  <text x="{center_x}" y="{height * 0.336:.2f}" class="meta">{caption}</text>
  {dots_markup}
</svg>"""


@dataclass(frozen=True)
class RamadanGeometry:
    """Paramètres de mise en page propres à un thème (fractions du canevas)."""

    panel_width: float
    column_count: int
    card_gap_x: float
    card_gap_y: float
    card_width: float
    card_height: float
    card_top: float
    icon_size: float
    mosque_max_width: float
    mosque_max_height: float
    mosque_bottom_inset: float
    title_offset: float
    hijri_offset: float
    subtitle_offset: float
    row_layout: bool


def ramadan_geometry(theme: str, width: int, height: int) -> RamadanGeometry:
    """Géométrie du panneau: six cartes sur une ligne (`classic`) ou grille 2 colonnes (`girly`)."""
    if theme == "girly":
        panel_width = width * 0.87
        column_count = 2
        card_gap_x = width * 0.02
        card_height = height * 0.076
        card_width = (panel_width - card_gap_x * (column_count - 1)) / column_count
        return RamadanGeometry(
            panel_width=panel_width,
            column_count=column_count,
            card_gap_x=card_gap_x,
            card_gap_y=height * 0.016,
            card_width=card_width,
            card_height=card_height,
            card_top=height * 0.565,
            icon_size=min(card_width * 0.16, card_height * 0.45),
            mosque_max_width=width * 0.72,
            mosque_max_height=height * 0.24,
            mosque_bottom_inset=height * 0.006,
            title_offset=0.175,
            hijri_offset=0.136,
            subtitle_offset=0.104,
            row_layout=True,
        )

    panel_width = width * 0.928
    column_count = len(PRAYER_ENTRIES)
    card_gap_x = width * 0.009
    card_height = height * 0.093
    card_width = (panel_width - card_gap_x * (column_count - 1)) / column_count
    return RamadanGeometry(
        panel_width=panel_width,
        column_count=column_count,
        card_gap_x=card_gap_x,
        card_gap_y=0.0,
        card_width=card_width,
        card_height=card_height,
        card_top=height * 0.572,
        icon_size=min(card_width * 0.34, card_height * 0.22),
        mosque_max_width=width * 0.78,
        mosque_max_height=height * 0.29,
        mosque_bottom_inset=height * 0.012,
        title_offset=0.142,
        hijri_offset=0.104,
        subtitle_offset=0.072,
        row_layout=False,
    )


def _prayer_card(
    idx: int,
    label: str,
    value: str,
    icon: str,
    geo: RamadanGeometry,
    panel_left: float,
    card: CardTokens,
) -> str:
    cw = geo.card_width
    ch = geo.card_height
    if geo.row_layout:
        row, col = divmod(idx, geo.column_count)
    else:
        row, col = 0, idx
    x = panel_left + col * (cw + geo.card_gap_x)
    y = geo.card_top + row * (ch + geo.card_gap_y)

    if geo.row_layout:
        icon_x = x + cw * 0.08
        icon_base_y = y + (ch - geo.icon_size) / 2
        label_x, label_y = x + cw * 0.24, y + ch * 0.59
        value_x, value_y = x + cw * 0.92, y + ch * 0.59
        label_class, value_class = "row-label", "row-value"
    else:
        icon_x = x + (cw - geo.icon_size) / 2
        icon_base_y = y + ch * 0.13
        label_x, label_y = x + cw / 2, y + ch * 0.58
        value_x, value_y = x + cw / 2, y + ch * 0.83
        label_class, value_class = "col-label", "col-value"
    icon_y = icon_base_y + ch * _ICON_NUDGE.get(label, 0.0)

    return f"""
      <g transform="translate({x:.2f}, {y:.2f})">
        <rect width="{cw:.2f}" height="{ch:.2f}" rx="{cw * card.outer_radius_scale:.2f}" fill="url(#card)" stroke="url(#goldBorder)" stroke-width="{card.border_width}" filter="url(#cardGlow)"/>
        <rect x="2" y="2" width="{cw - 4:.2f}" height="{ch - 4:.2f}" rx="{cw * card.inner_radius_scale:.2f}" fill="none" stroke="{card.inner_stroke}" stroke-opacity="{card.inner_stroke_opacity}" stroke-width="1"/>
      </g>
      <use xlink:href="#{icon}" x="{icon_x:.2f}" y="{icon_y:.2f}" width="{geo.icon_size:.2f}" height="{geo.icon_size:.2f}" class="icon-line" />
      <text x="{label_x:.2f}" y="{label_y:.2f}" class="{label_class}">{escape_xml(label)}</text>
      <text x="{value_x:.2f}" y="{value_y:.2f}" class="{value_class}">{escape_xml(to_12_hour_label(value))}</text>"""


def render_ramadan(
    config: RamadanConfig, timings: RamadanTimings, *, width: int, height: int, now: datetime
) -> str:
    """Construit le SVG du calendrier de Ramadan pour le thème de `config`.

    `now` fait partie du contrat de rendu commun; les libellés affichés proviennent de `timings`,
    déjà résolus pour le jour local de cet instant.
    """
    theme = get_theme_tokens(config.theme)
    geo = ramadan_geometry(config.theme, width, height)
    panel_left = (width - geo.panel_width) / 2
    row_center_y = geo.card_top + geo.card_height / 2

    mosque_scale = min(
        geo.mosque_max_width / MOSQUE_BASE_SIZE, geo.mosque_max_height / MOSQUE_BASE_SIZE
    )
    mosque_size = MOSQUE_BASE_SIZE * mosque_scale
    mosque_x = (width - mosque_size) / 2
    mosque_y = height - mosque_size - geo.mosque_bottom_inset

    cards = "".join(
        _prayer_card(idx, label, getattr(timings, field), icon, geo, panel_left, theme.card)
        for idx, (label, field, icon) in enumerate(PRAYER_ENTRIES)
    )
    title_line = escape_xml(config.title or "RAMADAN CALENDAR")
    center_x = f"{width / 2:.2f}"

    return f"""<?xml version="1.0" encoding="UTF-8"?>
<svg width="{width}" height="{height}" viewBox="0 0 {width} {height}" fill="none" xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink">
  <defs>
    <linearGradient id="bgMain" x1="0" y1="0" x2="{width}" y2="{height}" gradientUnits="userSpaceOnUse">
      <stop offset="0%" stop-color="{theme.background.start}" />
      <stop offset="50%" stop-color="{theme.background.mid}" />
      <stop offset="100%" stop-color="{theme.background.end}" />
    </linearGradient>
    <radialGradient id="vignette" cx="50%" cy="42%" r="72%">
      <stop offset="0%" stop-color="{theme.vignette.inner}" stop-opacity="{theme.vignette.inner_opacity}" />
      <stop offset="68%" stop-color="{theme.vignette.mid}" stop-opacity="{theme.vignette.mid_opacity}" />
      <stop offset="100%" stop-color="{theme.vignette.outer}" stop-opacity="{theme.vignette.outer_opacity}" />
    </radialGradient>
    <pattern id="grain" width="8" height="8" patternUnits="userSpaceOnUse">
      <circle cx="1" cy="1" r="0.45" fill="{theme.grain.a}" fill-opacity="{theme.grain.a_opacity}" />
      <circle cx="6" cy="2" r="0.4" fill="{theme.grain.b}" fill-opacity="{theme.grain.b_opacity}" />
      <circle cx="3" cy="5" r="0.5" fill="{theme.grain.c}" fill-opacity="{theme.grain.c_opacity}" />
      <circle cx="7" cy="7" r="0.35" fill="{theme.grain.d}" fill-opacity="{theme.grain.d_opacity}" />
    </pattern>
    <linearGradient id="card" x1="0" y1="0" x2="{geo.panel_width:.2f}" y2="{geo.card_height:.2f}" gradientUnits="userSpaceOnUse">
      <stop offset="0%" stop-color="{theme.card.start}" />
      <stop offset="100%" stop-color="{theme.card.end}" />
    </linearGradient>
    <linearGradient id="goldBorder" x1="0" y1="0" x2="{geo.panel_width:.2f}" y2="0" gradientUnits="userSpaceOnUse">
      <stop offset="0%" stop-color="{theme.card.border_start}" />
      <stop offset="50%" stop-color="{theme.card.border_mid}" />
      <stop offset="100%" stop-color="{theme.card.border_end}" />
    </linearGradient>
    <linearGradient id="goldText" x1="0" y1="0" x2="{width}" y2="0" gradientUnits="userSpaceOnUse">
      <stop offset="0%" stop-color="{theme.text.gold_start}" />
      <stop offset="50%" stop-color="{theme.text.gold_mid}" />
      <stop offset="100%" stop-color="{theme.text.gold_end}" />
    </linearGradient>
    <filter id="cardGlow" x="-12%" y="-12%" width="124%" height="124%">
      <feGaussianBlur stdDeviation="{theme.card.glow_std_deviation}" />
      <feColorMatrix type="matrix" values="1 0 0 0 0 0 1 0 0 0 0 0 1 0 0 0 0 0 {theme.card.glow_opacity} 0" />
    </filter>
{ICON_SYMBOLS}
{mosque_symbol(theme.mosque)}
    <style>
      .header-title {{ font-family: "Cinzel", "Times New Roman", serif; font-size: {_round_px(width * 0.062)}px; font-weight: 600; fill: url(#goldText); text-anchor: middle; letter-spacing: 0.7px; }}
      .header-sub {{ font-family: "Noto Nastaliq Urdu", "Noto Naskh Arabic", serif; font-size: {_round_px(width * 0.032)}px; font-weight: 500; fill: {theme.text.header_sub}; text-anchor: middle; opacity: 0.84; direction: rtl; unicode-bidi: plaintext; }}
      .mode-title {{ font-family: "Cinzel", "Times New Roman", serif; font-size: {_round_px(width * 0.026)}px; font-weight: 500; fill: {theme.text.mode_title}; text-anchor: middle; letter-spacing: 2.2px; opacity: 0.9; }}
      .col-label {{ font-family: "Cinzel", "Times New Roman", serif; font-size: {_round_px(width * 0.027)}px; font-weight: 560; fill: {theme.text.col_label}; text-anchor: middle; letter-spacing: 0.15px; }}
      .col-value {{ font-family: "Cinzel", "Times New Roman", serif; font-size: {_round_px(width * 0.031)}px; font-weight: 680; fill: {theme.text.col_value}; text-anchor: middle; letter-spacing: 0.12px; }}
      .row-label {{ font-family: "Cinzel", "Times New Roman", serif; font-size: {_round_px(width * 0.029)}px; font-weight: 560; fill: {theme.text.col_label}; text-anchor: start; letter-spacing: 0.1px; }}
      .row-value {{ font-family: "Cinzel", "Times New Roman", serif; font-size: {_round_px(width * 0.028)}px; font-weight: 640; fill: {theme.text.col_value}; text-anchor: end; letter-spacing: 0.08px; }}
      .icon-line {{ fill: none; stroke: {theme.icon_stroke}; stroke-width: 1.75; stroke-linecap: round; stroke-linejoin: round; }}
      .theme-crescent {{ color: {theme.motif.crescent_color}; opacity: {theme.motif.crescent_opacity}; }}
      .theme-star {{ color: {theme.motif.star_color}; opacity: {theme.motif.star_opacity}; }}
    </style>
  </defs>
  <rect x="0" y="0" width="{width}" height="{height}" fill="url(#bgMain)" />
  <rect x="0" y="0" width="{width}" height="{height}" fill="url(#vignette)" />
  <rect x="0" y="0" width="{width}" height="{height}" fill="url(#grain)" />
  {create_theme_motif(config.theme, width, height)}

  <text x="{center_x}" y="{row_center_y - height * geo.title_offset:.2f}" class="mode-title">{title_line}</text>
  <text x="{center_x}" y="{row_center_y - height * geo.hijri_offset:.2f}" class="header-title">{escape_xml(timings.hijri_date)}</text>
  <text x="{center_x}" y="{row_center_y - height * geo.subtitle_offset:.2f}" class="header-sub">{RAMADAN_SUBTITLE}</text>
  {cards}

  <g transform="translate({mosque_x:.2f}, {mosque_y:.2f}) scale({mosque_scale:.5f})">
    <use xlink:href="#mosque-outline" width="{MOSQUE_BASE_SIZE}" height="{MOSQUE_BASE_SIZE}" />
  </g>
</svg>"""


ICON_SYMBOLS = """    <symbol id="icon-sehri" viewBox="0 0 24 24">
      <path d="M3 16.5h18" />
      <path d="M5.4 16.5a6.6 6.6 0 0 1 13.2 0" />
      <path d="M12 6.4v2.2" />
      <path d="M8.2 8.1l1.1 1.1" />
      <path d="M15.8 8.1l-1.1 1.1" />
      <path d="M4.4 19.3h15.2" />
    </symbol>
    <symbol id="icon-fajr" viewBox="0 0 24 24">
      <path d="M12 3.5v4.2" />
      <path d="M8.1 7.5L12 3.5l3.9 4" />
      <path d="M7.5 20a4.5 4.5 0 0 1 9 0" />
      <path d="M5.4 11.2l1.4 1.4" />
      <path d="M18.6 11.2l-1.4 1.4" />
      <path d="M3 20h18" />
    </symbol>
    <symbol id="icon-zohar" viewBox="0 0 24 24">
      <circle cx="12" cy="12" r="3.8" />
      <path d="M12 2.8v3" />
      <path d="M12 18.2v3" />
      <path d="M2.8 12h3" />
      <path d="M18.2 12h3" />
      <path d="M5.5 5.5l2.1 2.1" />
      <path d="M16.4 16.4l2.1 2.1" />
      <path d="M18.5 5.5l-2.1 2.1" />
      <path d="M7.6 16.4l-2.1 2.1" />
    </symbol>
    <symbol id="icon-asr" viewBox="0 0 24 24">
      <path d="M3 17.8h18" />
      <path d="M6 17.8a6 6 0 0 1 12 0" />
      <path d="M12 7v2.2" />
      <path d="M8.2 9l1.1 1.1" />
      <path d="M15.8 9l-1.1 1.1" />
      <path d="M5.2 12.2h2.2" />
      <path d="M16.6 12.2h2.2" />
    </symbol>
    <symbol id="icon-maghrib" viewBox="0 0 24 24">
      <path d="M12 10V2" />
      <path d="M5.2 11.2l1.4 1.4" />
      <path d="M2 18h2" />
      <path d="M20 18h2" />
      <path d="M17.4 12.6l1.4-1.4" />
      <path d="M22 22H2" />
      <path d="M16 6l-4 4-4-4" />
      <path d="M16 18a4 4 0 00-8 0" />
    </symbol>
    <symbol id="icon-isha" viewBox="0 0 24 24">
      <path d="M16.2 4.4a7.4 7.4 0 1 0 0 15.2a6.5 6.5 0 0 1-4.5-7.6a6.5 6.5 0 0 1 4.5-7.6z" />
      <path d="M18.2 6.2l0.5 1.4l1.4 0.5l-1.4 0.5l-0.5 1.4l-0.5-1.4l-1.4-0.5l1.4-0.5z" />
    </symbol>"""

# Silhouette de mosquée (repère 512x512), contours seulement
MOSQUE_PATHS = (
    "M503.467,494.933H8.533c-4.71,0-8.533,3.823-8.533,8.533S3.823,512,8.533,512h494.933c4.719,0,8.533-3.823,8.533-8.533 S508.186,494.933,503.467,494.933z",
    "M418.133,477.867c4.719,0,8.533-3.823,8.533-8.533v-307.2c0-4.71-3.814-8.533-8.533-8.533s-8.533,3.823-8.533,8.533 v162.133h-34.133v-8.533c0-4.71-3.814-8.533-8.533-8.533s-8.533,3.823-8.533,8.533V460.8h-34.133v-68.267 c0-37.641-30.626-68.267-68.267-68.267c-37.641,0-68.267,30.626-68.267,68.267V460.8H153.6V315.733 c0-4.71-3.823-8.533-8.533-8.533c-4.71,0-8.533,3.823-8.533,8.533v8.533H102.4V162.133c0-4.71-3.823-8.533-8.533-8.533 c-4.71,0-8.533,3.823-8.533,8.533v307.2c0,4.71,3.823,8.533,8.533,8.533c4.71,0,8.533-3.823,8.533-8.533v-128h34.133V460.8H128 c-4.71,0-8.533,3.823-8.533,8.533s3.823,8.533,8.533,8.533h256c4.719,0,8.533-3.823,8.533-8.533S388.719,460.8,384,460.8h-8.533 V341.333H409.6v128C409.6,474.044,413.414,477.867,418.133,477.867z M247.467,409.6c-4.71,0-8.533,3.823-8.533,8.533 s3.823,8.533,8.533,8.533V460.8H204.8v-68.267c0-25.318,18.492-46.344,42.667-50.432V409.6z M307.2,460.8h-42.667v-34.133 c4.719,0,8.533-3.823,8.533-8.533s-3.814-8.533-8.533-8.533v-67.499c24.175,4.087,42.667,25.114,42.667,50.432V460.8z",
    "M443.733,196.267v17.067c0,4.71,3.814,8.533,8.533,8.533c4.719,0,8.533-3.823,8.533-8.533v-17.067 c0-4.71-3.814-8.533-8.533-8.533C447.548,187.733,443.733,191.556,443.733,196.267z",
    "M17.067,162.133v307.2c0,4.71,3.823,8.533,8.533,8.533c4.71,0,8.533-3.823,8.533-8.533v-307.2 c0-4.71-3.823-8.533-8.533-8.533C20.89,153.6,17.067,157.423,17.067,162.133z",
    "M418.133,136.533H486.4c3.234,0,6.187-1.826,7.629-4.719c15.172-30.336-8.107-59.273-23.501-78.421 c-4.565-5.666-8.866-11.017-10.624-14.541c-2.901-5.786-12.373-5.786-15.275,0c-1.758,3.524-6.067,8.875-10.624,14.541 c-15.394,19.149-38.673,48.085-23.509,78.421C411.947,134.707,414.899,136.533,418.133,136.533z M447.309,64.085 c1.741-2.167,3.413-4.241,4.958-6.229c1.545,1.988,3.217,4.062,4.958,6.229c13.090,16.282,29.150,36.233,23.415,55.381h-56.747 C418.159,100.318,434.219,80.367,447.309,64.085z",
    "M486.4,153.6c-4.719,0-8.533,3.823-8.533,8.533v307.2c0,4.71,3.814,8.533,8.533,8.533s8.533-3.823,8.533-8.533v-307.2 C494.933,157.423,491.119,153.6,486.4,153.6z",
    "M25.6,136.533h68.267c3.234,0,6.187-1.826,7.637-4.719c15.164-30.336-8.115-59.273-23.509-78.421 c-4.565-5.666-8.866-11.017-10.633-14.541c-2.884-5.786-12.373-5.786-15.266,0c-1.758,3.524-6.067,8.875-10.624,14.541 c-15.394,19.149-38.673,48.085-23.509,78.421C19.413,134.707,22.366,136.533,25.6,136.533z M54.775,64.085 c1.741-2.167,3.413-4.241,4.958-6.229c1.545,1.988,3.209,4.062,4.958,6.229c13.099,16.282,29.150,36.233,23.415,55.381H31.36 C25.626,100.318,41.677,80.367,54.775,64.085z",
    "M179.2,256c4.71,0,8.533-3.823,8.533-8.533V230.4c0-4.71-3.823-8.533-8.533-8.533s-8.533,3.823-8.533,8.533v17.067 C170.667,252.177,174.49,256,179.2,256z",
    "M51.2,196.267v17.067c0,4.71,3.823,8.533,8.533,8.533s8.533-3.823,8.533-8.533v-17.067c0-4.71-3.823-8.533-8.533-8.533 S51.2,191.556,51.2,196.267z",
    "M145.067,290.133h221.867c3.849,0,7.219-2.577,8.235-6.289c18.270-67.021-24.653-102.895-62.524-134.545 c-19.081-15.949-37.069-31.070-48.111-49.357V67.055c5.743-1.476,11.059-4.318,15.386-8.585c3.354-3.302,3.405-8.704,0.094-12.066 c-3.294-3.362-8.713-3.405-12.066-0.094c-3.208,3.149-7.450,4.890-11.947,4.890c-9.412,0-17.067-7.654-17.067-17.067 c0-9.412,7.654-17.067,17.067-17.067c4.710,0,8.533-3.823,8.533-8.533S260.710,0,256,0c-18.825,0-34.133,15.309-34.133,34.133 c0,15.855,10.923,29.107,25.600,32.922v32.887c-11.042,18.287-29.030,33.408-48.111,49.357 c-37.871,31.650-80.802,67.524-62.524,134.545C137.847,287.556,141.218,290.133,145.067,290.133z M210.304,162.389 c16.418-13.722,33.297-27.827,45.696-44.493c12.399,16.666,29.278,30.771,45.696,44.493 c35.831,29.943,69.743,58.283,58.539,110.677H151.765C140.561,220.672,174.473,192.333,210.304,162.389z",
    "M230.4,256c4.71,0,8.533-3.823,8.533-8.533V230.4c0-4.71-3.823-8.533-8.533-8.533s-8.533,3.823-8.533,8.533v17.067 C221.867,252.177,225.69,256,230.4,256z",
    "M281.6,256c4.719,0,8.533-3.823,8.533-8.533V230.4c0-4.71-3.814-8.533-8.533-8.533c-4.719,0-8.533,3.823-8.533,8.533 v17.067C273.067,252.177,276.881,256,281.6,256z",
    "M332.8,256c4.719,0,8.533-3.823,8.533-8.533V230.4c0-4.71-3.814-8.533-8.533-8.533c-4.719,0-8.533,3.823-8.533,8.533 v17.067C324.267,252.177,328.081,256,332.8,256z",
)


def mosque_symbol(mosque: MosqueTokens) -> str:
    """Symbole `mosque-outline` avec le trait du thème."""
    paths = "\n".join(f'        <path d="{d}"/>' for d in MOSQUE_PATHS)
    return (
        '    <symbol id="mosque-outline" viewBox="0 0 512 512">\n'
        f'      <g fill="none" stroke="{mosque.stroke}" stroke-width="{mosque.width}" '
        f'stroke-linecap="{mosque.linecap}" stroke-linejoin="{mosque.linejoin}" '
        f'opacity="{mosque.opacity}">\n'
        f"{paths}\n"
        "      </g>\n"
        "    </symbol>"
    )
