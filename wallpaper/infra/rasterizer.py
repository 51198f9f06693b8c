"""
Rastérisation SVG -> PNG via CairoSVG.

Le rendu du texte doit être reproductible d'un déploiement à l'autre: avant le premier rendu, une
configuration fontconfig dédiée est écrite afin que seules les polices embarquées (`FONT_DIR`)
soient visibles. Cette initialisation est globale au processus, protégée par un verrou et
exécutée au plus une fois.
"""

from __future__ import annotations

import os
import threading
from pathlib import Path
from xml.sax.saxutils import escape

import structlog

log = structlog.get_logger(__name__)

_font_lock = threading.Lock()
_font_configured = False


FONT_SUFFIXES = (".ttf", ".otf", ".ttc")


def find_font_files(font_dir: str) -> list[str]:
    """Liste triée des fichiers de police (.ttf, .otf, .ttc) présents dans `font_dir`."""
    root = Path(font_dir)
    if not root.is_dir():
        return []
    return sorted(
        str(path)
        for path in root.rglob("*")
        if path.is_file() and path.suffix.lower() in FONT_SUFFIXES
    )


def font_config_xml(font_dir: str, cache_dir: str, default_family: str) -> str:
    return f"""<?xml version="1.0"?>
<!DOCTYPE fontconfig SYSTEM "fonts.dtd">
<fontconfig>
  <dir>{escape(font_dir)}</dir>
  <cachedir>{escape(cache_dir)}</cachedir>
  <alias>
    <family>sans-serif</family>
    <prefer><family>{escape(default_family)}</family></prefer>
  </alias>
  <config></config>
</fontconfig>
"""


def ensure_font_config(
    font_dir: str, fontconfig_dir: str, default_family: str = "Noto Sans"
) -> bool:
    """Écrit `fonts.conf` et exporte les variables fontconfig, une seule fois par processus.

    Returns:
        bool: True si cet appel a effectué l'initialisation, False si elle était déjà faite.
    """
    global _font_configured
    if _font_configured:
        return False
    with _font_lock:
        if _font_configured:
            return False
        config_dir = Path(fontconfig_dir)
        cache_dir = config_dir / "cache"
        cache_dir.mkdir(parents=True, exist_ok=True)
        config_path = config_dir / "fonts.conf"
        config_xml = font_config_xml(font_dir, str(cache_dir), default_family)
        config_path.write_text(config_xml, encoding="utf-8")

        os.environ["FONTCONFIG_PATH"] = str(config_dir)
        os.environ["FONTCONFIG_FILE"] = str(config_path)
        os.environ["XDG_CACHE_HOME"] = str(config_dir.parent)
        _font_configured = True
    log.info("font_config_ready", font_dir=font_dir, config=str(config_path))
    return True


def reset_font_config() -> None:
    """Réinitialise l'indicateur (tests uniquement)."""
    global _font_configured
    with _font_lock:
        _font_configured = False


class SvgRasterizer:
    """Convertit un document SVG autonome en PNG à la largeur demandée."""

    def __init__(
        self,
        font_dir: str,
        fontconfig_dir: str = "/tmp/fontconfig",
        default_family: str = "Noto Sans",
    ):
        self.font_dir = font_dir
        self.fontconfig_dir = fontconfig_dir
        self.default_family = default_family

    def render_png(self, svg: str, width: int) -> bytes:
        """Rend `svg` en PNG, mis à l'échelle sur `width` pixels de large."""
        ensure_font_config(self.font_dir, self.fontconfig_dir, self.default_family)
        # cairosvg charge libcairo à l'import: import différé après la configuration des polices
        import cairosvg  # noqa: PLC0415

        return cairosvg.svg2png(bytestring=svg.encode("utf-8"), output_width=width)
