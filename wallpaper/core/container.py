"""
Conteneur d'injection de dépendances et configuration application.

Instancie les composants centraux (settings, client d'horaires, géocodeur, rastériseur) et expose
un singleton `container` utilisé par le reste de l'application.
"""

import structlog

from wallpaper.core.settings import get_settings
from wallpaper.domain.services import WallpaperService
from wallpaper.infra.fake_timings import FakeGeocoder, FakeTimingsClient
from wallpaper.infra.http_clients import AlAdhanTimingsClient, OpenMeteoGeocoder
from wallpaper.infra.rasterizer import SvgRasterizer, find_font_files

log = structlog.get_logger(__name__)


class Container:
    def __init__(self):
        self.settings = get_settings()
        s = self.settings
        if s.USE_FAKE_TIMINGS:
            self.timings_client = FakeTimingsClient()
            self.geocoder = FakeGeocoder()
            self.timings_backend = "fake"
        else:
            self.timings_client = AlAdhanTimingsClient(
                s.ALADHAN_BASE_URL, timeout=s.HTTP_TIMEOUT_S, user_agent=s.USER_AGENT
            )
            self.geocoder = OpenMeteoGeocoder(
                s.GEOCODING_BASE_URL, timeout=s.HTTP_TIMEOUT_S, user_agent=s.USER_AGENT
            )
            self.timings_backend = "aladhan"
        self.font_files = find_font_files(s.FONT_DIR)
        if not self.font_files:
            if s.REQUIRE_FONTS:
                raise RuntimeError(f"Fonts required but none found in FONT_DIR ({s.FONT_DIR})")
            log.warning("fonts_missing", font_dir=s.FONT_DIR)
        self.rasterizer = SvgRasterizer(
            s.FONT_DIR, fontconfig_dir=s.FONTCONFIG_DIR, default_family=s.DEFAULT_FONT_FAMILY
        )

    def build_service(self) -> WallpaperService:
        """Service de rendu câblé sur les composants et les bornes de dimensions configurés."""
        s = self.settings
        return WallpaperService(
            self.timings_client,
            self.rasterizer,
            self.geocoder,
            default_size=(s.WALLPAPER_DEFAULT_WIDTH, s.WALLPAPER_DEFAULT_HEIGHT),
            width_bounds=(s.WALLPAPER_MIN_WIDTH, s.WALLPAPER_MAX_WIDTH),
            height_bounds=(s.WALLPAPER_MIN_HEIGHT, s.WALLPAPER_MAX_HEIGHT),
        )

    def public_origin(self, headers) -> str:
        """Origine des URLs absolues: `PUBLIC_BASE_URL`, sinon en-têtes proxy/hôte, sinon local."""
        if self.settings.PUBLIC_BASE_URL:
            return self.settings.PUBLIC_BASE_URL.rstrip("/")
        proto = headers.get("x-forwarded-proto") or "https"
        host = headers.get("x-forwarded-host") or headers.get("host")
        if host:
            return f"{proto}://{host}"
        return f"http://localhost:{self.settings.APP_PORT}"


container = Container()
