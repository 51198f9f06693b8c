"""Clients HTTP externes (horaires de prière, géocodage).

Objectif du module
------------------
- Encapsuler les appels réseau vers des services tiers (AlAdhan, Open-Meteo).
- Ne jamais propager d'erreur amont: toute défaillance se traduit par `None`, que l'appelant
  convertit en réponse d'erreur.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any
from zoneinfo import ZoneInfo

import httpx
import structlog

from wallpaper.domain.entities import GeocodedCity, RamadanTimings

log = structlog.get_logger(__name__)

_TIME_RE = re.compile(r"[0-9]{1,2}:[0-9]{2}")


def clean_time(value: str) -> str:
    """Extrait `H:MM`/`HH:MM` d'une valeur comme `05:12 (PKT)`; sinon valeur inchangée."""
    match = _TIME_RE.search(value)
    return match.group(0) if match else value


def iso_date_in_time_zone(instant: datetime, time_zone: str) -> str:
    """Date calendaire (YYYY-MM-DD) de `instant` observée dans `time_zone`."""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(ZoneInfo(time_zone)).date().isoformat()


def to_dd_mm_yyyy(iso_date: str) -> str:
    year, month, day = iso_date.split("-")
    return f"{day}-{month}-{year}"


def title_case(value: str) -> str:
    return " ".join(part[:1].upper() + part[1:] for part in value.lower().split(" ") if part)


class _BaseClient:
    """Paramètres communs (URL de base, délai, User-Agent, transport injectable pour les tests)."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        user_agent: str = "life-calendar-wallpaper/1.0",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._timeout = httpx.Timeout(timeout)
        self._headers = {"User-Agent": user_agent}
        self._transport = transport

    async def _get_json(self, url: str, params: dict[str, str]) -> Any:
        async with httpx.AsyncClient(
            headers=self._headers, timeout=self._timeout, transport=self._transport
        ) as client:
            response = await client.get(url, params=params)
            response.raise_for_status()
            return response.json()


class AlAdhanTimingsClient(_BaseClient):
    """Client du service AlAdhan pour les horaires de prière du jour."""

    async def lookup_ramadan_timings(
        self,
        latitude: float,
        longitude: float,
        time_zone: str,
        calculation_method: int,
        instant: datetime,
    ) -> RamadanTimings | None:
        """Horaires du jour calendaire contenant `instant` dans `time_zone`, ou `None`."""
        iso_date = iso_date_in_time_zone(instant, time_zone)
        url = f"{self.base_url}/timings/{to_dd_mm_yyyy(iso_date)}"
        params = {
            "latitude": str(latitude),
            "longitude": str(longitude),
            "method": str(calculation_method),
            "timezonestring": time_zone,
        }
        try:
            payload = await self._get_json(url, params)
        except (httpx.HTTPError, ValueError) as exc:
            log.warning("timings_lookup_failed", date=iso_date, tz=time_zone, error=str(exc))
            return None

        if not isinstance(payload, dict) or payload.get("code") != 200 or not payload.get("data"):
            log.warning("timings_lookup_empty", date=iso_date, tz=time_zone)
            return None

        try:
            return self._parse(payload["data"])
        except (KeyError, TypeError, ValueError) as exc:
            log.warning("timings_payload_invalid", date=iso_date, error=str(exc))
            return None

    @staticmethod
    def _parse(data: dict[str, Any]) -> RamadanTimings:
        timings = data["timings"]
        hijri = data["date"]["hijri"]
        hijri_day = int(hijri["day"])
        hijri_month = hijri["month"]["en"]
        return RamadanTimings(
            gregorian_date=data["date"]["readable"],
            hijri_date=f"{hijri_day} {hijri_month} {hijri['year']} AH",
            hijri_month=hijri_month,
            hijri_day=hijri_day,
            fajr=clean_time(timings["Fajr"]),
            dhuhr=clean_time(timings["Dhuhr"]),
            asr=clean_time(timings["Asr"]),
            maghrib=clean_time(timings["Maghrib"]),
            isha=clean_time(timings["Isha"]),
            sehri=clean_time(timings["Imsak"]),
            iftar=clean_time(timings["Maghrib"]),
        )


class OpenMeteoGeocoder(_BaseClient):
    """Client de géocodage Open-Meteo: nom de ville libre -> coordonnées et fuseau."""

    async def _geocode_once(self, name: str) -> GeocodedCity | None:
        params = {"name": name.strip(), "count": "1", "language": "en", "format": "json"}
        try:
            payload = await self._get_json(f"{self.base_url}/search", params)
        except (httpx.HTTPError, ValueError) as exc:
            log.warning("geocode_failed", query=name, error=str(exc))
            return None

        results = payload.get("results") if isinstance(payload, dict) else None
        if not results:
            return None
        first = results[0]
        try:
            return GeocodedCity(
                city=title_case(first["name"]),
                country=first.get("country") or "",
                latitude=first["latitude"],
                longitude=first["longitude"],
                time_zone=first["timezone"],
            )
        except (KeyError, TypeError, ValueError) as exc:
            log.warning("geocode_payload_invalid", query=name, error=str(exc))
            return None

    async def lookup_city_coordinates(self, query: str) -> GeocodedCity | None:
        """Essaie la requête complète, puis la partie avant la virgule, puis le premier mot."""
        normalized = query.strip()
        if not normalized:
            return None

        direct = await self._geocode_once(normalized)
        if direct:
            return direct

        comma_part = normalized.split(",")[0].strip()
        if comma_part and comma_part != normalized:
            by_comma = await self._geocode_once(comma_part)
            if by_comma:
                return by_comma

        word_part = normalized.split()[0].strip()
        if word_part and word_part != normalized:
            return await self._geocode_once(word_part)
        return None
