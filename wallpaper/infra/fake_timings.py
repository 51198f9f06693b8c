"""Fournisseurs déterministes pour les tests et le développement.

Ce module implémente un client d'horaires et un géocodeur factices qui produisent des résultats
prévisibles, sans appel réseau.
"""

from datetime import datetime

from wallpaper.domain.entities import GeocodedCity, RamadanTimings
from wallpaper.infra.http_clients import iso_date_in_time_zone


class FakeTimingsClient:
    """Client d'horaires factice: mêmes horaires chaque jour, date grégorienne réelle.

    Passer `available=False` simule une indisponibilité du service amont.
    """

    def __init__(self, available: bool = True):
        self.available = available
        self.calls: list[tuple] = []

    async def lookup_ramadan_timings(
        self,
        latitude: float,
        longitude: float,
        time_zone: str,
        calculation_method: int,
        instant: datetime,
    ) -> RamadanTimings | None:
        """Retourne des horaires fixes pour le jour local de `instant`."""
        self.calls.append((latitude, longitude, time_zone, calculation_method, instant))
        if not self.available:
            return None
        return RamadanTimings(
            gregorian_date=iso_date_in_time_zone(instant, time_zone),
            hijri_date="12 Ramadan 1447 AH",
            hijri_month="Ramadan",
            hijri_day=12,
            fajr="05:12",
            dhuhr="12:31",
            asr="16:02",
            maghrib="18:29",
            isha="19:47",
            sehri="05:02",
            iftar="18:29",
        )


class FakeGeocoder:
    """Géocodeur factice adossé à un petit dictionnaire de villes (clé en minuscules)."""

    def __init__(self, cities: dict[str, GeocodedCity] | None = None):
        self.cities = cities or {
            "karachi": GeocodedCity(
                city="Karachi",
                country="Pakistan",
                latitude=24.8607,
                longitude=67.0011,
                time_zone="Asia/Karachi",
            )
        }

    async def lookup_city_coordinates(self, query: str) -> GeocodedCity | None:
        """Recherche par nom complet puis par premier mot."""
        normalized = query.strip().lower()
        if not normalized:
            return None
        return self.cities.get(normalized) or self.cities.get(normalized.split()[0])
