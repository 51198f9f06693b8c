"""
Encodage/décodage des jetons de fond d'écran.

Un jeton est un objet JSON compact à clés courtes, encodé en base64 URL-safe sans remplissage.
Formats reconnus:

- v1 (hérité, lecture seule): `{"v": 1, "d", "z", "t"}`, implicitement en mode vie.
- v2 (courant): `{"v": 2, "m": "life", "d", "z", "t"}` ou
  `{"v": 2, "m": "ramadan", "c", "n", "la", "lo", "z", "cm", "t", "th"}`.

Le décodage repasse systématiquement par la normalisation: un jeton forgé ou corrompu ne peut
donc jamais introduire de valeur invalide ou surdimensionnée dans le rendu.
"""

from __future__ import annotations

import base64
import json
from typing import Any

from wallpaper.domain.entities import LifeConfig, RamadanConfig, WallpaperConfig
from wallpaper.domain.wallpaper_config import normalize_life, normalize_ramadan

TOKEN_VERSION = 2
LEGACY_TOKEN_VERSION = 1


class InvalidConfigError(ValueError):
    """Tentative d'encoder une configuration qui ne passe pas la normalisation."""


def _to_base64url(text: str) -> str:
    return base64.urlsafe_b64encode(text.encode("utf-8")).rstrip(b"=").decode("ascii")


def _from_base64url(value: str) -> str:
    padded = value + "=" * (-len(value) % 4)
    raw = base64.b64decode(padded.encode("ascii"), altchars=b"-_", validate=True)
    return raw.decode("utf-8")


def _life_payload(config: LifeConfig) -> dict[str, Any]:
    safe = normalize_life(config)
    return {
        "v": TOKEN_VERSION,
        "m": "life",
        "d": safe.date_of_birth,
        "z": safe.time_zone,
        "t": safe.title,
    }


def _ramadan_payload(config: RamadanConfig) -> dict[str, Any]:
    safe = normalize_ramadan(config)
    if safe is None:
        raise InvalidConfigError("Invalid ramadan config.")
    return {
        "v": TOKEN_VERSION,
        "m": "ramadan",
        "c": safe.city,
        "n": safe.country,
        "la": safe.latitude,
        "lo": safe.longitude,
        "z": safe.time_zone,
        "cm": safe.calculation_method,
        "t": safe.title,
        "th": safe.theme,
    }


def encode_token(config: WallpaperConfig) -> str:
    """Sérialise une configuration en jeton v2.

    Raises:
        InvalidConfigError: si une configuration Ramadan n'est pas normalisable. Ce cas relève
            d'une erreur de programmation: l'appelant doit normaliser avant d'encoder.
    """
    if isinstance(config, LifeConfig):
        payload = _life_payload(config)
    elif isinstance(config, RamadanConfig):
        payload = _ramadan_payload(config)
    else:
        raise InvalidConfigError(f"Unsupported config type: {type(config).__name__}")
    text = json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
    return _to_base64url(text)


def _decode_life(parsed: dict[str, Any]) -> LifeConfig:
    return normalize_life(
        {"date_of_birth": parsed.get("d"), "time_zone": parsed.get("z"), "title": parsed.get("t")}
    )


def _decode_ramadan(parsed: dict[str, Any]) -> RamadanConfig | None:
    return normalize_ramadan(
        {
            "city": parsed.get("c"),
            "country": parsed.get("n"),
            "latitude": parsed.get("la"),
            "longitude": parsed.get("lo"),
            "time_zone": parsed.get("z"),
            "calculation_method": parsed.get("cm"),
            "title": parsed.get("t"),
            "theme": parsed.get("th"),
        }
    )


def decode_token(token: str) -> WallpaperConfig | None:
    """Décode un jeton; retourne `None` pour tout jeton inexploitable, sans jamais lever."""
    if not isinstance(token, str) or not token:
        return None
    try:
        parsed = json.loads(_from_base64url(token))
    except (ValueError, RecursionError):
        return None
    if not isinstance(parsed, dict):
        return None

    version = parsed.get("v")
    if isinstance(version, bool):
        return None
    if version == TOKEN_VERSION:
        mode = parsed.get("m")
        if mode == "life":
            return _decode_life(parsed)
        if mode == "ramadan":
            return _decode_ramadan(parsed)
        return None
    if version == LEGACY_TOKEN_VERSION:
        return _decode_life(parsed)
    return None
