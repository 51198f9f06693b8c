"""
Vérifie, contre un serveur démarré, que les deux thèmes Ramadan produisent une image PNG.

Variables d'environnement:
- BASE_URL: origine du serveur (défaut `http://localhost:8000`).
- SAMPLE_AT: instant de rendu passé en paramètre `at`.
"""

import os
import sys

import httpx

BASE_URL = os.environ.get("BASE_URL", "http://localhost:8000")
SAMPLE_AT = os.environ.get("SAMPLE_AT", "2026-03-01T22:30:00.000Z")

KARACHI_REQUEST = {
    "mode": "ramadan",
    "city": "Current Location",
    "latitude": 24.8607,
    "longitude": 67.0011,
    "timeZone": "Asia/Karachi",
    "calculationMethod": 1,
    "theme": "classic",
}


def check(client: httpx.Client) -> None:
    r = client.post(f"{BASE_URL}/api/token", json=KARACHI_REQUEST)
    if r.status_code != 200:
        raise RuntimeError(f"Token generation failed: {r.status_code} {r.text}")

    variants = r.json().get("variants") or {}
    if not all(variants.get(theme, {}).get("wallpaper_path") for theme in ("classic", "girly")):
        raise RuntimeError("Expected both classic and girly variants from /api/token.")

    for theme in ("classic", "girly"):
        # chemin relatif: l'origine annoncée peut différer derrière un proxy
        url = httpx.URL(f"{BASE_URL}{variants[theme]['wallpaper_path']}")
        url = url.copy_merge_params({"at": SAMPLE_AT})
        image = client.get(url)
        if image.status_code != 200:
            raise RuntimeError(f"{theme} wallpaper fetch failed: {image.status_code}")
        content_type = image.headers.get("content-type", "")
        if "image/png" not in content_type:
            raise RuntimeError(f"{theme} wallpaper returned unexpected content-type: {content_type}")
        print(f"{theme}: ok -> {url}")


def main() -> int:
    try:
        with httpx.Client(timeout=30.0) as client:
            check(client)
    except (httpx.HTTPError, RuntimeError) as exc:
        print(str(exc), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
