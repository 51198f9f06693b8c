"""
Quick smoke test for API endpoints using TestClient.

Checks:
- GET /health
- POST /api/token (life and ramadan)
- GET /api/wallpaper/{token}
- GET /setup/{token}

Le rendu PNG requiert libcairo et les polices embarquées.
"""

from fastapi.testclient import TestClient

from wallpaper.api import routes_token, routes_wallpaper
from wallpaper.app.main import app
from wallpaper.core.container import container
from wallpaper.infra.fake_timings import FakeGeocoder, FakeTimingsClient

SAMPLE_AT = "2026-03-01T22:30:00.000Z"


def main() -> None:
    """Exécute les appels de base avec des fournisseurs d'horaires déterministes."""
    container.timings_client = FakeTimingsClient()
    container.geocoder = FakeGeocoder()
    routes_token.service = container.build_service()
    routes_wallpaper.service = container.build_service()
    client = TestClient(app)

    r = client.get("/health")
    print("/health:", r.status_code, r.json())

    r = client.post("/api/token", json={"mode": "life", "dateOfBirth": "1990-05-17"})
    print("/api/token (life):", r.status_code)
    life_token = r.json()["token"]

    r = client.post("/api/token", json={"city": "Karachi Pakistan", "theme": "girly"})
    print("/api/token (ramadan):", r.status_code, r.json().get("config", {}).get("city"))
    ramadan_tokens = [v["token"] for v in r.json()["variants"].values()]

    for token in [life_token, *ramadan_tokens]:
        r = client.get(f"/api/wallpaper/{token}.png", params={"at": SAMPLE_AT})
        print(
            "/api/wallpaper:",
            r.status_code,
            r.headers.get("content-type"),
            r.headers.get("content-disposition"),
            len(r.content),
        )

    r = client.get(f"/setup/{life_token}")
    print("/setup:", r.status_code, r.json().get("summary"))

    print("Smoke test OK")


if __name__ == "__main__":
    main()
