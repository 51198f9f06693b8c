"""
Script de serveur de développement.

Lance l'application avec uvicorn. Avec `--fake-timings`, les horaires de prière et le géocodage
sont servis par des fournisseurs déterministes, sans accès réseau.
"""

import argparse
import os


def main():
    """Point d'entrée: lit les options puis démarre uvicorn sur l'application FastAPI."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--fake-timings", action="store_true", help="no upstream HTTP calls")
    parser.add_argument("--port", type=int, default=None)
    args = parser.parse_args()

    # Must be set BEFORE importing app/modules (the container reads settings at import)
    if args.fake_timings:
        os.environ["USE_FAKE_TIMINGS"] = "true"

    import uvicorn

    from wallpaper.app.main import app
    from wallpaper.core.container import container

    port = args.port or container.settings.APP_PORT
    uvicorn.run(app, host=container.settings.APP_HOST, port=port, reload=False)


if __name__ == "__main__":
    main()
