"""Instructions d'installation iOS (Raccourci + Automatisation) pour un jeton donné."""

from __future__ import annotations

from typing import Any

from wallpaper.domain.entities import RamadanConfig, WallpaperConfig

SHORTCUT_STEPS = (
    "Create a new Shortcut in iOS Shortcuts.",
    "Add `URL` action and paste the wallpaper URL above.",
    "Add `Get Contents of URL` action.",
    "Add `Set Wallpaper` action and select Lock Screen only.",
    "Disable `Show Preview` and `Crop to Subject`.",
)

AUTOMATION_STEPS = (
    "Open the Automation tab and create a Personal Automation.",
    "Use an early fixed time (for example `3:00 AM`) so times refresh before Fajr.",
    "Run your shortcut and disable `Ask Before Running`.",
)

AUTOMATION_NOTE = "iOS Personal Automation does not support dynamic daily trigger times from an API."


def config_summary(config: WallpaperConfig) -> list[str]:
    if isinstance(config, RamadanConfig):
        return [
            "Mode: Ramadan Calendar",
            f"Location label: {config.city}",
            f"Coordinates (exact): {config.latitude:.6f}, {config.longitude:.6f}",
            f"Calculation method: {config.calculation_method}",
        ]
    return [
        "Mode: Life Calendar (legacy token)",
        f"Date of birth: {config.date_of_birth}",
    ]


def build_setup_guide(config: WallpaperConfig, wallpaper_url: str) -> dict[str, Any]:
    """Document JSON décrivant l'URL dynamique et les étapes de configuration."""
    return {
        "mode": config.mode,
        "title": "Ramadan Wallpaper Setup" if config.mode == "ramadan" else "Wallpaper Setup",
        "wallpaper_url": wallpaper_url,
        "summary": config_summary(config),
        "shortcut_steps": list(SHORTCUT_STEPS),
        "automation_steps": list(AUTOMATION_STEPS),
        "note": AUTOMATION_NOTE,
    }
