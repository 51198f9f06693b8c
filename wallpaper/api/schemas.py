# Schémas Pydantic exposés par l'API (requêtes et réponses).

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TokenRequest(BaseModel):
    """Corps de requête pour émettre un jeton.

    Tous les champs sont facultatifs et faiblement typés: la normalisation métier applique les
    valeurs par défaut et les bornes. Les noms camelCase (`dateOfBirth`, `timeZone`,
    `calculationMethod`) sont acceptés en alias.
    """

    model_config = ConfigDict(populate_by_name=True)

    mode: str | None = None
    date_of_birth: str | None = Field(default=None, alias="dateOfBirth")
    time_zone: str | None = Field(default=None, alias="timeZone")
    title: str | None = None
    city: str | None = None
    country: str | None = None
    latitude: float | str | None = None
    longitude: float | str | None = None
    calculation_method: float | str | None = Field(default=None, alias="calculationMethod")
    theme: str | None = None


class VariantResponse(BaseModel):
    theme: str
    token: str
    wallpaper_url: str
    wallpaper_path: str
    setup_url: str


class TokenResponse(BaseModel):
    """Réponse d'émission: jeton principal, configuration normalisée et URLs.

    `theme` et `variants` ne sont renseignés que pour le mode Ramadan.
    """

    mode: str
    token: str
    config: dict[str, Any]
    wallpaper_url: str
    wallpaper_path: str
    setup_url: str
    theme: str | None = None
    variants: dict[str, VariantResponse] | None = None


class SetupResponse(BaseModel):
    mode: str
    title: str
    wallpaper_url: str
    summary: list[str]
    shortcut_steps: list[str]
    automation_steps: list[str]
    note: str
