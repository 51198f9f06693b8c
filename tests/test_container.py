"""Tests pour les chemins de configuration du container selon les polices disponibles."""

from __future__ import annotations

from typing import Any

import pytest

from wallpaper.core.container import Container
from wallpaper.infra.rasterizer import find_font_files


def _new_container(monkeypatch: Any, env: dict[str, str]) -> Container:
    """Crée un nouveau container avec un environnement isolé."""
    for k in ["FONT_DIR", "REQUIRE_FONTS"]:
        monkeypatch.delenv(k, raising=False)
    for k, v in env.items():
        monkeypatch.setenv(k, v)
    return Container()


def test_require_fonts_with_empty_dir_raises(monkeypatch: Any, tmp_path) -> None:
    """Teste que le démarrage échoue si les polices sont exigées mais absentes."""
    with pytest.raises(RuntimeError, match="FONT_DIR"):
        _new_container(monkeypatch, {"FONT_DIR": str(tmp_path), "REQUIRE_FONTS": "true"})


def test_require_fonts_is_default(monkeypatch: Any, tmp_path) -> None:
    monkeypatch.delenv("REQUIRE_FONTS", raising=False)
    with pytest.raises(RuntimeError):
        _new_container(monkeypatch, {"FONT_DIR": str(tmp_path / "missing")})


def test_require_fonts_with_font_present(monkeypatch: Any, tmp_path) -> None:
    """Teste que le container démarre et recense les polices de FONT_DIR."""
    (tmp_path / "NotoSans-Variable.ttf").write_bytes(b"\x00\x01\x00\x00")
    (tmp_path / "README.md").write_text("not a font", encoding="utf-8")
    c = _new_container(monkeypatch, {"FONT_DIR": str(tmp_path), "REQUIRE_FONTS": "true"})
    assert c.font_files == [str(tmp_path / "NotoSans-Variable.ttf")]


def test_missing_fonts_tolerated_when_not_required(monkeypatch: Any, tmp_path) -> None:
    c = _new_container(monkeypatch, {"FONT_DIR": str(tmp_path), "REQUIRE_FONTS": "false"})
    assert c.font_files == []
    assert c.rasterizer.font_dir == str(tmp_path)


def test_find_font_files_filters_extensions(tmp_path) -> None:
    """Teste le recensement: extensions reconnues, sous-dossiers inclus, tri stable."""
    (tmp_path / "b.OTF").write_bytes(b"")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "a.ttc").write_bytes(b"")
    (tmp_path / "c.woff2").write_bytes(b"")
    assert find_font_files(str(tmp_path)) == sorted(
        [str(tmp_path / "b.OTF"), str(tmp_path / "sub" / "a.ttc")]
    )
    assert find_font_files(str(tmp_path / "absent")) == []
