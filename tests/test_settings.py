from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from grabber.audio.sfx import SFXManager
from grabber.settings import TOPIC_ALL, TOPIC_AUDIO, TOPIC_WINDOW, Settings


def write_toml(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "settings.toml"
    path.write_text(textwrap.dedent(body), encoding="utf-8")
    return path


def test_defaults_without_sources(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    settings = Settings.from_sources(env={})

    assert settings.tile_size == 32
    assert settings.sfx_enabled is True
    assert settings.seed is None
    assert settings.effective_sfx_volume == pytest.approx(0.8)


def test_toml_sections_are_flattened(tmp_path: Path):
    path = write_toml(
        tmp_path,
        """
        seed = 12

        [window]
        tile_size = 24
        margin = 2

        [audio]
        sfx_volume = 0.5
        sfx_enabled = false
        """,
    )

    settings = Settings.from_sources(env={}, file_path=path)

    assert settings.tile_size == 24
    assert settings.margin == 2
    assert settings.sfx_volume == pytest.approx(0.5)
    assert settings.sfx_enabled is False
    assert settings.seed == 12


def test_env_overrides_file(tmp_path: Path):
    path = write_toml(tmp_path, "[audio]\nsfx_volume = 0.5\n")
    env = {
        "GRABBER_SFX_VOLUME": "0.25",
        "GRABBER_SFX_ENABLED": "off",
        "GRABBER_SEED": "77",
        "GRABBER_TILE_SIZE": "not-a-number",
    }

    settings = Settings.from_sources(env=env, file_path=path)

    assert settings.sfx_volume == pytest.approx(0.25)
    assert settings.sfx_enabled is False
    assert settings.seed == 77
    # invalid value is logged and ignored
    assert settings.tile_size == 32


def test_settings_file_from_env_var(tmp_path: Path):
    path = write_toml(tmp_path, "[window]\nstatus_height = 60\n")
    settings = Settings.from_sources(env={"GRABBER_SETTINGS_FILE": str(path)})
    assert settings.status_height == 60


def test_broken_toml_falls_back_to_defaults(tmp_path: Path):
    path = write_toml(tmp_path, "[window\ntile_size = ")
    settings = Settings.from_sources(env={}, file_path=path)
    assert settings.tile_size == 32


def test_validate_clamps_values():
    settings = Settings.from_dict(
        {"tile_size": 1, "margin": 50, "master_volume": 3.0, "sfx_volume": -1.0, "seed": "random", "bogus": 1}
    )

    assert settings.tile_size == 32
    assert settings.margin == 8
    assert settings.master_volume == 1.0
    assert settings.sfx_volume == 0.0
    assert settings.seed is None


def test_update_notifies_only_affected_topics():
    settings = Settings()
    seen = []
    settings.subscribe(TOPIC_AUDIO, lambda s: seen.append("audio"))
    settings.subscribe(TOPIC_WINDOW, lambda s: seen.append("window"))
    settings.subscribe(TOPIC_ALL, lambda s: seen.append("all"))

    settings.update(sfx_volume=0.3)
    assert sorted(seen) == ["all", "audio"]

    seen.clear()
    settings.update(seed=5)
    assert seen == []

    seen.clear()
    settings.update(tile_size=48)
    assert sorted(seen) == ["all", "window"]

    with pytest.raises(AttributeError):
        settings.update(width=100)
    with pytest.raises(ValueError):
        settings.subscribe("ui", lambda s: None)


def test_failing_observer_is_logged(caplog):
    settings = Settings()

    def broken(_):
        raise RuntimeError("observer broke")

    settings.subscribe(TOPIC_AUDIO, broken)
    settings.update(master_volume=0.5)

    assert "Settings observer failed" in caplog.text


def test_apply_to_audio_sets_effective_volume_and_enabled():
    settings = Settings(master_volume=0.5, sfx_volume=0.5, sfx_enabled=False)
    sfx = SFXManager(auto_load=False)

    settings.apply_to_audio(sfx)

    assert sfx.volume == pytest.approx(0.25)
    assert sfx.enabled is False
