import json

import pytest

from conftest import VALID_LICENCE, MemoryStore
from dvsa_booking.config import (
    DEFAULT_INSTRUCTOR,
    DEFAULT_LICENCE,
    DEFAULT_POSTCODE,
    DEFAULT_TEST_DATE,
    INSTRUCTOR_KEY,
    LICENCE_KEY,
    POSTCODE_KEY,
    TEST_DATE_KEY,
    TIMING_PROFILES,
    BookingSettings,
    get_timing,
    load_settings,
)
from dvsa_booking.data.store import ConfigStoreError, JsonConfigStore


def test_load_settings_keeps_valid_values(capsys):
    store = MemoryStore(
        {
            LICENCE_KEY: VALID_LICENCE,
            TEST_DATE_KEY: "29/02/2024",
            POSTCODE_KEY: "M1 1AA",
            INSTRUCTOR_KEY: "98765",
        }
    )

    settings = load_settings(store)

    assert settings.licence == VALID_LICENCE
    assert settings.test_date == "29/02/2024"
    assert settings.postcode == "M1 1AA"
    assert settings.instructor_reference == "98765"
    assert settings.nearest_num_of_centres == 12
    assert "⚠️" not in capsys.readouterr().out


def test_load_settings_replaces_each_invalid_value_with_one_warning(capsys):
    store = MemoryStore(
        {
            LICENCE_KEY: "short",
            TEST_DATE_KEY: "31/02/2024",
            POSTCODE_KEY: "12345",
            INSTRUCTOR_KEY: "abc",
        }
    )

    settings = load_settings(store)

    assert settings.licence == DEFAULT_LICENCE
    assert settings.test_date == DEFAULT_TEST_DATE
    assert settings.postcode == DEFAULT_POSTCODE
    assert settings.instructor_reference == DEFAULT_INSTRUCTOR

    warnings = [line for line in capsys.readouterr().out.splitlines() if "⚠️" in line]
    assert len(warnings) == 4
    assert len(set(warnings)) == 4
    for label in ["driving licence number", "test date", "postcode", "instructor reference number"]:
        assert sum(label in w for w in warnings) >= 1


def test_empty_instructor_reference_is_not_a_warning(capsys):
    store = MemoryStore(
        {
            LICENCE_KEY: VALID_LICENCE,
            TEST_DATE_KEY: "15/08/2025",
            POSTCODE_KEY: "SW1A 1AA",
            INSTRUCTOR_KEY: "",
        }
    )

    settings = load_settings(store)

    assert settings.instructor_reference == ""
    assert "⚠️" not in capsys.readouterr().out


def test_settings_are_immutable():
    settings = BookingSettings()
    with pytest.raises(AttributeError):
        settings.licence = VALID_LICENCE


def test_timing_profile_applies_windows():
    settings = load_settings(MemoryStore(), timing=get_timing("dev_test"))
    assert settings.min_delay_ms == TIMING_PROFILES["dev_test"]["step_delay_min"]
    assert settings.max_reload_ms == TIMING_PROFILES["dev_test"]["reload_max"]


def test_unknown_or_unsafe_timing_profile_falls_back_to_default(monkeypatch, capsys):
    assert get_timing("warp") is TIMING_PROFILES["default"]

    monkeypatch.setitem(
        TIMING_PROFILES,
        "reckless",
        {"step_delay_min": 10, "step_delay_max": 20, "reload_min": 100, "reload_max": 200},
    )
    assert get_timing("reckless") is TIMING_PROFILES["default"]
    assert "VIOLATIONS" in capsys.readouterr().out


def test_json_store_round_trips_and_defaults(tmp_path):
    path = tmp_path / "nested" / "config.json"
    store = JsonConfigStore(str(path))

    assert store.get(POSTCODE_KEY, "fallback") == "fallback"
    assert not path.exists()

    store.set(POSTCODE_KEY, "SW1A 1AA")
    store.set(TEST_DATE_KEY, "15/08/2025")
    store.set(POSTCODE_KEY, "M1 1AA")

    assert JsonConfigStore(str(path)).get(POSTCODE_KEY) == "M1 1AA"
    assert json.loads(path.read_text()) == {POSTCODE_KEY: "M1 1AA", TEST_DATE_KEY: "15/08/2025"}


def test_json_store_rejects_corrupt_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2")
    with pytest.raises(ConfigStoreError):
        JsonConfigStore(str(path)).get(LICENCE_KEY)

    path.write_text("[1, 2]")
    with pytest.raises(ConfigStoreError):
        JsonConfigStore(str(path)).get(LICENCE_KEY)


def test_json_store_set_leaves_no_temp_files_and_replaces_atomically(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    store = JsonConfigStore(str(path))
    store.set(POSTCODE_KEY, "SW1A 1AA")

    def crash(*args, **kwargs):
        raise OSError("disk full")

    monkeypatch.setattr("dvsa_booking.data.store.json.dump", crash)
    with pytest.raises(OSError):
        store.set(POSTCODE_KEY, "M1 1AA")

    assert json.loads(path.read_text()) == {POSTCODE_KEY: "SW1A 1AA"}
    assert [p.name for p in tmp_path.iterdir()] == ["config.json"]
