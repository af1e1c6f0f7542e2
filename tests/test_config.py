import json

from iherbcatalog.config import (
    DEFAULT_IH_PREF,
    DEFAULT_PREF,
    HttpSettings,
    load_config,
)


def test_default_headers_carry_source_values():
    headers = HttpSettings().headers()
    assert headers["accept-language"] == "en-US,en;q=0.8"
    assert headers["platform"] == "Linux"
    assert headers["regiontype"] == "GLOBAL"
    assert headers["ih-pref"] == "lc=en-US;cc=USD;ctc=AM;wp=kilograms"
    assert headers["content-type"] == "application/json; charset=UTF-8"


def test_header_names():
    assert sorted(HttpSettings().headers()) == sorted(
        [
            "accept-language",
            "platform",
            "regiontype",
            "ih-pref",
            "pref",
            "user-agent",
            "content-type",
        ]
    )


def test_default_pref_is_valid_json():
    pref = json.loads(HttpSettings().pref)
    assert pref["crc"] == "USD"
    assert pref["storeid"] == 0


def test_default_pref_header_matches_default():
    headers = HttpSettings().headers()
    assert headers["pref"] == DEFAULT_PREF
    assert json.loads(headers["pref"]) == {
        "ctc": "AM",
        "crc": "USD",
        "crs": "2",
        "lac": "en-US",
        "storeid": 0,
        "som": "kilograms",
    }


def test_empty_environment_gives_defaults():
    assert load_config({}) == HttpSettings()


def test_platform_and_user_agent_override():
    settings = load_config({"PLATFORM": "Windows", "USER_AGENT": "agent/1.0"})
    assert settings.platform == "Windows"
    assert settings.user_agent == "agent/1.0"
    assert settings.headers()["platform"] == "Windows"


def test_empty_values_are_ignored():
    settings = load_config({"PLATFORM": "", "USER_AGENT": ""})
    assert settings == HttpSettings()


def test_preferences_built_when_all_set():
    settings = load_config(
        {"CATALOG_LANGUAGE": "de-DE", "CURRENCY": "EUR", "COUNTRY": "DE"}
    )
    assert settings.ih_pref == "lc=de-DE;cc=EUR;ctc=DE;wp=DE"
    assert json.loads(settings.pref) == {
        "ctc": "DE",
        "crc": "EUR",
        "crs": "2",
        "lac": "de-DE",
        "storeid": 0,
        "som": "DE",
    }


def test_partial_preferences_keep_defaults():
    settings = load_config({"CURRENCY": "EUR", "COUNTRY": "DE"})
    assert settings.ih_pref == DEFAULT_IH_PREF
    assert settings.pref == DEFAULT_PREF