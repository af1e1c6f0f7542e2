"""HTTP settings used when talking to the product catalog API."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace

PRODUCT_PAGE_URL = "https://catalog.app.iherb.com/product/"

DEFAULT_ACCEPT_LANGUAGE = "en-US,en;q=0.8"
DEFAULT_PLATFORM = "Linux"
DEFAULT_REGION_TYPE = "GLOBAL"
DEFAULT_IH_PREF = "lc=en-US;cc=USD;ctc=AM;wp=kilograms"
DEFAULT_PREF = (
    '{"ctc":"AM","crc":"USD","crs":"2","lac":"en-US","storeid":0,"som":"kilograms"}'
)
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/136.0.0.0 Safari/537.36"
)
DEFAULT_CONTENT_TYPE = "application/json; charset=UTF-8"


@dataclass(frozen=True)
class HttpSettings:
    """Header values sent with every catalog request."""

    accept_language: str = DEFAULT_ACCEPT_LANGUAGE
    platform: str = DEFAULT_PLATFORM
    region_type: str = DEFAULT_REGION_TYPE
    ih_pref: str = DEFAULT_IH_PREF
    pref: str = DEFAULT_PREF
    user_agent: str = DEFAULT_USER_AGENT
    content_type: str = DEFAULT_CONTENT_TYPE

    def headers(self) -> dict[str, str]:
        """Return the request headers built from these settings."""
        return {
            "accept-language": self.accept_language,
            "platform": self.platform,
            "regiontype": self.region_type,
            "ih-pref": self.ih_pref,
            "pref": self.pref,
            "user-agent": self.user_agent,
            "content-type": self.content_type,
        }


def load_config(environ: Mapping[str, str] | None = None) -> HttpSettings:
    """Build settings from the defaults, overridden by environment variables.

    PLATFORM and USER_AGENT replace their headers when non-empty. The
    preference headers are rebuilt only when CATALOG_LANGUAGE, CURRENCY and
    COUNTRY are all set; the weight units are taken from COUNTRY.
    """
    env = os.environ if environ is None else environ
    settings = HttpSettings()

    if platform := env.get("PLATFORM", ""):
        settings = replace(settings, platform=platform)
    if user_agent := env.get("USER_AGENT", ""):
        settings = replace(settings, user_agent=user_agent)

    lang = env.get("CATALOG_LANGUAGE", "")
    currency = env.get("CURRENCY", "")
    country = env.get("COUNTRY", "")
    weight_units = env.get("COUNTRY", "")
    if lang and currency and country and weight_units:
        settings = replace(
            settings,
            ih_pref=f"lc={lang};cc={currency};ctc={country};wp={weight_units}",
            pref=(
                f'{{"ctc":"{country}","crc":"{currency}","crs":"2",'
                f'"lac":"{lang}","storeid":0,"som":"{weight_units}"}}'
            ),
        )
    return settings