import json

import pytest
import requests
import responses

from iherbcatalog.config import PRODUCT_PAGE_URL, HttpSettings
from iherbcatalog.repository import IherbApiRepository, RepositoryError


@pytest.fixture
def mocked():
    with responses.RequestsMock() as rsps:
        yield rsps


def test_product_url():
    repo = IherbApiRepository()
    assert repo.product_url(123) == PRODUCT_PAGE_URL + "123"


def test_product_url_uses_catalog_host():
    assert (
        IherbApiRepository().product_url(42)
        == "https://catalog.app.iherb.com/product/42"
    )


@pytest.mark.parametrize("bad", [-1, 2**32, "12", True])
def test_product_url_rejects_bad_ids(bad):
    with pytest.raises(ValueError):
        IherbApiRepository().product_url(bad)


def test_get_product_data_parses_body(mocked):
    mocked.add(
        responses.GET,
        PRODUCT_PAGE_URL + "77",
        body=json.dumps({"displayName": "Fish Oil", "stockStatus": 0, "id": 77}),
        status=200,
    )
    data = IherbApiRepository().get_product_data(77)
    assert data.display_name == "Fish Oil"
    assert data.id == 77


def test_request_carries_settings_headers(mocked):
    mocked.add(responses.GET, PRODUCT_PAGE_URL + "5", body="{}", status=200)
    settings = HttpSettings(platform="Windows")
    IherbApiRepository(settings=settings).get_product_data(5)
    sent = mocked.calls[0].request.headers
    for name, value in settings.headers().items():
        assert sent[name] == value


def test_http_error_raises(mocked):
    mocked.add(responses.GET, PRODUCT_PAGE_URL + "9", body="gone", status=404)
    with pytest.raises(RepositoryError):
        IherbApiRepository().get_product_data(9)


def test_connection_error_raises(mocked):
    mocked.add(
        responses.GET,
        PRODUCT_PAGE_URL + "9",
        body=requests.ConnectionError("refused"),
    )
    with pytest.raises(RepositoryError, match="refused"):
        IherbApiRepository().get_product_data(9)


def test_bad_json_raises(mocked):
    mocked.add(responses.GET, PRODUCT_PAGE_URL + "3", body="<html>", status=200)
    with pytest.raises(RepositoryError, match="decode"):
        IherbApiRepository().get_product_data(3)


def test_custom_base_url(mocked):
    mocked.add(responses.GET, "http://localhost/p/4", body="{}", status=200)
    repo = IherbApiRepository(base_url="http://localhost/p/")
    assert repo.get_product_data(4).display_name == ""
    assert mocked.calls[0].request.url == "http://localhost/p/4"