# iherbcatalog

`iherbcatalog` fetches product data from the iHerb catalog API over HTTP and decodes it into a
`ProductData` record. It can also reduce that record to a short response that holds the product's
name, its base price and its stock status.

## Installation

```
pip install iherbcatalog
```

With the test dependencies:

```
pip install "iherbcatalog[test]"
```

## Configuration

Every request carries a fixed set of HTTP headers, held in an `HttpSettings` object
(`iherbcatalog.config`). `HttpSettings()` gives the defaults. `HttpSettings.headers()` returns
them as a dictionary.

`load_config(environ)` builds settings from the defaults and applies overrides from an environment
mapping. If you pass `None` or no argument, it reads `os.environ`.

| Variable           | Effect                                                    |
|--------------------|-----------------------------------------------------------|
| `PLATFORM`         | replaces the `platform` header when non-empty             |
| `USER_AGENT`       | replaces the `user-agent` header when non-empty           |
| `CATALOG_LANGUAGE` | language used in the `ih-pref` and `pref` headers         |
| `CURRENCY`         | currency used in the preference headers                   |
| `COUNTRY`          | country used in the preference headers, and also as the weight units |

The preference headers are rebuilt only when `CATALOG_LANGUAGE`, `CURRENCY` and `COUNTRY` are all
set. Otherwise they keep their defaults.

```python
from iherbcatalog.config import load_config

settings = load_config({"PLATFORM": "Windows"})
print(settings.headers()["platform"])  # Windows
```

## Usage

```python
from iherbcatalog.config import load_config
from iherbcatalog.repository import IherbApiRepository
from iherbcatalog.usecase import CatalogUsecase
from iherbcatalog.handler import Handler, ProductDataRequest

repository = IherbApiRepository(settings=load_config())
handler = Handler(CatalogUsecase(repository))

response = handler.get_product_data(ProductDataRequest(product_id=12345))
print(response.name, response.base_price, response.base_price_formatted, response.stock_status)
```

`IherbApiRepository` takes these optional arguments:

- `session`: a `requests.Session`
- `settings`: an `HttpSettings`
- `base_url`: the product endpoint prefix
- `timeout`: in seconds, 10 by default

`product_url(product_id)` returns the address it requests. Product ids must be integers from 0 to
2**32 − 1; any other value raises `ValueError`.

`IherbApiRepository.get_product_data` raises `RepositoryError` when the request fails, when the
server returns an error status, or when the body cannot be decoded.

`Handler.get_product_data` raises `HandlerError`. Its `code` is a `StatusCode`:

- `INVALID_ARGUMENT` when the request is `None`
- `NOT_FOUND` when the lookup raises `RepositoryError` or `ValueError`

`CatalogUsecase` built with no repository raises `RuntimeError` when it is used.

The stock status is mapped by `stock_status`:

- `0` gives `StockStatus.IN_STOCK`
- `1` gives `StockStatus.OUT_OF_STOCK`
- anything else gives `StockStatus.UNDEFINED`

`product_data_response` builds a `ProductDataResponse` from a `ProductData`.

## Working with the full record

`ProductData` has one field for each key of the catalog response, in snake case (`displayName`
becomes `display_name`). Missing or `null` keys keep their defaults. Values of the wrong JSON type
raise `ValueError`.

```python
from iherbcatalog.models import ProductData

product = ProductData.from_json('{"displayName": "Vitamin C", "stockStatus": 0}')
print(product.display_name, product.stock_status)
```

`ProductData.from_dict` accepts an already decoded JSON object.

## What it does not do

The package is a library only. It has no command, and it does not run a network service that
answers requests. `Handler` is meant to be called from your own code. It does not read `.env`
files: pass the variables to `load_config` yourself.

## Running the tests

```
pytest
```