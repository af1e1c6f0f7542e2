"""Product data as returned by the catalog API."""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass, field, fields
from typing import Any

_JSON_SCALARS = (str, int, float, bool)


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _as_str(value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"expected a string, got {type(value).__name__}")
    return value


def _as_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"expected an integer, got {type(value).__name__}")
    return value


def _as_float(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"expected a number, got {type(value).__name__}")
    return float(value)


def _as_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"expected a boolean, got {type(value).__name__}")
    return value


def _as_json(value: Any) -> Any:
    """Check that a value is plain JSON data and return an independent copy."""
    if value is None or isinstance(value, _JSON_SCALARS):
        return value
    if isinstance(value, list):
        return [_as_json(element) for element in value]
    if isinstance(value, dict):
        copied = {}
        for key, element in value.items():
            if not isinstance(key, str):
                raise ValueError(f"expected string keys, got {type(key).__name__}")
            copied[key] = _as_json(element)
        return copied
    raise ValueError(f"expected JSON data, got {type(value).__name__}")


def _as_list(item: Callable[[Any], Any]) -> Callable[[Any], list]:
    def decode(value: Any) -> list:
        if not isinstance(value, list):
            raise ValueError(f"expected an array, got {type(value).__name__}")
        return [item(element) for element in value]

    return decode


def _field(decode: Callable[[Any], Any], default: Any = None, factory: Any = None):
    meta = {"decode": decode}
    if factory is not None:
        return field(default_factory=factory, metadata=meta)
    return field(default=default, metadata=meta)


def _str():
    return _field(_as_str, "")


def _int():
    return _field(_as_int, 0)


def _float():
    return _field(_as_float, 0.0)


def _bool():
    return _field(_as_bool, False)


def _any():
    return _field(_as_json, None)


def _list(item: Callable[[Any], Any]):
    return _field(_as_list(item), factory=list)


def _decode_object(cls, data: Any):
    """Build a dataclass from a JSON object; missing and null keys keep defaults."""
    if not isinstance(data, dict):
        raise ValueError(
            f"expected a JSON object for {cls.__name__}, got {type(data).__name__}"
        )
    values = {}
    for spec in fields(cls):
        key = _camel(spec.name)
        raw = data.get(key)
        if raw is None:
            continue
        try:
            values[spec.name] = spec.metadata["decode"](raw)
        except ValueError as exc:
            raise ValueError(f"field {key!r}: {exc}") from None
    return cls(**values)


@dataclass
class CanonicalPathEntry:
    """One step of a category path leading to a product."""

    display_name: str = _str()
    url: str = _str()

    @classmethod
    def from_dict(cls, data: Any) -> CanonicalPathEntry:
        return _decode_object(cls, data)


@dataclass
class UnitValues:
    """A value given in imperial and metric units."""

    imperial: str = _str()
    metric: str = _str()

    @classmethod
    def from_dict(cls, data: Any) -> UnitValues:
        return _decode_object(cls, data)


def _units():
    return _field(UnitValues.from_dict, factory=UnitValues)


@dataclass
class ProductData:
    """Everything the catalog API reports about one product."""

    canonical_paths: list[list[CanonicalPathEntry]] = _list(
        _as_list(CanonicalPathEntry.from_dict)
    )
    brand_name: str = _str()
    brand_url: str = _str()
    brand_code: str = _str()
    brand_manufacturer_url: str = _str()
    display_name: str = _str()
    flag: list[Any] = _list(_as_json)
    primary_image_index: int = _int()
    part_number: str = _str()
    image_indices: list[int] = _list(_as_int)
    campaign_images: list[str] = _list(_as_str)
    image_indices_360: list[int] = _list(_as_int)
    retail_price: str = _str()
    list_price: str = _str()
    list_price_amount: float = _float()
    discount_price: str = _str()
    discount_amt: str = _str()
    discount_price_amount: float = _float()
    price_per_unit: str = _str()
    list_price_per_unit: str = _str()
    discount_price_per_unit: str = _str()
    list_price_per_units: UnitValues = _units()
    price_per_units: UnitValues = _units()
    stock_status: int = _int()
    stock_status_v2: int = _int()
    stock_status_message: str = _str()
    has_back_in_stock_date: bool = _bool()
    back_in_stock_date: Any = _any()
    formatted_coming_soon_date: Any = _any()
    back_in_stock_date_unavailable_message: str = _str()
    expiration_date: str = _str()
    formatted_expiration_date: str = _str()
    weight: str = _str()
    package_quantity: str = _str()
    package_quantities: UnitValues = _units()
    dimensions: str = _str()
    actual_weight: str = _str()
    description: str = _str()
    ingredients: str = _str()
    special_note: str = _str()
    suggested_use: str = _str()
    supplement_facts: str = _str()
    warnings: str = _str()
    is_available_to_purchase: bool = _bool()
    url_name: str = _str()
    id: int = _int()
    url: str = _str()
    product_status: int = _int()
    is_discontinued: bool = _bool()
    is_coming_soon: bool = _bool()
    qty_limit: int = _int()
    quantity_limit: int = _int()
    auto_ship_quantity_limit: int = _int()
    special_deal_info: Any = _any()
    trial_discount_info: Any = _any()
    discount_type: int = _int()
    discount_display_type: int = _int()
    is_in_cart_discount: bool = _bool()
    sales_discount_percentage: float = _float()
    root_category_id: int = _int()
    root_category_name: str = _str()
    en_root_category_name: str = _str()
    formatted_on_sale_date: str = _str()
    weight_lb: str = _str()
    weight_kg: str = _str()
    dimensions_in: str = _str()
    dimensions_cm: str = _str()
    has_expiration_date: bool = _bool()
    manufacturer_addresses: list[Any] = _list(_as_json)
    enabled_discount_banner: bool = _bool()
    enabled_discount_for_previously_purchased: bool = _bool()
    restricted_countries: list[Any] = _list(_as_json)
    legal_notice: str = _str()
    recent_activity_message: str = _str()
    recent_activity_count: int = _int()
    prohibited: bool = _bool()
    customer_visible: bool = _bool()
    in_stock_in_excluded_warehouses: bool = _bool()
    is_weight_management_product: bool = _bool()

    @classmethod
    def from_dict(cls, data: Any) -> ProductData:
        """Build product data from a decoded JSON object."""
        return _decode_object(cls, data)

    @classmethod
    def from_json(cls, text: str | bytes) -> ProductData:
        """Build product data from a JSON document; raises ValueError if invalid."""
        return cls.from_dict(json.loads(text))