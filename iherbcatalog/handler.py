"""Request handling for the product catalog service."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Protocol

from .models import ProductData
from .repository import RepositoryError


class StatusCode(enum.IntEnum):
    """Status codes reported to callers, numbered as in gRPC."""

    OK = 0
    UNKNOWN = 2
    INVALID_ARGUMENT = 3
    NOT_FOUND = 5


class StockStatus(enum.Enum):
    """Stock state of a product."""

    IN_STOCK = "InStock"
    OUT_OF_STOCK = "OutOfStock"
    UNDEFINED = "UndefinedStatus"


@dataclass(frozen=True)
class ProductDataRequest:
    """Request for the data of one product."""

    product_id: int


@dataclass(frozen=True)
class ProductDataResponse:
    """Summary of a product returned to callers."""

    name: str
    base_price: float
    base_price_formatted: str
    stock_status: StockStatus


class HandlerError(Exception):
    """A request failed with a status code."""

    def __init__(self, code: StatusCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class _Usecase(Protocol):
    def get_product_data(self, product_id: int) -> ProductData:
        ...


def stock_status(status: int) -> StockStatus:
    """Map the API's numeric stock status to a StockStatus."""
    if status == 0:
        return StockStatus.IN_STOCK
    if status == 1:
        return StockStatus.OUT_OF_STOCK
    return StockStatus.UNDEFINED


def product_data_response(product_data: ProductData | None) -> ProductDataResponse:
    """Summarise product data for a response."""
    if product_data is None:
        raise ValueError("product data is None")
    return ProductDataResponse(
        name=product_data.display_name,
        base_price=product_data.list_price_amount,
        base_price_formatted=product_data.list_price,
        stock_status=stock_status(product_data.stock_status),
    )


class Handler:
    """Answers product data requests using a catalog use case."""

    def __init__(self, usecase: _Usecase) -> None:
        self.usecase = usecase

    def get_product_data(
        self, request: ProductDataRequest | None
    ) -> ProductDataResponse:
        """Look up a product; failures raise HandlerError with a status code."""
        if request is None:
            raise HandlerError(StatusCode.INVALID_ARGUMENT, "request is empty")
        try:
            data = self.usecase.get_product_data(request.product_id)
        except (RepositoryError, ValueError) as exc:
            raise HandlerError(StatusCode.NOT_FOUND, str(exc)) from exc
        return product_data_response(data)