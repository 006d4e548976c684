"""Error kinds raised by the shop models and reported by checkout."""
from enum import Enum


class ErrorKind(Enum):
    INVALID_ARGUMENT = 'invalid_argument'
    ITEM_EXPIRED = 'item_expired'
    CART_EMPTY = 'cart_empty'
    INSUFFICIENT_FUNDS = 'insufficient_funds'
    NOT_IN_CART = 'not_in_cart'
    OUT_OF_STOCK = 'out_of_stock'


class ShopError(Exception):
    """Base exception for all shop errors."""

    kind = None

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class InvalidArgument(ShopError):
    """Bad quantity, missing name or a stock-exceeding request."""

    kind = ErrorKind.INVALID_ARGUMENT


class ItemExpired(ShopError):
    kind = ErrorKind.ITEM_EXPIRED


class CartEmpty(ShopError):
    kind = ErrorKind.CART_EMPTY


class InsufficientFunds(ShopError):
    kind = ErrorKind.INSUFFICIENT_FUNDS


class NotInCart(ShopError):
    kind = ErrorKind.NOT_IN_CART


class OutOfStock(ShopError):
    kind = ErrorKind.OUT_OF_STOCK
