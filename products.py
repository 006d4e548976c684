import numbers
from datetime import date
from enum import Enum

from errors import InvalidArgument


class ProductKind(Enum):
    PERISHABLE = 'perishable'
    PHYSICAL = 'physical'
    VIRTUAL = 'virtual'


def _is_amount(value):
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


#product model
class Product:
    def __init__(self, kind, name, price, stock, weight=None, expiry=None):
        if not name:
            raise InvalidArgument("Name can't be empty")
        if not _is_amount(price) or price < 0:
            raise InvalidArgument(f"Price must be a non-negative number ({price!r})")
        if kind is ProductKind.PERISHABLE and expiry is None:
            raise InvalidArgument("Expiry can't be empty")
        if kind is not ProductKind.VIRTUAL and (not _is_amount(weight) or weight < 0):
            raise InvalidArgument(f"{name} needs a non-negative weight ({weight!r})")
        self.kind = kind
        self.name = name
        self.price = price
        self.stock = max(0, stock)
        self.weight = weight if kind is not ProductKind.VIRTUAL else None
        self.expiry = expiry if kind is ProductKind.PERISHABLE else None

    def __repr__(self):
        return f"Product({self.kind.value}, {self.name!r}, price={self.price}, stock={self.stock})"

    def is_available(self, qty):
        return 0 < qty <= self.stock

    def reduce_stock(self, qty):
        # the only stock mutator; stock is left untouched on failure
        if qty <= 0 or qty > self.stock:
            raise InvalidArgument(f"Can't remove {qty} (only {self.stock} available)")
        self.stock -= qty

    def is_expired(self, today=None):
        if self.kind is ProductKind.PERISHABLE:
            return (today or date.today()) > self.expiry
        return False

    def requires_shipping(self):
        return self.kind in (ProductKind.PERISHABLE, ProductKind.PHYSICAL)

    def shipping_weight(self):
        """Weight in kg of one unit, or None when nothing gets shipped."""
        if self.requires_shipping():
            return self.weight
        return None


def perishable_product(name, price, stock, expiry, weight):
    return Product(ProductKind.PERISHABLE, name, price, stock, weight=weight, expiry=expiry)


def physical_product(name, price, stock, weight):
    return Product(ProductKind.PHYSICAL, name, price, stock, weight=weight)


def virtual_product(name, price, stock):
    return Product(ProductKind.VIRTUAL, name, price, stock)
