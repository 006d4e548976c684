import itertools
from datetime import datetime

_order_seq = itertools.count(1)


class ReceiptLine:
    def __init__(self, name, qty, unit_price, line_total):
        self.name = name
        self.qty = qty
        self.unit_price = unit_price
        self.line_total = line_total


#receipt of a completed checkout
class Receipt:
    def __init__(self, customer_name, subtotal, shipping, total, shipment_notice=None, created_at=None):
        self.customer_name = customer_name
        self.lines = []
        self.subtotal = subtotal
        self.shipping = shipping
        self.total = total
        self.shipment_notice = list(shipment_notice or [])
        self.created_at = created_at or datetime.now()
        self.order_number = f"QS-{self.created_at.strftime('%Y%m%d')}-{int(self.created_at.timestamp())}-{next(_order_seq):04d}"

    def add_line(self, cart_item):
        self.lines.append(ReceiptLine(
            cart_item.product.name,
            cart_item.qty,
            cart_item.product.price,
            cart_item.total,
        ))


class CheckoutSuccess:
    ok = True

    def __init__(self, receipt):
        self.receipt = receipt

    def __repr__(self):
        return f"CheckoutSuccess(total={self.receipt.total})"


class CheckoutFailure:
    """A checkout that stopped at `kind`; `message` is what the caller reports."""

    ok = False

    def __init__(self, kind, message):
        self.kind = kind
        self.message = message

    def __repr__(self):
        return f"CheckoutFailure({self.kind.name}, {self.message!r})"

    @classmethod
    def from_error(cls, error):
        return cls(error.kind, error.message)
