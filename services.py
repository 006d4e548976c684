import sys

from errors import CartEmpty, ItemExpired, ShopError
from model import ReceiptGenerator
from shipping import ShippingService
from transactions import CheckoutFailure, CheckoutSuccess, Receipt


#Check-out service
class CheckoutService:
    """Charges the customer for a cart, deducts stock, ships and prints a receipt.

    Business failures come back as a `CheckoutFailure` instead of being raised.
    The customer is charged before any stock is deducted; if a deduction fails
    after that point the failure is returned with the charge already applied.
    """

    def __init__(self, shipping=None, out=None):
        self.shipping = shipping or ShippingService()
        self.out = out

    def checkout(self, customer, cart, today=None):
        try:
            return CheckoutSuccess(self._process(customer, cart, today))
        except ShopError as e:
            return CheckoutFailure.from_error(e)

    def _process(self, customer, cart, today):
        out = self.out or sys.stdout

        if cart.is_empty():
            raise CartEmpty("Cart cannot be empty")

        # One entry per physical unit; expiry is checked before anything is charged
        to_ship = []
        for item in cart.items:
            product = item.product
            if product.is_expired(today):
                raise ItemExpired(f"{product.name} expired")
            if product.requires_shipping():
                to_ship.extend([product] * item.qty)

        subtotal = cart.subtotal
        fee = self.shipping.calculate_fee(self.shipping.total_weight(to_ship))
        total = subtotal + fee

        customer.charge(total)

        for item in cart.items:
            item.product.reduce_stock(item.qty)

        notice = self.shipping.ship(to_ship, out=out) if to_ship else []

        receipt = Receipt(customer.name, subtotal, fee, total, shipment_notice=notice)
        for item in cart.items:
            receipt.add_line(item)
        ReceiptGenerator.print_receipt(receipt, out=out)

        cart.clear()
        return receipt
