from errors import InvalidArgument, InsufficientFunds, NotInCart, OutOfStock


#cart item model, read-only; the cart swaps in a new line when the quantity changes
class CartItem:
    def __init__(self, product, qty):
        self._product = product
        self._qty = qty

    @property
    def product(self):
        return self._product

    @property
    def qty(self):
        return self._qty

    @property
    def total(self):
        return self._product.price * self._qty


#cart model
class Cart:
    def __init__(self):
        # product name -> CartItem, kept in first-add order
        self._lines = {}

    def __len__(self):
        return len(self._lines)

    def add(self, product, qty=1):
        if not product.is_available(qty):
            raise OutOfStock(f"{product.name} out of stock")

        existing = self._lines.get(product.name)
        if existing is None:
            self._lines[product.name] = CartItem(product, qty)
            return

        if existing.product is not product:
            raise InvalidArgument(f"Another product named {product.name} is already in the cart")
        new_qty = existing.qty + qty
        if not product.is_available(new_qty):
            raise OutOfStock(f"Not enough {product.name}")
        self._lines[product.name] = CartItem(product, new_qty)

    def remove(self, product, qty):
        existing = self._lines.get(product.name)
        if existing is None:
            raise NotInCart(f"{product.name} not in cart")
        have = existing.qty
        if qty <= 0 or qty > have:
            raise InvalidArgument(f"Cannot remove {qty}; only {have} in cart")
        if qty == have:
            del self._lines[product.name]
        else:
            self._lines[product.name] = CartItem(existing.product, have - qty)

    def quantity_of(self, product):
        existing = self._lines.get(product.name)
        return existing.qty if existing else 0

    def is_empty(self):
        return not self._lines

    def clear(self):
        self._lines.clear()

    @property
    def items(self):
        return list(self._lines.values())

    @property
    def subtotal(self):
        return sum(item.total for item in self._lines.values())


#customer model
class Customer:
    def __init__(self, name, balance):
        self.name = name
        self.balance = balance

    def charge(self, amount):
        if amount < 0:
            raise InvalidArgument(f"Can't charge a negative amount ({amount})")
        if amount > self.balance:
            raise InsufficientFunds("Insufficient funds")
        self.balance -= amount
