import sys

BASE_FEE = 8.0
RATE_PER_KG = 20.0


class ShippingService:
    """Standard shipping: a flat base fee plus a rate per kilogram.

    `units` is the list of shippable products with one entry per physical
    unit, so a line of quantity 3 appears three times.
    """

    def __init__(self, base_fee=BASE_FEE, rate_per_kg=RATE_PER_KG):
        self.base_fee = base_fee
        self.rate_per_kg = rate_per_kg

    @staticmethod
    def group(units):
        # name -> [count, unit weight], in order of first appearance
        groups = {}
        for unit in units:
            entry = groups.get(unit.name)
            if entry is None:
                groups[unit.name] = [1, unit.shipping_weight()]
            else:
                entry[0] += 1
        return groups

    @staticmethod
    def total_weight(units):
        return sum(unit.shipping_weight() for unit in units)

    def notice_lines(self, units):
        if not units:
            return []
        lines = ["-- Shipment Notice --"]
        total = 0.0
        for name, (count, weight) in self.group(units).items():
            lines.append(f"Shipping {count}× {name} ({int(weight * count * 1000)}g)")
            total += weight * count
        lines.append(f"Total weight: {total:.1f} kg")
        lines.append("")
        return lines

    def ship(self, units, out=None):
        out = out or sys.stdout
        lines = self.notice_lines(units)
        for line in lines:
            print(line, file=out)
        return lines

    def calculate_fee(self, total_weight_kg):
        # the base fee applies even when nothing is shipped
        return self.base_fee + self.rate_per_kg * total_weight_kg
