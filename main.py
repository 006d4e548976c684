import argparse
import sys
from datetime import date, datetime, timedelta

from model import ReceiptGenerator
from models import Cart, Customer
from products import perishable_product, physical_product, virtual_product
from services import CheckoutService


def scenario_success(today):
    cart = Cart()
    cart.add(perishable_product("Cheese", 100, 5, today + timedelta(days=7), 0.2), 2)
    cart.add(virtual_product("Scratch Card", 50, 10), 3)
    cart.add(physical_product("TV", 500, 2, 15.0), 1)
    return "Successful purchase", Customer("John Doe", 2000.0), cart


def scenario_insufficient_funds(today):
    cart = Cart()
    cart.add(perishable_product("Cheese", 100, 5, today + timedelta(days=7), 0.2), 4)
    return "Insufficient funds", Customer("Jane Smith", 100.0), cart


def scenario_empty_cart(today):
    return "Empty cart", Customer("Empty Buyer", 500.0), Cart()


def scenario_expired_item(today):
    cart = Cart()
    cart.add(perishable_product("Old Milk", 20, 1, today - timedelta(days=1), 0.5), 1)
    return "Expired item", Customer("Expiry Tester", 100.0), cart


def scenario_virtual_only(today):
    cart = Cart()
    cart.add(virtual_product("E-Book", 30, 10), 2)
    cart.add(virtual_product("Online Course", 100, 5), 1)
    return "Virtual-only purchase", Customer("Virtual Lover", 200.0), cart


SCENARIOS = [
    scenario_success,
    scenario_insufficient_funds,
    scenario_empty_cart,
    scenario_expired_item,
    scenario_virtual_only,
]


def execute_checkout(customer, cart, today=None, receipts_dir=None, out=None, err=None):
    out = out or sys.stdout
    err = err or sys.stderr
    print(f"Processing checkout for {customer.name}...", file=out)
    result = CheckoutService(out=out).checkout(customer, cart, today=today)
    if result.ok:
        print(f"Done. Remaining balance: ${customer.balance:.2f}", file=out)
        if receipts_dir:
            png = ReceiptGenerator.generate(result.receipt, receipts_dir)
            print(f"Receipt saved to {png}", file=out)
    else:
        print(f"[Error] {result.message}", file=err)
    return result


def run_demo(today=None, only=None, receipts_dir=None, out=None, err=None):
    out = out or sys.stdout
    today = today or date.today()
    print("Welcome to the E-Commerce Demo!\n", file=out)
    results = []
    for number, build in enumerate(SCENARIOS, start=1):
        if only is not None and number != only:
            continue
        title, customer, cart = build(today)
        if number > 1 and only is None:
            print("", file=out)
        print(f"Scenario {number}: {title}", file=out)
        results.append(execute_checkout(customer, cart, today, receipts_dir, out, err))
    return results


def _parse_date(value):
    try:
        return datetime.strptime(value, '%Y-%m-%d').date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a YYYY-MM-DD date: {value}") from None


def main(argv=None):
    parser = argparse.ArgumentParser(description='Run the checkout demo scenarios')
    parser.add_argument('--scenario', type=int, choices=range(1, len(SCENARIOS) + 1),
                        help='Run a single scenario by number')
    parser.add_argument('--today', type=_parse_date, help='Date used for expiry checks (YYYY-MM-DD)')
    parser.add_argument('--receipts-dir', help='Write a PNG receipt per successful checkout here')
    args = parser.parse_args(argv)

    run_demo(today=args.today, only=args.scenario, receipts_dir=args.receipts_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())
