from PIL import Image, ImageDraw, ImageFont
import os
import sys
from decimal import Decimal, ROUND_HALF_UP

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
RECEIPTS_DIR = os.path.join(BASE_DIR, 'receipts')

NAME_WIDTH = 14
SEPARATOR = "-" * 16


def whole_dollars(amount):
    # receipts round half up, so 2.5 prints as 3
    return str(Decimal(str(amount)).quantize(Decimal('1'), rounding=ROUND_HALF_UP))


class ReceiptGenerator:
    @staticmethod
    def text_lines(receipt):
        """Console receipt: one line per cart line, then the money summary."""
        lines = ["-- Receipt --"]
        for line in receipt.lines:
            lines.append(f"{line.qty}x {line.name:<{NAME_WIDTH}} ${whole_dollars(line.line_total)}")
        lines.append(SEPARATOR)
        lines.append(f"Subtotal: ${whole_dollars(receipt.subtotal)}")
        lines.append(f"Shipping: ${whole_dollars(receipt.shipping)}")
        lines.append(f"Total: ${whole_dollars(receipt.total)}")
        lines.append("")
        return lines

    @staticmethod
    def print_receipt(receipt, out=None):
        out = out or sys.stdout
        for line in ReceiptGenerator.text_lines(receipt):
            print(line, file=out)

    @staticmethod
    def _load_font(size):
        # Try common system fonts, fallback to default
        candidates = ["arial.ttf", "DejaVuSans.ttf", "LiberationSans-Regular.ttf"]
        for f in candidates:
            try:
                return ImageFont.truetype(f, size)
            except OSError:
                continue
        return ImageFont.load_default()

    @staticmethod
    def _text_size(draw, text, font):
        bbox = draw.textbbox((0, 0), text, font=font)
        return (bbox[2] - bbox[0], bbox[3] - bbox[1])

    @staticmethod
    def _wrap_text(draw, text, font, max_w):
        words = (text or '').split()
        if not words:
            return ['']
        lines = []
        cur = words[0]
        for w in words[1:]:
            tw, _ = ReceiptGenerator._text_size(draw, cur + ' ' + w, font)
            if tw <= max_w:
                cur = cur + ' ' + w
            else:
                lines.append(cur)
                cur = w
        lines.append(cur)
        return lines

    @staticmethod
    def generate(receipt, receipts_dir=None):
        """Render the receipt as a PNG under `receipts_dir` and return its path."""
        receipts_dir = receipts_dir or RECEIPTS_DIR
        os.makedirs(receipts_dir, exist_ok=True)
        png_path = os.path.join(receipts_dir, f"{receipt.order_number}.png")

        width = 600
        header_h = 140
        line_h = 24
        footer_h = 140
        x = 30

        f_head = ReceiptGenerator._load_font(24)
        f_sub = ReceiptGenerator._load_font(14)
        f_mono = ReceiptGenerator._load_font(12)

        # Column positions, amounts are right-aligned
        value_x = width - x
        col_total_right = value_x
        col_price_right = value_x - 100
        col_qty_center = col_price_right - 60
        item_col_w = max(80, int(col_qty_center - x) - 24)

        # Wrap names first so the image height fits every line
        tmp_draw = ImageDraw.Draw(Image.new('RGB', (1, 1)))
        prepared = []
        items_h = 0
        for line in receipt.lines:
            wrapped = ReceiptGenerator._wrap_text(tmp_draw, line.name, f_mono, item_col_w)
            block_h = len(wrapped) * line_h + 6
            items_h += block_h
            prepared.append((wrapped, str(line.qty), f"{line.unit_price:.2f}", f"{line.line_total:.2f}"))
        items_h = max(line_h * 2, items_h + 20)

        height = header_h + items_h + footer_h
        img = Image.new('RGB', (width, height), color=(255, 255, 255))
        draw = ImageDraw.Draw(img)

        y = 24
        draw.text((x, y), "Checkout Receipt", font=f_head, fill=(20, 20, 20))
        y += 34
        draw.text((x, y), f"Order #: {receipt.order_number}", font=f_sub, fill=(0, 0, 0))
        y += 20
        draw.text((x, y), f"Date: {receipt.created_at.strftime('%Y-%m-%d %H:%M:%S')}", font=f_sub, fill=(0, 0, 0))
        y += 20
        draw.text((x, y), f"Customer: {receipt.customer_name}", font=f_sub, fill=(0, 0, 0))
        y += 26
        draw.line((x, y, width - x, y), fill=(200, 200, 200), width=1)
        y += 8

        draw.text((x, y), "Item", font=f_mono, fill=(0, 0, 0))
        tw, _ = ReceiptGenerator._text_size(draw, "Qty", f_mono)
        draw.text((col_qty_center - tw / 2, y), "Qty", font=f_mono, fill=(0, 0, 0))
        tw, _ = ReceiptGenerator._text_size(draw, "Price", f_mono)
        draw.text((col_price_right - tw, y), "Price", font=f_mono, fill=(0, 0, 0))
        tw, _ = ReceiptGenerator._text_size(draw, "Total", f_mono)
        draw.text((col_total_right - tw, y), "Total", font=f_mono, fill=(0, 0, 0))
        y += 18
        draw.line((x, y, width - x, y), fill=(230, 230, 230), width=1)
        y += 8

        for wrapped, qty, price, total in prepared:
            for i, text in enumerate(wrapped):
                draw.text((x, y), text, font=f_mono, fill=(20, 20, 20))
                if i == 0:
                    qw, _ = ReceiptGenerator._text_size(draw, qty, f_mono)
                    draw.text((col_qty_center - qw / 2, y), qty, font=f_mono, fill=(20, 20, 20))
                    pw, _ = ReceiptGenerator._text_size(draw, price, f_mono)
                    draw.text((col_price_right - pw, y), price, font=f_mono, fill=(20, 20, 20))
                    tw, _ = ReceiptGenerator._text_size(draw, total, f_mono)
                    draw.text((col_total_right - tw, y), total, font=f_mono, fill=(20, 20, 20))
                y += line_h
            draw.line((x, y, width - x, y), fill=(245, 245, 245), width=1)
            y += 6

        y = max(y, header_h + items_h) + 8
        summary = [
            f"Subtotal: $ {receipt.subtotal:,.2f}",
            f"Shipping: $ {receipt.shipping:,.2f}",
            f"Total: $ {receipt.total:,.2f}",
        ]
        for txt in summary:
            tw, _ = ReceiptGenerator._text_size(draw, txt, f_sub)
            fill = (0, 100, 0) if txt.startswith('Total') else (0, 0, 0)
            draw.text((value_x - tw, y), txt, font=f_sub, fill=fill)
            y += line_h

        img.save(png_path)
        return png_path
