"""
Generate sample one-page "invoice" PDFs and impose them for manual review.

Writes the samples plus one merged PDF per (capacity, orientation) pair
to workspace/sample_pdfs so the layouts can be checked by eye.
"""

import argparse
import logging
import sys
from pathlib import Path

from reportlab.lib.pagesizes import A4, A5, A6
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

# Add src to path so we can import nup_toolkit
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root / "src"))

from nup_toolkit.imposer import Orientation, RunRequest, impose
from nup_toolkit.imposer.layout import SUPPORTED_CAPACITIES
from nup_toolkit.imposer.output import save_pdf

logging.basicConfig(level=logging.INFO, format='%(message)s')
logger = logging.getLogger("generate_sample_pdfs")

OUTPUT_DIR = project_root / "workspace" / "sample_pdfs"
PAGE_SIZES = [A4, A5, A6, (80 * mm, 200 * mm)]  # last one: till receipt


def write_invoice(path: Path, number: int) -> None:
    """Write a single-page invoice with a border and a large number."""
    size = PAGE_SIZES[number % len(PAGE_SIZES)]
    width, height = size
    c = canvas.Canvas(str(path), pagesize=size)
    c.setLineWidth(2)
    c.rect(5 * mm, 5 * mm, width - 10 * mm, height - 10 * mm)
    c.setFont("Helvetica-Bold", min(width, height) / 4)
    c.drawCentredString(width / 2, height / 2, str(number))
    c.setFont("Helvetica", 9)
    c.drawString(10 * mm, height - 15 * mm, f"INVOICE #{number:04d}")
    c.showPage()
    c.save()


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--count", type=int, default=13, help="Number of sample PDFs")
    parser.add_argument("--output-dir", type=Path, default=OUTPUT_DIR)
    args = parser.parse_args()

    source_dir = args.output_dir / "sources"
    source_dir.mkdir(parents=True, exist_ok=True)

    sources = []
    for number in range(1, args.count + 1):
        path = source_dir / f"invoice_{number:03d}.pdf"
        write_invoice(path, number)
        sources.append(path)
    logger.info(f"[OK] Wrote {len(sources)} sample invoices to {source_dir}")

    for orientation in Orientation:
        for capacity in SUPPORTED_CAPACITIES:
            result = impose(RunRequest(
                input_paths=tuple(sources),
                capacity=capacity,
                orientation=orientation,
            ))
            out = args.output_dir / f"merged_{capacity}up_{orientation.value}.pdf"
            save_pdf(result.pdf_bytes, out)
            logger.info(f"[OK] {out.name}: {result.page_count} pages")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
