"""Verify a cart page from saved HTML, without a browser."""

from dataclasses import dataclass
from pathlib import Path

from ..models import AggregateReadout, ScrapeResult, VerificationReport
from ..pricing.verification import PRICE_TOLERANCE, verify
from .cart import read_order_aggregates, scrape_cart_rows
from .elements import SoupDocument


@dataclass(frozen=True)
class SnapshotVerification:
    """Everything learned from one cart snapshot."""

    scrape: ScrapeResult
    readout: AggregateReadout
    report: VerificationReport


def verify_cart_html(html: str, tolerance: float = PRICE_TOLERANCE) -> SnapshotVerification:
    """Scrape and verify the cart contained in an HTML string."""
    document = SoupDocument(html)
    scrape = scrape_cart_rows(document)
    readout = read_order_aggregates(document)
    return SnapshotVerification(
        scrape=scrape,
        readout=readout,
        report=verify(scrape.items, readout.aggregates, tolerance),
    )


def verify_cart_snapshot(path: Path, tolerance: float = PRICE_TOLERANCE) -> SnapshotVerification:
    """Scrape and verify a cart page saved to disk (e.g. by the capture plugin)."""
    return verify_cart_html(path.read_text(encoding="utf-8"), tolerance)
