"""Pull the Bank of England base rate and store it as a snapshot."""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional

from ..config.series_registry import BASE_RATE_SERIES_ID
from ..config.settings import settings
from ..errors import OutOfRangeError, ParseError, ProviderError
from ..models.rate_series import RateSeries
from .dates import DateLike, parse_date
from .providers.base import SeriesProvider
from .providers.boe import BoeRateProvider
from .providers.transport import RequestsTransport
from .snapshot import save_snapshot

logger = logging.getLogger(__name__)


def pull_base_rate(
    provider: SeriesProvider,
    start: Optional[DateLike] = None,
    end: Optional[DateLike] = None,
    snapshot: Optional[Path] = None,
) -> RateSeries:
    """Fetch the base rate and write it to the snapshot file.

    Args:
        provider: Source of the rate document
        start: First day requested (default: full history)
        end: Last day requested (default: today when start is given)
        snapshot: Snapshot file (default: settings.SNAPSHOT_PATH)

    Returns:
        The freshly built series; the snapshot is left untouched when empty
    """
    print(f"Base Rate Pull: Starting refresh for {BASE_RATE_SERIES_ID}")
    print(f"  Fetching from BoE (start={start or 'ALL'}, end={end or 'now'})...")

    series = RateSeries(provider.fetch_observations(start, end))
    if not len(series):
        print("  WARNING: No base rate data returned from BoE")
        return series

    first, last = series.first_date(), series.last_date()
    print(f"  Fetched {len(series)} rate change(s)")
    print(f"  Date range: {first.isoformat()} to {last.isoformat()}")
    print(f"  Latest rate: {series.rate_at():.2f}% (since {last.isoformat()})")

    written = save_snapshot(series, snapshot)
    print(f"  ✓ Stored {len(series)} record(s) in {written}")
    return series


def _date_arg(value: str) -> date:
    try:
        return parse_date(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point for pulling the base rate."""
    parser = argparse.ArgumentParser(description="Fetch the Bank of England base rate")
    parser.add_argument("--from", dest="start", type=_date_arg, help="First day (default: full history)")
    parser.add_argument("--to", dest="end", type=_date_arg, help="Last day (default: today)")
    parser.add_argument(
        "--snapshot",
        type=Path,
        default=Path(settings.SNAPSHOT_PATH),
        help="Snapshot file to write",
    )
    parser.add_argument("--url", help="Override the request URL (sent without generated parameters)")
    parser.add_argument("--rate-on", type=_date_arg, help="Print the rate in effect on this day")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    with RequestsTransport() as transport:
        provider = BoeRateProvider(transport, url=args.url)
        try:
            series = pull_base_rate(provider, args.start, args.end, args.snapshot)
        except ProviderError as e:
            print(f"  ERROR: Provider error: {e}")
            return 1
        except ParseError as e:
            print(f"  ERROR: Could not read rate document: {e}")
            return 1

    if args.rate_on is not None:
        if not len(series):
            print(f"  ERROR: No base rate data to look up {args.rate_on.isoformat()}")
            return 2
        try:
            rate = series.rate_at(args.rate_on)
        except OutOfRangeError as e:
            print(f"  ERROR: {e}")
            return 2
        print(f"  Rate on {args.rate_on.isoformat()}: {rate:.2f}%")

    return 0


if __name__ == "__main__":
    sys.exit(main())
