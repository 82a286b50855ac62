"""Print pages of the mock feed as JSON.

Usage:
  python scripts/run_feed.py --geometry roads.json
  python scripts/run_feed.py --geometry roads.json --tracked-assets 500 --page-size 100 --pages 10
"""

from __future__ import annotations

import argparse
import json
import logging
import random
import time

from mock_feed.config import FeedConfig
from mock_feed.geometry import load_feature_set
from mock_feed.simulation.service import MockFeedService


def main() -> None:
    defaults = FeedConfig.from_env()
    ap = argparse.ArgumentParser(description="Emit synthetic tracked-asset pages")
    ap.add_argument("--geometry", required=True, help="Polyline feature set JSON file")
    ap.add_argument("--tracked-assets", type=int, default=defaults.tracked_assets)
    ap.add_argument("--page-size", type=int, default=defaults.page_size)
    ap.add_argument("--dist-step", type=float, default=defaults.dist_step)
    ap.add_argument("--pages", type=int, default=1, help="Number of pages to print")
    ap.add_argument("--interval", type=float, default=0.0, help="Seconds between pages")
    ap.add_argument("--seed", type=int, default=None, help="Random seed")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = FeedConfig(
        tracked_assets=args.tracked_assets,
        page_size=args.page_size,
        dist_step=args.dist_step,
    )
    service = MockFeedService(config, rng=random.Random(args.seed))
    service.initialize(load_feature_set(args.geometry))

    for _ in range(args.pages):
        print(json.dumps(service.next().to_dict()))
        if args.interval > 0:
            time.sleep(args.interval)


if __name__ == "__main__":
    main()
