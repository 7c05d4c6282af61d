import argparse
import signal
import sys
import threading
from typing import List, Optional

from feedpoll.core.config import PollerConfig, settings
from feedpoll.fetch.requests_fetcher import RequestsFetcher
from feedpoll.notify.factory import build_notifier
from feedpoll.services.poller import Poller

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="feedpoll",
        description="Periodically fetch a CSV feed, store each fetch and write a summary report.",
    )
    p.add_argument("--url", type=str, help=f"Feed URL (default: FEED_URL or {settings.FEED_URL}).")
    p.add_argument("--workdir", type=str, help="Directory holding data_files/ and analysis_results/ (default: WORK_DIR or cwd).")
    p.add_argument("--interval", type=float, help="Seconds to sleep between iterations (default: POLL_INTERVAL_SECONDS or 60).")
    p.add_argument("--once", action="store_true", help="Run a single iteration and exit.")
    return p.parse_args(argv)

def build_poller(args: argparse.Namespace) -> Poller:
    config = PollerConfig.from_settings(
        settings,
        url=args.url,
        work_dir=args.workdir,
        interval_seconds=args.interval,
    )
    return Poller(config, RequestsFetcher(), build_notifier(settings))

def install_signal_handlers(stop: threading.Event) -> None:
    def _signal_handler(sig, frame):
        print("\n[Shutdown] Signal received, stopping after the current iteration...")
        stop.set()

    signal.signal(signal.SIGINT, _signal_handler)
    signal.signal(signal.SIGTERM, _signal_handler)

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        poller = build_poller(args)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    print(f"Data directory: {poller.config.data_dir}")
    print(f"Analysis directory: {poller.config.analysis_dir}")

    try:
        poller.prepare()
    except OSError as e:
        print(f"Cannot create output directories: {e}", file=sys.stderr)
        return 2

    if args.once:
        outcome = poller.run_once()
        return 0 if outcome.ok else 1

    stop = threading.Event()
    install_signal_handlers(stop)
    poller.run_forever(stop)
    return 0

if __name__ == "__main__":
    sys.exit(main())
