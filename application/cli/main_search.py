## application/cli/main_search.py
from __future__ import annotations
from pathlib import Path
from typing import Optional, Sequence
import argparse
import logging
import sys

from application.directory_session import DirectorySession
from domain.models.disclosure_state import Revealed
from domain.models.load_state import Failed, Ready
from infrastructure.config.settings import DirectorySettings, parse_threshold
from infrastructure.reporting.card_table_writer import CardTableWriter
from infrastructure.sources.factory import make_source


def threshold_arg(value: str) -> int:
    try:
        return parse_threshold(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Search the construction company directory.")
    ap.add_argument("--query", "-q", default="", help="case-insensitive match on name or region")
    ap.add_argument("--threshold", type=threshold_arg, help="region label length before truncation (10 grid, 7 compact)")
    ap.add_argument("--reveal", metavar="NAME", help="print the full region of the first visible company with this name")
    ap.add_argument("--host", help="running host; 'localhost' reads the directory from --local-root")
    ap.add_argument("--base-url", help="explicit base URL, skips host detection")
    ap.add_argument("--local-root", type=str, help="directory holding data/companies.json on a dev host")
    ap.add_argument("--csv", type=str, help="also save the visible cards to this CSV path")
    ap.add_argument("--verbose", "-v", action="count", default=0,
                    help="-v INFO, -vv DEBUG")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Logging setup
    level = logging.WARNING
    if args.verbose == 1: level = logging.INFO
    elif args.verbose >= 2: level = logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s | %(levelname)s | %(name)s | %(message)s")

    logger = logging.getLogger("directory")

    try:
        env_settings = DirectorySettings.from_env()
    except ValueError as e:
        parser.error(f"invalid environment setting: {e}")
    settings = env_settings.with_overrides(
        host=args.host,
        base_url=args.base_url,
        local_root=Path(args.local_root) if args.local_root else None,
        label_threshold=args.threshold,
    )
    logger.info("Base URL resolved to %r (host=%s)", settings.resolved_base_url, settings.host)

    session = DirectorySession(make_source(settings), settings.directory_config(), logger=logger)
    state = session.start()
    if isinstance(state, Failed):
        print(state.message, file=sys.stderr)
        return 1

    session.set_query(args.query)
    cards = session.cards()
    writer = CardTableWriter()
    print(writer.to_text(cards))
    logger.info("%d of %d companies visible", len(cards), len(state.companies) if isinstance(state, Ready) else 0)

    if args.reveal:
        match = next((c for c in cards if c.name == args.reveal), None)
        if match is None:
            print(f"No visible company named {args.reveal!r}", file=sys.stderr)
            return 2
        disclosed = session.request_reveal(match.full_region)
        if isinstance(disclosed, Revealed):
            print(f"{match.name}: {disclosed.text}")
        session.dismiss()

    if args.csv:
        out = writer.save_csv(cards, Path(args.csv))
        logger.info("Saved %d cards to %s", len(cards), out)

    session.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
