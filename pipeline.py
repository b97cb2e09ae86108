#!/usr/bin/env python3
"""Command-line entry point for the news toolkit.

Usage:
  python pipeline.py glove                         # Load the configured GloVe table
  python pipeline.py glove --file other.csv        # Load a different table
  python pipeline.py glove --strict                # Fail on the first malformed row

  python pipeline.py news                          # Build the article corpus
  python pipeline.py news --root path/to/News      # From another directory
  python pipeline.py news --output data/           # Also write articles.json

  python pipeline.py status                        # Show configured paths
"""

import argparse
import logging
import sys
from collections import Counter

import config

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


# ---------------------------------------------------------------------------
# GLOVE
# ---------------------------------------------------------------------------

def cmd_glove(args) -> int:
    """Load the embedding table and report its shape."""
    from embeddings.loader import EmbeddingLoader

    on_malformed = "abort" if args.strict else config.ON_MALFORMED
    loader = EmbeddingLoader(
        args.file or config.GLOVE_FILENAME,
        search_dirs=[config.RESOURCES_DIR],
        on_malformed=on_malformed,
    )
    result = loader.load()
    index = result.index

    logger.info("Vocabulary: %d words, %d dimensions", len(index), index.dimension)
    for row in result.skipped:
        logger.warning("  skipped line %d: %s", row.line_number, row.reason)
    return 0


# ---------------------------------------------------------------------------
# NEWS
# ---------------------------------------------------------------------------

def cmd_news(args) -> int:
    """Build the article corpus and optionally write it to JSON."""
    from processors.corpus_builder import load_news
    from scrapers.utils import save_records

    root = args.root or config.NEWS_DIR
    result = load_news(root, extension=args.ext or config.NEWS_EXTENSION)

    labels = Counter(r.label for r in result.records)
    data_types = Counter(r.data_type for r in result.records)
    logger.info("Articles: %d (skipped %d)", len(result.records), len(result.skipped))
    logger.info("  labels: %s", dict(labels))
    logger.info("  data types: %s", dict(data_types))
    for doc in result.skipped:
        logger.warning("  skipped %s: %s", doc.path.name, doc.reason)

    if args.output and result.records:
        save_records(result.records, args.output, "articles.json")
    return 0


# ---------------------------------------------------------------------------
# STATUS
# ---------------------------------------------------------------------------

def cmd_status(args) -> int:
    """Show where the toolkit looks for its inputs."""
    glove_path = config.RESOURCES_DIR / config.GLOVE_FILENAME

    print("\n" + "=" * 70)
    print("NEWS TOOLKIT STATUS")
    print("=" * 70)
    print(f"  Resources dir:   {config.RESOURCES_DIR} ({'ok' if config.RESOURCES_DIR.is_dir() else 'missing'})")
    print(f"  GloVe table:     {glove_path} ({'ok' if glove_path.is_file() else 'missing'})")
    print(f"  News dir:        {config.NEWS_DIR} ({'ok' if config.NEWS_DIR.is_dir() else 'missing'})")
    print(f"  News extension:  {config.NEWS_EXTENSION}")
    print(f"  Malformed rows:  {config.ON_MALFORMED}")
    print("=" * 70)
    return 0


# ---------------------------------------------------------------------------
# MAIN
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="GloVe and news corpus loader",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Toolkit command")

    glove_parser = subparsers.add_parser("glove", help="Load the embedding table")
    glove_parser.add_argument(
        "--file",
        default=None,
        help=f"Table file name or path (default: {config.GLOVE_FILENAME})",
    )
    glove_parser.add_argument(
        "--strict",
        action="store_true",
        help="Abort on the first malformed row instead of skipping it",
    )

    news_parser = subparsers.add_parser("news", help="Build the news article corpus")
    news_parser.add_argument("--root", default=None, help="News directory")
    news_parser.add_argument("--ext", default=None, help="Document extension (default: .htm)")
    news_parser.add_argument("--output", default=None, help="Directory for articles.json")

    subparsers.add_parser("status", help="Show configured paths")

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if not args.command:
        parser.print_help()
        return 1

    commands = {
        "glove": cmd_glove,
        "news": cmd_news,
        "status": cmd_status,
    }

    try:
        return commands[args.command](args)
    except Exception as e:
        logger.exception("Pipeline error: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
