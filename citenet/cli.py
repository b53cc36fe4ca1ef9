"""
citenet CLI - build, filter and export a citation network from a corpus file.
"""

import argparse
import sys
import logging
from pathlib import Path
from typing import List, Optional

from .core.config import CitenetConfig
from .core.logs import setup_logging
from .providers.base import CorpusUnavailableError
from .providers.json_file import JsonCorpusProvider
from .pipeline import ExplorerSession
from .export.formats import GraphExporter

logger = logging.getLogger("citenet.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="citenet",
        description="Citation network explorer for a paper corpus.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  citenet papers.json
  citenet papers.json --filter "neural" --format both
  citenet papers.json --seed 42 --width 1200 --height 900 -o out
        """
    )

    parser.add_argument(
        "corpus",
        nargs='?',
        help="JSON corpus export (default: $CITENET_CORPUS or papers.json)"
    )
    parser.add_argument(
        "--filter",
        type=str,
        default="",
        metavar="QUERY",
        help="keep papers whose title contains QUERY (case-insensitive)"
    )

    # layout
    layout_group = parser.add_argument_group('layout')
    layout_group.add_argument(
        "--seed",
        type=int,
        help="jitter seed for reproducible layouts"
    )
    layout_group.add_argument(
        "--width",
        type=float,
        help="canvas width (default: 800)"
    )
    layout_group.add_argument(
        "--height",
        type=float,
        help="canvas height (default: 600)"
    )

    # output
    parser.add_argument(
        "--output-dir", "-o",
        type=str,
        help="output directory (default: output)"
    )
    parser.add_argument(
        "--format", "-f",
        type=str,
        default="json",
        choices=["json", "graphml", "both"],
        help="export format (default: json)"
    )

    # misc
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="minimal output"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="verbose/debug output"
    )
    parser.add_argument(
        "--log-file",
        type=str,
        help="also write logs to this file"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # setup logging
    log_level = logging.WARNING if args.quiet else (logging.DEBUG if args.verbose else logging.INFO)
    setup_logging(level=log_level, log_file=args.log_file)

    # configure
    config = CitenetConfig.from_env()
    config.verbose = args.verbose
    if args.corpus:
        config.corpus_path = args.corpus
    if args.seed is not None:
        config.seed = args.seed
    if args.width:
        config.layout.width = args.width
    if args.height:
        config.layout.height = args.height
    if args.output_dir:
        config.export.output_dir = args.output_dir

    session = ExplorerSession(JsonCorpusProvider(config.corpus_path), config)

    try:
        session.load()
    except CorpusUnavailableError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    graph = session.filter(args.filter) if args.filter else session.graph

    if not args.quiet:
        print(f"\n{'='*60}")
        print(session.result.summary())
        if session.query:
            print(f"  Filter {session.query!r}: {len(graph.nodes)} papers, {len(graph.edges)} citations")
        print(f"{'='*60}\n")

    exporter = GraphExporter(config=config.export)
    written = []
    if args.format in ("json", "both"):
        written.append(exporter.export_json(graph, query=session.query))
    if args.format in ("graphml", "both"):
        written.append(exporter.export_graphml(graph))

    for path in written:
        print(f"Wrote {Path(path)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
