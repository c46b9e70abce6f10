# lecture_analyzer/main.py
import argparse
import logging
import sys
from typing import List, Optional

from .analyze import summarize
from .config import Config
from .errors import LectureAnalyzerError
from .export import export_to_pdf
from .links import suggest_links
from .output_format import format_console
from .pdf_loader import extract_all

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lecture-analyzer",
        description="Summarize lecture notes and export key insights",
    )
    parser.add_argument("--version", action="version", version="%(prog)s 0.1.0")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("analyze", help="Analyze one or more lecture PDFs")
    p.add_argument("files", nargs="+", help="Input PDF files")
    p.add_argument("--export", metavar="PATH", help="Export summary to PDF file")
    p.add_argument("--backend", choices=Config.TEXT_BACKENDS, default=None,
                   help=f"Text extraction backend (default: {Config.TEXT_BACKEND})")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if (verbose or Config.DEBUG) else logging.INFO,
        format="[%(levelname)s] %(message)s",
        stream=sys.stderr,
    )


def analyze(files: List[str], export: Optional[str] = None,
            backend: Optional[str] = None) -> None:
    # 1) extract
    all_text = extract_all(files, backend)
    # 2) analyze
    keywords, summary = summarize(all_text)
    # 3) suggested resources
    links = suggest_links(keywords)
    log.debug("keywords=%s summary_sentences=%d", keywords, len(summary))
    # 4) export or print
    if export:
        export_to_pdf(export, keywords, summary, links)
        print(f"✓ Summary exported to {export}")
    else:
        print(format_console(keywords, summary, links))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    _setup_logging(args.verbose)
    try:
        if args.command == "analyze":
            analyze(args.files, args.export, args.backend)
    except LectureAnalyzerError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
