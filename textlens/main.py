import argparse
import asyncio
import mimetypes
import sys
from pathlib import Path

from textlens.config.settings import Settings
from textlens.delivery.exceptions import DeliveryError
from textlens.export.exceptions import ExportError
from textlens.extraction.exceptions import ExtractionError
from textlens.extraction.models import ExtractionMode
from textlens.logging.logger import Log
from textlens.pipeline.exceptions import PipelineError
from textlens.pipeline.orchestrator import Orchestrator, build_orchestrator
from textlens.tabular.parser import serialize


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textlens",
        description="Extract text (or a CSV table) from an image with an OCR / vision backend.",
    )
    parser.add_argument("image", type=Path, help="Image file (JPG, PNG, HEIC, ...)")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in ExtractionMode],
        default=ExtractionMode.PLAIN_TEXT.value,
        help="'text' for plain text, 'table' for CSV / spreadsheet output",
    )
    parser.add_argument("--provider", help="Override EXTRACTION_PROVIDER")
    parser.add_argument("--export", action="store_true", help="Save the result to the download directory")
    parser.add_argument("--share", action="store_true", help="Share the result, falling back to download / clipboard")
    parser.add_argument("--copy", action="store_true", help="Copy the extracted text to the clipboard")
    return parser


async def run(args: argparse.Namespace, orchestrator: Orchestrator) -> int:
    """Run one upload through the orchestrator and print the outcome."""
    path: Path = args.image
    try:
        raw_bytes = path.read_bytes()
    except OSError as exc:
        print(f"Cannot read {path}: {exc}", file=sys.stderr)
        return 2

    await orchestrator.change_mode(ExtractionMode(args.mode))
    mime_type, _ = mimetypes.guess_type(path.name)
    try:
        await orchestrator.upload(path.name, raw_bytes, mime_type or "")
    except PipelineError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    except ExtractionError:
        print(orchestrator.session.error_message, file=sys.stderr)
        return 1

    session = orchestrator.session
    if session.warning_message:
        print(session.warning_message, file=sys.stderr)
    if session.mode is ExtractionMode.TABULAR:
        print(serialize(orchestrator.grid()))
    elif session.result is not None:
        print(session.result.text)

    try:
        if args.export:
            report = orchestrator.download()
            print(f"Saved {report.path}", file=sys.stderr)
        if args.share:
            report = orchestrator.share()
            print(f"Share: {report.outcome.value}", file=sys.stderr)
        if args.copy:
            orchestrator.copy_text()
    except (ExportError, DeliveryError, PipelineError) as exc:
        print(str(exc), file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point: settings -> logging -> orchestrator -> one upload."""
    args = build_parser().parse_args(argv)
    overrides = {"extraction_provider": args.provider} if args.provider else {}
    settings = Settings(**overrides)
    Log.configure(settings.log_level)
    orchestrator = build_orchestrator(settings)
    return asyncio.run(run(args, orchestrator))


if __name__ == "__main__":
    sys.exit(main())
