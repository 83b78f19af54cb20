from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from src.config.loader import ConfigError, load_config
from src.logging.error_report import ErrorReportWriter
from src.logging.init import log_summary, set_color, setup_logging
from src.services.runner import run_validation
from src.services.summary import render_summary_line
from src.source.reader import SourceUnavailableError

"""CLI entrypoint.

Flow:
- Load .env, then config (optional YAML), then apply CLI flags
- Validate the CSV (header gate, then every row)
- Print per-row progress plus a SUMMARY line, and exit with the contract code
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1
EXIT_INVALID_ROWS = 2


def _load_env_file(path: Path, override: bool = False) -> None:
    """Load .env using python-dotenv. Failure only prints a warning."""
    try:
        if path.exists():
            load_dotenv(dotenv_path=path, override=override)
    except OSError as e:  # pragma: no cover
        print(f"WARNING: failed to load .env via python-dotenv: {e}")


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="RBAC role CSV pre-import validator")
    p.add_argument("-f", "--file", help="Path to CSV file")
    p.add_argument("--config", type=Path, help="Path to YAML config (default: config/validator.yml)")
    p.add_argument("--report-dir", help="Directory for the error report file")
    p.add_argument("--no-color", action="store_true", help="Disable colored output")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # None -> read sys.argv; [] from tests must not pick up pytest's own args
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"))

    try:
        cfg = load_config(args.config)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    if args.no_color:
        set_color(False)
    elif cfg.color_enabled is not None:
        set_color(cfg.color_enabled)

    if args.debug:
        for h in logger.handlers:
            h.setLevel("DEBUG")
        logger.setLevel("DEBUG")
        logger.debug("debug mode enabled")

    source = Path(args.file or cfg.default_file)
    report_dir = Path(args.report_dir or cfg.report_directory)
    logger.debug(f"config={cfg}")
    logger.info(f"Reading file: {source}")

    try:
        run = run_validation(
            source,
            report_writer=ErrorReportWriter(report_dir),
            encoding=cfg.encoding,
            delimiter=cfg.delimiter,
        )
    except SourceUnavailableError as e:
        if e.path.exists():
            logger.error(f"File '{e.path}' could not be read: {e.reason}", extra={"color": "red"})
        else:
            logger.error(f"File '{e.path}' not found or does not exist.", extra={"color": "red"})
        return EXIT_FATAL

    if run.result.is_header_failure:
        logger.error(
            f"Required columns are missing. See '{run.report_path}'", extra={"color": "red"}
        )
        log_summary(render_summary_line(run)[len("SUMMARY "):])
        return EXIT_FATAL

    log_summary(render_summary_line(run)[len("SUMMARY "):])
    if run.result.is_valid:
        logger.info(
            "[SUCCESS] The CSV file is complete and correctly formatted.", extra={"color": "green"}
        )
        return EXIT_SUCCESS

    logger.error(
        "Validation failed. Errors were found in the file, "
        f"see '{run.report_path}' for details.",
        extra={"color": "red"},
    )
    return EXIT_INVALID_ROWS


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
