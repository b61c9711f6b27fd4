import argparse
import importlib
import logging
from pathlib import Path
from typing import List, Optional

import colorlog

from student_registry.core.enums import RecordKind

# Record kind choices for argparse - used across all commands
RECORD_KIND_CHOICES = list(RecordKind.__members__.keys())

try:
    from student_registry import __version__ as _PACKAGE_VERSION
except ImportError:  # pragma: no cover
    _PACKAGE_VERSION = "unknown"  # type: ignore[assignment]


def setup_logging(
    verbose: bool = False, warnings_only: bool = False, errors_only: bool = False
) -> None:
    logger = logging.getLogger()
    for h in list(logger.handlers):
        logger.removeHandler(h)
    log_format = (
        "%(asctime)s:%(levelname)s:%(name)s in %(filename)s:%(funcName)s:%(lineno)d: %(message)s"
    )
    log_colors = {
        "DEBUG": "cyan",
        "INFO": "green",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "bold_red",
    }
    stream_handler = colorlog.StreamHandler()
    formatter = colorlog.ColoredFormatter(f"%(log_color)s{log_format}", log_colors=log_colors)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)
    if errors_only:
        logger.setLevel(logging.ERROR)
    elif warnings_only:
        logger.setLevel(logging.WARNING)
    else:
        logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def _report_path(option, input_path: Path, suffix: str) -> Path:
    """Resolve where a report goes: next to the input, or in a custom directory."""
    name = f"{input_path.stem}_validation.{suffix}"
    if option is True:
        return input_path.parent / name
    report_dir = Path(option)
    report_dir.mkdir(parents=True, exist_ok=True)
    return report_dir / name


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate every record of a CSV or JSON file as one record kind.

    Returns:
        0 if all records were accepted
        1 if no records were validated (missing, unreadable or empty file)
        2 if any record was rejected, or the arguments were invalid
    """
    from student_registry.core.utils import resolve_now
    from student_registry.validation.config import DEFAULT_SETTINGS, load_settings

    registry = importlib.import_module("student_registry.validation.registry")

    try:
        kind = RecordKind[args.kind]
    except KeyError:
        valid_kinds = ", ".join(k.value for k in RecordKind)
        logging.error("Unknown record kind: '%s'. Valid kinds: %s", args.kind, valid_kinds)
        return 2

    now_arg = getattr(args, "now", None)
    try:
        reference = resolve_now(now_arg)
    except ValueError:
        logging.error("Invalid --now value: '%s'. Use an ISO date such as 2025-06-01.", now_arg)
        return 2

    settings = DEFAULT_SETTINGS
    config_arg = getattr(args, "config", None)
    if config_arg:
        try:
            settings = load_settings(Path(config_arg))
        except (FileNotFoundError, ValueError) as e:
            logging.error("Cannot use validation config: %s", e)
            return 2

    input_path = Path(args.input).resolve()
    logging.info("Validating %s as %s...", input_path.name, kind.value)

    try:
        report = registry.run_file_validation(input_path, kind, now=reference, settings=settings)
    except FileNotFoundError as e:
        logging.error("Input not found: %s", e)
        return 1
    except (ValueError, OSError) as e:
        logging.error("Error reading %s: %s", input_path, e)
        return 1

    if not report.results:
        logging.error("No records found in %s.", input_path)
        return 1

    registry.print_report(report)

    if getattr(args, "report", False):
        report_path = _report_path(args.report, input_path, "md")
        with open(report_path, "w", encoding="utf-8") as f:
            f.write(report.to_markdown())
        logging.info("Markdown report saved: %s", report_path)

    if getattr(args, "report_json", False):
        report_path = _report_path(args.report_json, input_path, "json")
        with open(report_path, "w", encoding="utf-8") as f:
            f.write(report.to_json())
        logging.info("JSON report saved: %s", report_path)

    if report.has_errors():
        logging.warning(
            "Validation failed for %s: %d of %d records rejected, %d field errors",
            input_path.name,
            report.get_rejected_count(),
            len(report.results),
            report.get_error_count(),
        )
        return 2

    logging.info("Validation passed for %s", input_path.name)
    return 0


def _describe_constraints(spec) -> str:
    parts: List[str] = []
    if spec.min_length > 1:
        parts.append(f"min length {spec.min_length}")
    elif spec.min_length == 1:
        parts.append("non-empty")
    if spec.choices is not None:
        parts.append("one of " + ", ".join(m.value for m in spec.choices))
    if spec.positive:
        parts.append("> 0")
    if spec.non_negative:
        parts.append(">= 0")
    if spec.maximum is not None:
        parts.append(f"<= {spec.maximum:g}")
    if spec.default is not None:
        parts.append(f"default {spec.default}")
    return "; ".join(parts)


def cmd_describe(args: argparse.Namespace) -> int:
    """Print the fields and refinements of a record kind."""
    from student_registry.validation.config import DEFAULT_SETTINGS
    from student_registry.validation.registry import ALL_CHECKS
    from student_registry.validation.runner import get_schema_fields

    try:
        kind = RecordKind[args.kind]
    except KeyError:
        logging.error("Unknown record kind: '%s'", args.kind)
        return 2

    print(f"{kind.value}")
    print()
    print(f"{'Field':<24} {'Type':<11} {'Presence':<9} Constraints")
    for spec in get_schema_fields(kind, DEFAULT_SETTINGS):
        print(
            f"{spec.name:<24} {spec.field_type.value:<11} {spec.presence.value:<9} "
            f"{_describe_constraints(spec)}".rstrip()
        )

    checks = [c for c in ALL_CHECKS if c.applies_to_record_kind(kind)]
    print()
    if checks:
        print("Refinements:")
        for check in checks:
            print(f"  - {check.check_id} ({', '.join(check.fields)})")
    else:
        print("Refinements: none")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="student-registry",
        description=f"Student Registry validation tools (v{_PACKAGE_VERSION})",
    )
    p.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    p.add_argument(
        "--warnings-only",
        action="store_true",
        help="Show only warnings and errors (overrides --verbose)",
    )
    p.add_argument(
        "--errors-only",
        action="store_true",
        help="Show only errors (overrides --warnings-only and --verbose)",
    )

    sub = p.add_subparsers(dest="command", required=True)

    p_validate = sub.add_parser("validate", help="Validate records from a CSV or JSON file")
    p_validate.add_argument(
        "--kind",
        required=True,
        type=str.upper,
        choices=RECORD_KIND_CHOICES,
        help="Record kind to validate each row as (case insensitive).",
    )
    p_validate.add_argument(
        "--input",
        required=True,
        help="CSV file (one record per row) or JSON file (object or list of objects).",
    )
    p_validate.add_argument(
        "--now",
        default=None,
        help="Reference date/time for age and past-date checks (ISO format). Defaults to now.",
    )
    p_validate.add_argument(
        "--config",
        default=None,
        help="YAML file overriding age bounds and pagination limits.",
    )
    p_validate.add_argument(
        "--report",
        nargs="?",
        const=True,
        default=False,
        help="Generate detailed Markdown report next to the input. Optionally specify custom directory path.",
    )
    p_validate.add_argument(
        "--report-json",
        nargs="?",
        const=True,
        default=False,
        help="Generate detailed JSON report next to the input. Optionally specify custom directory path.",
    )
    p_validate.set_defaults(func=cmd_validate)

    p_describe = sub.add_parser("describe", help="Show the fields and refinements of a record kind")
    p_describe.add_argument(
        "--kind",
        required=True,
        type=str.upper,
        choices=RECORD_KIND_CHOICES,
        help="Record kind to describe (case insensitive).",
    )
    p_describe.set_defaults(func=cmd_describe)

    return p


def main(argv: Optional[list] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(
        verbose=bool(args.verbose),
        warnings_only=bool(getattr(args, "warnings_only", False)),
        errors_only=bool(getattr(args, "errors_only", False)),
    )
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
