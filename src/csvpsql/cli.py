import argparse
import os
import sys
from typing import Any, Dict, List, Optional

from csvpsql.execution.config_executor import ConfigExecutor
from csvpsql.observability.logger import set_log_level
from csvpsql.router import route
from csvpsql.utils.exceptions import CsvPsqlError


class C:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    RED = "\033[31m"
    GREEN = "\033[32m"


def cprint(text: str, color: str = C.RESET, bold: bool = False, stream=None):
    stream = stream or sys.stderr
    if stream.isatty():
        prefix = (C.BOLD if bold else "") + color
        text = f"{prefix}{text}{C.RESET}"
    print(text, file=stream)


def _write_text(path: str, content: str) -> None:
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)


def build_parser() -> argparse.ArgumentParser:
    # -h is taken by --no-header, so help is long-form only
    parser = argparse.ArgumentParser(
        prog="csvpsql",
        description="Parse csv to sql tables.",
        add_help=False,
    )
    parser.add_argument("--help", action="help", help="Show this help message and exit")
    parser.add_argument("file", nargs="?", help="CSV file; standard input when omitted")
    parser.add_argument("-h", "--no-header", action="store_true", help="The file has no header row")
    parser.add_argument("-d", "--delimiter", default=",", help="Field delimiter [default: ,]")
    parser.add_argument(
        "--columns",
        help="Override column name. Separated by comma. Use the csv header or letters by default.",
    )
    parser.add_argument(
        "-n", "--null-as",
        default="",
        help="Empty string are null by default",
    )
    parser.add_argument("-t", "--table-name", help="File name is used as default")
    parser.add_argument("-o", "--output", help="Write the statement to this file instead of stdout")
    parser.add_argument("--config", help="Path to YAML config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log pipeline events to stderr")
    return parser


def _build_payload_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    return {
        "file_path": args.file,
        "delimiter": args.delimiter,
        "no_header": args.no_header,
        "null_as": args.null_as,
        "table_name": args.table_name,
        "columns": args.columns,
    }


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_log_level("INFO")

    if not args.config and not args.file and not args.table_name:
        parser.error("--table-name is required when reading from standard input")

    try:
        if args.config:
            executor = ConfigExecutor(args.config)
            result = executor.execute()
            written_to = executor.output_file
        else:
            result = route(_build_payload_from_args(args))
            written_to = None

        if args.output:
            _write_text(args.output, result["ddl"])
            written_to = args.output

        if written_to:
            cprint(f"[DONE] Statement written to: {written_to}", C.GREEN, bold=True)
        else:
            sys.stdout.write(result["ddl"])

    except (CsvPsqlError, OSError) as e:
        cprint("[FAILED] Application error: " + str(e), C.RED, bold=True)
        raise SystemExit(1)

    return 0


if __name__ == "__main__":
    main()
