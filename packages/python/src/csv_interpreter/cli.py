import argparse
import logging
import sys

from csv_interpreter.errors import InterpreterError
from csv_interpreter.interpreter import CsvInterpreter
from csv_interpreter.writer import write_xlsx


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="csv-interpreter",
        description="Evaluate the formulas of a CSV table and print the result",
    )
    # Counted by hand so that a wrong count gets its own message
    parser.add_argument("paths", nargs="*", help="Path to the CSV file to evaluate")
    parser.add_argument(
        "--delimiter", default=",", help="Cell delimiter (default: ',')"
    )
    parser.add_argument(
        "--xlsx", metavar="PATH", help="Also write the evaluated table to an Excel file"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Log debug output to stderr"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    if len(args.paths) != 1:
        print("Incorrect input. CSV-format file should be provided.")
        return 1
    if not args.delimiter:
        print("Delimiter must not be empty.")
        return 1
    path = args.paths[0]

    interpreter = CsvInterpreter(delimiter=args.delimiter)
    try:
        interpreter.load_file(path)
    except OSError:
        print(f'Could not open file "{path}".')
        return 1
    except UnicodeDecodeError:
        print("Invalid file format")
        return 1
    except InterpreterError as e:
        print(e.message)
        return 1

    try:
        interpreter.compute()
        output = interpreter.render()
    except InterpreterError as e:
        print(e.message)
        return 1

    print(output, end="")
    if args.xlsx:
        assert interpreter.grid is not None
        write_xlsx(interpreter.grid, args.xlsx)
        logging.debug(f"Wrote {args.xlsx}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
