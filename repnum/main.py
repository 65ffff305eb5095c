import argparse
import json
import logging
import sys

from rich.console import Console
from rich.markup import escape

from .config import AUTO_BASE, BUFFER_SIZE, PROG_NAME, PROG_VERSION, NumInfo
from .convert import ensure_number, format_binary, parse_base
from .errors import NumeralOverflow, RepnumError


logger = logging.getLogger(__name__)

err_console = Console(stderr=True, highlight=False)


class RepnumArgumentParser(argparse.ArgumentParser):
    # every usage error exits with 1
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = RepnumArgumentParser(
        prog=PROG_NAME,
        description="Displays a number in various base representations.",
    )
    parser.add_argument("number", nargs="?", help="number to convert")
    parser.add_argument(
        "-b",
        "--base",
        help="force a base. Possible values are 2 through 36.",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"{PROG_NAME} v{PROG_VERSION:.2f}. Licenced under the GNU GPL v3 License.",
        help="output version then exit.",
    )
    parser.add_argument("--json", action="store_true", help="output as JSON")
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    return parser


def representations(info: NumInfo) -> dict:
    binary = format_binary(info.num, BUFFER_SIZE)
    if binary is None:
        raise NumeralOverflow(info.text or str(info.num))

    return {
        "dec": info.num,
        "hex": format(info.num, "x"),
        "oct": format(info.num, "o"),
        "bin": binary,
    }


def render(info: NumInfo) -> str:
    reps = representations(info)
    return (
        f"[dec]\t{reps['dec']}\t=\t[hex]\t{reps['hex']}"
        f"\t[oct]\t{reps['oct']}\t[bin]\t{reps['bin']}"
    )


def render_json(info: NumInfo) -> str:
    return json.dumps(representations(info), indent=2)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )

    if args.number is None:
        parser.print_help()
        return 1

    try:
        base = parse_base(args.base) if args.base is not None else AUTO_BASE
        info = NumInfo(ensure_number(args.number, base), base, args.number)
        logger.debug("converted %r to %d", args.number, info.num)
        output = render_json(info) if args.json else render(info)
    except RepnumError as e:
        err_console.print(f"[red]{PROG_NAME}: {escape(str(e))}[/red]", soft_wrap=True)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
