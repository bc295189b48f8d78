import argparse
import sys
from pathlib import Path
from typing import List, Optional

from icecream import ic

from minilang.error.error import CompilerException
from minilang.parser.parser import Parser
from minilang.runner.runner import Runner
from minilang.scanner.scanner import Scanner

SAMPLE_PROGRAM = "2 + 3 * 4"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minilang",
        description="Scan, parse and run a minilang program, printing every term.",
    )
    parser.add_argument(
        "source",
        nargs="?",
        help=f"Program text. Defaults to the sample program {SAMPLE_PROGRAM!r}.",
    )
    parser.add_argument("-f", "--file", type=Path, help="Read the program from FILE.")
    parser.add_argument(
        "--tokens", action="store_true", help="Print the scanned tokens first."
    )
    parser.add_argument(
        "--print", action="store_true", help="Print the parsed program first."
    )
    parser.add_argument(
        "--debug", action="store_true", help="Trace tokens and tree to stderr."
    )
    return parser


def trace(message: str) -> None:
    print(message, file=sys.stderr)


def read_program(args: argparse.Namespace) -> str:
    if args.file is not None:
        # Only a space counts as whitespace, so drop the final line ending
        text = args.file.read_text(encoding="utf8")
        return text.removesuffix("\n").removesuffix("\r")
    if args.source is not None:
        return args.source
    return SAMPLE_PROGRAM


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    ic.configureOutput(prefix="minilang| ", outputFunction=trace)
    if args.debug:
        ic.enable()
    else:
        ic.disable()

    program = read_program(args)
    try:
        tokens = ic(Scanner(program).scan())
        tree = ic(Parser(program).parse(tokens))
        lines = Runner(tree).lines()
    except CompilerException as exc:
        print(exc, file=sys.stderr)
        return 1

    if args.tokens:
        for token in tokens:
            print(f"{token.type.name} {token.value}")
    if args.print:
        print(tree)
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
