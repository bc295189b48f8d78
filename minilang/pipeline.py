from typing import List

from minilang.parser.parser import Parser
from minilang.runner.runner import Runner
from minilang.scanner.scanner import Scanner


def execute(program: str) -> List[str]:
    """Scan, parse and run `program`, returning the report lines.

    A ScannerException or ParserException aborts the whole run, so either all
    lines are returned or none are.
    """
    scanner = Scanner(program)
    tokens = scanner.scan()

    parser = Parser(program)
    tree = parser.parse(tokens)

    runner = Runner(tree)
    return runner.lines()
