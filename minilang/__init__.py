from minilang.error.error import CompilerException
from minilang.error.parser_error import ParseError, ParserException
from minilang.error.scanner_error import LexError, ScannerException
from minilang.parser.parser import Parser
from minilang.pipeline import execute
from minilang.runner.runner import Runner
from minilang.scanner.scanner import Scanner
from minilang.token import Token
from minilang.type import KEYWORDS, Type
