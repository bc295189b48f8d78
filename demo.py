from minilang import CompilerException, Parser, Runner, Scanner
from tests.test_util import open_file

# Load a program string,
program = open_file("data/valid/mixed.mini")
# or define a program manually
program = "alpha 042 Beta 7 gamma"

# Perform scanning on the input program
scanner = Scanner(program)
tokens = scanner.scan()

# Perform parsing on the scanned tokens
parser = Parser(program)
tree = parser.parse(tokens)

# Print out the parsed tree
print("=" * 25)
print("Program:")
print("=" * 25)
print(tree)

# Run the tree, printing every term
print("=" * 25)
print("Program execution output:")
print("=" * 25)
Runner(tree).run()

# Operators are scanned, but the grammar has no rule for them
print("=" * 25)
print("Sample program:")
print("=" * 25)
sample = "2 + 3 * 4"
try:
    Runner(Parser(sample).parse(Scanner(sample).scan())).run()
except CompilerException as exc:
    print(exc)
