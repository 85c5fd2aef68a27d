"""
Quartz reader example

Reads a source file and prints every top-level expression back as text,
then the first error, if any, with its location.

Run: pip install -e . && python examples/basic.py examples/programs/hello.qz
"""

import sys
from pathlib import Path

from quartz import ParseError, iter_expressions, tokenize

path = Path(sys.argv[1] if len(sys.argv) > 1 else Path(__file__).parent / "programs" / "hello.qz")
source = path.read_text()

tokens = tokenize(source)
print(f"=== {path.name}: {len(tokens)} tokens ===\n")

try:
    for i, exp in enumerate(iter_expressions(tokens), 1):
        print(f"{i}. {exp}")
        print(f"   {exp!r}\n")
except ParseError as e:
    print(f"\nerror at line {e.line}, column {e.column}: {e.message}")
    sys.exit(1)
