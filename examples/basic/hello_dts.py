"""Classify one line of device tree source — zero config, zero deps."""

from dtslex import tokenize_line

line = '#include "board.dtsi"'
for token in tokenize_line(line).tokens:
    print(f"{token.start_column:>3} {token.text(line)!r:<16} {token.scope_name()}")
