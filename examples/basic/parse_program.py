"""Parse a G-code program and inspect its commands with zero config."""

from fresa import ArgumentKind, Command, ProgramNumber, parse

PROGRAM = """\
O1000 (bracket, op 10)
N10 G21 G90
N20 T1 M6
N30 G0 X0 Y0 Z5
N40 G1 Z-1.5 F300
N50 G1 X25.4 Y12.7 F1200
N60 M30
"""

for line in parse(PROGRAM, source_file="bracket.nc"):
    match line:
        case ProgramNumber(number=number):
            print(f"program {number}")
        case Command(command_type=kind, command_number=code) if line.args:
            feed = line.arg(ArgumentKind.FEED_RATE)
            print(f"{line.span}: {kind}{code} with {len(line.args)} args, feed={feed}")
        case Command():
            print(f"{line.span}: {line}")
