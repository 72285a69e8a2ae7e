import sys

from rich.markup import escape

from optkit import BoolOption, IntOption, OptionParseError, OptParser, StrOption, UIntOption
from optkit.console import console
from optkit.table import build_options_table
from optkit.utils import setup_logging
from optkit.validators import int_range_validator

setup_logging()

trace = BoolOption("-t", "--trace", description="Trace each executed instruction.")
steps = IntOption(
    "-s",
    "--steps",
    default=-1,
    description="Stop after this many steps; -1 runs forever.",
)
memory = UIntOption(
    "--memory",
    default=1 << 16,
    description="Memory size in bytes.",
)
threads = IntOption(
    "-j",
    "--threads",
    default=1,
    description="Interpreter threads.",
    callback=int_range_validator(1, 16),
)
dump = StrOption("--dump", description="Write a memory dump to this path on exit.")

parser = OptParser(options=[trace, steps, memory, threads, dump], program="vm")

if __name__ == "__main__":
    try:
        parser.parse(sys.argv)
    except OptionParseError as error:
        console.print(f"[error]{escape(str(error))}[/]")
        sys.exit(2)

    if not parser.has_program_name:
        console.print("[error]usage: vm [options] image [-- guest-args...][/]")
        sys.exit(2)

    console.print(build_options_table(parser.registry, title=f"vm {escape(parser.program_name)}"))
    console.print(f"guest argv: {escape(repr(parser.program_trailer))}")
