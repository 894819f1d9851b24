"""simple.py

Try it:
    python examples/simple.py notes.txt 3 --file out.md -v
    python examples/simple.py --help
"""
from chad import ArgumentDefinition, Chad
from chad.utils import setup_logging

setup_logging()

chad = Chad()
chad.register_args(
    [
        ArgumentDefinition("file", "Where to write the result", "result.txt"),
        ArgumentDefinition("ratio", "Scale factor", 1.0),
        ArgumentDefinition("v", "Verbose output", False),
    ],
    ["input", "times"],
)

if __name__ == "__main__":
    chad.parse()
    source = chad.string_pos_name("input")
    times = chad.int_pos_name("times")
    print(f"Reading {source} {times} time(s) into {chad.string_flag('file')}")
    print(f"ratio={chad.float_flag('ratio')} (default: {chad.is_flag_default('ratio')})")
    if chad.bool_flag("v"):
        print("verbose output enabled")
