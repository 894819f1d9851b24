"""outcomes.py

Parse without exiting and branch on the outcome.
"""
from chad.parser import (
    ArgumentDefinition,
    Failure,
    HelpRequested,
    Schema,
    Success,
    parse_string,
)

schema = Schema.register(
    [
        ArgumentDefinition("count", "How many", 5),
        ArgumentDefinition("name", "Who to greet", required=True),
    ],
    ["greeting"],
)

for line in [
    "hello --name 'Ada Lovelace'",
    "hello --name Ada --count 3",
    "hello --count three --name Ada",
    "hello",
    "--help",
]:
    match parse_string(line, schema):
        case Success(result):
            print(line, "->", result.as_dict(), result.explicit_flags())
        case HelpRequested():
            print(line, "-> help requested")
        case Failure() as failure:
            print(line, "->", failure.kind, failure.context)
