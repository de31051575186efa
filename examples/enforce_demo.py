"""
Demo script showing argument contracts in the three calling conventions.

Run it from the project root; every violation is printed rather than raised.
"""

from datetime import datetime

from arg_contracts import (
    ContractViolationError,
    ArgumentValidator,
    LoggingSink,
    create,
    enforce,
)


SHEET = create({"id": "!number", "options": {"title": "!string", "created": datetime}}, "update_sheet")


def update_sheet(id, options=None):
    ArgumentValidator(SHEET, LoggingSink()).validate_hybrid([id, options])
    return id


@enforce({"name": "!string", "age": "number"}, convention="named")
def register(**kwargs):
    return kwargs["name"]


@enforce({"values": "!array", "scale": "number"})
def rescale(values, scale=1):
    return [value * scale for value in values]


def demo(label, call):
    try:
        print(f"{label}: {call()!r}")
    except ContractViolationError as e:
        print(f"{label}: {type(e).__name__}: {e}")


def main():
    print("=== Hybrid ===")
    demo("valid", lambda: update_sheet(1, {"title": "Budget", "created": datetime.now()}))
    demo("missing title", lambda: update_sheet(1, {"created": datetime.now()}))

    print("\n=== Named ===")
    demo("valid", lambda: register(name="Ada", age=36))
    demo("unexpected key", lambda: register(name="Ada", email="ada@example.com"))

    print("\n=== Positional ===")
    demo("valid", lambda: rescale([1, 2], 3))
    demo("wrong type", lambda: rescale("12"))


if __name__ == "__main__":
    main()
