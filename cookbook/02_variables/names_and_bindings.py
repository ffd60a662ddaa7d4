"""Names and Bindings

A walk through the basics of names in Python: binding a value, values that
cannot change, rebinding, module constants, scopes, and rebinding a name to a
value of a different type. The library's demonstrate() does the same tour in
one call; this script spells each step out.

Demonstrates: THREE_HOURS_IN_SECONDS, demonstrate(), typing.Final,
              frozen pydantic models
"""

from typing import Final

from pydantic import BaseModel, ValidationError

from primer import THREE_HOURS_IN_SECONDS, demonstrate


# ---------------------------------------------------------------------------
# Step by step
# ---------------------------------------------------------------------------

class Point(BaseModel):
    # frozen=True turns attribute assignment into an error. Python has no
    # "immutable variable", but it does have immutable values.
    model_config = {"frozen": True}

    x: int
    y: int


def step_by_step():
    print("=" * 60)
    print("Step by step")
    print("=" * 60)

    # Binding: `=` attaches a name to a value. The annotation is optional and
    # only read by tools such as type checkers.
    x: int = 5
    print(f"The value of x is {x}.")

    # Immutable values: ints, strings and tuples can never change in place.
    # A frozen model behaves the same way for its fields.
    p = Point(x=1, y=2)
    try:
        p.x = 6
    except ValidationError as exc:
        print(f"Point is frozen: {exc.errors()[0]['type']}")

    # Rebinding: the name now refers to a different value. The old value is
    # untouched (and freed once nothing refers to it).
    y = 10
    print(f"The value of y is {y}.")
    y = 12
    print(f"The value of y is now {y}.")

    # Constants: ALL_CAPS by convention. `Final` lets a type checker flag any
    # later assignment; the interpreter itself does not stop it.
    MINUTES_PER_HOUR: Final = 60
    print(f"Three hours is {3 * MINUTES_PER_HOUR} minutes, "
          f"or {THREE_HOURS_IN_SECONDS} seconds.")

    # Scopes: a function body gets its own names. Assigning `z` inside
    # `inner` creates a new local `z`; the outer one keeps its value.
    z = 10

    def inner():
        z = 20
        print(f"The value of z within this scope is {z}.")

    inner()
    print(f"The value of z within this scope is {z}.")

    # Changing type: names are not typed, values are. Building the new value
    # from the old one under the same name is common when converting input.
    spaces = "     "
    spaces = len(spaces)
    print(f"There are {spaces} spaces in the string.")


# ---------------------------------------------------------------------------
# The library version
# ---------------------------------------------------------------------------

def library_tour():
    print("\n" + "=" * 60)
    print("demonstrate()")
    print("=" * 60)

    for line in demonstrate():
        print(line)


if __name__ == "__main__":
    step_by_step()
    library_tour()
