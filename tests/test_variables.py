"""Tests for the variables tour."""

from primer.variables import THREE_HOURS_IN_SECONDS, demonstrate


def test_constant_value():
    assert THREE_HOURS_IN_SECONDS == 10_800


def test_demonstrate_lines():
    assert demonstrate() == [
        "The value of x is 5.",
        "x cannot be reassigned: instance is frozen",
        "The value of y is 10.",
        "The value of y is now 12.",
        "Three hours is equal to 10800 seconds.",
        "The value of z within this scope is 20.",
        "The value of z within this scope is 10.",
        "There are 5 spaces in the string.",
    ]


def test_demonstrate_is_repeatable():
    assert demonstrate() == demonstrate()
