"""Classic algorithms and programming exercises in plain Python."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "automaton",
    "circular_list",
    "conversions",
    "game",
    "numbers",
    "patterns",
    "search",
    "sorting",
    "strings",
    "trees",
]