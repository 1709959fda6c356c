"""Classic abstract data types: rationals, real sets, chronologies, max-stacks, dictionaries and phone books."""

__version__ = "0.1.0"

__all__ = [
    "chronology",
    "dictionary",
    "historic_date",
    "max_stack",
    "phonebook",
    "rational",
    "real_set",
]