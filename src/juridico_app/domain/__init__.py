"""Domain rules: pure functions and exceptions, no database access."""
