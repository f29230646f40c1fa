"""Solutions to classic array, linked-list, string, search, sort and data-structure exercises."""

__version__ = "0.1.0"
__all__ = ["arrays", "linked", "strings", "searching", "sorting", "structures"]