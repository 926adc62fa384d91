"""Solutions to classic array, string, hashing, search, stack, interval, graph, list and tree exercises."""

__version__ = "0.1.0"