"""Lists, dictionaries, search trees, searching, sorting, dynamic programming and a URL shortener."""

__version__ = "0.1.0"