"""
Command-line tools for chain specification builtin declarations.
"""
