"""
Tests for the command-line tools.
"""
