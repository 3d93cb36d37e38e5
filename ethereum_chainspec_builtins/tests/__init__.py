"""
Tests for the ethereum_chainspec_builtins package.
"""
