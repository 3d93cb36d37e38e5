"""
Tests for the ethereum_chainspec_base_types package.
"""
