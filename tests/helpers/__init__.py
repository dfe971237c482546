"""Test helper modules for Outline import testing.

This package provides utilities for unit tests:
- fake_outline: Recording in-memory stand-in for the Outline API
- make_tree: Build a Markdown directory tree under tmp_path
"""

from .fake_outline import FakeOutlineAPI, CreateCall, ImportCall, make_tree

__all__ = [
    'FakeOutlineAPI',
    'CreateCall',
    'ImportCall',
    'make_tree',
]
