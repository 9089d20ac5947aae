"""Stub decisions for literal expressions."""

from stubs.significance import has_significant_value, should_create_stub_for_literal

__all__ = ["has_significant_value", "should_create_stub_for_literal"]
