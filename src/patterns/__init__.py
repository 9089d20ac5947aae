"""Descriptor pattern matching over JavaScript object literals."""

from patterns.descriptors import DescriptorMatch, match_descriptor

__all__ = ["DescriptorMatch", "match_descriptor"]
