"""Unit tests for closure-objects.

Fast and isolated. Tests that touch the filesystem use a temporary
directory per test.
"""
