# Integration Tests
"""
Integration tests verify the HTTP API end to end.

Each test runs against both record store backends (SQLite and in-memory).
Principle: Test behavior, not implementation.
"""
