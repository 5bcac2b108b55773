# Employee Records API Test Suite
"""
Test suite for the Employee Records API.

Key principle: test through the API, not internals. Store-level tests
exist so every backend is held to the same contract.
"""
