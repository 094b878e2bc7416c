"""Test data constants for account and password reset tests.

Shared credentials so fixtures and test modules agree on what was
registered without importing conftest.
"""

# Password registered for the `test_account` fixture
TEST_PASSWORD = "correct-horse"

# 40 two-byte characters: under 72 characters but 80 UTF-8 bytes
LONG_MULTIBYTE_PASSWORD = "é" * 40

# Registered with a mixed-case domain; stored with the domain lowercased
MIXED_CASE_EMAIL = "bob@Example.COM"
NORMALIZED_EMAIL = "bob@example.com"
