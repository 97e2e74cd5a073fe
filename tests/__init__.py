"""Test suite for type_more.

Test structure:
- unit/: Pure tests - validation, value objects, serialization, settings
- integration/: Real bcrypt/argon2 hashing through the adapters
"""
