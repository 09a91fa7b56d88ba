"""
Core application modules.
- security: password hashing and verification
"""
