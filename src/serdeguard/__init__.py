"""
serdeguard: serialization round-trip contracts for generated test cases.

Checks that live objects survive a JSON round trip, using an independent
XML encoding to tell broken serialization apart from broken equality.
"""

__version__ = "0.1.0"
