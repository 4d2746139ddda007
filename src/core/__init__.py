"""
Core exact-arithmetic modules.

This package contains the numeric building blocks (math), the exact value
types (domain) and the canonical text contracts (contracts). Nothing here
performs I/O apart from loading the JSON Schema files.
"""
