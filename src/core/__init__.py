"""
Core string utilities, contracts, and invariants.

This module contains independent, stateless string helpers (conversion,
validation, transformation, parsing, cryptography) and the JSON Schema
contracts they rely on.
"""
