"""
The `entities` package defines the data shapes the database layer works with.

Contents:
    - profile: ``DatabaseProfile`` (frozen pydantic model) and ``EngineKind``
    - cell: the closed ``CellKind`` vocabulary for row values, plus the
      normalization and conversion table used by typed reads
"""
