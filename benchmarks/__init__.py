"""
Benchmark suite for mason parsing performance.

Compares mason against JSON libraries on documents that are valid in both
formats:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Superset-only documents are measured for mason alone.
"""
