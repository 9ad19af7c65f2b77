"""Domain-level rules for partition pruning.

This package decides *which* year/month/day partitions a date range maps
to, independent from *where* the result is used (repositories, services).
"""
