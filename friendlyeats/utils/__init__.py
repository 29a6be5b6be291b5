"""
Utility modules for the FriendlyEats populator.

Cross-cutting concerns:
- Storage: JSON snapshots of fabricated datasets
- Summary: per-restaurant statistics and consistency checks
"""
