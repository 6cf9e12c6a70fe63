"""
Frontify Collection Export API

Flattens Frontify asset metadata, including dynamic custom metadata
fields, into CSV exports for whole collections or ad-hoc asset batches.
"""

__version__ = "1.0.0"
