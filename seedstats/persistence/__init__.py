"""
Persistence package.
"""

from .seed_storage import FileSeedStorage, MemorySeedStorage, SeedStorage

__all__ = [
    "FileSeedStorage",
    "MemorySeedStorage",
    "SeedStorage",
]
