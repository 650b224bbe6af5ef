"""
seedstats - sample, classify and count generated seeds.
"""

from seedstats.__version__ import __version__

__all__ = ["__version__"]
