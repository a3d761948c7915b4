"""
phrasal - string translation with plural/gender variants and safe interpolation.
"""

__version__ = "0.1.0"
