"""
knitsphere — knitted sphere pattern generator.

Translates a sphere diameter and a knitting gauge into row-by-row
instructions for a hemisphere worked in the round from the pole to the
equator.
"""

__version__ = "0.1.0"
