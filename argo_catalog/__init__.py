"""
ARGO Float Catalog

Decodes ARGO NetCDF profile files and synthesizes a fallback float population,
merging both into one in-memory float catalog with summary statistics.
"""

__version__ = "1.0.0"
__author__ = "ARGO Data Platform Team"
__description__ = "In-memory ARGO float catalog built from NetCDF profiles or synthetic floats"
