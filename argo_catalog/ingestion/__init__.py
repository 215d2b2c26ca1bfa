"""
ARGO Data Ingestion Module

This module provides functionality to retrieve and decode ARGO NetCDF profile files.
"""

from .argo_reader import ArgoNetCDFReader, ProfileRecord, float_id_from_path
from .sources import Source, fetch_source, discover_sources, sources_from_paths

__all__ = [
    'ArgoNetCDFReader',
    'ProfileRecord',
    'float_id_from_path',
    'Source',
    'fetch_source',
    'discover_sources',
    'sources_from_paths'
]
