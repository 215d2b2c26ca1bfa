"""
Source Retrieval

Fetches raw NetCDF bytes for the ingestion pipeline from in-memory buffers,
local files or HTTP(S) URLs. Every retrieval failure surfaces as
SourceUnavailableError so the caller can skip the source and carry on.
"""

import os
import asyncio
import logging
from typing import List, NamedTuple, Union

import aiofiles
import requests

from .argo_reader import float_id_from_path
from ..exceptions import SourceUnavailableError

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

Locator = Union[bytes, bytearray, memoryview, str, os.PathLike]


class Source(NamedTuple):
    """A float identifier and where its profile file comes from"""
    float_id: str
    locator: Locator


def describe_locator(locator: Locator) -> str:
    if isinstance(locator, (bytes, bytearray, memoryview)):
        return f"<buffer {len(locator)} bytes>"
    return str(locator)


def is_url(locator: Locator) -> bool:
    return isinstance(locator, str) and locator.startswith(('http://', 'https://'))


async def fetch_source(locator: Locator, timeout: float = 30.0) -> bytes:
    """
    Retrieve the raw bytes behind a locator

    Raises:
        SourceUnavailableError: the file is missing or the transfer failed
    """
    if isinstance(locator, (bytes, bytearray, memoryview)):
        return bytes(locator)

    if is_url(locator):
        return await asyncio.to_thread(_fetch_http, locator, timeout)

    try:
        file_path = os.fspath(locator)
    except TypeError:
        raise SourceUnavailableError(locator, f"unsupported locator type {type(locator).__name__}")
    return await _read_local(file_path)


async def _read_local(file_path: str) -> bytes:
    try:
        async with aiofiles.open(file_path, 'rb') as f:
            return await f.read()
    except FileNotFoundError:
        raise SourceUnavailableError(file_path, "file not found")
    except (OSError, ValueError) as e:
        raise SourceUnavailableError(file_path, str(e))


def _fetch_http(url: str, timeout: float) -> bytes:
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        return response.content
    except requests.HTTPError as e:
        raise SourceUnavailableError(url, f"HTTP error! status: {e.response.status_code}")
    except requests.RequestException as e:
        raise SourceUnavailableError(url, str(e))


def sources_from_paths(paths: List[Union[str, os.PathLike]]) -> List[Source]:
    """Pair each path with the float id encoded in its file name"""
    return [Source(float_id_from_path(os.fspath(path)), path) for path in paths]


def discover_sources(directory_path: str) -> List[Source]:
    """All ``.nc`` files in a directory, in name order"""
    if not os.path.isdir(directory_path):
        raise ValueError(f"Directory does not exist: {directory_path}")

    netcdf_files = sorted(
        os.path.join(directory_path, f)
        for f in os.listdir(directory_path)
        if f.endswith('.nc')
    )
    if not netcdf_files:
        logger.warning(f"No NetCDF files found in {directory_path}")
    return sources_from_paths(netcdf_files)
