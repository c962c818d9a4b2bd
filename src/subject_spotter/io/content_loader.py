"""Content loading from URLs and local files for Subject Spotter."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import ClassVar
from urllib.parse import urlparse

import requests

from .exceptions import ContentLoadError


class ContentLoader:
    """Loads document text and subject listings from a URL or a local path.

    Example usage:
        text = ContentLoader.get_content_from_path('https://example.com/transcript.txt')
        listing = ContentLoader.get_content_from_path('/path/to/subjects.json')
    """

    DEFAULT_ENCODING: ClassVar[str] = 'utf-8'
    DEFAULT_TIMEOUT: ClassVar[float] = 30.0
    URL_SCHEMES: ClassVar[tuple[str, ...]] = ('http', 'https')

    @classmethod
    def is_url(cls, path: str) -> bool:
        """Determine whether the given path is an http(s) URL.

        Args:
            path: The path to check.

        Returns:
            True if the path is a URL, otherwise False.
        """
        parsed = urlparse(str(path))
        return parsed.scheme.lower() in cls.URL_SCHEMES and bool(parsed.netloc)

    @classmethod
    def get_content_from_path(cls, path: str, *, timeout: float | None = None) -> str:
        """Retrieve content from a URL or a local file path.

        Args:
            path: URL or local file path.
            timeout: Request timeout in seconds for URLs.

        Returns:
            The content decoded as UTF-8.

        Raises:
            ContentLoadError: If the URL cannot be fetched or the file does not exist.
        """
        if not path:
            raise ContentLoadError('Invalid path provided: path is empty', file_path=path)

        if cls.is_url(path):
            return cls._fetch_url(path, timeout or cls.DEFAULT_TIMEOUT)

        file_path = Path(path)
        if file_path.is_file():
            try:
                content = file_path.read_text(encoding=cls.DEFAULT_ENCODING)
            except (OSError, UnicodeDecodeError) as e:
                raise ContentLoadError(f'Failed to read {path}: {e}', file_path=str(path)) from e
            logging.info('Loaded %d characters from %s', len(content), path)
            return content

        raise ContentLoadError(f'Invalid path provided: {path}', file_path=str(path))

    @classmethod
    def _fetch_url(cls, url: str, timeout: float) -> str:
        """Fetch a URL and return its body as UTF-8 text.

        Undecodable bytes are replaced rather than rejected.

        Raises:
            ContentLoadError: On connection failure or non-success status.
        """
        try:
            response = requests.get(url, timeout=timeout)
        except requests.RequestException as e:
            raise ContentLoadError(f'Failed to fetch {url}: {e}', file_path=url) from e

        if not response.ok:
            raise ContentLoadError(
                f'Failed to fetch {url}: {response.status_code} {response.reason}',
                file_path=url,
                status_code=response.status_code
            )

        content = response.content.decode(cls.DEFAULT_ENCODING, errors='replace')
        logging.info('Fetched %d characters from %s', len(content), url)
        return content
