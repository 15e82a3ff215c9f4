"""Raw media download to a local path.

Asset library entries expose preview and image URLs on TikTok's CDN.
These hosts take no access token, so downloads go out as plain GET
requests without the API authentication header.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import httpx

from ..exceptions import DownloadError, TimeoutError, ValidationError

logger = logging.getLogger(__name__)


async def download_to_path(
    http_client: httpx.AsyncClient,
    url: str,
    output_dir: Union[str, Path] = ".",
    file_name: Optional[str] = None,
    default_name: str = "download",
) -> Path:
    """Stream the body at ``url`` into ``output_dir/file_name``.

    The output directory is created when missing and an existing file
    is overwritten. The body is written to a ``.part`` file first and
    moved into place once complete, so a failed download leaves no
    output behind.

    :param http_client: httpx client used for the GET request
    :type http_client: httpx.AsyncClient
    :param url: Absolute URL to download
    :type url: str
    :param output_dir: Directory to write into
    :type output_dir: Union[str, Path]
    :param file_name: Target file name; ``default_name`` when empty
    :type file_name: Optional[str]
    :param default_name: Fallback file name
    :type default_name: str
    :return: Path of the written file
    :rtype: Path
    :raises ValidationError: If ``url`` is empty
    :raises DownloadError: If the host does not answer 200, the request
        fails or the file cannot be written
    :raises TimeoutError: If the download exceeds the client timeout
    """
    if not url:
        raise ValidationError("URL cannot be empty", field="url")

    target_dir = Path(output_dir or ".")
    file_path = target_dir / (file_name or default_name)
    part_path = file_path.with_name(file_path.name + ".part")
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DownloadError(f"failed to create {target_dir}: {e}", url=url) from e

    try:
        async with http_client.stream("GET", url) as response:
            if response.status_code != 200:
                raise DownloadError(
                    f"failed to download {url}: status code {response.status_code}",
                    url=url,
                    status_code=response.status_code,
                )
            size = 0
            with open(part_path, "wb") as f:
                async for chunk in response.aiter_bytes():
                    f.write(chunk)
                    size += len(chunk)
        part_path.replace(file_path)
    except httpx.TimeoutException as e:
        part_path.unlink(missing_ok=True)
        raise TimeoutError(f"download of {url} timed out", original_error=e) from e
    except httpx.HTTPError as e:
        part_path.unlink(missing_ok=True)
        raise DownloadError(f"failed to download {url}: {e}", url=url) from e
    except OSError as e:
        part_path.unlink(missing_ok=True)
        raise DownloadError(f"failed to write {file_path}: {e}", url=url) from e

    logger.info("Downloaded %d bytes to: %s", size, file_path)
    return file_path
