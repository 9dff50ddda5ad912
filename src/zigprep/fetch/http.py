"""HTTP/file archive download into a temporary file."""

from __future__ import annotations

import os
import shutil
import tempfile
from http.client import HTTPException
from pathlib import Path
from urllib.error import HTTPError, URLError
from urllib.request import urlopen

from zigprep.errors import FetchError, FilesystemError


def download_archive(url: str, *, dest_dir: str | Path, prefix: str = "download-") -> Path:
    """Stream ``url`` into a new temporary ``.zip`` file inside ``dest_dir``.

    The file is only created once the response is known to be successful, so
    a failed request leaves nothing behind. The caller owns the returned path.
    """
    try:
        response = urlopen(url)  # noqa: S310 - archive host is pinned by configuration
    except HTTPError as exc:
        raise FetchError(
            "Archive download failed.",
            hint="Check that the pinned release tag exists on the archive host.",
            context={"operation": "download", "url": url, "status": str(exc.code)},
        ) from exc
    except (URLError, OSError) as exc:
        raise FetchError(
            "Archive host is unreachable.",
            hint="Check network access or point the archive host at a reachable mirror.",
            context={"operation": "download", "url": url, "reason": str(exc)},
        ) from exc

    with response:
        status = getattr(response, "status", None)
        if status is not None and not 200 <= status < 300:
            raise FetchError(
                "Archive download failed.",
                context={"operation": "download", "url": url, "status": str(status)},
            )
        directory = Path(dest_dir)
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, name = tempfile.mkstemp(prefix=prefix, suffix=".zip", dir=directory)
        except OSError as exc:
            raise FilesystemError(
                "Could not create the temporary archive file.",
                context={"operation": "download", "path": str(directory), "reason": str(exc)},
            ) from exc
        archive_path = Path(name)
        try:
            with os.fdopen(fd, "wb") as out:
                shutil.copyfileobj(response, out)
        except (OSError, HTTPException) as exc:
            archive_path.unlink(missing_ok=True)
            raise FetchError(
                "Archive download was interrupted.",
                context={"operation": "download", "url": url, "reason": str(exc)},
            ) from exc
        except BaseException:
            archive_path.unlink(missing_ok=True)
            raise
    return archive_path
