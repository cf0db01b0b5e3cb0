from __future__ import annotations

import logging

from .host import Host

logger = logging.getLogger(__name__)


def download(host: Host, url: str, dest: str) -> None:
    """Fetch ``url`` to ``dest`` via wget.

    The file only appears under its final name once the transfer succeeded, so
    an interrupted download is never mistaken for a cached archive.
    """

    partial = dest + ".part"
    host.run(["wget", "-q", "-O", partial, url])
    host.move(partial, dest)
    logger.info("Downloaded %s", dest)


def download_if_missing(host: Host, url: str, dest: str) -> bool:
    if host.exists(dest):
        logger.info("%s already downloaded, skipping", dest)
        return False
    download(host, url, dest)
    return True


def extract_zip(host: Host, archive: str, dest_dir: str) -> None:
    host.run(["unzip", "-q", "-o", archive, "-d", dest_dir])


def extract_tarball(host: Host, archive: str, dest_dir: str) -> None:
    host.run(["tar", "-xzf", archive, "-C", dest_dir])
