from __future__ import annotations

import logging
from typing import Sequence

from .host import Host

logger = logging.getLogger(__name__)

_APT_ENV = {"DEBIAN_FRONTEND": "noninteractive"}


def apt_update(host: Host) -> None:
    host.run(["apt-get", "update"], env=_APT_ENV)


def apt_install(host: Host, packages: Sequence[str]) -> None:
    if not packages:
        return
    host.run(["apt-get", "install", "-y", *packages], env=_APT_ENV)
    logger.info("Installed packages: %s", " ".join(packages))
