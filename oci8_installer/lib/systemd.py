from __future__ import annotations

import logging

from .host import Host

logger = logging.getLogger(__name__)


def unit_exists(host: Host, unit: str) -> bool:
    if host.which("systemctl") is None:
        return False
    r = host.run(["systemctl", "list-units", "--full", "--all", "--plain", "--no-legend"], check=False)
    for line in r.stdout.splitlines():
        fields = line.split()
        if fields and fields[0] == unit:
            return True
    return False


def restart_unit(host: Host, unit: str) -> bool:
    r = host.run(["systemctl", "restart", unit], check=False)
    if r.returncode != 0:
        logger.warning("Restart of %s failed (%s): %s", unit, r.returncode, r.stderr.strip())
        return False
    return True
