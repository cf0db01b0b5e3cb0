from __future__ import annotations

import logging

from ..config import PhpRuntime
from .host import Host

logger = logging.getLogger(__name__)


def build_extension(host: Host, runtime: PhpRuntime, source_dir: str, *, configure_args: list[str]) -> None:
    """phpize, configure, make, make install inside ``source_dir``."""

    # Leftovers from an earlier build; neither command matters if it fails.
    host.run([runtime.phpize, "--clean"], check=False, cwd=source_dir)
    host.run(["make", "clean"], check=False, cwd=source_dir)

    host.run([runtime.phpize], cwd=source_dir)
    host.run(["./configure", *configure_args, f"--with-php-config={runtime.php_config}"], cwd=source_dir)
    host.run(["make"], cwd=source_dir)
    host.run(["make", "install"], cwd=source_dir)
    logger.info("Built and installed extension from %s for PHP %s", source_dir, runtime.version)
