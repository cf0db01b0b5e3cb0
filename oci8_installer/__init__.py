"""OCI8 installer for PHP on Ubuntu 24.04.

Core design goals:
- Idempotent steps, each gated by a check of the host itself
- One linear pass; the first failure stops the run
- All host access through lib.host.Host, all operator I/O through a Prompter
- Centralized logging
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
