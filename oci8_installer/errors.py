from __future__ import annotations

from typing import Sequence


class InstallerError(RuntimeError):
    """Base class for failures that stop the installer."""


class CommandError(InstallerError):
    def __init__(self, argv: Sequence[str], returncode: int, stderr: str = "") -> None:
        self.argv = list(argv)
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(f"Command failed ({returncode}): {' '.join(self.argv)}\n{stderr}".rstrip())


class VerificationError(InstallerError):
    pass


class OperatorInputError(InstallerError):
    pass
