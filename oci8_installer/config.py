from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

SUPPORTED_VERSIONS = ("8.2", "8.3", "8.4", "8.5")

INSTANT_CLIENT_RELEASE = "23.26.0.0.0"
INSTANT_CLIENT_BASE_URL = "https://download.oracle.com/otn_software/linux/instantclient/2326000"
OCI8_VERSION = "3.4.0"

DEFAULT_ORACLE_BASE = "/opt/oracle"
DEFAULT_LD_CONF = "/etc/ld.so.conf.d/oracle-instantclient.conf"
LIBAIO_DIR = "/usr/lib/x86_64-linux-gnu"

EXTENSION_NAME = "oci8"


@dataclass(frozen=True)
class PhpRuntime:
    version: str
    binary: str
    phpize: str
    php_config: str
    fpm_unit: str
    dev_package: str
    mods_available: str


def _runtime(version: str) -> PhpRuntime:
    return PhpRuntime(
        version=version,
        binary=f"php{version}",
        phpize=f"phpize{version}",
        php_config=f"php-config{version}",
        fpm_unit=f"php{version}-fpm.service",
        dev_package=f"php{version}-dev",
        mods_available=f"/etc/php/{version}/mods-available",
    )


RUNTIMES: Dict[str, PhpRuntime] = {v: _runtime(v) for v in SUPPORTED_VERSIONS}


@dataclass(frozen=True)
class InstallerConfig:
    """Installer settings.

    ``raw`` holds optional overrides (usually from YAML); every property falls
    back to the built-in target matrix when a key is absent.
    """

    raw: Dict[str, Any]

    def _section(self, name: str) -> Dict[str, Any]:
        return self.raw.get(name) or {}

    @property
    def versions(self) -> List[str]:
        raw_versions = self.raw.get("versions") or SUPPORTED_VERSIONS
        if isinstance(raw_versions, (str, int, float)):
            raw_versions = [raw_versions]
        if not isinstance(raw_versions, (list, tuple)):
            raise ValueError(f"Unsupported PHP versions in config: {raw_versions!r}")
        versions = [str(v) for v in raw_versions]
        unknown = [v for v in versions if v not in RUNTIMES]
        if unknown:
            raise ValueError(f"Unsupported PHP versions in config: {', '.join(unknown)}")
        return versions

    @property
    def runtimes(self) -> List[PhpRuntime]:
        return [RUNTIMES[v] for v in self.versions]

    def runtime(self, version: str) -> PhpRuntime:
        return RUNTIMES[version]

    @property
    def oracle_base(self) -> str:
        return str(self._section("oracle").get("base_dir") or DEFAULT_ORACLE_BASE)

    @property
    def instant_client_dir(self) -> str:
        default = str(Path(self.oracle_base) / "instantclient_23_26")
        return str(self._section("oracle").get("instant_client_dir") or default)

    @property
    def basic_zip_url(self) -> str:
        default = f"{INSTANT_CLIENT_BASE_URL}/instantclient-basic-linux.x64-{INSTANT_CLIENT_RELEASE}.zip"
        return str(self._section("oracle").get("basic_url") or default)

    @property
    def sdk_zip_url(self) -> str:
        default = f"{INSTANT_CLIENT_BASE_URL}/instantclient-sdk-linux.x64-{INSTANT_CLIENT_RELEASE}.zip"
        return str(self._section("oracle").get("sdk_url") or default)

    @property
    def ld_conf_path(self) -> str:
        return str(self._section("oracle").get("ld_conf") or DEFAULT_LD_CONF)

    @property
    def client_library(self) -> str:
        return str(Path(self.instant_client_dir) / "libclntsh.so")

    @property
    def sdk_include_dir(self) -> str:
        return str(Path(self.instant_client_dir) / "sdk" / "include")

    @property
    def client_header(self) -> str:
        return str(Path(self.sdk_include_dir) / "oci.h")

    @property
    def libaio_link(self) -> str:
        return f"{LIBAIO_DIR}/libaio.so.1"

    @property
    def libaio_target(self) -> str:
        return f"{LIBAIO_DIR}/libaio.so.1t64"

    @property
    def oci8_version(self) -> str:
        return str(self._section("oci8").get("version") or OCI8_VERSION)

    @property
    def oci8_url(self) -> str:
        default = f"https://pecl.php.net/get/oci8-{self.oci8_version}.tgz"
        return str(self._section("oci8").get("url") or default)

    @property
    def oci8_tarball(self) -> str:
        return str(Path(self.oracle_base) / f"oci8-{self.oci8_version}.tgz")

    @property
    def oci8_source_dir(self) -> str:
        return str(Path(self.oracle_base) / f"oci8-{self.oci8_version}")

    def dependency_packages(self, runtime: PhpRuntime) -> List[str]:
        extra = [str(p).strip() for p in (self._section("packages").get("extra") or []) if str(p).strip()]
        return ["libaio1t64", "unzip", runtime.dev_package, "wget", "build-essential", *extra]


def load_installer_config(path: Optional[str]) -> InstallerConfig:
    if path is None:
        return InstallerConfig(raw={})

    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(path)

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ValueError("installer config must be YAML")

    try:
        import yaml  # type: ignore
    except Exception as e:
        raise RuntimeError("PyYAML is required to read the installer config") from e

    raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ValueError("installer config must contain a mapping/object")

    cfg = InstallerConfig(raw=raw)
    logger.info("Loaded installer config %s (versions=%s)", p, ",".join(cfg.versions))
    return cfg
