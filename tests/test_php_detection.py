from oci8_installer.config import RUNTIMES
from oci8_installer.lib import php


def test_scan_classifies_absent_missing_and_loaded(host, cfg):
    host.add_php("8.2")
    host.add_php("8.4", "oci8", "pdo_mysql")

    scan = php.scan_runtimes(host, cfg.runtimes, "oci8")

    assert scan.detected == ["8.2", "8.4"]
    assert scan.installable == ["8.2"]
    assert scan.satisfied == ["8.4"]


def test_absent_runtime_is_never_queried(host, cfg):
    host.add_php("8.5")

    php.scan_runtimes(host, cfg.runtimes, "oci8")

    assert host.commands == [["php8.5", "-m"]]


def test_every_supported_version_is_probed(host, cfg):
    for version in ("8.2", "8.3", "8.4", "8.5"):
        host.add_php(version)

    scan = php.scan_runtimes(host, cfg.runtimes, "oci8")

    assert scan.installable == ["8.2", "8.3", "8.4", "8.5"]
    assert scan.satisfied == []


def test_module_name_match_is_exact_and_case_insensitive(host):
    runtime = RUNTIMES["8.3"]

    host.add_php("8.3", "OCI8")
    assert php.extension_loaded(host, runtime, "oci8")

    host.add_php("8.3", "oci8_helper")
    assert not php.extension_loaded(host, runtime, "oci8")


def test_failing_module_listing_counts_as_not_loaded(host, cfg):
    host.add_php("8.3", "oci8")
    host.failures["php8.3 -m"] = 255

    scan = php.scan_runtimes(host, cfg.runtimes, "oci8")

    assert scan.installable == ["8.3"]


def test_section_headers_are_not_modules(host):
    host.add_php("8.2")
    modules = php.loaded_modules(host, RUNTIMES["8.2"])
    assert modules == ["core", "date"]
