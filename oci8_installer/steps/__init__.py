from .step_00_check_privileges import CheckPrivilegesStep
from .step_05_probe_instant_client import ProbeInstantClientStep
from .step_10_detect_php import DetectPhpStep
from .step_15_check_runtimes import CheckRuntimesStep
from .step_20_select_version import SelectVersionStep
from .step_25_confirm import ConfirmInstallStep
from .step_30_install_dependencies import InstallDependenciesStep
from .step_35_link_libaio import LinkLibaioStep
from .step_40_provision_instant_client import ProvisionInstantClientStep
from .step_50_fetch_oci8_source import FetchOci8SourceStep
from .step_60_build_oci8 import BuildOci8Step
from .step_70_restart_fpm import RestartFpmStep
from .step_80_cleanup import CleanupStep
from .step_85_verify import VerifyStep
from .step_90_summary import SummaryStep

__all__ = [
    "CheckPrivilegesStep",
    "ProbeInstantClientStep",
    "DetectPhpStep",
    "CheckRuntimesStep",
    "SelectVersionStep",
    "ConfirmInstallStep",
    "InstallDependenciesStep",
    "LinkLibaioStep",
    "ProvisionInstantClientStep",
    "FetchOci8SourceStep",
    "BuildOci8Step",
    "RestartFpmStep",
    "CleanupStep",
    "VerifyStep",
    "SummaryStep",
]
