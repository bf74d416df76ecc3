"""
Package installation and service deployment.
"""

import logging
from typing import Optional, Sequence, Union

from ..plumbing import hab as plumb
from ..plumbing.common import Collect, Result, State
from ..plumbing.hab import HabCmd
from ..plumbing.habpkg import HabPkg, Hartifact, ident, is_fully_qualified, VersionedPackage


LOG = logging.getLogger(__name__)

Package = Union[HabPkg, Hartifact]


def ensure_installed(hab: HabCmd, pkg: Package, channel: str = "") -> Result[Optional[str]]:
    """
    Install a package, unless this exact release is already present.

    A package without a version and release always goes to `hab pkg install`, which decides for
    itself whether a newer release is available.
    """
    if is_fully_qualified(pkg) and hab.is_installed(pkg):
        LOG.debug("Already installed: %s", ident(pkg))
        return Result(State.unchanged, None)
    output = hab.install_package(pkg, channel)
    return Result(State.created, output)


def binlink(hab: HabCmd, pkg: VersionedPackage, exe: str) -> Result[str]:
    """
    Expose an executable from a package on the system path.
    """
    return Result(State.success, hab.binlink_package(pkg, exe))


def load(hab: HabCmd, pkg: VersionedPackage, binds: Optional[Sequence[str]] = None,
         binding_mode: str = "") -> Result[str]:
    """
    Load (or reload) a package as a service.
    """
    output = hab.load_service(pkg, plumb.binds(binds), plumb.binding_mode(binding_mode))
    return Result(State.success, output)


def unload(hab: HabCmd, pkg: VersionedPackage) -> Result[str]:
    return Result(State.success, hab.unload_service(pkg))


def start(hab: HabCmd, pkg: VersionedPackage) -> Result[str]:
    return Result(State.success, hab.start_service(pkg))


def stop(hab: HabCmd, pkg: VersionedPackage) -> Result[str]:
    return Result(State.success, hab.stop_service(pkg))


@Result.collect
def deploy_service(hab: HabCmd, pkg: Package, channel: str = "",
                   binds: Optional[Sequence[str]] = None, binding_mode: str = "") -> Collect[str]:
    """
    Install a package if needed, then load it as a service.

    Passing a freshly built `Hartifact` replaces the running service with the new build.
    """
    yield ensure_installed(hab, pkg, channel)
    res_load = yield from load(hab, pkg, binds, binding_mode)
    return res_load.value


@Result.collect
def restart_service(hab: HabCmd, pkg: VersionedPackage) -> Collect[None]:
    """
    Stop and start a loaded service.
    """
    yield stop(hab, pkg)
    yield start(hab, pkg)
