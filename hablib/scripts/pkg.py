"""
Scripts to install packages and expose their binaries.
"""

import sys

from .utils import DocOptArgs, entrypoint, Package
from ..plumbing.hab import HabCmd
from ..plumbing.habpkg import HabPkg
from ..tasks import hab as tasks


@entrypoint
def install(opts: DocOptArgs, hab: HabCmd, pkg: Package):
    """
    Install a package from the depot, or from a local hartifact.

    PKG is either an identifier (origin/name[/version[/release]]) or a path to a .hart file.

    Usage: {script} PKG [--channel=CHANNEL]
    """
    result = tasks.ensure_installed(hab, pkg, opts["--channel"] or "")
    if result:
        print(result.value, end="")
    else:
        print("Already installed: {}".format(pkg))


@entrypoint
def installed(hab: HabCmd, pkg: HabPkg):
    """
    Check if a package is installed, exiting non-zero if not.

    Usage: {script} PKG
    """
    if hab.is_installed(pkg):
        print("installed")
    else:
        print("not installed")
        sys.exit(1)


@entrypoint
def binlink(opts: DocOptArgs, hab: HabCmd, pkg: HabPkg):
    """
    Link an executable from an installed package onto the system path.

    Any existing link of the same name is replaced.

    Usage: {script} PKG EXE
    """
    result = tasks.binlink(hab, pkg, opts["EXE"])
    print(result.value, end="")
