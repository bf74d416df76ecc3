from hablib.plumbing.hab import HabCmd
from hablib.plumbing.habpkg import HabPkg, Hartifact
from hablib.scripts.utils import DocOptArgs, entrypoint, Package


@entrypoint
def no_args(opts: DocOptArgs):
    """
    Usage: {script}
    """


@entrypoint
def with_pkg(opts: DocOptArgs, pkg: HabPkg):
    """
    Usage: {script} PKG
    """
    return pkg


@entrypoint
def with_hart(opts: DocOptArgs, hart: Hartifact):
    """
    Usage: {script} HART
    """
    return hart


@entrypoint
def with_package(opts: DocOptArgs, pkg: Package):
    """
    Usage: {script} PKG
    """
    return pkg


@entrypoint
def with_hab(hab: HabCmd):
    """
    Usage: {script}
    """
    return hab
