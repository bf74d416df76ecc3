"""
Scripts to manage services loaded into the Habitat supervisor.
"""

from .utils import confirm, DocOptArgs, entrypoint, Package
from ..plumbing.hab import HabCmd
from ..plumbing.habpkg import HabPkg, short_ident
from ..tasks import hab as tasks


@entrypoint
def load(opts: DocOptArgs, hab: HabCmd, pkg: HabPkg):
    """
    Load a package as a service, reloading it if already loaded.

    Usage: {script} PKG [--bind=BIND]... [--binding-mode=MODE]
    """
    result = tasks.load(hab, pkg, opts["--bind"], opts["--binding-mode"] or "")
    print(result.value, end="")


@entrypoint
def deploy(opts: DocOptArgs, hab: HabCmd, pkg: Package):
    """
    Install a package if needed, and load it as a service.

    PKG may be a path to a freshly built .hart file, to replace the running service.

    Usage: {script} PKG [--channel=CHANNEL] [--bind=BIND]... [--binding-mode=MODE]
    """
    result = tasks.deploy_service(hab, pkg, opts["--channel"] or "", opts["--bind"],
                                  opts["--binding-mode"] or "")
    for part in result.parts:
        if part.value:
            print(part.value, end="")


@entrypoint
def unload(hab: HabCmd, pkg: HabPkg):
    """
    Unload a service.

    Usage: {script} PKG
    """
    confirm("Unload {}?".format(short_ident(pkg)))
    print(tasks.unload(hab, pkg).value, end="")


@entrypoint
def start(hab: HabCmd, pkg: HabPkg):
    """
    Start a loaded service.

    Usage: {script} PKG
    """
    print(tasks.start(hab, pkg).value, end="")


@entrypoint
def stop(hab: HabCmd, pkg: HabPkg):
    """
    Stop a loaded service.

    Usage: {script} PKG
    """
    print(tasks.stop(hab, pkg).value, end="")


@entrypoint
def restart(hab: HabCmd, pkg: HabPkg):
    """
    Stop and start a loaded service.

    Usage: {script} PKG
    """
    result = tasks.restart_service(hab, pkg)
    for part in result.parts:
        print(part.value, end="")
