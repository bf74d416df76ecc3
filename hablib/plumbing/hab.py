"""
Habitat package installation and service lifecycle, driven through the `hab` command-line tool.

Each method builds a `hab` command line, adds the standard environment overrides and a timeout for
the kind of operation, and hands it to a `command.Executor`.  Failed commands raise
`command.CommandError` with the tool's output attached, except for the `is_installed` probe.
"""

import logging
import os
from typing import Callable, List, Optional, Sequence

from . import command
from .command import CommandError, Executor
from .habpkg import ident, Installable, short_ident, VersionedPackage


LOG = logging.getLogger(__name__)

HAB_BIN = os.getenv("HABLIB_HAB_BIN", "hab")
"""
Name or path of the `hab` executable.
"""

HAB_TIMEOUT_INSTALL_PACKAGE = 1200.0
"""
Timeout for `HabCmd.install_package`.  Installs also pull in dependencies, and so can take a while.
"""

HAB_TIMEOUT_IS_INSTALLED = 60.0
"""
Timeout for `HabCmd.is_installed`, which runs `hab pkg path` and is expected to be fast.
"""

HAB_TIMEOUT_DEFAULT = 300.0
"""
Timeout for all other `hab` commands.
"""

STD_HAB_OPTIONS = (
    # Don't emit ANSI colour escape codes.
    command.envvar("HAB_NOCOLORING", "true"),
    # Don't use progress bars in output.
    command.envvar("HAB_NONINTERACTIVE", "true"),
)


def standard_hab_options() -> List[command.Opt]:
    """
    Fresh copy of the options applied to every `hab` command, safe to extend per call.
    """
    return list(STD_HAB_OPTIONS)


LoadOption = Callable[[List[str]], List[str]]
"""
Transformation of the `hab svc load` arguments, applied in the order passed to `load_service`.
"""


def binds(specs: Optional[Sequence[str]]) -> LoadOption:
    """
    Add a `--bind` argument for each bind specification, e.g. `database:postgresql.default`.
    """
    def opt(args: List[str]) -> List[str]:
        for spec in specs or ():
            args = args + ["--bind", spec]
        return args
    return opt


def binding_mode(mode: Optional[str]) -> LoadOption:
    """
    Set the binding mode (`strict` or `relaxed`) if one is given.
    """
    def opt(args: List[str]) -> List[str]:
        if mode:
            return args + ["--binding-mode", mode]
        return args
    return opt


class HabCmd:
    """
    Runs the `hab` command-line tool with a standard set of options.

    If `offline_mode` is set, package installs use Habitat's offline install feature and won't
    contact a depot.  Instances hold no other state, and can be shared between threads.
    """

    def __init__(self, executor: Executor, offline_mode: bool = False):
        if executor is None:
            raise TypeError("HabCmd requires an executor")
        self._executor = executor
        self._offline_mode = offline_mode

    @property
    def executor(self) -> Executor:
        return self._executor

    @property
    def offline_mode(self) -> bool:
        return self._offline_mode

    def __repr__(self):
        return "<{}: {!r}{}>".format(self.__class__.__name__, self._executor,
                                     " offline" if self._offline_mode else "")

    def install_package(self, pkg: Installable, channel: str = "") -> str:
        """
        Install a package, either a local hartifact or one from the depot, and its dependencies.
        """
        args = ["pkg", "install", pkg.install_ident()]
        opts = standard_hab_options()
        if self._offline_mode:
            args.append("--offline")
            opts.append(command.envvar("HAB_FEAT_OFFLINE_INSTALL", "true"))
        if channel:
            args.extend(["--channel", channel])
        opts.extend([command.timeout(HAB_TIMEOUT_INSTALL_PACKAGE), command.args(*args)])
        return self._executor.combined_output(HAB_BIN, *opts)

    def is_installed(self, pkg: VersionedPackage) -> bool:
        """
        Test if a package is installed.

        Any failure of the lookup counts as the package being absent: a broken `hab` can't be told
        apart from a missing package here.
        """
        opts = standard_hab_options()
        opts.extend([command.timeout(HAB_TIMEOUT_IS_INSTALLED),
                     command.args("pkg", "path", ident(pkg))])
        try:
            self._executor.run(HAB_BIN, *opts)
        except CommandError as ex:
            LOG.debug("Package %s not installed: %s", ident(pkg), ex)
            return False
        return True

    def binlink_package(self, pkg: VersionedPackage, exe: str) -> str:
        """
        Link an executable from an installed package onto the system path, replacing any existing
        link of the same name.
        """
        return self._hab_default("pkg", "binlink", "--force", ident(pkg), exe)

    def load_service(self, pkg: VersionedPackage, *opts: LoadOption) -> str:
        """
        Load a package as a supervised service, reloading it if already loaded.

        The update strategy is disabled, as updates are delivered by reinstalling and reloading.
        """
        args = ["svc", "load", "--force", ident(pkg), "--strategy", "none"]
        for opt in opts:
            args = opt(args)
        return self._hab_default(*args)

    def unload_service(self, pkg: VersionedPackage) -> str:
        """
        Unload whichever build of the package's service is currently loaded.
        """
        return self._hab_default("svc", "unload", short_ident(pkg))

    def start_service(self, pkg: VersionedPackage) -> str:
        """
        Start an already-loaded service.
        """
        return self._hab_default("svc", "start", short_ident(pkg))

    def stop_service(self, pkg: VersionedPackage) -> str:
        """
        Stop an already-loaded service.
        """
        return self._hab_default("svc", "stop", short_ident(pkg))

    def _hab_default(self, *args: str) -> str:
        opts = standard_hab_options()
        opts.extend([command.timeout(HAB_TIMEOUT_DEFAULT), command.args(*args)])
        return self._executor.combined_output(HAB_BIN, *opts)
