"""
Habitat package references.

A package is addressed either as a *versioned* reference (origin/name/version/release, where the
last two may be unknown) or as an *installable* reference, something `hab pkg install` accepts:
a depot identifier or a path to a local `.hart` file.
"""

import os.path
import re
from typing import NamedTuple, Protocol, Union


class VersionedPackage(Protocol):
    """
    Anything identifying a package by origin, name, version and release.
    """

    origin: str
    name: str
    version: str
    release: str


class Installable(Protocol):
    """
    Anything that can be passed to `hab pkg install`.
    """

    def install_ident(self) -> str: ...


class HabPkg(NamedTuple):
    """
    Package identifier, as found in a depot or on the local system.
    """

    origin: str
    name: str
    version: str = ""
    release: str = ""

    @classmethod
    def new(cls, origin: str, name: str) -> "HabPkg":
        return cls(origin, name)

    @classmethod
    def new_fq(cls, origin: str, name: str, version: str, release: str) -> "HabPkg":
        """
        Create a fully-qualified identifier.
        """
        pkg = cls(origin, name, version, release)
        if not is_fully_qualified(pkg):
            raise ValueError("Package {!r} is not fully qualified".format(ident(pkg)))
        return pkg

    def install_ident(self) -> str:
        return ident(self)

    def __str__(self):
        return ident(self)


class Hartifact(NamedTuple):
    """
    Locally built package archive, installable from its path.
    """

    pkg: HabPkg
    path: str

    @property
    def origin(self) -> str:
        return self.pkg.origin

    @property
    def name(self) -> str:
        return self.pkg.name

    @property
    def version(self) -> str:
        return self.pkg.version

    @property
    def release(self) -> str:
        return self.pkg.release

    def install_ident(self) -> str:
        return self.path

    def __str__(self):
        return self.path


def ident(pkg: VersionedPackage) -> str:
    """
    Slash-separated identifier of all known components, e.g. `core/hab/1.6.0/20200101000000`.
    """
    parts = [pkg.origin, pkg.name]
    if pkg.version:
        parts.append(pkg.version)
        if pkg.release:
            parts.append(pkg.release)
    return "/".join(parts)


def short_ident(pkg: VersionedPackage) -> str:
    """
    Origin and name only, used to address whichever build of a service is currently loaded.
    """
    return "{}/{}".format(pkg.origin, pkg.name)


def is_fully_qualified(pkg: VersionedPackage) -> bool:
    return bool(pkg.version and pkg.release)


def from_string(value: str) -> HabPkg:
    """
    Parse an `origin/name[/version[/release]]` identifier.
    """
    parts = value.split("/")
    if not 2 <= len(parts) <= 4 or not all(parts):
        raise ValueError("Invalid package identifier {!r}".format(value))
    return HabPkg(*parts)


# origin-name-version-release-arch-os.hart, where only the name may contain hyphens.
_HART_RE = re.compile(r"^(?P<origin>[^-]+)-(?P<name>.+)-(?P<version>[^-]+)-(?P<release>\d+)"
                      r"-(?P<target>[^-]+-[^-]+)\.hart$")


def from_hartifact_path(path: str) -> Hartifact:
    """
    Build a `Hartifact` from the path of a `.hart` file, reading the package from its filename.
    """
    match = _HART_RE.match(os.path.basename(path))
    if not match:
        raise ValueError("Invalid hartifact filename {!r}".format(path))
    pkg = HabPkg(match.group("origin"), match.group("name"), match.group("version"),
                 match.group("release"))
    return Hartifact(pkg, path)


def parse_installable(value: str) -> Union[HabPkg, Hartifact]:
    """
    Parse either a `.hart` path or a package identifier.
    """
    if value.endswith(".hart"):
        return from_hartifact_path(value)
    return from_string(value)
