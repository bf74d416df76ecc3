"""
Helpers for converting methods into scripts, and filling in arguments with packages and a `HabCmd`.
"""

from functools import wraps
from inspect import cleandoc, signature
import logging
import os
import sys
from typing import Any, Callable, cast, Dict, List, Optional, Union

from docopt import docopt

from ..plumbing.command import CommandError, Executor
from ..plumbing.hab import HabCmd
from ..plumbing.habpkg import from_hartifact_path, from_string, HabPkg, Hartifact, parse_installable
from ..tasks.hab import Package


DocOptArgs = Dict[str, Union[bool, str, List[str]]]

NoneType = type(None)

ENTRYPOINTS: List[str] = []


OFFLINE_ENV = "HABLIB_OFFLINE"
"""
Environment variable that, when set to a true-ish value, implies `--offline` for every script.
"""


def offline_from_env() -> bool:
    return os.getenv(OFFLINE_ENV, "").lower() in ("1", "true", "yes", "on")


def _resolve(cls: Any, value: str) -> Any:
    if cls is HabPkg:
        return from_string(value)
    elif cls is Hartifact:
        return from_hartifact_path(value)
    elif cls == Package:
        return parse_installable(value)
    else:
        raise RuntimeError("Bad parameter type {!r}".format(cls))


def entrypoint(fn: Callable[..., Any]) -> Callable[..., Any]:
    """
    Decorator to make an entrypoint out of a generic function.

    This uses `docopt` to parse arguments according to the method docstring, and will be formatted
    with `{script}` set to the script name.  At minimum, it should contain `Usage: {script}`.

    Functions may optionally accept arguments, but they must be annotated with a recognised type in
    order to be filled in.  The following types are fixed and always available:

    - `DocOptArgs` (a `dict` of input parameters parsed from the usage line)
    - `HabCmd` (built with a subprocess executor, in offline mode if `--offline` was given)

    The types `HabPkg`, `Hartifact`, or `Package` will be used to parse an input parameter matching
    the variable name (the name must be declared in the usage line, either in upper case or
    surrounded by arrow brackets, e.g. `PKG` or `<pkg>`).

    Any `CommandError` raised by the function has its captured output printed verbatim, and the
    script exits with status 1.

    An example function:

        @entrypoint
        def start(opts: DocOptArgs, hab: HabCmd, pkg: HabPkg):
            \"""
            Start a loaded service.

            Usage: {script} PKG
            \"""
    """
    label = "hablib-{}-{}".format(fn.__module__.rsplit(".", 1)[-1],
                                  fn.__qualname__).replace("_", "-")

    @wraps(fn)
    def wrap(opts: Optional[DocOptArgs] = None):
        extra: Dict[str, Any] = {}
        script = "{} [--debug] [--offline]".format(label)
        if opts is None:
            doc = cleandoc(fn.__doc__.format(script=script))
            opts = docopt(doc)
        if opts.pop("--debug", False):
            logging.basicConfig(level=logging.DEBUG)
        offline = bool(opts.pop("--offline", False)) or offline_from_env()
        # Detect resolvable-typed arguments and fill in their values.
        sig = signature(fn)
        ok = True
        for param in sig.parameters.values():
            name = param.name
            cls = param.annotation
            if cls is DocOptArgs:
                extra[name] = opts
                continue
            elif cls is HabCmd:
                extra[name] = HabCmd(Executor(), offline)
                continue
            try:
                try:
                    value = cast(str, opts[name.upper()])
                except KeyError:
                    value = cast(str, opts["<{}>".format(name)])
            except KeyError:
                raise RuntimeError("Missing argument {!r}".format(name))
            optional = False
            # Unpick Optional[X] by reading the type object arguments and removing type(None).
            if getattr(cls, "__origin__", None) is Union:
                cls_args = cls.__args__
                if NoneType in cls_args:
                    optional = True
                    # NB. Union[X] for a single type X automatically resolves to X.
                    cls = Union[tuple(arg for arg in cls_args if arg is not NoneType)]
            if value is None and optional:
                extra[name] = None
                continue
            try:
                extra[name] = _resolve(cls, value)
            except ValueError as ex:
                ok = False
                error("{!r} is not valid for parameter {!r}: {}".format(value, name, ex),
                      colour="1")
        if not ok:
            sys.exit(1)
        try:
            return fn(**extra)
        except CommandError as ex:
            if ex.output:
                sys.stderr.write(ex.output)
                if not ex.output.endswith("\n"):
                    sys.stderr.write("\n")
            error(str(ex), exit=1)
    wrap.__doc__ = wrap.__doc__.format(script=label)
    # Create a console script line for setup.
    target = "{}:{}".format(fn.__module__, fn.__qualname__)
    ENTRYPOINTS.append("{}={}".format(label, target))
    return wrap


def confirm(msg: str = "Are you sure?"):
    """
    Prompt for confirmation before destructive actions.
    """
    try:
        yn = input("\033[96m{} [yN]\033[0m ".format(msg))
    except (KeyboardInterrupt, EOFError):
        print()
        yn = "n"
    if yn.lower() not in ("y", "yes"):
        error("Aborted!", exit=1)


def error(msg: Optional[str] = None, *, exit: Optional[int] = None, colour: Optional[str] = None):
    """
    Print an error message and/or exit.
    """
    if msg:
        colour = colour or ("1" if exit else "3")
        print("\033[9{}m{}\033[0m".format(colour, msg), file=sys.stderr)
    if exit is not None:
        sys.exit(exit)
