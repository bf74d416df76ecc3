"""
Execution of external commands with a timeout, environment overrides and an argument list.

Commands are described by a name plus a sequence of options, each of which updates the `Command`
under construction:

    executor.combined_output("hab", envvar("HAB_NOCOLORING", "true"), timeout(60),
                             args("pkg", "path", "core/hab"))
"""

import logging
import os
import subprocess
from typing import Callable, Dict, List, Optional


LOG = logging.getLogger(__name__)


class CommandError(Exception):
    """
    An external command could not be started, exceeded its timeout, or exited non-zero.

    Any output captured before the failure is kept verbatim in `output` for diagnosis.
    """

    def __init__(self, command: List[str], returncode: Optional[int] = None, output: str = "",
                 reason: Optional[str] = None):
        self.command = command
        self.returncode = returncode
        self.output = output
        self.reason = reason
        super().__init__(command, returncode, output)

    def __str__(self):
        if self.reason:
            status = self.reason
        elif self.returncode is None:
            status = "did not complete"
        else:
            status = "exited with status {}".format(self.returncode)
        return "Command {!r} {}".format(" ".join(self.command), status)


class Command:
    """
    Specification of a single command invocation.
    """

    def __init__(self, name: str):
        self.name = name
        self.env: Dict[str, str] = {}
        self.timeout: Optional[float] = None
        self.args: List[str] = []

    @classmethod
    def build(cls, name: str, *opts: "Opt") -> "Command":
        """
        Create a command, applying each option in order.
        """
        cmd = cls(name)
        for opt in opts:
            opt(cmd)
        return cmd

    @property
    def argv(self) -> List[str]:
        return [self.name] + self.args

    def environ(self) -> Dict[str, str]:
        """
        Full environment for the child: the current process environment plus any overrides.
        """
        env = dict(os.environ)
        env.update(self.env)
        return env

    def __repr__(self):
        return "<{}: {!r} env={!r} timeout={!r}>".format(self.__class__.__name__, self.argv,
                                                          self.env, self.timeout)


Opt = Callable[[Command], None]
"""
Option applied to a `Command` under construction.
"""


def envvar(name: str, value: str) -> Opt:
    """
    Set an environment variable for the child process.
    """
    def opt(cmd: Command) -> None:
        cmd.env[name] = value
    return opt


def timeout(seconds: float) -> Opt:
    """
    Kill the child process if it has not finished within the given number of seconds.
    """
    def opt(cmd: Command) -> None:
        cmd.timeout = seconds
    return opt


def args(*argv: str) -> Opt:
    """
    Append arguments to the command line.
    """
    def opt(cmd: Command) -> None:
        cmd.args.extend(argv)
    return opt


class Executor:
    """
    Runs commands as subprocesses.

    `subprocess.run` kills the child when its timeout expires, so no process outlives its deadline.
    """

    def _exec(self, cmd: Command, capture: bool) -> str:
        LOG.debug("Exec: %r", cmd.argv)
        if cmd.env:
            LOG.debug("Env: %r", cmd.env)
        try:
            proc = subprocess.run(cmd.argv, env=cmd.environ(), timeout=cmd.timeout,
                                  stdin=subprocess.DEVNULL,
                                  stdout=subprocess.PIPE if capture else subprocess.DEVNULL,
                                  stderr=subprocess.STDOUT if capture else subprocess.DEVNULL)
        except subprocess.TimeoutExpired as ex:
            output = _decode(ex.output) if capture else ""
            raise CommandError(cmd.argv, None, output,
                               "timed out after {} seconds".format(cmd.timeout)) from ex
        except OSError as ex:
            raise CommandError(cmd.argv, None, "", "could not be started: {}".format(ex)) from ex
        output = _decode(proc.stdout) if capture else ""
        if proc.returncode != 0:
            raise CommandError(cmd.argv, proc.returncode, output)
        return output

    def run(self, name: str, *opts: Opt) -> None:
        """
        Execute a command for its exit status only, raising `CommandError` on failure.
        """
        self._exec(Command.build(name, *opts), False)

    def combined_output(self, name: str, *opts: Opt) -> str:
        """
        Execute a command, returning its interleaved stdout and stderr.

        On failure, `CommandError.output` holds whatever was written before the command ended.
        """
        return self._exec(Command.build(name, *opts), True)


def _decode(data: Optional[bytes]) -> str:
    if not data:
        return ""
    return data.decode("utf-8", "replace")
