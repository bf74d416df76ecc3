"""
Test doubles for running `hab` commands without a real `hab` binary.

`RecordingExecutor` builds each requested `Command` exactly as the real executor would, keeps it for
inspection, and returns canned output instead of spawning a process:

    executor = RecordingExecutor(output="ok\n")
    HabCmd(executor).start_service(pkg)
    executor.last.args  # ["svc", "start", "core/redis"]
"""

from typing import List, Optional

from hablib.plumbing.command import Command, CommandError, Opt


class RecordingExecutor:

    def __init__(self, output: str = "", fail: bool = False, returncode: int = 1,
                 missing: bool = False):
        self.output = output
        self.fail = fail
        # Fail probes (`run`) only, as `hab pkg path` does for a package that isn't installed.
        self.missing = missing
        self.returncode = returncode
        self.calls: List[Command] = []
        self.modes: List[str] = []

    @property
    def last(self) -> Optional[Command]:
        return self.calls[-1] if self.calls else None

    def _record(self, mode: str, name: str, opts: tuple, fail: bool) -> Command:
        cmd = Command.build(name, *opts)
        self.calls.append(cmd)
        self.modes.append(mode)
        if fail:
            raise CommandError(cmd.argv, self.returncode, self.output)
        return cmd

    def run(self, name: str, *opts: Opt) -> None:
        self._record("run", name, opts, self.fail or self.missing)

    def combined_output(self, name: str, *opts: Opt) -> str:
        self._record("combined_output", name, opts, self.fail)
        return self.output
