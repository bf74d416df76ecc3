import code
import logging

from hablib.plumbing import habpkg
from hablib.plumbing.command import CommandError, Executor
from hablib.plumbing.common import *
from hablib.plumbing.hab import binding_mode, binds, HabCmd
from hablib.plumbing.habpkg import from_hartifact_path, from_string, HabPkg, Hartifact
from hablib.scripts.utils import offline_from_env
from hablib.tasks import hab as tasks


hab = HabCmd(Executor(), offline_from_env())


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    code.interact(local=globals())
