import logging
import os
import subprocess

from . import config, fields
from .errors import ExecuteFailed
from .execute import ResolvedCommand, resolve_command

logger = logging.getLogger(__name__)


def wrap_in_terminal(command, terminal):
    return ResolvedCommand(terminal[0], (*terminal[1:], *command.argv))


def execute(command, cwd=None, env=None):
    """Replace the current process with ``command``.

    Only returns by raising :class:`ExecuteFailed`.
    """
    logger.info("Executing %s", command.argv)
    previous_cwd = os.getcwd()
    try:
        if cwd:
            os.chdir(cwd)
        if env is None:
            os.execvp(command.program, command.argv)
        else:
            os.execvpe(command.program, command.argv, env)
    except OSError as exc:
        os.chdir(previous_cwd)
        raise ExecuteFailed(command.program, exc.strerror or str(exc)) from exc
    os.chdir(previous_cwd)
    raise ExecuteFailed(command.program, "exec returned")


def spawn(command, cwd=None, env=None):
    logger.info("Spawning %s", command.argv)
    try:
        return subprocess.Popen(command.argv, cwd=cwd or None, env=env)
    except OSError as exc:
        raise ExecuteFailed(command.program, exc.strerror or str(exc)) from exc


def launch(entry, args=(), action=None, source_path=None):
    command = resolve_command(entry, args, source_path=source_path, action=action)
    if entry.get(fields.TERMINAL):
        command = wrap_in_terminal(command, config.terminal_command())
    cwd = entry.get(fields.PATH)
    if cwd and not os.path.isdir(cwd):
        logger.debug("Ignoring missing working directory %s", cwd)
        cwd = None
    return spawn(command, cwd=cwd)
