"""Subprocess-based process runner."""

import subprocess
from collections.abc import Sequence

from ...exceptions import ExternalCommandFailedError
from ...logging import get_logger
from ..interfaces.process_runner import IProcessRunner

logger = get_logger(__name__)


class SubprocessRunner(IProcessRunner):
    """Runs external tools as blocking child processes."""

    def run(
        self,
        program: str,
        args: Sequence[str],
        stdin: bytes | None = None,
        capture_output: bool = True,
    ) -> int:
        command = [program, *args]
        logger.debug("running_command", command=command, capture_output=capture_output)

        output = subprocess.PIPE if capture_output else subprocess.DEVNULL

        try:
            result = subprocess.run(
                command, input=stdin, stdout=output, stderr=output, check=False
            )
        except OSError as e:
            raise ExternalCommandFailedError(program, e) from e

        if result.returncode != 0:
            stderr = result.stderr.decode(errors="replace").strip() if result.stderr else ""
            logger.debug(
                "command_failed",
                program=program,
                returncode=result.returncode,
                stderr=stderr,
            )

        return result.returncode
