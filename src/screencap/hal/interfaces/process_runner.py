"""Process execution interface definition."""

from abc import ABC, abstractmethod
from collections.abc import Sequence


class IProcessRunner(ABC):
    """Narrow capability for running external tools.

    Capture tool chains and the clipboard sink only ever need the exit
    status of a blocking child process, so that is all this exposes.
    """

    @abstractmethod
    def run(
        self,
        program: str,
        args: Sequence[str],
        stdin: bytes | None = None,
        capture_output: bool = True,
    ) -> int:
        """Run a program to completion.

        No timeout is applied: interactive tools may wait on the user.

        Helpers that leave a background child behind (clipboard owners,
        viewers) must run with ``capture_output=False``; a captured pipe
        stays open until every process holding it exits.

        Args:
            program: Executable name or path
            args: Arguments (without the program itself)
            stdin: Optional bytes fed to the child's standard input
            capture_output: Collect stdout/stderr for logging, otherwise discard them

        Returns:
            Exit status of the child (0 means success)

        Raises:
            ExternalCommandFailedError: If the program could not be launched
        """
        pass
