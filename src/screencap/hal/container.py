"""HAL Container for dependency injection.

Holds the two outside-world collaborators of the capture pipeline so that
tests can swap them for fakes.
"""

from dataclasses import dataclass, field

from ..config import Platform, detect_platform
from .interfaces import IProcessRunner, IScreenCapture


@dataclass
class HALContainer:
    """Container for HAL component instances.

    Attributes:
        screen_capture: In-process screen grab primitive
        process_runner: Launcher for external capture/clipboard tools
        platform: Platform whose tool chains apply

    Example:
        >>> hal = HALContainer.create_default()
        >>> hal.screen_capture.get_monitors()
    """

    screen_capture: IScreenCapture
    process_runner: IProcessRunner
    platform: Platform = field(default_factory=detect_platform)

    @classmethod
    def create_default(cls) -> "HALContainer":
        """Create a container backed by mss and subprocess.

        Returns:
            HALContainer for the current platform
        """
        from .implementations import MSSScreenCapture, SubprocessRunner

        return cls(screen_capture=MSSScreenCapture(), process_runner=SubprocessRunner())

    def cleanup(self) -> None:
        """Release resources held by HAL components."""
        self.screen_capture.close()
