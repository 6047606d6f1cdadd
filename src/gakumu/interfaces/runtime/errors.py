"""Exceptions for container runtime operations."""


class ContainerRuntimeError(Exception):
    """Base class for container runtime errors."""


class RuntimeUnavailableError(ContainerRuntimeError):
    """The container runtime executable cannot be found.

    Attributes:
        executable (str): The executable that was looked up.
    """

    def __init__(self, executable: str):
        super().__init__(
            f"Container runtime '{executable}' was not found on PATH. "
            "Please install it first."
        )
        self.executable = executable


class RuntimeCommandError(ContainerRuntimeError):
    """A runtime command finished with a non-zero exit status.

    Attributes:
        command (str): The runtime operation that failed (e.g. "build").
        returncode (int): Exit status reported by the runtime.
    """

    def __init__(self, command: str, returncode: int):
        super().__init__(
            f"Container runtime command '{command}' failed with exit code {returncode}."
        )
        self.command = command
        self.returncode = returncode
