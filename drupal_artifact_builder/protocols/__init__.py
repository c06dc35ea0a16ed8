"""Protocol definitions for artifact builder adapters.

These protocols use Python's typing.Protocol system with the
@runtime_checkable decorator to enable both static type checking and runtime
isinstance() checks, so tests can substitute fakes for the shell and the
file system.
"""

from .file_adapter_protocol import FileAdapterProtocol
from .shell_runner_protocol import Command, ShellRunnerProtocol


__all__ = [
    "Command",
    "FileAdapterProtocol",
    "ShellRunnerProtocol",
]
