"""Fake implementation of SystemAction for testing."""

from dataclasses import dataclass
from pathlib import Path

from gitshell.system_action.abc import SystemAction
from gitshell.system_action.types import SystemActionOutput


@dataclass(frozen=True)
class PrintedRun:
    cwd: Path | None
    command: list[str]


@dataclass(frozen=True)
class CapturedRun:
    command: list[str]
    stdin: str | None


class FakeSystemAction(SystemAction):
    """In-memory fake that records commands instead of spawning processes.

    Constructor Injection:
    ---------------------
    - outputs: Results returned by successive run() calls, in order. Once
      exhausted, run() returns a successful empty output.
    - run_and_print_raises: Mapping of command prefix (space-joined, e.g.
      "git push") -> exception raised when a matching run_and_print() is called.
      The call is still recorded before raising.
    - run_raises: Exception raised by every run() call (e.g. CommandNotFoundError)

    Mutation Tracking:
    -----------------
    - printed_runs: PrintedRun records from run_and_print()
    - captured_runs: CapturedRun records from run()
    - commands: every command from either method, in call order
    """

    def __init__(
        self,
        *,
        outputs: list[SystemActionOutput] | None = None,
        run_and_print_raises: dict[str, Exception] | None = None,
        run_raises: Exception | None = None,
    ) -> None:
        self._outputs = list(outputs) if outputs is not None else []
        self._run_and_print_raises = (
            run_and_print_raises if run_and_print_raises is not None else {}
        )
        self._run_raises = run_raises

        self._printed_runs: list[PrintedRun] = []
        self._captured_runs: list[CapturedRun] = []
        self._commands: list[list[str]] = []

    def run_and_print(self, cwd: Path | None, command: list[str]) -> None:
        """Record the command, or raise if a failure is configured for it."""
        self._printed_runs.append(PrintedRun(cwd=cwd, command=list(command)))
        self._commands.append(list(command))

        joined = " ".join(command)
        for prefix, error in self._run_and_print_raises.items():
            if joined == prefix or joined.startswith(prefix + " "):
                raise error

    def run(self, command: list[str], *, stdin: str | None = None) -> SystemActionOutput:
        """Record the command and return the next configured output."""
        self._captured_runs.append(CapturedRun(command=list(command), stdin=stdin))
        self._commands.append(list(command))

        if self._run_raises is not None:
            raise self._run_raises
        if self._outputs:
            return self._outputs.pop(0)
        return SystemActionOutput(exit_code=0, stdout="", stderr="")

    @property
    def printed_runs(self) -> list[PrintedRun]:
        """Read-only access to run_and_print() calls for test assertions."""
        return list(self._printed_runs)

    @property
    def captured_runs(self) -> list[CapturedRun]:
        """Read-only access to run() calls for test assertions."""
        return list(self._captured_runs)

    @property
    def commands(self) -> list[list[str]]:
        """All recorded commands in call order."""
        return [list(command) for command in self._commands]
