# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build and run ansible-lint commands, classifying their exit status."""

from __future__ import annotations

import asyncio
import contextlib
import logging
import os
import shlex
import shutil

# Bandit: subprocess usage is intentional. Commands are passed as argument
# lists; a shell is only involved when the user configured an activation script.
import subprocess  # nosec B404
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, TypeAlias, runtime_checkable

from ..config.settings import ExtensionSettings
from ..constants import FINDINGS_EXIT_CODE, REPORT_FLAGS, TIMEOUT_EXIT_CODE

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LintCommand:
    """Argument vector and optional environment for one ansible-lint run."""

    args: tuple[str, ...]
    env: Mapping[str, str] | None = None

    def display(self) -> str:
        """Return a shell-quoted rendering of the command for logs."""

        return shlex.join(self.args)


@dataclass(frozen=True, slots=True)
class InvocationSuccess:
    """ansible-lint exited with status 0."""

    stdout: str
    stderr: str = ""


@dataclass(frozen=True, slots=True)
class FindingsReported:
    """ansible-lint ran but exited non-zero because it reported findings."""

    stdout: str
    stderr: str = ""
    returncode: int = FINDINGS_EXIT_CODE


@dataclass(frozen=True, slots=True)
class InvocationFailure:
    """ansible-lint could not be run or failed for a reason other than findings."""

    message: str
    stderr: str = ""
    returncode: int | None = None


InvocationOutcome: TypeAlias = InvocationSuccess | FindingsReported | InvocationFailure


def classify_exit(command: LintCommand, returncode: int, stdout: str, stderr: str) -> InvocationOutcome:
    """Translate a process exit status into an :data:`InvocationOutcome`.

    Args:
        command: Command that produced the result.
        returncode: Process exit status.
        stdout: Captured standard output.
        stderr: Captured standard error.

    Returns:
        InvocationOutcome: Success for 0, findings for the findings status, failure otherwise.
    """

    if returncode == 0:
        return InvocationSuccess(stdout=stdout, stderr=stderr)
    if returncode == FINDINGS_EXIT_CODE:
        return FindingsReported(stdout=stdout, stderr=stderr, returncode=returncode)
    return InvocationFailure(
        message=f"Command failed: {command.display()}\n{stderr}".rstrip(),
        stderr=stderr,
        returncode=returncode,
    )


def _interpreter_env(interpreter_path: str, base_env: Mapping[str, str]) -> dict[str, str] | None:
    """Return an environment activating the virtualenv owning ``interpreter_path``.

    The virtualenv is the grandparent of the interpreter (``<venv>/bin/python``).
    """

    interpreter = Path(interpreter_path).expanduser()
    if not interpreter.is_absolute():
        return None
    virtual_env = interpreter.parent.parent
    env = dict(base_env)
    env.pop("PYTHONHOME", None)
    env["VIRTUAL_ENV"] = str(virtual_env)
    bin_dir = str(virtual_env / "bin")
    existing = env.get("PATH")
    env["PATH"] = f"{bin_dir}{os.pathsep}{existing}" if existing else bin_dir
    return env


def build_lint_command(
    settings: ExtensionSettings,
    document_path: str,
    *,
    base_env: Mapping[str, str] | None = None,
) -> LintCommand:
    """Return the command validating ``document_path`` under ``settings``.

    Args:
        settings: Settings resolved for the document.
        document_path: Absolute filesystem path of the document.
        base_env: Environment to extend; defaults to ``os.environ``.

    Returns:
        LintCommand: Arguments and environment override for the run.
    """

    lint = settings.ansible_lint
    args = (lint.path, *shlex.split(lint.arguments), *REPORT_FLAGS, document_path)
    activation_script = settings.python.activation_script
    if activation_script:
        script = f"source {shlex.quote(activation_script)} && {shlex.join(args)}"
        return LintCommand(args=("bash", "-c", script))
    interpreter_path = settings.python.interpreter_path
    if interpreter_path:
        env = _interpreter_env(interpreter_path, os.environ if base_env is None else base_env)
        return LintCommand(args=args, env=env)
    return LintCommand(args=args)


def _resolve_executable(args: Sequence[str], env: Mapping[str, str] | None) -> list[str]:
    head, *rest = args
    if Path(head).is_absolute():
        return [head, *rest]
    search_path = env.get("PATH") if env is not None else None
    resolved = shutil.which(head, path=search_path)
    if resolved is None:
        raise FileNotFoundError(f"Executable '{head}' was not found on PATH")
    return [resolved, *rest]


@runtime_checkable
class LintInvoker(Protocol):
    """Run a :class:`LintCommand` and report an :data:`InvocationOutcome`."""

    async def run(self, command: LintCommand, *, cwd: str) -> InvocationOutcome:
        """Execute ``command`` in ``cwd``."""

        raise NotImplementedError


@dataclass(slots=True)
class SubprocessInvoker:
    """Run commands as child processes through :mod:`asyncio`.

    Attributes:
        timeout: Optional limit in seconds; expiry is reported as exit status 124.
    """

    timeout: float | None = None

    async def run(self, command: LintCommand, *, cwd: str) -> InvocationOutcome:
        """Execute ``command`` in ``cwd`` and classify the result.

        Args:
            command: Command built by :func:`build_lint_command`.
            cwd: Working directory for the child process.

        Returns:
            InvocationOutcome: Classified result of the run.
        """

        try:
            normalized = _resolve_executable(command.args, command.env)
        except FileNotFoundError as exc:
            return InvocationFailure(message=str(exc))
        LOGGER.debug("running %s in %s", command.display(), cwd)
        try:
            process = await asyncio.create_subprocess_exec(
                *normalized,
                cwd=cwd,
                env=dict(command.env) if command.env is not None else None,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except OSError as exc:
            return InvocationFailure(message=f"Unable to run {command.display()}: {exc}")
        try:
            stdout_bytes, stderr_bytes = await asyncio.wait_for(process.communicate(), timeout=self.timeout)
        except TimeoutError:
            with contextlib.suppress(ProcessLookupError):
                process.kill()
            await process.wait()
            return classify_exit(command, TIMEOUT_EXIT_CODE, "", f"Command timed out after {self.timeout:.1f}s")
        returncode = process.returncode if process.returncode is not None else -1
        return classify_exit(command, returncode, _decode(stdout_bytes), _decode(stderr_bytes))


def _decode(value: bytes | None) -> str:
    if not value:
        return ""
    return value.decode("utf-8", errors="replace")


__all__ = [
    "FindingsReported",
    "InvocationFailure",
    "InvocationOutcome",
    "InvocationSuccess",
    "LintCommand",
    "LintInvoker",
    "SubprocessInvoker",
    "build_lint_command",
    "classify_exit",
]
