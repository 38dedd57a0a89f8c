"""Runtime target resolution and dispatch.

A runtime target names the interpreter a benchmark should be measured under.
``current`` is the running interpreter; ``cpythonX.Y`` resolves to the
``pythonX.Y`` executable on PATH. Targets other than the running interpreter
are measured in a child process.
"""

from __future__ import annotations

import platform
import re
import shutil
import subprocess
import sys
from collections.abc import Sequence
from dataclasses import dataclass

CURRENT_TARGET = "current"

_CPYTHON_PATTERN = re.compile(r"^cpython(\d+)\.(\d+)$")


class RuntimeTargetNotFound(RuntimeError):
    """Raised when no interpreter for a runtime target is installed."""


@dataclass(frozen=True)
class RuntimeTarget:
    """A resolved runtime target.

    Args:
        name: Target name as declared (e.g. "cpython3.12").
        executable: Path to the interpreter.
        is_current: Whether the target is the running interpreter.
    """

    name: str
    executable: str
    is_current: bool = False


def current_runtime_name() -> str:
    """Describe the running interpreter, e.g. "cpython3.12"."""
    impl = platform.python_implementation().lower()
    return f"{impl}{sys.version_info.major}.{sys.version_info.minor}"


def validate_target_name(name: str) -> str:
    """Return ``name`` unchanged if it is a recognised target name.

    Raises:
        ValueError: If the name is neither "current" nor "cpythonX.Y".
    """
    if name != CURRENT_TARGET and _CPYTHON_PATTERN.match(name) is None:
        raise ValueError(
            f"Invalid runtime target; expected 'current' or 'cpythonX.Y' but got {name!r}"
        )
    return name


def resolve_target(name: str) -> RuntimeTarget:
    """Resolve a runtime target name to an interpreter.

    Raises:
        ValueError: If the name is not a recognised target.
        RuntimeTargetNotFound: If the interpreter is not installed.
    """
    validate_target_name(name)
    if name == CURRENT_TARGET or name == current_runtime_name():
        return RuntimeTarget(name=name, executable=sys.executable, is_current=True)

    match = _CPYTHON_PATTERN.match(name)
    command = f"python{match.group(1)}.{match.group(2)}"
    executable = shutil.which(command)
    if executable is None:
        raise RuntimeTargetNotFound(f"No '{command}' interpreter found on PATH for {name}")
    return RuntimeTarget(name=name, executable=executable)


def run_in_target(target: RuntimeTarget, args: Sequence[str]) -> int:
    """Run ``args`` under the target's interpreter and return its exit code."""
    completed = subprocess.run([target.executable, *args], check=False)
    return completed.returncode
