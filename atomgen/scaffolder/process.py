"""External commands run after the package files are written.

Wraps the package manager (``npm``/``yarn``), ``git init``, ``apm link --dev``
and the user's editor.  Every command goes through
:func:`atomgen.utils.run_command`; a non-zero exit raises
``ProcessRunnerError`` carrying the command and its stderr.
"""

from __future__ import annotations

import os
import shlex
from pathlib import Path

from atomgen.models import PackageManager
from atomgen.utils import console, run_command


class ProcessRunnerError(Exception):
    """Raised when an external command fails."""

    def __init__(self, message: str, command: str = "", stderr: str = ""):
        self.command = command
        self.stderr = stderr
        super().__init__(message)


def install_command(
    package_manager: PackageManager | str,
    packages: list[str],
    dev: bool = False,
    ignore_scripts: bool = False,
) -> list[str]:
    """Build the install command line for *package_manager*.

    ``npm install --save-dev a b`` / ``yarn add --dev a b``.
    """
    manager = PackageManager(package_manager)
    if manager is PackageManager.YARN:
        cmd = ["yarn", "add"]
        if dev:
            cmd.append("--dev")
    else:
        cmd = ["npm", "install"]
        if dev:
            cmd.append("--save-dev")
    if ignore_scripts:
        cmd.append("--ignore-scripts")
    return [*cmd, *packages]


class ProcessRunner:
    """Runs the post-generation commands inside a package directory."""

    def __init__(self, cwd: str | Path, timeout: int = 300, verbose: bool = False) -> None:
        self.cwd = Path(cwd)
        self.timeout = timeout
        self.verbose = verbose

    async def run(self, cmd: list[str], interactive: bool = False) -> str:
        """Run *cmd* in the package directory and return its stdout.

        Args:
            cmd: Program and arguments.
            interactive: Leave stdio attached to the terminal and wait
                without a timeout (stdout is then empty).

        Raises:
            ProcessRunnerError: If the program cannot be started, exits
                non-zero or times out.
        """
        command = " ".join(cmd)
        if self.verbose:
            console.print(f"  [dim]$ {command}[/dim]")
        try:
            returncode, stdout, stderr = await run_command(
                cmd,
                cwd=self.cwd,
                timeout=None if interactive else self.timeout,
                capture=not interactive,
            )
        except OSError as exc:
            raise ProcessRunnerError(
                f"Command not found: {cmd[0]}", command=command
            ) from exc
        if returncode != 0:
            raise ProcessRunnerError(
                f"Command failed with exit code {returncode}: {command}",
                command=command,
                stderr=stderr,
            )
        return stdout

    async def install(
        self,
        package_manager: PackageManager | str,
        dependencies: list[str],
        dev_dependencies: list[str],
    ) -> None:
        """Install runtime then dev dependencies; empty lists are skipped."""
        if dependencies:
            await self.run(
                install_command(package_manager, dependencies, ignore_scripts=True)
            )
        if dev_dependencies:
            await self.run(install_command(package_manager, dev_dependencies, dev=True))

    async def init_git(self) -> None:
        await self.run(["git", "init"])

    async def link_dev_package(self) -> None:
        """Link the package into ``~/.atom/dev/packages``."""
        await self.run(["apm", "link", "--dev"])

    async def open_in_editor(self, editor: str | None = None) -> bool:
        """Open the package directory in ``$EDITOR``.

        The editor value is split like a shell word list, so ``code --wait``
        works.  It runs attached to the terminal with no timeout.

        Returns:
            ``False`` if no editor is configured, ``True`` once it exited.
        """
        editor = editor or os.environ.get("EDITOR")
        if not editor:
            return False
        await self.run([*shlex.split(editor), "."], interactive=True)
        return True
