"""Compiler settings and the build step."""

import os
import shlex
import subprocess
import time
from dataclasses import dataclass, fields

CONFIG_FILE = "mingw_g++.ini"


@dataclass
class CompilerConfig:
    """Compiler path and the option strings placed on its command line."""

    compiler: str = ""
    flags: str = "-std=c++14 -O2 -s"
    extra_flags: str = "-static-libgcc"
    include: str = ""

    @classmethod
    def load(cls, path):
        """Read the four settings lines; missing lines keep their defaults."""
        config = cls()
        try:
            with open(path, encoding="utf-8", errors="replace") as handle:
                lines = handle.read().splitlines()
        except FileNotFoundError:
            return config
        order = ("compiler", "flags", "extra_flags", "include")
        for name, line in zip(order, lines):
            setattr(config, name, line)
        return config

    def save(self, path):
        """Write the four settings lines, one per line."""
        with open(path, "w", encoding="utf-8") as handle:
            for line in (self.compiler, self.flags, self.extra_flags, self.include):
                handle.write(line + "\n")

    def command(self, source, output):
        """Return the command line that compiles ``source`` into ``output``."""
        return (
            f'"{self.compiler}" "{source}" -o "{output}" '
            f"{self.flags} {self.include} {self.extra_flags}"
        )


def output_path(source):
    """Replace everything from the last '.' with ``.exe``."""
    stem, dot, _ = source.rpartition(".")
    return (stem if dot else source) + ".exe"


def _arguments(command):
    return command if os.name == "nt" else shlex.split(command)


def run_process(command, wait=True):
    """Start ``command``; with ``wait`` return its exit code, otherwise None.

    Without waiting the program gets a console of its own where possible.
    Raises OSError if the program cannot be started.
    """
    if wait:
        return subprocess.run(_arguments(command), check=False).returncode
    subprocess.Popen(
        _arguments(command),
        creationflags=getattr(subprocess, "CREATE_NEW_CONSOLE", 0),
    )
    return None


@dataclass(frozen=True)
class BuildResult:
    command: str
    output: str
    returncode: object
    elapsed_ms: int


def build(config, source, runner=None):
    """Compile ``source`` with ``config`` and report the command, output and time."""
    runner = runner or run_process
    output = output_path(source)
    command = config.command(source, output)
    start = time.monotonic()
    returncode = runner(command)
    elapsed_ms = int((time.monotonic() - start) * 1000)
    return BuildResult(command, output, returncode, elapsed_ms)


__all__ = [f.name for f in fields(CompilerConfig)] and [
    "CONFIG_FILE",
    "BuildResult",
    "CompilerConfig",
    "build",
    "output_path",
    "run_process",
]