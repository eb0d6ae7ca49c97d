"""Output directories, external commands and result files of a run."""

from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from castopt.settings import ConfigurationError, RunArguments

_POLLUTANT_IDX = 0
_IPOPT = 1
_LIMIT_ALPHA = 1.0


@dataclass(frozen=True)
class CommandResult:
    """Standard output and exit status of a finished command."""

    output: str
    exitstatus: int

    def __str__(self) -> str:
        return f"command exitstatus: {self.exitstatus} output: {self.output}"


def run_command(command: str) -> CommandResult:
    """Run ``command`` through the shell and capture its standard output."""
    completed = subprocess.run(command, shell=True, stdout=subprocess.PIPE, check=False)
    status = completed.returncode
    if status < 0:
        status = 0
    return CommandResult(completed.stdout.decode(errors="replace"), status)


def _number(value: float) -> str:
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _run_dir(base_path: str | Path, emo_uuid: str) -> Path:
    return Path(base_path) / "output" / "nsga3" / emo_uuid


def prepare_output(base_path: str | Path, emo_uuid: str) -> Path:
    """Create the run and front directories; return the front directory."""
    front = _run_dir(base_path, emo_uuid) / "front"
    front.mkdir(parents=True, exist_ok=True)
    return front


def _copy_if_newer(src: Path, dst: Path) -> None:
    if not src.exists():
        return
    if dst.exists() and dst.stat().st_mtime >= src.stat().st_mtime:
        return
    shutil.copy2(src, dst)


def smart_init(
    args: RunArguments, base_path: str | Path, eps_cnstr_path: str | None
) -> str:
    """Make sure the injected points exist and return their file name.

    When the points file is missing the epsilon-constraint solver at
    ``eps_cnstr_path`` is started to produce it. The configuration's
    ``ipopt.json`` is then copied to ``front/epsilon.json``.
    """
    if not args.smart_init:
        return args.injected_points_filename
    run_dir = _run_dir(base_path, args.emo_uuid)
    filename = args.injected_points_filename
    if filename == "./":
        filename = str(run_dir / "config" / "ipopt.json")

    if not Path(filename).exists():
        if not eps_cnstr_path:
            raise ConfigurationError("path of the epsilon-constraint solver is not set")
        parts: Sequence[str] = (
            eps_cnstr_path,
            args.emo_uuid,
            _number(args.ipopt_reduction),
            str(_POLLUTANT_IDX),
            str(_IPOPT),
            _number(_LIMIT_ALPHA),
            str(args.cost_profile_idx),
            _number(args.ipopt_popsize),
        )
        run_command(" ".join(parts))

    front = run_dir / "front"
    front.mkdir(parents=True, exist_ok=True)
    _copy_if_newer(run_dir / "config" / "ipopt.json", front / "epsilon.json")
    return filename


def write_outcome(path: str | Path, obj: Sequence[float]) -> None:
    """Write the first two objectives with two decimals."""
    Path(path).write_text(f"{obj[0]:.2f},{obj[1]:.2f}\n")