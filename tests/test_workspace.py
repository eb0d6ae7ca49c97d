import shlex
import sys

import pytest

from castopt.settings import ConfigurationError, RunArguments
from castopt.workspace import (
    CommandResult,
    prepare_output,
    run_command,
    smart_init,
    write_outcome,
)

UUID = "00000000-0000-0000-0000-000000000075"


def _args(evaluation="corecast+smartinit", filename="./"):
    return RunArguments.from_argv(
        ["0.5", UUID, evaluation, "10", filename, "20", "2", "0",
         "/tmp/scen.csv", "0.5", "10", "2", "8"]
    )


def test_run_command_output():
    result = run_command("echo hello")
    assert result == CommandResult("hello\n", 0)


def test_run_command_status():
    result = run_command("exit 3")
    assert result.exitstatus == 3
    assert result.output == ""


def test_command_result_str():
    text = str(CommandResult("out", 2))
    assert text == "command exitstatus: 2 output: out"


def test_prepare_output(tmp_path):
    front = prepare_output(tmp_path, UUID)
    assert front == tmp_path / "output" / "nsga3" / UUID / "front"
    assert front.is_dir()
    assert prepare_output(tmp_path, UUID) == front


def test_smart_init_copies_existing(tmp_path):
    config = tmp_path / "output" / "nsga3" / UUID / "config"
    config.mkdir(parents=True)
    (config / "ipopt.json").write_text("[]")
    filename = smart_init(_args(), tmp_path, None)
    assert filename == str(config / "ipopt.json")
    epsilon = tmp_path / "output" / "nsga3" / UUID / "front" / "epsilon.json"
    assert epsilon.read_text() == "[]"


def test_smart_init_runs_solver(tmp_path):
    script = tmp_path / "solver.py"
    script.write_text(
        "import sys, pathlib\n"
        f"base = pathlib.Path({str(tmp_path)!r})\n"
        "cfg = base / 'output' / 'nsga3' / sys.argv[1] / 'config'\n"
        "cfg.mkdir(parents=True, exist_ok=True)\n"
        "(cfg / 'ipopt.json').write_text(' '.join(sys.argv[1:]))\n"
    )
    solver = f"{shlex.quote(sys.executable)} {shlex.quote(str(script))}"
    filename = smart_init(_args(), tmp_path, solver)
    written = open(filename).read()
    assert written.split() == [UUID, "0.5", "0", "1", "1", "8", "10"]
    epsilon = tmp_path / "output" / "nsga3" / UUID / "front" / "epsilon.json"
    assert epsilon.read_text() == written


def test_smart_init_without_solver(tmp_path):
    with pytest.raises(ConfigurationError):
        smart_init(_args(), tmp_path, "")


def test_smart_init_not_requested(tmp_path):
    assert smart_init(_args("corecast"), tmp_path, None) == ""
    assert not (tmp_path / "output").exists()


def test_write_outcome(tmp_path):
    path = tmp_path / "outcome.txt"
    write_outcome(path, [1.234, 5.678, 9.0])
    assert path.read_text() == "1.23,5.68\n"