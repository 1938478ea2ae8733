from typer.testing import CliRunner

from strqueue.cli import cli
from strqueue.model import QueueModel, RegistryModel

runner = CliRunner()

SCRIPT = """new
insert_at 0 0 b
insert_at 0 0 a
get_at 0 1
new
comp 0 1
delete 1
"""


def test_cli():
    assert runner.invoke(cli, "--help").exit_code == 0
    assert runner.invoke(cli, "--settings").exit_code == 0
    assert runner.invoke(cli, "--version").exit_code == 0


def test_cli_run(tmp_path):
    script = tmp_path / "script.txt"
    script.write_text(SCRIPT)
    res = runner.invoke(cli, ["run", str(script)])
    assert res.exit_code == 0
    assert res.stdout.splitlines() == [
        "create() = 0",
        'get_at(0, 1) = "b"',
        "create() = 1",
        "compare(0, 1) = 1",
    ]

    res = runner.invoke(cli, ["run", str(script), "--trace"])
    assert res.exit_code == 0
    assert "compare(0, 1) = 1" in res.stdout

    out = tmp_path / "out.txt"
    res = runner.invoke(cli, ["run", str(script), "-o", str(out)])
    assert res.exit_code == 0
    assert out.read_text().splitlines()[1] == 'get_at(0, 1) = "b"'


def test_cli_run_dump(tmp_path):
    script = tmp_path / "script.txt"
    script.write_text(SCRIPT)
    out = tmp_path / "out.txt"
    res = runner.invoke(cli, ["run", str(script), "--dump", "-o", str(out)])
    assert res.exit_code == 0
    lines = out.read_text().splitlines()
    assert len(lines) == 5
    state = RegistryModel.model_validate_json(lines[-1])
    assert state.next_handle == 2
    assert state.queues == [QueueModel(handle=0, items=["a", "b"])]


def test_cli_run_invalid(tmp_path):
    script = tmp_path / "script.txt"
    script.write_text("new\npush 0 a\n")
    res = runner.invoke(cli, ["run", str(script)])
    assert res.exit_code != 0
