import pytest

from ucdmesh.cli import main


def test_main_prints_message_and_succeeds(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Funziona\n"


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2