"""Tests for the metac command-line driver."""

import json
import logging

import pytest

from metac import init
from metac.cli import build_parser, main
from metac.logging_config import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo the handler and level the CLI installs."""
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def files(write_schema, tmp_path):
    source = write_schema("""
        obj :: Player {
            health :: int
        }
        obj :: World {
            player :: Player
            boss :: Boss
        }
    """)
    return source, tmp_path / "out.h"


def test_success(files, capsys):
    source, target = files

    assert main([str(source), str(target)]) == 0

    out = capsys.readouterr().out
    assert "Code generation succeeded" in out
    assert "1 warning(s)" in out
    assert "typedef struct PlayerData {" in target.read_text(encoding="utf-8")


def test_quiet_prints_nothing(files, capsys):
    source, target = files
    assert main(["--quiet", str(source), str(target)]) == 0
    assert capsys.readouterr().out == ""


def test_verbose_shows_metadata(files, capsys):
    source, target = files
    assert main(["-v", str(source), str(target)]) == 0
    assert "Object Count" in capsys.readouterr().out


def test_missing_input(tmp_path, capsys):
    code = main([str(tmp_path / "nope.meta"), str(tmp_path / "out.h")])

    assert code == 1
    assert "Error in code generation" in capsys.readouterr().out
    assert not (tmp_path / "out.h").exists()


def test_missing_arguments(capsys):
    assert main([]) == 1
    assert "required" in capsys.readouterr().out


def test_unknown_language(files, capsys):
    source, target = files
    assert main(["-l", "cobol", str(source), str(target)]) == 1
    assert "No generator registered" in capsys.readouterr().out


def test_list_languages(capsys):
    assert main(["--list-languages"]) == 0
    assert "CGenerator" in capsys.readouterr().out


def test_generation_options(files):
    source, target = files
    assert main(["--suffix", "Rec", "--indent", "2", str(source), str(target)]) == 0
    assert "  PlayerRec player;\n" in target.read_text(encoding="utf-8")


def test_field_limit_option(write_schema, tmp_path):
    source = write_schema("obj :: A {\n  a :: int\n  b :: int\n}\n")
    target = tmp_path / "out.h"

    assert main(["-q", "--max-fields", "1", str(source), str(target)]) == 0
    assert "b;" not in target.read_text(encoding="utf-8")


def test_config_file(files, tmp_path):
    source, target = files
    config = tmp_path / "metac.json"
    config.write_text(json.dumps({"struct_suffix": "_t"}), encoding="utf-8")

    assert main(["--config", str(config), str(source), str(target)]) == 0
    assert "typedef struct Player_t {" in target.read_text(encoding="utf-8")


def test_bad_config_file(files, tmp_path, capsys):
    source, target = files
    code = main(["--config", str(tmp_path / "missing.json"), str(source), str(target)])

    assert code == 1
    assert "Configuration error" in capsys.readouterr().out


def test_include_makes_objects_referenceable(write_schema, tmp_path):
    common = write_schema("obj :: Boss {\n}\n", name="common.meta")
    source = write_schema("obj :: World {\n  boss :: Boss\n}\n", name="game.meta")
    target = tmp_path / "game.h"

    assert main(["-q", "-I", str(common), str(source), str(target)]) == 0

    code = target.read_text(encoding="utf-8")
    assert "   BossData boss;\n" in code
    # included objects are not written to the output
    assert "typedef struct BossData" not in code


def test_missing_include(files, tmp_path, capsys):
    source, target = files
    code = main(["-I", str(tmp_path / "gone.meta"), str(source), str(target)])

    assert code == 1
    assert "Cannot read included schema" in capsys.readouterr().out


def test_runs_are_independent(files):
    init()
    source, target = files
    assert main(["-q", str(source), str(target)]) == 0
    first = target.read_bytes()
    assert main(["-q", str(source), str(target)]) == 0
    assert target.read_bytes() == first


def test_verbose_and_quiet_conflict():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["-v", "-q", "a", "b"])


def test_warnings_are_shown_once(files, capsys):
    source, target = files

    assert main([str(source), str(target)]) == 0

    captured = capsys.readouterr()
    assert "'Boss'" not in captured.out
    assert captured.err.count("'Boss'") == 1
