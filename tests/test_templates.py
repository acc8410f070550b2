"""Tests for the Jinja2 template wrapper and logging setup."""

import logging

import pytest

from metac.codegen.core.templates import TemplateEngine, TemplateError
from metac.logging_config import configure_logging, get_logger


@pytest.fixture
def engine(tmp_path):
    (tmp_path / "plain.j2").write_text("{{ a }} < {{ b }};\n", encoding="utf-8")
    (tmp_path / "block.j2").write_text(
        "{% filter comment %}\nx;\n\ny;{% endfilter %}\n", encoding="utf-8"
    )
    (tmp_path / "broken.j2").write_text("{% if %}\n", encoding="utf-8")
    return TemplateEngine(tmp_path)


def test_render_keeps_c_syntax(engine):
    assert engine.render_template("plain.j2", {"a": "x", "b": "&y"}) == "x < &y;"


def test_comment_filter_skips_blank_lines(engine):
    assert engine.render_template("block.j2", {}) == "// x;\n\n// y;"


@pytest.mark.parametrize("name", ["broken.j2", "missing.j2"])
def test_render_errors_are_wrapped(engine, name):
    with pytest.raises(TemplateError):
        engine.render_template(name, {})


def test_engine_without_directory_has_no_templates():
    with pytest.raises(TemplateError):
        TemplateEngine().render_template("struct.c.j2", {})


def test_loggers_share_package_namespace():
    assert get_logger("metac.cli").name == "metac.cli"
    assert get_logger("tools").name == "metac.tools"


def test_configure_logging_levels():
    logger = configure_logging(quiet=True)
    try:
        assert logger.level == logging.ERROR
        assert len(logger.handlers) == 1
        configure_logging(verbose=True)
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
