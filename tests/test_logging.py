"""Tests for logging utilities."""

import logging
from io import StringIO

import numpy as np

from smoothopt.logging import configure_logging, get_logger, set_log_level, verbose_logging
from smoothopt.optimize import Quadratic, gradient_method


def test_get_logger_namespaced_and_cached():
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "smoothopt.test_module"
    assert get_logger("test_module") is logger
    assert get_logger("smoothopt.test_module") is logger


def test_different_names_give_different_loggers():
    assert get_logger("module1") is not get_logger("module2")


def test_logger_does_not_propagate():
    assert get_logger("test_module").propagate is False


def test_set_log_level_string():
    logger = get_logger("test_module")
    try:
        set_log_level("DEBUG")
        assert logger.level == logging.DEBUG
        set_log_level("ERROR")
        assert logger.level == logging.ERROR
    finally:
        set_log_level(logging.WARNING)


def test_configure_logging_redirects_output():
    stream = StringIO()
    try:
        configure_logging(level=logging.DEBUG, stream=stream)
        get_logger("test_module").debug("Debug message")
        assert "Debug message" in stream.getvalue()
    finally:
        configure_logging(level=logging.WARNING)


def test_verbose_run_reports_progress():
    stream = StringIO()
    F = Quadratic(np.diag([1.0, 100.0]))
    try:
        configure_logging(level=logging.INFO, stream=stream)
        res = gradient_method(
            F,
            np.array([1.0, 1.0]),
            analytic_gradient=True,
            verbose=True,
            maxiter=6,
            disp_iter=2,
            tol=0.0,
        )
    finally:
        configure_logging(level=logging.WARNING)
    output = stream.getvalue()
    assert res.nit == 6
    assert "analytic gradient" in output
    assert "Iteration 2," in output
    assert "Iteration 4," in output
    assert "Iteration 3," not in output
    assert "Maximum iteration number reached" in output


def test_quiet_run_emits_no_info_records():
    stream = StringIO()
    try:
        configure_logging(level=logging.INFO, stream=stream)
        gradient_method(Quadratic(np.eye(2)), np.ones(2), verbose=False)
    finally:
        configure_logging(level=logging.WARNING)
    assert stream.getvalue() == ""


def test_verbose_run_shown_with_default_configuration(capsys):
    logger = get_logger("smoothopt.optimize.minimize")
    assert logger.level == logging.WARNING
    gradient_method(
        Quadratic(np.diag([1.0, 100.0])),
        np.ones(2),
        analytic_gradient=True,
        verbose=True,
        maxiter=6,
        disp_iter=2,
        tol=0.0,
    )
    err = capsys.readouterr().err
    assert "Iteration 2," in err
    assert "Iteration 6," in err
    assert logger.level == logging.WARNING
    assert all(h.level == logging.WARNING for h in logger.handlers)


def test_verbose_logging_restores_levels():
    logger = get_logger("verbose_block")
    logger.setLevel(logging.ERROR)
    try:
        with verbose_logging(logger):
            assert logger.isEnabledFor(logging.INFO)
        assert logger.level == logging.ERROR
        with verbose_logging(logger, enabled=False):
            assert not logger.isEnabledFor(logging.INFO)
    finally:
        logger.setLevel(logging.WARNING)


def test_configure_logging_applies_to_later_loggers():
    stream = StringIO()
    try:
        configure_logging(level=logging.INFO, stream=stream, format_string="%(message)s")
        get_logger("created_after_configure").info("late logger message")
    finally:
        configure_logging(level=logging.WARNING)
    assert stream.getvalue() == "late logger message\n"
