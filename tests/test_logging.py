import logging

from adpulse.shared.logging.logger import get_logger, setup_logging


def _own_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, "_adpulse", False)]


def test_repeated_setup_keeps_one_handler():
    setup_logging("info")
    setup_logging("debug")

    assert len(_own_handlers()) == 1
    assert logging.getLogger().level == logging.DEBUG


def test_noisy_libraries_are_quieted_unless_sql_echo():
    setup_logging(logging.INFO)
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING

    setup_logging(logging.INFO, sql_echo=True)
    assert logging.getLogger("sqlalchemy.engine").level == logging.INFO


def test_logger_namespace():
    assert get_logger("api.routes").name == "adpulse.api.routes"
