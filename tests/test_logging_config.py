import logging

from slovnik.utils import logging_config
from slovnik.utils.observability import get_logger


def test_configure_logging_reads_environment(monkeypatch):
    project_logger = logging.getLogger("slovnik")
    http_logger = logging.getLogger("httpx")
    previous_level = project_logger.level
    previous_http_level = http_logger.level
    monkeypatch.setattr(logging_config, "_CONFIGURED", False)
    monkeypatch.setenv("SLOVNIK_LOG_LEVEL", "debug")

    try:
        logging_config.configure_logging()
        assert project_logger.level == logging.DEBUG
        assert http_logger.level == logging.DEBUG

        logging_config.configure_logging("WARNING")
        assert project_logger.level == logging.DEBUG

        logging_config.configure_logging(logging.ERROR, force=True)
        assert project_logger.level == logging.ERROR
        assert http_logger.level == logging.WARNING
    finally:
        project_logger.setLevel(previous_level)
        http_logger.setLevel(previous_http_level)


def test_structured_logger_renders_bound_context(caplog):
    caplog.set_level(logging.INFO, logger="slovnik.tests")
    logger = get_logger("slovnik.tests").bind(component="test")

    logger.info("Search request completed", context={"results": 2})

    assert caplog.records[-1].getMessage() == (
        'Search request completed | {"component": "test", "results": 2}'
    )
