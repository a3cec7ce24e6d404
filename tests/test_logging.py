import logging

from lrcsync.utils.logging import get_logger, setup_logging


def test_setup_logging_sets_level_and_replaces_handlers():
    logger = setup_logging(level="DEBUG")
    setup_logging(level="DEBUG")
    assert logger.name == "lrcsync"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_setup_logging_with_file(temp_dir):
    log_file = temp_dir / "logs" / "lrcsync.log"
    logger = setup_logging(level="INFO", log_file=log_file, verbose=True)
    logger.info("hello file")
    for handler in logger.handlers:
        handler.flush()
    assert "hello file" in log_file.read_text()
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()


def test_get_logger_names():
    assert get_logger("lrcsync.core.sync").name == "lrcsync.core.sync"
    assert get_logger().name == "lrcsync"
