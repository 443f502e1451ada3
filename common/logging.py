import logging
import os
from common.config import Config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE = 'app.log'


def setup_logging(name: str = "legal_assist", log_dir: str = None, level: str = None):
    """Attach app.log and console handlers to the named logger and return it.

    Calling it again for the same logger does not add duplicate handlers.
    """
    log_dir = log_dir or Config.LOG_DIR
    os.makedirs(log_dir, exist_ok=True)

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, (level or Config.LOG_LEVEL).upper(), logging.INFO))
    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT)
    file_handler = logging.FileHandler(os.path.join(log_dir, LOG_FILE), mode='a', encoding='utf-8')
    console_handler = logging.StreamHandler()
    for handler in (file_handler, console_handler):
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


logger = setup_logging()
