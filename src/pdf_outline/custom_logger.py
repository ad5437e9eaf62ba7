import logging
from pathlib import Path

from .config import LOG_FILE, LOG_LEVEL


# define a function that will return a logger object

def get_logger(name: str = "pdf_outline") -> logging.Logger:
    # Set up logging configuration; basicConfig is a no-op once the root
    # logger has handlers (e.g. under pytest or an embedding application)
    if not logging.getLogger().handlers:
        Path(LOG_FILE).parent.mkdir(parents=True, exist_ok=True)
        logging.basicConfig(
            filename=LOG_FILE,
            level=getattr(logging, LOG_LEVEL, logging.INFO),
            format='%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    # Create a logger instance
    logger = logging.getLogger(name)
    return logger
