import logging
import os

LOGGER_NAME = "chatshelf"

def log_level():
   """Level name from CHATSHELF_LOG_LEVEL, INFO when unset."""
   return os.environ.get('CHATSHELF_LOG_LEVEL', 'INFO').upper()

def get_logger(name=None):
   """
   The chatshelf logger, or a child of it for ``name``.

   Only the root chatshelf logger gets a handler; children propagate to it
   so a single CHATSHELF_LOG_LEVEL setting governs the whole package.
   """
   if name:
       return logging.getLogger(f"{LOGGER_NAME}.{name}")

   logger = logging.getLogger(LOGGER_NAME)
   logger.handlers.clear()

   # Keep controller and store messages out of the server's root handlers
   logger.propagate = False

   formatter = logging.Formatter("\033[36mCHATSHELF\033[0m: %(levelname)-8s %(message)s")
   handler = logging.StreamHandler()
   handler.setFormatter(formatter)
   logger.addHandler(handler)

   logger.setLevel(log_level())
   return logger

def configure_server_logging():
   """Match uvicorn's loggers to the chatshelf level; access logs only at DEBUG."""
   level = log_level()
   logging.getLogger('uvicorn.error').setLevel(level)
   logging.getLogger('uvicorn.access').setLevel(logging.DEBUG if level == 'DEBUG' else logging.WARNING)

logger = get_logger()
