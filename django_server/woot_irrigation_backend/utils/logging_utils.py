import logging

LOGGER_NAME = 'woot_irrigation'


def get_logger() -> logging.Logger:
    """
    Returns the application logger. Pass extra={'resource_id': <uuid>} to have the record persisted as a LogMessage.
    """
    return logging.getLogger(LOGGER_NAME)
