import logging

logger = logging.getLogger("streamwrap")


def streamlog(message, level=logging.INFO):
    logger.log(level, "[###STREAMWRAPLOG###] " + str(message))
