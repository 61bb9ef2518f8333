from pydantic import validate_call, ConfigDict
import logging

type_check_call = validate_call(config=ConfigDict(arbitrary_types_allowed=True))

def get_logger(name, level=logging.DEBUG):
    logger = logging.getLogger(name)
    logger.setLevel(level)

    return logger
