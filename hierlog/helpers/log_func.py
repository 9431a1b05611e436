"""Message composition helpers"""

from typing import Iterable

from hierlog.core.severity import Severity
from hierlog.helpers.parameter import DEFAULT_DELIMITER, ParameterPair

# Separates the base message from the first parameter
FIRST_DELIMITER = ";"


def compose_message(message: str, parameters: Iterable[ParameterPair]) -> str:
    """
    Append parameters to a base message in the order given.

    The first parameter is introduced with ";" unless it carries a custom
    delimiter, the following ones with their own delimiter (", " by
    default). Empty pairs add nothing.

    Example:
        compose_message("message", [ParameterPair("a", "1"), ParameterPair("b", "2")])
        # "message; a='1', b='2'"
    """
    parts = [message]
    first = True
    for parameter in parameters:
        if parameter.is_empty():
            continue
        if first and parameter.delimiter == DEFAULT_DELIMITER:
            parts.append(parameter.render(FIRST_DELIMITER))
        else:
            parts.append(parameter.render())
        first = False
    return "".join(parts)


def log_func(logger, level: Severity, log_id: int, message: str, *parameters: ParameterPair) -> None:
    """
    Log ``message`` with parameters through ``logger``.

    Args:
        logger: Target logger
        level: Message severity
        log_id: Numeric message identifier
        message: Base message
        *parameters: ParameterPair instances appended in call order
    """
    if not logger.need_log(level):
        return
    logger.log(level, log_id, compose_message(message, parameters))
