import logging
from typing import Type

from kinokritik.core.exceptions import BaseAppException, InvalidInputException, MovieNotFoundException

logger = logging.getLogger(__name__)


def handle_exception(e: Exception, message: str, error_class: Type[BaseAppException] = BaseAppException) -> BaseAppException:
    """Map a service failure onto the response the route should send.

    Invalid input and missing movies keep their own status and message;
    anything else is logged and replaced by `message`.
    """
    if isinstance(e, (InvalidInputException, MovieNotFoundException)):
        return e
    logger.error(f"{message}: {e}", exc_info=e)
    return error_class(message)
