"""Convention-based field accessor."""

import inspect
import logging
from typing import Any

logger = logging.getLogger(__name__)


class ConventionAccessor:
    """Reads `{name}{suffix}` from a record, falling back to `name` itself.

    With the default suffix, field "title" is read from `record.title_for_index`
    (called if it is a method), else from `record.title`. A missing attribute
    or an accessor that raises yields None: the field is simply absent.
    """

    def __init__(self, suffix: str = "_for_index") -> None:
        self._suffix = suffix

    def get(self, record: Any, name: str) -> Any | None:
        for attr in (f"{name}{self._suffix}", name):
            try:
                value = getattr(record, attr)
            except AttributeError:
                continue
            except Exception as e:
                logger.debug(f"Accessor '{attr}' raised {e!r}; treating value as absent")
                return None
            if inspect.ismethod(value):
                try:
                    return value()
                except Exception as e:
                    logger.debug(f"Accessor '{attr}' raised {e!r}; treating value as absent")
                    return None
            return value
        return None
