from __future__ import annotations

import logging
from typing import Any, Iterable, List, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import InvalidInputError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def parse_payloads(model: Type[M], items: Iterable[Any], *, resource: str) -> List[M]:
    """Validate raw JSON objects of one backend resource.

    The first malformed item aborts the whole batch with InvalidInputError,
    pointing at its index in the payload.
    """

    parsed: List[M] = []
    for index, item in enumerate(items):
        try:
            parsed.append(model.model_validate(item))
        except PydanticValidationError as exc:
            logger.debug("Rejected %s[%d]: %s", resource, index, exc)
            first = exc.errors()[0]
            location = ".".join(str(part) for part in first.get("loc", ())) or "<root>"
            raise InvalidInputError(f"{resource}[{index}].{location}: {first.get('msg')}") from exc
    return parsed
