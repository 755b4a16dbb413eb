"""Annotated field types for provider payloads that may carry nulls."""

from collections.abc import Callable
from typing import Annotated

from pydantic import BeforeValidator


def default_if_none(factory: Callable[[], object]) -> BeforeValidator:
    """Replace a null payload value with ``factory()`` before validation."""

    def _replace(value: object) -> object:
        return factory() if value is None else value

    return BeforeValidator(_replace)


# A null numeric value is read as 0 once, when the payload is parsed.
ZeroFloat = Annotated[float, default_if_none(float)]
ZeroInt = Annotated[int, default_if_none(int)]
OneInt = Annotated[int, default_if_none(lambda: 1)]
EmptyText = Annotated[str, default_if_none(str)]
TextList = Annotated[list[str], default_if_none(list)]
