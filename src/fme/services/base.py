"""BaseService — shared construction for fme services."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fme.config.settings import FmeSettings


class BaseService:
    """Base for service-layer classes.

    Services get the frozen settings at construction time and read
    behaviour switches (dry run, file filters) from them.

    Usage::

        class EditService(BaseService):
            def apply(self, op: str, directory: Path, ...) -> ServiceResult:
                ...
    """

    def __init__(self, settings: FmeSettings) -> None:
        self._settings = settings
