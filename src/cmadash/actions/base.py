"""Base action group with common dependency wiring and the error boundary."""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, TypeVar

from pydantic import BaseModel

from cmadash.core.config import AppSettings
from cmadash.core.exceptions import CmaDashError, NotFoundError
from cmadash.core.protocols import ISheetFetcher
from cmadash.models.dashboard import DashboardDocument
from cmadash.models.results import ActionResult
from cmadash.persistence.gateway import PersistenceGateway

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def action(result_type: type[BaseModel] = ActionResult) -> Callable[[F], F]:
    """Convert any failure inside an action into ``result_type(success=False)``.

    Domain errors are expected outcomes and logged at WARNING; anything else
    is logged with its traceback.
    """
    def decorator(fn: F) -> F:
        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return fn(*args, **kwargs)
            except CmaDashError as exc:
                logger.warning("%s failed: %s", fn.__qualname__, exc)
                return result_type(success=False, error=str(exc))
            except Exception as exc:
                logger.exception("%s failed", fn.__qualname__)
                return result_type(success=False, error=str(exc) or exc.__class__.__name__)
        return wrapper  # type: ignore[return-value]
    return decorator


class BaseActions:
    """Common base for all action groups.

    Settings, the persistence gateway and (where sheets are read) the sheet
    fetcher are injected at construction time.
    """

    def __init__(
        self,
        *,
        settings: AppSettings,
        gateway: PersistenceGateway,
        fetcher: ISheetFetcher | None = None,
    ) -> None:
        self._settings = settings
        self._gateway = gateway
        self._fetcher = fetcher

    def _require_dashboard(self, use_cache: bool = True) -> DashboardDocument:
        doc = self._gateway.load_dashboard(use_cache=use_cache)
        if doc is None:
            raise NotFoundError("Dashboard data")
        return doc
