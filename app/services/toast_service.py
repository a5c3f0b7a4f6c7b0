"""
Portfolio API - Toast Service
Maps a toast variant onto one primitive of a toast display library
"""

from collections import deque
from dataclasses import dataclass
from typing import Optional, Dict, Any, List, Callable, Protocol

import structlog

from app.schemas import ToastPayload, ToastRequest, ToastVariant

DESTRUCTIVE_STYLE: Dict[str, str] = {"maxWidth": "100%", "color": "red"}
TOAST_QUEUE_MAXLEN = 100


class Toaster(Protocol):
    """Display primitives of a toast library (sonner's toast / .error / .success)."""

    def message(self, title: str, **options: Any) -> None: ...

    def error(self, title: str, **options: Any) -> None: ...

    def success(self, title: str, **options: Any) -> None: ...


class LogToaster:
    """Stateless toaster that emits each toast as a structured log event."""

    def __init__(self, logger: Any = None):
        self.logger = logger if logger is not None else structlog.get_logger()

    def message(self, title: str, **options: Any) -> None:
        self.logger.info("toast", type="default", title=title, **options)

    def error(self, title: str, **options: Any) -> None:
        self.logger.info("toast", type="error", title=title, **options)

    def success(self, title: str, **options: Any) -> None:
        self.logger.info("toast", type="success", title=title, **options)


class ToastQueue:
    """
    Toaster that records sonner-shaped payloads for a frontend to render.

    Holds at most `maxlen` payloads; the oldest are dropped first.
    drain() hands them over and empties the queue.
    """

    def __init__(self, maxlen: int = TOAST_QUEUE_MAXLEN):
        self._pending: deque = deque(maxlen=maxlen)

    def _push(self, kind: str, title: str, options: Dict[str, Any]) -> None:
        self._pending.append(ToastPayload(
            type=kind,
            title=title,
            description=options.get("description"),
            style=options.get("style"),
        ))

    def message(self, title: str, **options: Any) -> None:
        self._push("default", title, options)

    def error(self, title: str, **options: Any) -> None:
        self._push("error", title, options)

    def success(self, title: str, **options: Any) -> None:
        self._push("success", title, options)

    @property
    def pending(self) -> List[ToastPayload]:
        return list(self._pending)

    def drain(self) -> List[ToastPayload]:
        pending = list(self._pending)
        self._pending.clear()
        return pending


class ToastService:
    """Dispatches toast requests to a Toaster."""

    def __init__(self, toaster: Toaster):
        self.toaster = toaster

    def dispatch(self, request: ToastRequest) -> None:
        """Exactly one primitive call per request."""
        if request.variant is ToastVariant.DESTRUCTIVE:
            self.toaster.error(
                request.title,
                description=request.description,
                style=dict(DESTRUCTIVE_STYLE),
            )
        elif request.variant is ToastVariant.SUCCESS:
            self.toaster.success(request.title, description=request.description)
        else:
            self.toaster.message(request.title, description=request.description)

    def toast(
        self,
        title: str,
        description: Optional[str] = None,
        variant: ToastVariant | str | None = None,
    ) -> None:
        self.dispatch(ToastRequest(title=title, description=description, variant=variant))


@dataclass(frozen=True)
class ToastHandle:
    """What use_toast() hands to call sites."""
    toast: Callable[..., None]


toast_service = ToastService(LogToaster())


def toast(
    title: str,
    description: Optional[str] = None,
    variant: ToastVariant | str | None = None,
) -> None:
    toast_service.toast(title, description=description, variant=variant)


def use_toast() -> ToastHandle:
    return ToastHandle(toast=toast)
