import importlib
from unittest.mock import MagicMock

import pytest
from structlog.testing import CapturingLogger

from app.schemas import ToastRequest, ToastVariant
from app.services.toast_service import LogToaster, ToastQueue, ToastService, use_toast

# app.services re-exports the toast_service instance under the module name.
toast_module = importlib.import_module("app.services.toast_service")


@pytest.fixture
def toaster():
    return MagicMock(spec=["message", "error", "success"])


@pytest.fixture
def toasts(toaster):
    return ToastService(toaster)


def test_destructive_uses_error_primitive(toasts, toaster):
    toasts.toast("Save failed", description="Disk full", variant="destructive")

    toaster.error.assert_called_once_with(
        "Save failed",
        description="Disk full",
        style={"maxWidth": "100%", "color": "red"},
    )
    assert len(toaster.method_calls) == 1


def test_success_uses_success_primitive(toasts, toaster):
    toasts.toast("Saved", description="All good", variant=ToastVariant.SUCCESS)

    toaster.success.assert_called_once_with("Saved", description="All good")
    assert len(toaster.method_calls) == 1


@pytest.mark.parametrize("variant", [None, "default", "warning", "", 42])
def test_anything_else_is_neutral(toasts, toaster, variant):
    toasts.toast("Heads up", description="Something happened", variant=variant)

    toaster.message.assert_called_once_with("Heads up", description="Something happened")
    assert len(toaster.method_calls) == 1


def test_description_is_optional(toasts, toaster):
    toasts.toast("Hi")

    toaster.message.assert_called_once_with("Hi", description=None)


def test_primitive_errors_propagate(toasts, toaster):
    toaster.success.side_effect = RuntimeError("display gone")

    with pytest.raises(RuntimeError):
        toasts.toast("Saved", variant="success")


def test_request_coerces_unknown_variant():
    assert ToastRequest(title="t", variant="nonsense").variant is ToastVariant.DEFAULT
    assert ToastRequest(title="t").variant is ToastVariant.DEFAULT
    assert ToastRequest(title="t", variant="destructive").variant is ToastVariant.DESTRUCTIVE


def test_queue_records_payloads():
    queue = ToastQueue()
    toasts = ToastService(queue)

    toasts.toast("Oops", description="Nope", variant="destructive")
    toasts.toast("Done", variant="success")

    drained = [p.model_dump() for p in queue.drain()]
    assert drained == [
        {"type": "error", "title": "Oops", "description": "Nope", "style": {"maxWidth": "100%", "color": "red"}},
        {"type": "success", "title": "Done", "description": None, "style": None},
    ]
    assert queue.pending == []


def test_destructive_style_is_not_shared():
    queue = ToastQueue()
    toasts = ToastService(queue)

    toasts.toast("a", variant="destructive")
    queue.pending[0].style["color"] = "blue"
    toasts.toast("b", variant="destructive")

    assert queue.pending[1].style["color"] == "red"


def test_use_toast_exposes_module_toast(monkeypatch, toaster):
    monkeypatch.setattr(toast_module, "toast_service", ToastService(toaster))

    handle = use_toast()
    handle.toast("Hello", description="World")

    assert handle.toast is toast_module.toast
    toaster.message.assert_called_once_with("Hello", description="World")
    assert len(toaster.method_calls) == 1


def test_default_toaster_keeps_no_state():
    assert isinstance(toast_module.toast_service.toaster, LogToaster)


def test_log_toaster_emits_one_event_per_toast():
    capture = CapturingLogger()
    toasts = ToastService(LogToaster(capture))

    toasts.toast("Oops", description="Nope", variant="destructive")
    toasts.toast("Done", variant="success")

    assert [(c.method_name, c.args, c.kwargs) for c in capture.calls] == [
        ("info", ("toast",), {"type": "error", "title": "Oops", "description": "Nope",
                              "style": {"maxWidth": "100%", "color": "red"}}),
        ("info", ("toast",), {"type": "success", "title": "Done", "description": None}),
    ]


def test_queue_is_bounded():
    queue = ToastQueue(maxlen=10)
    toasts = ToastService(queue)

    for i in range(1000):
        toasts.toast(f"t{i}")

    pending = queue.pending
    assert len(pending) == 10
    assert pending[0].title == "t990"
    assert pending[-1].title == "t999"
