from types import SimpleNamespace

import pytest

from pickupwatch.action.action import Action
from pickupwatch.util.exceptions import MissingConfigurationError


class DummyAction(Action):
    def __init__(self, error=None):
        self.error = error
        self.called_with = None

    def run(self, request_):
        if self.error:
            raise self.error
        self.called_with = request_
        return {"ok": True}


@pytest.fixture
def request_():
    return SimpleNamespace(args=SimpleNamespace(to_dict=lambda: {}))


def test_route_formats_class_name():
    action = DummyAction()
    assert action.route == "dummy"
    assert action.method == "GET"


def test_trigger_returns_run_result(request_):
    action = DummyAction()

    result = action.trigger(request_)

    assert result == {"ok": True}
    assert action.called_with is request_


def test_trigger_reports_exception_to_sns_and_reraises(mocker, request_):
    action = DummyAction(error=ValueError("boom"))
    post_sns = mocker.patch("pickupwatch.action.action.post_exception_to_sns")

    with pytest.raises(ValueError):
        action.trigger(request_)

    post_sns.assert_called_once()
    assert "DummyAction" in post_sns.call_args.args[0]


def test_trigger_reraises_original_error_when_sns_fails(mocker, request_):
    action = DummyAction(error=MissingConfigurationError("PUSHOVER_TOKEN"))
    post_sns = mocker.patch(
        "pickupwatch.action.action.post_exception_to_sns",
        side_effect=RuntimeError("Unable to locate credentials"),
    )

    with pytest.raises(MissingConfigurationError) as exc_info:
        action.trigger(request_)

    post_sns.assert_called_once()
    assert exc_info.value.name == "PUSHOVER_TOKEN"
