# pyright: reportUnknownParameterType=false, reportUnknownMemberType=false
from unittest.mock import Mock

import pytest

from ign_vault.networking.classifier import ErrorClassifier
from ign_vault.networking.errors import ClientError, ServerError
from ign_vault.networking.models import Response


def _response(status, body=b"", reason=""):
    return Response(
        status_code=status,
        headers={"Content-Type": "application/json"},
        body=body,
        reason=reason,
    )


@pytest.mark.parametrize("status", [200, 204, 301, 302, 399])
def test_below_400_passes_through_unchanged(status):
    response = _response(status, body=b'{"data": {}}')

    result = ErrorClassifier().check(response)

    assert result.ok
    assert result.value is response
    assert result.value.body == b'{"data": {}}'
    assert result.meta["status_code"] == status


@pytest.mark.parametrize("status", [400, 403, 404, 429, 499])
def test_4xx_is_client_error(status):
    response = _response(status, body=b'{"errors": []}', reason="Bad")

    result = ErrorClassifier().check(response)

    assert not result.ok
    assert type(result.error) is ClientError
    assert not isinstance(result.error, ServerError)
    assert result.error.status_code == status
    assert result.error.response is response


@pytest.mark.parametrize("status", [500, 502, 503, 599])
def test_5xx_is_server_error(status):
    result = ErrorClassifier().check(_response(status, reason="Down"))

    assert not result.ok
    assert isinstance(result.error, ServerError)
    assert result.error.status_code == status


def test_error_message_carries_status_reason_and_body():
    response = _response(
        404, body=b'{"errors": ["no handler"]}', reason="Not Found"
    )

    result = ErrorClassifier().check(response)

    assert result.error.message == (
        'Vault call failed (404 - Not Found).\n{"errors": ["no handler"]}'
    )


def test_error_body_stays_readable_after_logging():
    response = _response(503, body=b'{"errors": ["sealed"]}', reason="Down")

    result = ErrorClassifier(Mock()).check(response)

    assert result.error.response.body == b'{"errors": ["sealed"]}'
    assert result.error.response.json() == {"errors": ["sealed"]}


def test_failures_are_logged_at_error_and_debug():
    logger = Mock()

    ErrorClassifier(logger).check(_response(400, body=b"nope", reason="Bad"))

    levels = [call.args[0] for call in logger.log.call_args_list]
    assert levels == [40, 10]
    assert "Vault call failed (400 - Bad)." in logger.log.call_args_list[0].args
    assert "nope" in logger.log.call_args_list[1].args[1]


def test_success_is_not_logged():
    logger = Mock()

    ErrorClassifier(logger).check(_response(200))

    logger.log.assert_not_called()


def test_raise_for_status():
    classifier = ErrorClassifier()
    ok = _response(200)

    assert classifier.raise_for_status(ok) is ok
    with pytest.raises(ClientError):
        classifier.raise_for_status(_response(401, reason="Unauthorized"))
