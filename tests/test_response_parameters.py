import pytest

from tgbot_types.chat import User
from tgbot_types.primitive import DeserializeError
from tgbot_types.response_parameters import (
    ResponseError,
    ResponseParameters,
    ResponseSuccess,
    parse_response,
)


def test_success_uses_parser():
    response = parse_response(
        {"ok": True, "result": {"id": 5, "first_name": "Bot", "is_bot": True}}, User.from_json
    )
    assert isinstance(response, ResponseSuccess)
    assert response.result == User.from_json({"id": 5, "first_name": "Bot", "is_bot": True})


def test_error_with_parameters():
    response = parse_response(
        {
            "ok": False,
            "description": "Too Many Requests",
            "parameters": {"retry_after": 30},
        },
        lambda value: value,
    )
    assert response == ResponseError(
        description="Too Many Requests",
        parameters=ResponseParameters(migrate_to_chat_id=None, retry_after=30),
    )


def test_error_without_parameters():
    response = parse_response({"ok": False, "description": "Bad Request"}, lambda value: value)
    assert response == ResponseError(description="Bad Request", parameters=None)


@pytest.mark.parametrize(
    "data",
    [
        {"ok": True},
        {"ok": True, "result": None},
        {"ok": True, "result": 1, "description": "extra"},
        {"ok": False},
        {"ok": False, "description": "oops", "result": 1},
        {"ok": True, "description": "oops"},
    ],
)
def test_ambiguous_responses(data):
    with pytest.raises(DeserializeError, match="ambiguous response"):
        parse_response(data, lambda value: value)


def test_ok_is_required():
    with pytest.raises(DeserializeError, match="ok"):
        parse_response({"result": 1}, lambda value: value)


def test_result_parse_error_propagates():
    with pytest.raises(DeserializeError, match="is_bot"):
        parse_response({"ok": True, "result": {"id": 1, "first_name": "A"}}, User.from_json)


def test_response_parameters_from_json():
    params = ResponseParameters.from_json({"migrate_to_chat_id": -1001, "retry_after": None})
    assert params == ResponseParameters(migrate_to_chat_id=-1001, retry_after=None)


def test_response_parameters_bad_type():
    with pytest.raises(DeserializeError, match="retry_after"):
        ResponseParameters.from_json({"retry_after": "soon"})