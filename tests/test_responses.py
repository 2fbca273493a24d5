import pytest

from reqtrail.responses import Response, ResponseStage, status_code_message


@pytest.mark.parametrize(
    ("code", "message"),
    [
        (100, "Continue"),
        (200, "OK"),
        (204, "No Content"),
        (301, "Moved Permanently"),
        (404, "Not Found"),
        (418, "I'm a teapot"),
        (500, "Internal Server Error"),
        (511, "Network Authentication Required"),
    ],
)
def test_known_status_messages(code, message):
    assert status_code_message(code) == message


@pytest.mark.parametrize("code", [0, 99, 209, 427, 509, 999, -1])
def test_unknown_status_is_undefined(code):
    assert status_code_message(code) == "undefined"


def test_response_defaults():
    response = Response()
    assert response.status == 0
    assert response.response_time_ms == 0
    assert response.headers == []
    assert response.body == ""
    assert response.stage is ResponseStage.EMPTY


def test_response_defaults_do_not_share_headers():
    first = Response()
    second = Response()
    first.headers.append(("a", "b"))
    assert second.headers == []


def test_response_equality():
    one = Response(status=200, body="Ok")
    other = Response(status=200, body="Ok")
    assert one == other
    assert one != Response(status=201, body="Ok")


def test_responses_differ_by_stage():
    stages = list(ResponseStage)
    responses = [Response(stage=stage) for stage in stages]
    assert [response.stage for response in responses] == stages
    assert sum(a == b for a in responses for b in responses) == len(stages)