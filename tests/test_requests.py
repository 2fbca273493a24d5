import json
from dataclasses import replace

import pytest

from reqtrail.methods import Method
from reqtrail.partial import PartialRequestData
from reqtrail.requests import (
    JsonBody,
    RawBody,
    RequestData,
    RequestEntity,
    body_from_dict,
    body_to_dict,
    parse_body,
)
from reqtrail.url import RawUrl, UrlInfo, parse_url


def test_parse_body_json_object():
    assert parse_body('{"a": 1}') == JsonBody({"a": 1})


@pytest.mark.parametrize("text", ["hello", "", "NaN", "{invalid = json}"])
def test_parse_body_keeps_raw(text):
    assert parse_body(text) == RawBody(text)


def test_json_body_str_is_compact_and_round_trips():
    body = JsonBody({"a": [1, 2], "b": {"c": None}})
    text = str(body)
    assert " " not in text
    assert json.loads(text) == body.value


def test_raw_body_str():
    assert str(RawBody("some text")) == "some text"


@pytest.mark.parametrize("body", [RawBody("x"), JsonBody([1, "two"]), JsonBody({"k": True})])
def test_body_dict_round_trip(body):
    assert body_from_dict(body_to_dict(body)) == body


def test_body_from_dict_rejects_unknown_tag():
    with pytest.raises(ValueError):
        body_from_dict({"Other": 1})


def test_with_url_parses_or_keeps_raw():
    assert RequestData().with_url("google.com").url == UrlInfo.parse("google.com")
    assert RequestData().with_url("not a url!").url == RawUrl("not a url!")


def test_with_url_does_not_share_headers():
    first = RequestData(headers={"a": "b"})
    second = first.with_url("duck.com")
    second.headers["c"] = "d"
    assert first.headers == {"a": "b"}


def test_merge_of_saved_and_new_input():
    first = replace(
        RequestData().with_url("https://google.com"),
        method=Method.GET,
        headers={"User-Agent": "treq-test"},
    )
    partial = PartialRequestData(
        url=parse_url("https://google.com"),
        method=Method.POST,
        body=JsonBody({"Hello": "World"}),
    )
    expected = RequestData(
        url=parse_url("https://google.com"),
        method=Method.POST,
        headers={"User-Agent": "treq-test"},
        body=JsonBody({"Hello": "World"}),
    )
    assert first.merge(partial) == expected


def test_merge_keeps_method_when_absent():
    base = RequestData(method=Method.PUT)
    assert base.merge(PartialRequestData()).method == Method.PUT


def test_merge_combines_validated_urls():
    base = RequestData().with_url("example.com/a?x=1")
    other = PartialRequestData(url=UrlInfo.parse("example.com:8080?y=2"))
    merged = base.merge(other)
    assert merged.url == UrlInfo.parse("example.com/a?x=1").overwritten_by(
        UrlInfo.parse("example.com:8080?y=2")
    )


def test_merge_raw_url_replaces():
    base = RequestData().with_url("example.com")
    merged = base.merge(PartialRequestData(url=RawUrl("weird url")))
    assert merged.url == RawUrl("weird url")


def test_merge_extends_headers():
    base = RequestData(headers={"a": "1", "b": "2"})
    merged = base.merge(PartialRequestData(headers={"b": "3", "c": "4"}))
    assert merged.headers == {"a": "1", "b": "3", "c": "4"}
    assert base.headers == {"a": "1", "b": "2"}


def test_merge_json_objects():
    base = RequestData(body=JsonBody({"name": "Thales", "age": 1}))
    merged = base.merge(PartialRequestData(body=JsonBody({"age": 40, "job": "Dev"})))
    assert merged.body == JsonBody({"name": "Thales", "age": 40, "job": "Dev"})


def test_merge_non_object_body_replaces():
    base = RequestData(body=JsonBody({"a": 1}))
    merged = base.merge(PartialRequestData(body=JsonBody([1, 2])))
    assert merged.body == JsonBody([1, 2])
    assert base.merge(PartialRequestData(body=RawBody("r"))).body == RawBody("r")


def test_merge_keeps_body_when_absent():
    base = RequestData(body=RawBody("keep"))
    assert base.merge(PartialRequestData()).body == RawBody("keep")


def test_default_to_dict():
    assert RequestData().to_dict() == {
        "url": {"Raw": ""},
        "method": "GET",
        "headers": {},
        "body": {"Raw": ""},
    }


@pytest.mark.parametrize(
    "request_data",
    [
        RequestData(),
        RequestData(
            url=parse_url("https://example.com:8080/a/b?x=1#top"),
            method=Method.PATCH,
            headers={"Content-Type": "application/json"},
            body=JsonBody({"nested": {"list": [1, 2.5, False]}}),
        ),
        RequestData(url=RawUrl("???"), method=Method.DELETE, body=RawBody("text")),
    ],
)
def test_json_round_trip(request_data):
    assert RequestData.from_json(request_data.to_json()) == request_data


@pytest.mark.parametrize(
    "text",
    ["not json", "[]", '{"url": {"Raw": ""}}', RequestData().to_json().replace("GET", "FETCH")],
)
def test_from_json_rejects_bad_input(text):
    with pytest.raises(ValueError):
        RequestData.from_json(text)


def test_entity_undo_redo_sequence():
    first = RequestData().with_url("google.com")
    second = replace(RequestData().with_url("duck.com"), headers={"private": "higher"})
    third = RequestData().with_url("bing.com")

    entity = RequestEntity(first)
    entity.update(second)
    entity.update(third)
    assert entity.current() == third

    entity.undo()
    assert entity.current() == second
    entity.undo()
    assert entity.current() == first
    entity.undo()
    assert entity.current() == first

    entity.redo()
    assert entity.current() == second
    entity.redo()
    assert entity.current() == third
    entity.redo()
    entity.redo()
    assert entity.current() == third

    entity.undo()
    assert entity.current() == second


def test_entity_update_drops_redo_history():
    a, b, c = (RequestData().with_url(u) for u in ("a.com", "b.com", "c.com"))
    entity = RequestEntity(a)
    entity.update(b)
    entity.undo()
    entity.update(c)
    entity.redo()
    assert entity.current() == c
    entity.undo()
    assert entity.current() == a


def test_entity_default_is_default_request():
    assert RequestEntity().current() == RequestData()