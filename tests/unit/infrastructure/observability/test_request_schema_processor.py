from sourcegraph_client.infrastructure.observability.logging import request_schema_processor


def test_nests_http_fields_under_request():
    event = {
        "event": "Sourcegraph API call finished",
        "http_method": "GET",
        "http_url": "https://sg.local/api/repos",
        "http_status": 200,
        "duration_ms": 12.5,
        "component": "sourcegraph_client.infrastructure.http",
    }

    out = request_schema_processor(None, "info", event)

    assert out == {
        "event": "Sourcegraph API call finished",
        "component": "sourcegraph_client.infrastructure.http",
        "request": {"method": "GET", "url": "https://sg.local/api/repos", "status": 200, "duration_ms": 12.5},
    }


def test_events_without_http_fields_are_untouched():
    event = {"event": "hello", "cross_repo": True}

    assert request_schema_processor(None, "info", dict(event)) == event
