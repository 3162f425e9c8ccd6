import asyncio

import httpx
import pytest

from football_proxy.core.errors import UpstreamError, UpstreamTimeout
from football_proxy.services.football_data_client import FootballDataClient


def _get(handler, path):
    async def scenario():
        client = FootballDataClient("secret-token", transport=httpx.MockTransport(handler))
        try:
            return await client.get(path)
        finally:
            await client.aclose()

    return asyncio.run(scenario())


def test_request_targets_base_url_with_auth_header():
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        seen["token"] = request.headers.get("X-Auth-Token")
        return httpx.Response(200, json={"standings": []})

    body = _get(handler, "/competitions/PL/standings")

    assert body == {"standings": []}
    assert seen == {
        "url": "https://api.football-data.org/v4/competitions/PL/standings",
        "token": "secret-token",
    }


def test_timeout_is_fixed_at_ten_seconds():
    client = FootballDataClient("k")
    assert client._client.timeout == httpx.Timeout(10.0)
    asyncio.run(client.aclose())


def test_non_2xx_raises_with_upstream_status_and_message():
    def handler(request):
        return httpx.Response(403, json={"message": "The resource you are looking for is restricted.", "errorCode": 403})

    with pytest.raises(UpstreamError) as excinfo:
        _get(handler, "/teams/1")

    assert excinfo.value.status_code == 403
    assert excinfo.value.upstream_message == "The resource you are looking for is restricted."


def test_non_json_error_body_has_no_upstream_message():
    def handler(request):
        return httpx.Response(502, text="<html>Bad gateway</html>")

    with pytest.raises(UpstreamError) as excinfo:
        _get(handler, "/matches/1")

    assert excinfo.value.status_code == 502
    assert excinfo.value.upstream_message is None


def test_no_response_maps_to_timeout():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(UpstreamTimeout) as excinfo:
        _get(handler, "/teams/1")

    assert excinfo.value.status_code == 504


def test_connection_error_has_no_status():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(UpstreamError) as excinfo:
        _get(handler, "/teams/1")

    assert excinfo.value.upstream_status is None
    assert excinfo.value.status_code == 500


def test_single_attempt_per_call():
    calls = []

    def handler(request):
        calls.append(request.url.path)
        return httpx.Response(500, json={})

    with pytest.raises(UpstreamError):
        _get(handler, "/teams/1")

    assert calls == ["/v4/teams/1"]


def test_non_json_success_body_raises_upstream_error():
    def handler(request):
        return httpx.Response(200, text="<html>maintenance</html>")

    with pytest.raises(UpstreamError) as excinfo:
        _get(handler, "/teams/1")

    assert excinfo.value.status_code == 500
    assert excinfo.value.upstream_message is None
