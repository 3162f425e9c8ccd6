from football_proxy.schemas.football import VALID_LEAGUE_CODES


def test_health_reports_cache_and_codes(client):
    client.get("/api/team/1")

    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["upstream"] == "https://stub.football-data.test/v4"
    assert data["cache"] == {"size": 1, "ttl_seconds": 300}
    assert data["league_codes"] == VALID_LEAGUE_CODES


def test_health_is_not_cached(client, cache):
    client.get("/health")
    assert cache.get_stats()["size"] == 0


def test_root_lists_endpoints(client):
    data = client.get("/").json()
    assert "/api/league-data/{leagueCode}" in data["endpoints"]


def test_process_time_header(client):
    response = client.get("/api/team/1")
    assert "x-process-time" in response.headers


def test_cors_allows_configured_origin(client):
    response = client.get("/api/team/1", headers={"Origin": "http://localhost:3000"})
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"


def test_cached_response_goes_through_cors(client, upstream):
    client.get("/api/team/1")
    response = client.get("/api/team/1", headers={"Origin": "http://localhost:3000"})

    assert upstream.calls == ["/teams/1"]
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"
