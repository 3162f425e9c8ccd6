import pytest

from football_proxy.core.errors import ValidationError
from football_proxy.schemas.football import LeagueCode
from football_proxy.services.league_service import LeagueDataService
from football_proxy.services.validators import is_positive_int_id, validate_league_code


@pytest.mark.parametrize("raw", ["1", "123", "0042"])
def test_positive_ids(raw):
    assert is_positive_int_id(raw)


@pytest.mark.parametrize("raw", ["", "0", "00", "-5", "abc", "1.5", " 1", "1e3", "1\n", "١٢٣", "１２３"])
def test_rejected_ids(raw):
    assert not is_positive_int_id(raw)


def test_valid_league_code():
    assert validate_league_code("PL") is LeagueCode.PL


def test_invalid_league_code_lists_whitelist():
    with pytest.raises(ValidationError) as excinfo:
        validate_league_code("XX")

    assert excinfo.value.status_code == 400
    assert excinfo.value.message.endswith("PL, PD, BL1, SA, FL1, CL, PPL")


def test_endpoint_order():
    assert LeagueDataService.build_endpoints(LeagueCode.SA) == [
        "/competitions/SA/standings",
        "/competitions/SA/matches",
        "/competitions/SA/scorers",
    ]
    assert LeagueDataService.build_endpoints(LeagueCode.CL) == [
        "/competitions/CL/standings",
        "/competitions/CL/matches",
    ]
