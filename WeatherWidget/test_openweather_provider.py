"""Tests for OpenWeather provider."""
import pytest
import requests
from unittest.mock import Mock, patch
from openweather_provider import OpenWeatherProvider, DEFAULT_LAT, DEFAULT_LON
from weather_provider import FetchError, FETCH_ERROR_MESSAGE
from weather_data import WeatherPayload


@pytest.fixture
def sample_openweather_response():
    """Sample OpenWeather API response."""
    return {
        "coord": {"lon": 46.7386, "lat": 24.7743},
        "weather": [
            {
                "id": 800,
                "main": "Clear",
                "description": "clear sky",
                "icon": "01d"
            }
        ],
        "base": "stations",
        "main": {
            "temp": 300.0,
            "feels_like": 298.2,
            "temp_min": 295.0,
            "temp_max": 305.0,
            "pressure": 1014,
            "humidity": 12
        },
        "visibility": 10000,
        "wind": {"speed": 3.13, "deg": 93},
        "clouds": {"all": 0},
        "dt": 1684929490,
        "sys": {"country": "SA"},
        "timezone": 10800,
        "name": "Riyadh",
        "id": 108410
    }


@pytest.fixture
def provider():
    """Create OpenWeather provider instance."""
    return OpenWeatherProvider(api_key="test_key")


def _ok_response(body):
    mock_response = Mock()
    mock_response.ok = True
    mock_response.status_code = 200
    mock_response.json.return_value = body
    return mock_response


def test_openweather_provider_success(provider, sample_openweather_response):
    """Test successful API call and parsing."""
    with patch('openweather_provider.requests.get') as mock_get:
        mock_get.return_value = _ok_response(sample_openweather_response)

        payload = provider.get_current()

        assert isinstance(payload, WeatherPayload)
        assert payload.name == "Riyadh"
        assert payload.main.temp == 300.0
        assert payload.main.temp_min == 295.0
        assert payload.main.temp_max == 305.0
        assert payload.weather[0].description == "clear sky"
        assert payload.weather[0].icon == "01d"


def test_openweather_provider_request_parameters(provider, sample_openweather_response):
    """Test that the fixed coordinates and key are sent, without a units parameter."""
    with patch('openweather_provider.requests.get') as mock_get:
        mock_get.return_value = _ok_response(sample_openweather_response)

        provider.get_current()

        mock_get.assert_called_once()
        args, kwargs = mock_get.call_args
        assert args[0] == "https://api.openweathermap.org/data/2.5/weather"
        assert kwargs["params"] == {"lat": DEFAULT_LAT, "lon": DEFAULT_LON, "appid": "test_key"}
        assert kwargs["timeout"] is None


def test_openweather_provider_uses_session(sample_openweather_response):
    """Test that a supplied session is used instead of the module-level API."""
    session = Mock()
    session.get.return_value = _ok_response(sample_openweather_response)
    provider = OpenWeatherProvider(api_key="test_key", session=session, timeout=5)

    provider.get_current()

    session.get.assert_called_once()
    assert session.get.call_args.kwargs["timeout"] == 5


def test_openweather_provider_each_call_hits_api(provider, sample_openweather_response):
    """Nothing is cached between invocations."""
    with patch('openweather_provider.requests.get') as mock_get:
        mock_get.return_value = _ok_response(sample_openweather_response)

        provider.get_current()
        provider.get_current()

        assert mock_get.call_count == 2


def test_openweather_provider_missing_fields(provider):
    """Missing blocks are not errors."""
    with patch('openweather_provider.requests.get') as mock_get:
        mock_get.return_value = _ok_response({"name": "Riyadh", "weather": []})

        payload = provider.get_current()

        assert payload.main is None
        assert payload.weather == ()


def test_openweather_provider_http_error(provider):
    """Test handling of HTTP errors."""
    with patch('openweather_provider.requests.get') as mock_get:
        mock_response = Mock()
        mock_response.ok = False
        mock_response.status_code = 401
        mock_response.json.return_value = {
            "cod": 401,
            "message": "Invalid API key"
        }
        mock_get.return_value = mock_response

        with pytest.raises(FetchError) as exc_info:
            provider.get_current()

        # The cause is logged, never shown
        assert str(exc_info.value) == FETCH_ERROR_MESSAGE
        assert "Invalid API key" not in str(exc_info.value)


def test_openweather_provider_server_error_non_json(provider):
    """Test handling of a 5xx with a non-JSON body."""
    with patch('openweather_provider.requests.get') as mock_get:
        mock_response = Mock()
        mock_response.ok = False
        mock_response.status_code = 502
        mock_response.json.side_effect = ValueError("not json")
        mock_response.text = "<html>Bad Gateway</html>"
        mock_get.return_value = mock_response

        with pytest.raises(FetchError) as exc_info:
            provider.get_current()

        assert str(exc_info.value) == FETCH_ERROR_MESSAGE


def test_openweather_provider_network_error(provider):
    """Test handling of network errors."""
    with patch('openweather_provider.requests.get') as mock_get:
        mock_get.side_effect = requests.exceptions.ConnectionError("Connection refused")

        with pytest.raises(FetchError) as exc_info:
            provider.get_current()

        assert str(exc_info.value) == FETCH_ERROR_MESSAGE
        assert isinstance(exc_info.value.__cause__, requests.exceptions.ConnectionError)


def test_openweather_provider_invalid_json(provider):
    """Test handling of a 200 response whose body is not JSON."""
    with patch('openweather_provider.requests.get') as mock_get:
        mock_response = _ok_response(None)
        mock_response.json.side_effect = ValueError("Expecting value")
        mock_get.return_value = mock_response

        with pytest.raises(FetchError):
            provider.get_current()


def test_openweather_provider_json_not_object(provider):
    """Test handling of a JSON body that is not an object."""
    with patch('openweather_provider.requests.get') as mock_get:
        mock_get.return_value = _ok_response(["unexpected"])

        with pytest.raises(FetchError):
            provider.get_current()
