import httpx
import pytest

from todo_service.core.exceptions import ErrorKind, UpstreamServiceError

from .weather_stubs import make_weather_client, weather_ok


def respond(*args, **kwargs):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(*args, **kwargs)
    return handler


class TestGetTodayWeather:
    def test_uses_first_entry(self):
        assert make_weather_client(weather_ok).get_today_weather() == "Sunny"

    def test_requests_configured_url(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return httpx.Response(200, json=[{"date": "01-01", "weather": "Snow"}])

        assert make_weather_client(handler).get_today_weather() == "Snow"
        assert seen == ["https://weather.test/weather.json"]

    @pytest.mark.parametrize("status_code", [400, 404, 500, 503])
    def test_error_status_is_upstream_fault(self, status_code):
        with pytest.raises(UpstreamServiceError) as exc_info:
            make_weather_client(respond(status_code)).get_today_weather()

        assert exc_info.value.kind == ErrorKind.UPSTREAM_FAULT
        assert exc_info.value.context["status_code"] == status_code

    @pytest.mark.parametrize("payload", [[], {"weather": "Sunny"}, None, [{"date": "01-01"}], ["Sunny"]])
    def test_empty_or_malformed_payload_is_upstream_fault(self, payload):
        with pytest.raises(UpstreamServiceError) as exc_info:
            make_weather_client(respond(200, json=payload)).get_today_weather()

        assert exc_info.value.kind == ErrorKind.UPSTREAM_FAULT

    def test_non_json_body_is_upstream_fault(self):
        with pytest.raises(UpstreamServiceError):
            make_weather_client(respond(200, text="<html>down</html>")).get_today_weather()

    def test_transport_error_is_upstream_fault(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(UpstreamServiceError) as exc_info:
            make_weather_client(handler).get_today_weather()

        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
