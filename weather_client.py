import enum
import logging
from typing import Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from weather_format import format_forecast, format_live
from weather_model import ForecastResponse, LiveWeatherResponse

logger = logging.getLogger(__name__)

WEATHER_API_BASE = "https://restapi.amap.com/v3/weather/weatherInfo"
USER_AGENT = "weather-app/1.0"
DEFAULT_TIMEOUT = 5.0

LIVE_FALLBACK = "No alerts found or an error occurred."
FORECAST_FALLBACK = "No forecast found or an error occurred."

T = TypeVar("T", bound=BaseModel)


def redact_url(url: str) -> str:
    """隐藏请求地址中的 key 参数, 用于日志和错误信息"""
    parsed = httpx.URL(url)
    if "key" not in parsed.params:
        return url
    return str(parsed.copy_set_param("key", "REDACTED"))


class FetchErrorKind(enum.Enum):
    TRANSPORT = "transport"
    STATUS = "status"
    DECODE = "decode"


class FetchError(Exception):
    """请求或解析天气接口失败"""

    def __init__(self, url: str, message: str, kind: FetchErrorKind,
                 status_code: Optional[int] = None):
        super().__init__(f"{message}: {redact_url(url)}")
        self.url = url
        self.message = message
        self.kind = kind
        self.status_code = status_code


class WeatherClient:
    """高德天气接口客户端

    持有一个共享的 httpx.AsyncClient, 可被并发的工具调用复用.
    """

    def __init__(self, api_key: str, base_url: str = WEATHER_API_BASE,
                 timeout: Optional[float] = DEFAULT_TIMEOUT,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_key = api_key
        self.base_url = base_url
        # timeout 为 None 时不设上限
        self._client = httpx.AsyncClient(
            headers={"User-Agent": USER_AGENT},
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "WeatherClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def build_url(self, location_code: str, extensions: bool = False) -> str:
        """ 拼接请求地址

        Args:
            location_code (str): 城市编码
            extensions (bool): True 时请求多日预报 (extensions=all)

        Returns:
            str: 完整的请求地址
        """
        params = {
            "key": self.api_key,
            "city": location_code,
            "output": "json",
        }
        if extensions:
            params["extensions"] = "all"
        return str(httpx.URL(self.base_url, params=params))

    async def fetch(self, url: str, model: Type[T]) -> T:
        """ 请求接口并解析为指定模型

        Raises:
            FetchError: 网络错误, 非 200 状态码或返回内容无法解析
        """
        logger.info("Making request to %s", redact_url(url))
        try:
            response = await self._client.get(url)
        except httpx.TimeoutException as e:
            raise FetchError(url, f"请求超时: {e!r}", FetchErrorKind.TRANSPORT) from e
        except httpx.HTTPError as e:
            raise FetchError(url, f"网络错误: {e!r}", FetchErrorKind.TRANSPORT) from e

        logger.info("Received response: %s %s", response.status_code, response.reason_phrase)

        if response.status_code != httpx.codes.OK:
            raise FetchError(
                url,
                f"返回错误: {response.status_code}",
                FetchErrorKind.STATUS,
                status_code=response.status_code,
            )

        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            raise FetchError(
                url,
                f"解析错误: {e.error_count()} 个字段不符合 {model.__name__}",
                FetchErrorKind.DECODE,
            ) from e

    async def get_current(self, location_code: str) -> str:
        """ 获取当天天气, 失败时返回固定提示文本 """
        logger.info("Received request for current weather with city code %s", location_code)
        url = self.build_url(location_code)
        try:
            result = await self.fetch(url, LiveWeatherResponse)
        except FetchError as e:
            logger.error("Failed to fetch current weather (%s): %s", e.kind.value, e)
            return LIVE_FALLBACK
        return format_live(result.lives)

    async def get_forecast(self, location_code: str) -> str:
        """ 获取多日预报, 失败时返回固定提示文本 """
        logger.info("Received request for forecast with city code %s", location_code)
        url = self.build_url(location_code, extensions=True)
        try:
            result = await self.fetch(url, ForecastResponse)
        except FetchError as e:
            logger.error("Failed to fetch forecast (%s): %s", e.kind.value, e)
            return FORECAST_FALLBACK
        return format_forecast(result.forecasts)
