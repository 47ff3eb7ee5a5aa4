from fastmcp import FastMCP
from dotenv import load_dotenv
from logging.handlers import TimedRotatingFileHandler
from typing import Annotated, Optional
from pydantic import Field
import asyncio
import logging
import math
import os

from weather_client import DEFAULT_TIMEOUT, WEATHER_API_BASE, WeatherClient

load_dotenv()

logger = logging.getLogger(__name__)

server = FastMCP("weather_mcp", instructions="A simple weather forecaster")

api_key = os.getenv("API_KEY")
api_base = os.getenv("WEATHER_API_BASE", WEATHER_API_BASE)


if not api_key:
    raise ValueError("环境变量api_key未设置, 请检查 .env文件")


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    """REQUEST_TIMEOUT 未设置时使用默认值, 设为 0 表示不限时"""
    if raw is None or raw.strip() == "":
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(f"环境变量REQUEST_TIMEOUT无效: {raw!r}")
    if timeout < 0 or not math.isfinite(timeout):
        raise ValueError(f"环境变量REQUEST_TIMEOUT无效: {raw!r}")
    return timeout or None


request_timeout = _parse_timeout(os.getenv("REQUEST_TIMEOUT"))

weather_client = WeatherClient(api_key, base_url=api_base, timeout=request_timeout)


def setup_logging(log_dir: Optional[str] = None, level: Optional[str] = None) -> None:
    """按天滚动写入 log_dir/app.log, stdout 留给 stdio 协议"""
    log_dir = log_dir or os.getenv("LOG_DIR", "./logs")
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()

    os.makedirs(log_dir, exist_ok=True)
    handler = TimedRotatingFileHandler(
        os.path.join(log_dir, "app.log"), when="midnight", encoding="utf-8"
    )
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(message)s")
    )

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)


CityCode = Annotated[str, Field(description="城市编码")]


@server.tool()
async def get_current(adcode: CityCode) -> str:
    """获取当天，天气情况"""
    return await weather_client.get_current(adcode)


@server.tool()
async def get_forecast(adcode: CityCode) -> str:
    """获取最近几天，天气预报"""
    return await weather_client.get_forecast(adcode)


def _transport_kwargs(transport: str) -> dict:
    if transport == "stdio":
        return {}
    return {
        "host": os.getenv("HOST", "127.0.0.1"),
        "port": int(os.getenv("PORT", "8000")),
    }


async def _serve(transport: str) -> None:
    """运行服务, 退出时关闭共享的 http 连接"""
    try:
        await server.run_async(transport=transport, **_transport_kwargs(transport))
    finally:
        await weather_client.aclose()


def main() -> None:
    setup_logging()
    logger.info("Starting weather MCP server")

    try:
        asyncio.run(_serve(os.getenv("MCP_TRANSPORT", "stdio")))
    except Exception:
        logger.exception("serving error")
        raise


if __name__ == "__main__":
    main()
