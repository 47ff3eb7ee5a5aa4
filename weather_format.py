from typing import Sequence

from weather_model import ForecastEnvelope, LiveWeatherReport

NO_LIVE_DATA = "No active alerts found."
NO_FORECAST_DATA = "No forecast data available."


def format_live(reports: Sequence[LiveWeatherReport]) -> str:
    """ 格式化实况天气

    Args:
        reports (Sequence[LiveWeatherReport]): 实况天气列表

    Returns:
        str: 每个城市一段文本, 以 "---" 结尾
    """
    if not reports:
        return NO_LIVE_DATA

    blocks = []
    for report in reports:
        blocks.append(
            f"省份: {report.province}\n"
            f"城市: {report.city}\n"
            f"天气: {report.weather}\n"
            f"温度: {report.temperature}°\n"
            f"风向: {report.winddirection}({report.windpower})\n"
            "---\n"
        )
    return "".join(blocks)


def format_forecast(envelopes: Sequence[ForecastEnvelope]) -> str:
    """ 格式化天气预报

    Args:
        envelopes (Sequence[ForecastEnvelope]): 城市预报列表

    Returns:
        str: 每天一段文本, 包含白天和夜间两行, 以 "---" 结尾
    """
    if not envelopes:
        return NO_FORECAST_DATA

    blocks = []
    for envelope in envelopes:
        for day in envelope.casts:
            blocks.append(
                f"日期: {day.date}\n"
                f"白天: {day.dayweather} {day.daytemp}° {day.daywind}({day.daypower}) \n"
                f"夜间: {day.nightweather} {day.nighttemp}° {day.nightwind}({day.nightpower})\n"
                "---\n"
            )
    return "".join(blocks)
