from pydantic import BaseModel, ConfigDict
from typing import List, Optional

# 高德接口的数值字段也以字符串下发, 这里一律按字符串保存


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class LiveWeatherReport(_FrozenModel):
    """实况天气信息"""
    province: str
    city: str
    adcode: str
    weather: str
    temperature: str
    winddirection: str
    windpower: str
    humidity: str
    reporttime: str
    temperature_float: str
    humidity_float: str

class DayForecast(_FrozenModel):
    """单日预报信息"""
    date: str
    week: Optional[str] = None
    dayweather: str
    nightweather: str
    daytemp: str
    nighttemp: str
    daywind: str
    nightwind: str
    daypower: str
    nightpower: str

class ForecastEnvelope(_FrozenModel):
    """城市预报信息"""
    city: str
    adcode: Optional[str] = None
    province: Optional[str] = None
    reporttime: Optional[str] = None
    casts: List[DayForecast]

class ApiEnvelope(_FrozenModel):
    """接口返回的公共字段"""
    status: str
    count: str
    info: str
    infocode: str

class LiveWeatherResponse(ApiEnvelope):
    """实况天气返回"""
    lives: List[LiveWeatherReport]

class ForecastResponse(ApiEnvelope):
    """预报天气返回"""
    forecasts: List[ForecastEnvelope]
