import os

import pytest

# weather_server 在导入时检查 API_KEY
os.environ.setdefault("API_KEY", "test-key")
os.environ.pop("REQUEST_TIMEOUT", None)


LIVE_BODY = {
    "status": "1",
    "count": "1",
    "info": "OK",
    "infocode": "10000",
    "lives": [
        {
            "province": "北京",
            "city": "北京市",
            "adcode": "110000",
            "weather": "晴",
            "temperature": "20",
            "winddirection": "西北",
            "windpower": "3",
            "humidity": "40",
            "reporttime": "2024-01-01 12:00:00",
            "temperature_float": "20.0",
            "humidity_float": "40.0",
        }
    ],
}

FORECAST_BODY = {
    "status": "1",
    "count": "1",
    "info": "OK",
    "infocode": "10000",
    "forecasts": [
        {
            "city": "北京市",
            "adcode": "110000",
            "province": "北京",
            "reporttime": "2024-01-01 11:00:00",
            "casts": [
                {
                    "date": "2024-01-01",
                    "week": "1",
                    "dayweather": "晴",
                    "nightweather": "多云",
                    "daytemp": "5",
                    "nighttemp": "-3",
                    "daywind": "北",
                    "nightwind": "北",
                    "daypower": "1-3",
                    "nightpower": "1-3",
                },
                {
                    "date": "2024-01-02",
                    "week": "2",
                    "dayweather": "小雪",
                    "nightweather": "阴",
                    "daytemp": "2",
                    "nighttemp": "-5",
                    "daywind": "西北",
                    "nightwind": "西",
                    "daypower": "4",
                    "nightpower": "≤3",
                },
            ],
        }
    ],
}


@pytest.fixture
def live_body():
    return LIVE_BODY


@pytest.fixture
def forecast_body():
    return FORECAST_BODY
