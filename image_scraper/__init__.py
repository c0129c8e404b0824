"""DuckDuckGo 이미지 스크레이퍼 API"""

__version__ = "1.0.0"
