"""설정 관리 - 환경 변수 로드 및 검증"""
from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    """애플리케이션 설정"""

    # 서버
    host: str = "localhost"
    port: int = 3000

    # 스크레이퍼
    user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
    )
    # 페이지 요청 사이 대기 시간 (DDG rate limit 회피)
    request_delay_ms: int = 500
    max_image_count: int = 500
    default_image_count: int = 30
    ddg_locale: str = "us-en"

    # vqd 토큰 캐시 TTL (10분). 프로세스 시작 후 변경되지 않습니다.
    vqd_cache_ttl_s: int = 600

    # HTTP 전송 계층 (curl_cffi)
    # - http_timeout_s: 단일 요청 타임아웃. 스크레이퍼 자체에는 별도 타임아웃이 없습니다.
    http_timeout_s: float = 15.0
    http_impersonate: str = "chrome110"
    http_max_clients: int = 20

    # API
    api_title: str = "DuckDuckGo Image Scraper API"
    api_version: str = "1.0.0"
    api_description: str = "DuckDuckGo 이미지 검색 결과를 페이지 단위로 수집해 반환합니다."

    # 로깅
    log_level: str = "INFO"

    @field_validator("request_delay_ms")
    @classmethod
    def validate_request_delay_ms(cls, v: int) -> int:
        if v < 0:
            raise ValueError("request_delay_ms must be >= 0")
        return v

    @field_validator("max_image_count", "default_image_count")
    @classmethod
    def validate_image_counts(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("image counts must be positive")
        return v

    @field_validator("vqd_cache_ttl_s")
    @classmethod
    def validate_vqd_cache_ttl(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("vqd_cache_ttl_s must be positive")
        return v

    @field_validator("http_timeout_s")
    @classmethod
    def validate_http_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("http_timeout_s must be positive")
        return v

    @field_validator("http_max_clients")
    @classmethod
    def validate_http_max_clients(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("http_max_clients must be positive")
        return v

    @property
    def request_delay_s(self) -> float:
        return self.request_delay_ms / 1000.0

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
