"""
core/config.py - 중앙 설정 관리

버전 정보와 환경 변수 기반 런타임 설정을 제공합니다.

환경 변수:
    XCF_LANG: CLI 언어 ("ko" 또는 "en", 기본값 "ko")
    XCF_LOG_LEVEL: 로그 레벨 (DEBUG, INFO, WARNING, ERROR, 기본값 WARNING)

Usage:
    from core.config import get_version, load_settings

    print(get_version())  # "1.0.0"
    print(load_settings().log_level)  # "WARNING"
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from core.exceptions import ConfigError

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent
VERSION_FILE = PROJECT_ROOT / "version.txt"
DEFAULT_VERSION = "0.0.1"

SUPPORTED_LANGS = ("ko", "en")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_version() -> str:
    """버전 문자열 반환

    version.txt 파일에서 버전을 읽어옴. 파일이 없으면 기본값 반환.
    """
    try:
        return VERSION_FILE.read_text(encoding="utf-8").strip() or DEFAULT_VERSION
    except OSError as e:
        logger.debug("Failed to read version file: %s", e)
        return DEFAULT_VERSION


@dataclass(frozen=True)
class Settings:
    """런타임 설정

    Attributes:
        lang: CLI 언어 ("ko" 또는 "en")
        log_level: logging 모듈 레벨 이름
    """

    lang: str = "ko"
    log_level: str = "WARNING"

    @property
    def log_level_value(self) -> int:
        """logging 레벨 정수값"""
        return getattr(logging, self.log_level)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """환경 변수에서 Settings 생성

        Args:
            environ: 환경 변수 매핑 (None이면 os.environ)

        Raises:
            ConfigError: 지원하지 않는 값이 지정된 경우
        """
        env = os.environ if environ is None else environ

        lang = env.get("XCF_LANG", cls.lang).strip().lower()
        if lang not in SUPPORTED_LANGS:
            raise ConfigError(
                f"지원하지 않는 언어: {lang} (지원: {', '.join(SUPPORTED_LANGS)})",
                config_key="XCF_LANG",
            )

        log_level = env.get("XCF_LOG_LEVEL", cls.log_level).strip().upper()
        if log_level not in LOG_LEVELS:
            raise ConfigError(
                f"지원하지 않는 로그 레벨: {log_level} (지원: {', '.join(LOG_LEVELS)})",
                config_key="XCF_LOG_LEVEL",
            )

        return cls(lang=lang, log_level=log_level)


def load_settings() -> Settings:
    """현재 환경에서 설정 로드"""
    return Settings.from_env()
