"""
간단한 로거 유틸리티
생성된 TypeScript 코드가 stdout으로 나가는 경우를 고려해 로그는 stderr로 출력합니다.
"""
import logging
import os
import sys

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _resolve_level() -> int:
    level_name = os.getenv("MODELER_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(level_name)
    # getLevelName은 모르는 이름에 대해 "Level X" 문자열을 돌려줌
    return level if isinstance(level, int) else logging.INFO


def setup_logger(name: str) -> logging.Logger:
    """
    로거를 설정하고 반환합니다.

    Args:
        name: 로거 이름

    Returns:
        설정된 로거 인스턴스
    """
    logger = logging.getLogger(name)

    # 이미 핸들러가 있으면 중복 추가하지 않음
    if logger.handlers:
        return logger

    level = _resolve_level()
    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))

    logger.addHandler(handler)

    return logger
