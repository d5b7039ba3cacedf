"""
Logging configuration module for the face pose tracker.
Provides centralized logging setup with file and console handlers.
"""
import logging
import logging.handlers
from pathlib import Path
from .config_loader import ConfigSection, get_config

# config.yaml이 없을 때 사용하는 기본값
DEFAULT_LOGGING = {
    'level': 'INFO',
    'format': '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    'date_format': '%Y-%m-%d %H:%M:%S',
    'console': {'enabled': True, 'level': 'INFO'},
    'file': {
        'enabled': False,
        'level': 'DEBUG',
        'directory': 'logs',
        'filename': 'face_pose_tracker.log',
        'max_bytes': 10485760,
        'backup_count': 5,
    },
}


def _load_logging_section() -> ConfigSection:
    """config.yaml의 logging 섹션 (파일이 없거나 읽을 수 없으면 기본값)"""
    try:
        section = get_config().section('logging')
    except (FileNotFoundError, ValueError):
        return ConfigSection(DEFAULT_LOGGING)

    merged = dict(DEFAULT_LOGGING)
    for key, value in section.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = {**merged[key], **value}
        else:
            merged[key] = value
    return ConfigSection(merged)


def setup_logging(name: str = None) -> logging.Logger:
    """
    로깅 시스템 설정 및 로거 반환

    Args:
        name: 로거 이름 (일반적으로 __name__ 사용)

    Returns:
        logging.Logger: 설정된 로거 객체
    """
    # 로거 생성
    logger = logging.getLogger(name or __name__)

    # 이미 핸들러가 설정되어 있으면 중복 설정 방지
    if logger.handlers:
        return logger

    log_config = _load_logging_section()

    # 로그 레벨 설정
    log_level = getattr(logging, str(log_config.level).upper(), logging.INFO)
    logger.setLevel(log_level)

    formatter = logging.Formatter(log_config.format, datefmt=log_config.date_format)

    # 콘솔 핸들러 설정
    if log_config.console.enabled:
        console_handler = logging.StreamHandler()
        console_level = getattr(logging, str(log_config.console.level).upper(), logging.INFO)
        console_handler.setLevel(console_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    # 파일 핸들러 설정
    if log_config.file.enabled:
        log_dir = Path(log_config.file.directory)
        log_dir.mkdir(parents=True, exist_ok=True)

        log_file = log_dir / log_config.file.filename

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=log_config.file.max_bytes,
            backupCount=log_config.file.backup_count,
            encoding='utf-8'
        )
        file_level = getattr(logging, str(log_config.file.level).upper(), logging.DEBUG)
        file_handler.setLevel(file_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = None) -> logging.Logger:
    """
    로거 가져오기 (간편 함수)

    Args:
        name: 로거 이름 (일반적으로 __name__ 사용)

    Returns:
        logging.Logger: 설정된 로거 객체
    """
    return setup_logging(name)
