"""
Configuration Loader Module
config.yaml을 읽어 점(.) 경로 / 속성 방식으로 접근하게 해주는 모듈

경로 우선순위: 명시 경로 > FACE_POSE_TRACKER_CONFIG 환경 변수 > 프로젝트 루트 config.yaml
"""
import os
import yaml
from pathlib import Path
from typing import Any, Dict, Optional, Union

CONFIG_ENV_VAR = 'FACE_POSE_TRACKER_CONFIG'
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / 'config.yaml'

PathLike = Union[str, Path]


def resolve_config_path(config_path: Optional[PathLike] = None) -> Path:
    """사용할 config.yaml 경로 결정"""
    if config_path is not None:
        return Path(config_path)
    env_path = os.environ.get(CONFIG_ENV_VAR)
    return Path(env_path) if env_path else DEFAULT_CONFIG_PATH


def load_yaml(path: Path) -> Dict[str, Any]:
    """
    YAML 파일을 최상위 mapping으로 로드

    Raises:
        FileNotFoundError: 파일이 없는 경우
        ValueError: YAML 문법 오류 또는 최상위가 mapping이 아닌 경우
    """
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {path} "
            f"(create config.yaml or set {CONFIG_ENV_VAR})"
        )

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML format in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Top level of {path} must be a mapping, got {type(data).__name__}")
    return data


class ConfigSection:
    """
    중첩 dict 읽기 전용 뷰

    Usage:
        section.get('console.level', 'INFO')
        section.console.level
    """

    def __init__(self, data: Dict[str, Any]):
        self._data = data

    def __getattr__(self, name: str):
        if name.startswith('_'):
            raise AttributeError(f"'{self.__class__.__name__}' has no attribute '{name}'")

        if name not in self._data:
            raise AttributeError(f"{self.__class__.__name__} has no key '{name}'")

        value = self._data[name]
        return ConfigSection(value) if isinstance(value, dict) else value

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def get(self, key_path: str, default: Any = None) -> Any:
        """점(.) 구분 경로로 값 가져오기 (없으면 default)"""
        value = self._data
        for key in key_path.split('.'):
            if not isinstance(value, dict) or key not in value:
                return default
            value = value[key]
        return value

    def section(self, name: str) -> Dict[str, Any]:
        """
        하위 mapping 복사본 반환

        Returns:
            dict (키가 없거나 값이 비어 있으면 빈 dict)

        Raises:
            ValueError: 값이 mapping이 아닌 경우
        """
        value = self.get(name)
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise ValueError(f"'{name}' section must be a mapping, got {type(value).__name__}")
        return dict(value)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._data)

    def __repr__(self):
        return f"{self.__class__.__name__}({list(self._data.keys())})"


class Config(ConfigSection):
    """config.yaml 파일 하나에 대응하는 최상위 섹션"""

    def __init__(self, config_path: Optional[PathLike] = None):
        self.config_path = resolve_config_path(config_path)
        super().__init__(load_yaml(self.config_path))

    def reload(self):
        """설정 파일 다시 로드"""
        self._data = load_yaml(self.config_path)

    def __repr__(self):
        return f"Config(path={self.config_path})"


_global_config: Optional[Config] = None


def get_config() -> Config:
    """
    전역 Config 인스턴스 (최초 호출 시 로드)

    Raises:
        FileNotFoundError, ValueError: load_yaml 참고
    """
    global _global_config

    if _global_config is None:
        _global_config = Config()

    return _global_config


def reload_config():
    """전역 설정 다시 로드"""
    if _global_config is not None:
        _global_config.reload()
