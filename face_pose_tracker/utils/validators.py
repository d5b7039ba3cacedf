"""입력 검증 유틸리티 함수"""

import numpy as np
from .exceptions import InvalidFrameError


def validate_frame(frame: np.ndarray) -> None:
    """
    프레임 유효성 검증

    Args:
        frame: 검증할 프레임 (numpy array, BGR 또는 grayscale)

    Raises:
        InvalidFrameError: 프레임이 유효하지 않은 경우
    """
    if frame is None:
        raise InvalidFrameError("Frame is None")

    if not isinstance(frame, np.ndarray):
        raise InvalidFrameError(f"Frame must be numpy.ndarray, got {type(frame)}")

    if frame.size == 0:
        raise InvalidFrameError("Frame is empty")

    if len(frame.shape) not in [2, 3]:
        raise InvalidFrameError(f"Frame must be 2D or 3D, got shape {frame.shape}")

    if len(frame.shape) == 3 and frame.shape[2] not in [1, 3, 4]:
        raise InvalidFrameError(f"Frame channels must be 1, 3, or 4, got {frame.shape[2]}")


def validate_confidence(confidence: float, param_name: str = "confidence") -> None:
    """신뢰도 값 검증 (0.0 ~ 1.0)"""
    if not 0.0 <= confidence <= 1.0:
        raise ValueError(f"{param_name} must be between 0.0 and 1.0, got {confidence}")
