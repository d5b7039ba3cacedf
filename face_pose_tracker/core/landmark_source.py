"""Landmark Source 인터페이스 및 기본 구현"""

import time
from abc import ABC, abstractmethod
from typing import Callable

import numpy as np

from ..config.constants import LANDMARK_COUNT
from ..models import DetectionResult, Landmark
from ..utils import get_logger
from ..utils.exceptions import DetectionError

logger = get_logger(__name__)


class LandmarkSource(ABC):
    """
    프레임 → 랜드마크 검출기 인터페이스

    detect()는 얼굴이 없으면 success=False 결과를 반환한다.
    얼굴이 있으면 모델 고정 개수(478)의 랜드마크를 순서대로 반환한다.
    """

    @abstractmethod
    def detect(self, frame: np.ndarray) -> DetectionResult:
        """
        프레임에서 얼굴 랜드마크 검출

        Args:
            frame: BGR 형식 이미지 (H, W, 3)

        Returns:
            DetectionResult
        """
        pass

    def reset(self):
        """내부 추적 상태 초기화 (카메라 재시작 시)"""
        pass

    def close(self):
        """리소스 해제"""
        pass


class FunctionLandmarkSource(LandmarkSource):
    """
    detect 함수 하나로 LandmarkSource를 구성

    함수가 던진 예외는 DetectionError로 감싼다.
    """

    def __init__(self, detect_fn: Callable[[np.ndarray], DetectionResult]):
        self._detect_fn = detect_fn

    def detect(self, frame: np.ndarray) -> DetectionResult:
        try:
            return self._detect_fn(frame)
        except DetectionError:
            raise
        except Exception as e:
            raise DetectionError(f"Landmark function failed: {e}") from e


class SyntheticLandmarkSource(LandmarkSource):
    """
    실제 검출기 없이 얼굴 형태의 mesh를 생성하는 Landmark Source

    프레임 중앙에 타원형 478개 포인트를 배치한다 (데모/테스트용).
    """

    def __init__(
        self,
        center: tuple = (0.5, 0.5),
        face_width: float = 0.3,
        face_height: float = 0.4,
        confidence: float = 0.95,
        num_landmarks: int = LANDMARK_COUNT,
    ):
        self.center = center
        self.face_width = face_width
        self.face_height = face_height
        self.confidence = confidence
        self.num_landmarks = num_landmarks
        self._landmarks = self._build_mesh()
        logger.debug(f"Synthetic mesh generated with {len(self._landmarks)} landmarks")

    def _build_mesh(self) -> tuple:
        """23열 x 21행 격자를 타원 위에 매핑"""
        idx = np.arange(self.num_landmarks)
        u = (idx % 23) / 22.0
        v = (idx // 23) / 20.0

        angle = u * 2.0 * np.pi
        radius_x = self.face_width * 0.5 * np.sin(v * np.pi)

        xs = self.center[0] + radius_x * np.cos(angle)
        ys = self.center[1] + (v - 0.5) * self.face_height
        zs = np.cos(v * np.pi) * 0.1

        return tuple(
            Landmark(x=float(x), y=float(y), z=float(z))
            for x, y, z in zip(xs, ys, zs)
        )

    def detect(self, frame: np.ndarray) -> DetectionResult:
        start_time = time.time()
        landmarks = self._landmarks
        processing_time = (time.time() - start_time) * 1000  # ms

        return DetectionResult(
            success=True,
            landmarks=landmarks,
            confidence=self.confidence,
            processing_time=processing_time
        )
