"""프레임 단위 얼굴 추적 세션"""

import dataclasses
import threading
from typing import Callable, Optional, Union

import numpy as np

from ..config.constants import LANDMARK_COUNT
from ..config.settings import TrackerConfig
from ..core.landmark_source import FunctionLandmarkSource, LandmarkSource
from ..models import DetectionResult, FaceResult
from ..utils import get_logger
from ..utils.exceptions import ConfigurationError, DetectionError, InvalidFrameError
from ..utils.validators import validate_frame
from .geometry import get_bounding_box
from .key_points import KeyPointSelector
from .model_matrix import ModelMatrixBuilder
from .pose_estimator import PoseEstimator

logger = get_logger(__name__)

SourceLike = Union[LandmarkSource, Callable[[np.ndarray], DetectionResult]]


class FaceTracker:
    """
    얼굴 추적 세션

    - process_frame(): 프레임 → FaceResult (호출 단위로 완전히 직렬화)
    - get_last_result(): 마지막 검출 결과 (새 처리 없음)
    - reset(): 캐시된 결과 초기화 (Landmark Source 상태는 건드리지 않음)

    lock은 검출 호출과 캐시 갱신만 감싼다. key points / pose / 모델 행렬은
    이미 복사된 랜드마크의 순수 함수이므로 lock 밖에서 계산한다.
    """

    def __init__(
        self,
        config: Optional[TrackerConfig] = None,
        source: Optional[SourceLike] = None
    ):
        """
        초기화

        Args:
            config: 추적 설정 (None이면 기본값, 생성 후 변경 불가)
            source: Landmark Source (None이면 MediaPipe 검출기 생성)
        """
        self.config = config or TrackerConfig()
        self._lock = threading.Lock()
        self._last_detection = FaceResult()
        self._source: Optional[LandmarkSource] = None
        self._initialized = False

        try:
            self._source = self._create_source(source)
            self._initialized = True
            logger.info(f"FaceTracker initialized with {type(self._source).__name__}")
        except ConfigurationError as e:
            logger.error(f"FaceTracker initialization failed: {e}")

    def _create_source(self, source: Optional[SourceLike]) -> LandmarkSource:
        if source is None:
            # mediapipe import는 실제 검출기가 필요할 때만
            from ..core.mediapipe_source import MediaPipeLandmarkSource
            return MediaPipeLandmarkSource(self.config)
        if isinstance(source, LandmarkSource):
            return source
        if callable(source):
            return FunctionLandmarkSource(source)
        raise ConfigurationError(f"Unsupported landmark source: {type(source)}")

    @classmethod
    def from_config(cls, config=None, source: Optional[SourceLike] = None) -> "FaceTracker":
        """
        config.yaml 설정으로 세션 생성

        Args:
            config: Config 인스턴스 (None이면 전역 설정)
            source: Landmark Source
        """
        if config is None:
            from ..utils import get_config
            config = get_config()
        return cls(TrackerConfig.from_config(config), source=source)

    @property
    def source(self) -> Optional[LandmarkSource]:
        return self._source

    def is_initialized(self) -> bool:
        """세션 생성 (Landmark Source 초기화) 성공 여부"""
        return self._initialized

    def process_frame(self, frame: np.ndarray) -> FaceResult:
        """
        프레임 처리

        Args:
            frame: BGR 형식 이미지 (H, W, 3)

        Returns:
            FaceResult (얼굴이 없거나 입력이 잘못되면 has_face=False)
        """
        with self._lock:
            if not self._initialized:
                return FaceResult()

            try:
                validate_frame(frame)
            except InvalidFrameError as e:
                logger.debug(f"Skipping invalid frame: {e}")
                return FaceResult()

            try:
                detection = self._source.detect(frame)
            except DetectionError as e:
                logger.warning(f"Landmark detection failed: {e}")
                return FaceResult()

            if not detection.success:
                logger.debug("No face detected")
                return FaceResult()

            result = FaceResult(
                has_face=True,
                confidence=detection.confidence,
                landmarks=detection.landmarks,
            )
            self._last_detection = result

        return self._derive(result)

    def get_last_result(self) -> FaceResult:
        """마지막 결과 반환 (새 프레임 처리 없음)"""
        with self._lock:
            result = self._last_detection
        return self._derive(result)

    def reset(self):
        """캐시된 결과 초기화"""
        with self._lock:
            self._last_detection = FaceResult()
        logger.debug("FaceTracker last result reset")

    @staticmethod
    def _derive(result: FaceResult) -> FaceResult:
        """검출 결과에 key points, pose, 모델 행렬, bounding box 추가"""
        if not result.has_face:
            return result

        if not result.landmarks_complete:
            logger.warning(
                f"Expected {LANDMARK_COUNT} landmarks, got {len(result.landmarks)}; "
                f"key points and pose left at defaults"
            )

        pose = PoseEstimator.estimate(result.landmarks, result.pose)
        return dataclasses.replace(
            result,
            key_points=KeyPointSelector.select(result.landmarks),
            pose=ModelMatrixBuilder.apply(pose),
            bounding_box=get_bounding_box(result.landmarks),
        )

    def close(self):
        """Landmark Source 리소스 해제"""
        if self._source is not None:
            self._source.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
