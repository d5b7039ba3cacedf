"""MediaPipe FaceMesh 기반 Landmark Source"""

import time
import cv2
import numpy as np
import mediapipe as mp
from typing import Optional

from ..config.settings import TrackerConfig
from ..models import DetectionResult, Landmark
from ..utils import get_logger
from ..utils.exceptions import ConfigurationError, DetectionError
from .landmark_source import LandmarkSource

logger = get_logger(__name__)


def _to_rgb(frame: np.ndarray) -> np.ndarray:
    """BGR/BGRA/Gray 프레임을 MediaPipe 입력(RGB)으로 변환"""
    if len(frame.shape) == 2 or frame.shape[2] == 1:
        return cv2.cvtColor(frame, cv2.COLOR_GRAY2RGB)
    if frame.shape[2] == 4:
        return cv2.cvtColor(frame, cv2.COLOR_BGRA2RGB)
    return cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)


class MediaPipeLandmarkSource(LandmarkSource):
    """MediaPipe FaceMesh 기반 얼굴 랜드마크 검출기"""

    def __init__(self, config: Optional[TrackerConfig] = None):
        """
        초기화

        Args:
            config: 추적 설정 (None이면 기본값)

        Raises:
            ConfigurationError: MediaPipe 초기화 실패
        """
        self.config = config or TrackerConfig()
        self.face_mesh = None

        if self.config.use_gpu:
            logger.warning("GPU backend is not available through MediaPipe Python solutions; using CPU")
        if self.config.enable_segmentation:
            logger.warning("Segmentation output is not produced by FaceMesh; flag ignored")

        self._create_face_mesh()

    def _create_face_mesh(self):
        try:
            self.face_mesh = mp.solutions.face_mesh.FaceMesh(
                static_image_mode=self.config.static_image_mode,
                max_num_faces=self.config.max_num_faces,
                refine_landmarks=self.config.refine_landmarks,
                min_detection_confidence=self.config.min_detection_confidence,
                min_tracking_confidence=self.config.min_tracking_confidence
            )
            logger.info("MediaPipe FaceMesh initialized successfully")
        except Exception as e:
            logger.error(f"Failed to initialize MediaPipe FaceMesh: {e}")
            raise ConfigurationError(f"Failed to initialize MediaPipe FaceMesh: {e}")

    def detect(self, frame: np.ndarray) -> DetectionResult:
        """
        프레임에서 얼굴 검출 수행

        Args:
            frame: BGR 형식 이미지 (H, W, 3)

        Returns:
            DetectionResult: 첫 번째 얼굴의 랜드마크

        Raises:
            DetectionError: MediaPipe 처리 실패
        """
        start_time = time.time()

        try:
            results = self.face_mesh.process(_to_rgb(frame))
        except Exception as e:
            raise DetectionError(f"MediaPipe FaceMesh processing failed: {e}")

        processing_time = (time.time() - start_time) * 1000  # ms

        if not results or not results.multi_face_landmarks:
            logger.debug("No face detected")
            return DetectionResult(success=False, processing_time=processing_time)

        # 첫 번째 얼굴만 처리
        face_landmarks = results.multi_face_landmarks[0]
        landmarks = tuple(
            Landmark(x=float(lm.x), y=float(lm.y), z=float(lm.z))
            for lm in face_landmarks.landmark
        )

        logger.debug(f"Detected face with {len(landmarks)} landmarks")

        return DetectionResult(
            success=True,
            landmarks=landmarks,
            confidence=1.0,  # MediaPipe는 개별 신뢰도 미제공
            processing_time=processing_time
        )

    def reset(self):
        """FaceMesh 그래프 재생성 (추적 상태 초기화)"""
        self.close()
        self._create_face_mesh()

    def close(self):
        """리소스 해제"""
        if self.face_mesh is not None:
            self.face_mesh.close()
            self.face_mesh = None
            logger.debug("MediaPipe FaceMesh closed")

    def __del__(self):
        """소멸자"""
        if getattr(self, 'face_mesh', None) is not None:
            self.close()
