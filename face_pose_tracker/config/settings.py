"""시스템 설정 클래스 정의"""

from dataclasses import dataclass, fields

from ..utils.validators import validate_confidence
from .constants import (
    DEFAULT_MAX_NUM_FACES,
    DEFAULT_MIN_DETECTION_CONFIDENCE,
    DEFAULT_MIN_TRACKING_CONFIDENCE,
)


@dataclass(frozen=True)
class TrackerConfig:
    """얼굴 추적 설정 (세션 생성 후 변경 불가)"""

    max_num_faces: int = DEFAULT_MAX_NUM_FACES
    min_detection_confidence: float = DEFAULT_MIN_DETECTION_CONFIDENCE
    min_tracking_confidence: float = DEFAULT_MIN_TRACKING_CONFIDENCE
    enable_segmentation: bool = False
    use_gpu: bool = False

    # MediaPipe FaceMesh 전달용
    static_image_mode: bool = False  # True: 이미지, False: 비디오
    refine_landmarks: bool = True    # 홍채 포함 478개 landmarks

    def __post_init__(self):
        """설정 값 검증"""
        if self.max_num_faces < 1:
            raise ValueError("max_num_faces must be >= 1")
        validate_confidence(self.min_detection_confidence, "min_detection_confidence")
        validate_confidence(self.min_tracking_confidence, "min_tracking_confidence")

    @classmethod
    def from_config(cls, config) -> "TrackerConfig":
        """
        config.yaml의 tracker 섹션에서 설정 생성

        Args:
            config: Config 인스턴스 (utils.config_loader)

        Returns:
            TrackerConfig (없는 키는 기본값 사용)

        Raises:
            ValueError: tracker 섹션이 mapping이 아니거나 값이 범위를 벗어난 경우
        """
        section = config.section('tracker')
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in section.items() if k in known})
