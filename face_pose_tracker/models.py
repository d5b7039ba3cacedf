"""데이터 모델 정의"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from .config.constants import LANDMARK_COUNT

IDENTITY_MATRIX: Tuple[float, ...] = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


@dataclass(frozen=True)
class Landmark:
    """단일 랜드마크 포인트"""

    x: float = 0.0  # 정규화 x 좌표 (0-1)
    y: float = 0.0  # 정규화 y 좌표 (0-1)
    z: float = 0.0  # 상대 깊이 (얼굴 평면 = 0)

    def to_dict(self) -> Dict[str, Any]:
        """딕셔너리로 변환"""
        return {'x': self.x, 'y': self.y, 'z': self.z}


@dataclass(frozen=True)
class KeyPoints:
    """마스크 정렬용 주요 랜드마크 (기본값: 모두 0)"""

    left_eye: Landmark = field(default_factory=Landmark)
    right_eye: Landmark = field(default_factory=Landmark)
    nose_tip: Landmark = field(default_factory=Landmark)
    upper_lip: Landmark = field(default_factory=Landmark)
    chin: Landmark = field(default_factory=Landmark)
    left_ear: Landmark = field(default_factory=Landmark)
    right_ear: Landmark = field(default_factory=Landmark)
    forehead: Landmark = field(default_factory=Landmark)

    def to_dict(self) -> Dict[str, Any]:
        """딕셔너리로 변환"""
        return {
            'left_eye': self.left_eye.to_dict(),
            'right_eye': self.right_eye.to_dict(),
            'nose_tip': self.nose_tip.to_dict(),
            'upper_lip': self.upper_lip.to_dict(),
            'chin': self.chin.to_dict(),
            'left_ear': self.left_ear.to_dict(),
            'right_ear': self.right_ear.to_dict(),
            'forehead': self.forehead.to_dict(),
        }


@dataclass(frozen=True)
class HeadPose:
    """
    단순화된 6DOF 머리 자세

    rotation은 (pitch, yaw, roll) 라디안, translation은 (tx, ty, tz).
    model_matrix는 row-major 4x4 (element [row*4+col]),
    rotation/translation에서만 계산된다.
    """

    translation: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    rotation: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    model_matrix: Tuple[float, ...] = IDENTITY_MATRIX

    @property
    def pitch(self) -> float:
        return self.rotation[0]

    @property
    def yaw(self) -> float:
        return self.rotation[1]

    @property
    def roll(self) -> float:
        return self.rotation[2]

    def matrix_rows(self) -> List[List[float]]:
        """4x4 행렬을 행 리스트로 반환"""
        return [list(self.model_matrix[row * 4:row * 4 + 4]) for row in range(4)]

    def to_dict(self) -> Dict[str, Any]:
        """딕셔너리로 변환"""
        return {
            'translation': list(self.translation),
            'rotation': {
                'pitch': self.pitch,
                'yaw': self.yaw,
                'roll': self.roll,
            },
            'model_matrix': list(self.model_matrix),
        }


@dataclass(frozen=True)
class DetectionResult:
    """Landmark Source 검출 결과"""

    success: bool
    landmarks: Tuple[Landmark, ...] = ()
    confidence: float = 0.0
    processing_time: float = 0.0  # ms

    def __post_init__(self):
        # 검출 실패 시 landmarks는 비어 있고 confidence는 0으로 취급
        if not self.success:
            object.__setattr__(self, 'landmarks', ())
            object.__setattr__(self, 'confidence', 0.0)
        else:
            object.__setattr__(self, 'landmarks', tuple(self.landmarks))


@dataclass(frozen=True)
class FaceResult:
    """한 프레임의 얼굴 추적 결과"""

    has_face: bool = False
    confidence: float = 0.0
    landmarks: Tuple[Landmark, ...] = ()
    pose: HeadPose = field(default_factory=HeadPose)
    key_points: KeyPoints = field(default_factory=KeyPoints)
    bounding_box: Tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)  # (x, y, w, h)

    @property
    def landmarks_complete(self) -> bool:
        """pose/key_points가 실제로 계산되었는지 여부 (랜드마크 개수 충족)"""
        return len(self.landmarks) >= LANDMARK_COUNT

    def to_dict(self) -> Dict[str, Any]:
        """딕셔너리로 변환"""
        return {
            'has_face': self.has_face,
            'confidence': self.confidence,
            'landmarks_complete': self.landmarks_complete,
            'landmarks': [lm.to_dict() for lm in self.landmarks],
            'pose': self.pose.to_dict(),
            'key_points': self.key_points.to_dict(),
            'bounding_box': list(self.bounding_box),
        }
