"""랜드마크 기하 기반 머리 자세 추정"""

import math
from typing import Optional, Sequence

from ..config.constants import (
    FRAME_CENTER,
    KEY_POINT_INDICES,
    LANDMARK_COUNT,
    PITCH_SCALE,
    YAW_SCALE,
)
from ..models import HeadPose, Landmark


class PoseEstimator:
    """
    눈/코 위치로부터 단순화된 6DOF 자세 계산

    카메라 보정 없는 휴리스틱 근사이며 프레임당 한 번의 closed-form 계산이다.
    - yaw: 두 눈 중점 x의 화면 중심 대비 오프셋 x 2.0
    - pitch: 눈 높이와 코끝 높이 차이 x 1.5
    - roll: 왼눈 → 오른눈 벡터의 atan2 (정확한 평면 기울기)
    - translation: 코끝의 화면 중심 대비 오프셋, z는 상대 깊이
    """

    @staticmethod
    def calculate_rotation(landmarks: Sequence[Landmark]):
        """
        (pitch, yaw, roll) 계산 (라디안)

        Args:
            landmarks: 478개 landmarks
        """
        left_eye = landmarks[KEY_POINT_INDICES['left_eye']]
        right_eye = landmarks[KEY_POINT_INDICES['right_eye']]
        nose_tip = landmarks[KEY_POINT_INDICES['nose_tip']]

        # Yaw (좌우 회전)
        eye_center_x = (left_eye.x + right_eye.x) * 0.5
        yaw = (eye_center_x - FRAME_CENTER) * YAW_SCALE

        # Pitch (상하 회전)
        eye_center_y = (left_eye.y + right_eye.y) * 0.5
        pitch = (eye_center_y - nose_tip.y) * PITCH_SCALE

        # Roll (기울기)
        dx = right_eye.x - left_eye.x
        dy = right_eye.y - left_eye.y
        roll = math.atan2(dy, dx)

        return (pitch, yaw, roll)

    @staticmethod
    def calculate_translation(landmarks: Sequence[Landmark]):
        """코끝 기준 (tx, ty, tz)"""
        nose_tip = landmarks[KEY_POINT_INDICES['nose_tip']]
        return (
            nose_tip.x - FRAME_CENTER,
            nose_tip.y - FRAME_CENTER,
            nose_tip.z,
        )

    @staticmethod
    def estimate(
        landmarks: Sequence[Landmark],
        pose: Optional[HeadPose] = None
    ) -> HeadPose:
        """
        머리 자세 추정

        Args:
            landmarks: 478개 landmarks
            pose: 개수가 부족할 때 그대로 반환할 자세 (None이면 기본값)

        Returns:
            rotation/translation이 채워진 HeadPose
            (model_matrix는 ModelMatrixBuilder에서 계산)
        """
        if len(landmarks) < LANDMARK_COUNT:
            return pose if pose is not None else HeadPose()

        return HeadPose(
            translation=PoseEstimator.calculate_translation(landmarks),
            rotation=PoseEstimator.calculate_rotation(landmarks),
        )
