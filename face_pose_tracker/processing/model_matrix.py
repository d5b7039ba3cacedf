"""머리 자세 → 렌더러용 4x4 모델 행렬"""

import dataclasses
from typing import Tuple

import numpy as np

from ..config.constants import CAMERA_Z_OFFSET, TRANSLATION_SCALE_XY, TRANSLATION_SCALE_Z
from ..models import HeadPose


class ModelMatrixBuilder:
    """
    HeadPose의 rotation/translation으로 row-major 4x4 행렬 생성

    회전 합성 순서는 R = Rz * Ry * Rx 로 고정 (X → Y → Z 순서로 회전).
    Y축은 렌더러 좌표계에 맞춰 뒤집는다.
    """

    @staticmethod
    def rotation_x(angle: float) -> np.ndarray:
        """X축 회전 (pitch)"""
        c, s = np.cos(angle), np.sin(angle)
        return np.array([
            [1.0, 0.0, 0.0],
            [0.0, c, -s],
            [0.0, s, c],
        ])

    @staticmethod
    def rotation_y(angle: float) -> np.ndarray:
        """Y축 회전 (yaw)"""
        c, s = np.cos(angle), np.sin(angle)
        return np.array([
            [c, 0.0, s],
            [0.0, 1.0, 0.0],
            [-s, 0.0, c],
        ])

    @staticmethod
    def rotation_z(angle: float) -> np.ndarray:
        """Z축 회전 (roll)"""
        c, s = np.cos(angle), np.sin(angle)
        return np.array([
            [c, -s, 0.0],
            [s, c, 0.0],
            [0.0, 0.0, 1.0],
        ])

    @staticmethod
    def rotation_matrix(rotation: Tuple[float, float, float]) -> np.ndarray:
        """(pitch, yaw, roll) → 3x3 회전 행렬"""
        pitch, yaw, roll = rotation
        rx = ModelMatrixBuilder.rotation_x(pitch)
        ry = ModelMatrixBuilder.rotation_y(yaw)
        rz = ModelMatrixBuilder.rotation_z(roll)
        return rz @ ry @ rx

    @staticmethod
    def build(pose: HeadPose) -> Tuple[float, ...]:
        """
        모델 행렬 계산

        Args:
            pose: rotation/translation이 설정된 HeadPose

        Returns:
            16개 float (row-major, element [row*4+col])
        """
        matrix = np.identity(4)
        matrix[:3, :3] = ModelMatrixBuilder.rotation_matrix(pose.rotation)

        tx, ty, tz = pose.translation
        # Translation은 element 12, 13, 14
        matrix[3, 0] = tx * TRANSLATION_SCALE_XY
        matrix[3, 1] = -ty * TRANSLATION_SCALE_XY
        matrix[3, 2] = tz * TRANSLATION_SCALE_Z + CAMERA_Z_OFFSET

        return tuple(float(v) for v in matrix.flatten())

    @staticmethod
    def apply(pose: HeadPose) -> HeadPose:
        """model_matrix를 다시 계산한 HeadPose 반환"""
        return dataclasses.replace(pose, model_matrix=ModelMatrixBuilder.build(pose))
