"""Processing layer components"""

from .key_points import KeyPointSelector
from .pose_estimator import PoseEstimator
from .model_matrix import ModelMatrixBuilder
from .session import FaceTracker

__all__ = [
    'KeyPointSelector',
    'PoseEstimator',
    'ModelMatrixBuilder',
    'FaceTracker',
]
