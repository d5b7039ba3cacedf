"""
Face Pose Tracker
MediaPipe FaceMesh 기반 머리 자세 추적 및 렌더러용 모델 행렬 생성
"""

__version__ = "0.1.0"

from .models import Landmark, KeyPoints, HeadPose, FaceResult, DetectionResult
from .config.settings import TrackerConfig
from .core.landmark_source import LandmarkSource, SyntheticLandmarkSource
from .processing.session import FaceTracker

__all__ = [
    'Landmark', 'KeyPoints', 'HeadPose', 'FaceResult', 'DetectionResult',
    'TrackerConfig',
    'LandmarkSource', 'SyntheticLandmarkSource',
    'FaceTracker',
]
