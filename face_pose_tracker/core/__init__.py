"""
Landmark source package.
"""
# MediaPipeLandmarkSource는 mediapipe 의존성 때문에 직접 import
from .landmark_source import LandmarkSource, FunctionLandmarkSource, SyntheticLandmarkSource

__all__ = ['LandmarkSource', 'FunctionLandmarkSource', 'SyntheticLandmarkSource']
