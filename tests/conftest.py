from __future__ import annotations

import threading
import time

import numpy as np
import pytest

from face_pose_tracker.config.constants import KEY_POINT_INDICES, LANDMARK_COUNT
from face_pose_tracker.core.landmark_source import LandmarkSource
from face_pose_tracker.models import Landmark


def make_landmarks(points=None, count=LANDMARK_COUNT, fill=(0.5, 0.5, 0.0)):
    """fill 값으로 채운 landmark 튜플, points {index: (x, y, z)} 로 덮어쓰기"""
    landmarks = [Landmark(*fill) for _ in range(count)]
    for index, xyz in (points or {}).items():
        landmarks[index] = Landmark(*xyz)
    return tuple(landmarks)


def face_points(left_eye, right_eye, nose_tip, chin=(0.5, 0.9, 0.0)):
    return {
        KEY_POINT_INDICES['left_eye']: left_eye,
        KEY_POINT_INDICES['right_eye']: right_eye,
        KEY_POINT_INDICES['nose_tip']: nose_tip,
        KEY_POINT_INDICES['chin']: chin,
    }


class ScriptedSource(LandmarkSource):
    """호출마다 미리 정한 DetectionResult를 돌려주는 Landmark Source"""

    def __init__(self, results=None, delay=0.0):
        # list 또는 호출 순번 -> DetectionResult 함수
        self.results = results if callable(results) else list(results or [])
        self.delay = delay
        self.calls = 0
        self.active = 0
        self.max_active = 0
        self.closed = False
        self._guard = threading.Lock()

    def detect(self, frame):
        with self._guard:
            self.active += 1
            self.max_active = max(self.max_active, self.active)
            index = self.calls
            self.calls += 1
        try:
            if self.delay:
                time.sleep(self.delay)
            if callable(self.results):
                return self.results(index)
            return self.results[min(index, len(self.results) - 1)]
        finally:
            with self._guard:
                self.active -= 1

    def close(self):
        self.closed = True


@pytest.fixture
def frame() -> np.ndarray:
    return np.zeros((480, 640, 3), dtype=np.uint8)


@pytest.fixture
def level_face_landmarks():
    return make_landmarks(face_points(
        left_eye=(0.35, 0.45, 0.0),
        right_eye=(0.65, 0.45, 0.0),
        nose_tip=(0.5, 0.55, 0.0),
    ))
