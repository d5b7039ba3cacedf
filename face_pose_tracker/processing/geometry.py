"""랜드마크 기하 유틸리티"""

from typing import Sequence, Tuple

from ..models import Landmark


def get_bounding_box(landmarks: Sequence[Landmark]) -> Tuple[float, float, float, float]:
    """
    랜드마크로부터 정규화 bounding box 계산

    Args:
        landmarks: Landmark 리스트

    Returns:
        (x, y, width, height) 튜플, 비어 있으면 (0, 0, 0, 0)
    """
    if not landmarks:
        return (0.0, 0.0, 0.0, 0.0)

    x_coords = [lm.x for lm in landmarks]
    y_coords = [lm.y for lm in landmarks]

    x_min, x_max = min(x_coords), max(x_coords)
    y_min, y_max = min(y_coords), max(y_coords)

    return (x_min, y_min, x_max - x_min, y_max - y_min)
