"""주요 랜드마크 선택"""

from typing import Sequence

from ..config.constants import KEY_POINT_INDICES, LANDMARK_COUNT
from ..models import KeyPoints, Landmark


class KeyPointSelector:
    """전체 랜드마크에서 마스크 정렬용 주요 포인트 추출"""

    @staticmethod
    def select(landmarks: Sequence[Landmark]) -> KeyPoints:
        """
        고정 인덱스의 랜드마크를 KeyPoints로 복사

        Args:
            landmarks: 478개 landmarks

        Returns:
            KeyPoints (개수가 부족하면 기본값 그대로)
        """
        if len(landmarks) < LANDMARK_COUNT:
            return KeyPoints()

        return KeyPoints(**{
            name: landmarks[index]
            for name, index in KEY_POINT_INDICES.items()
        })
