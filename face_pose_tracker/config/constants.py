"""얼굴 랜드마크 인덱스 및 시스템 상수 정의"""

from typing import Dict

# MediaPipe FaceMesh (refine_landmarks=True) 랜드마크 개수
LANDMARK_COUNT = 478

# 마스크 정렬용 주요 랜드마크 인덱스
KEY_POINT_INDICES: Dict[str, int] = {
    'left_eye': 33,
    'right_eye': 263,
    'nose_tip': 1,
    'upper_lip': 13,
    'chin': 152,
    'left_ear': 234,
    'right_ear': 454,
    'forehead': 10,
}

# 프레임 중심 (정규화 좌표)
FRAME_CENTER = 0.5

# 자세 추정 스케일 (선형 근사)
YAW_SCALE = 2.0
PITCH_SCALE = 1.5

# 모델 행렬 변환 상수 (렌더러 좌표계)
TRANSLATION_SCALE_XY = 2.0
TRANSLATION_SCALE_Z = 1.0
CAMERA_Z_OFFSET = 1.0  # 얼굴을 가상 카메라 앞쪽으로 한 단위 이동

# 기본 검출 설정
DEFAULT_MAX_NUM_FACES = 1
DEFAULT_MIN_DETECTION_CONFIDENCE = 0.5
DEFAULT_MIN_TRACKING_CONFIDENCE = 0.5
