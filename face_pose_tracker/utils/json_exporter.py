"""
추적 결과를 렌더러 전달용 JSON으로 변환
"""
import json
from datetime import datetime

from ..models import FaceResult


def to_renderer_json(result: FaceResult, include_landmarks: bool = False) -> dict:
    """
    FaceResult를 렌더러(다른 프로세스)로 넘길 값으로 변환
    - model_matrix: row-major 16 floats
    - key_points: 마스크 정렬용 8개 포인트

    Args:
        result: FaceTracker.process_frame() 결과
        include_landmarks: 전체 랜드마크 포함 여부

    Returns:
        dict: JSON 직렬화 가능한 딕셔너리
    """
    payload = {
        'timestamp': datetime.now().isoformat(),
        'has_face': result.has_face,
        'confidence': round(float(result.confidence), 4),
        'landmarks_complete': result.landmarks_complete,
        'landmark_count': len(result.landmarks),
        'rotation': {
            'pitch': result.pose.pitch,
            'yaw': result.pose.yaw,
            'roll': result.pose.roll,
        },
        'translation': list(result.pose.translation),
        'model_matrix': list(result.pose.model_matrix),
        'key_points': result.key_points.to_dict(),
        'bounding_box': list(result.bounding_box),
    }

    if include_landmarks:
        payload['landmarks'] = [[lm.x, lm.y, lm.z] for lm in result.landmarks]

    return payload


def dumps(result: FaceResult, include_landmarks: bool = False, indent: int = None) -> str:
    """to_renderer_json 결과를 문자열로"""
    return json.dumps(to_renderer_json(result, include_landmarks), ensure_ascii=False, indent=indent)
