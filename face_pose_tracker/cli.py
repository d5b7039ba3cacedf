"""단일 이미지 머리 자세 추적 CLI"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

import cv2

from .config.settings import TrackerConfig
from .core.landmark_source import SyntheticLandmarkSource
from .processing.session import FaceTracker
from .utils import get_logger
from .utils.config_loader import Config
from .utils.json_exporter import dumps

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='face-pose-tracker',
        description='이미지에서 얼굴 랜드마크와 머리 자세(모델 행렬) 추출'
    )
    parser.add_argument('image', help='분석할 이미지 파일 경로')
    parser.add_argument('--config', help='config.yaml 경로 (tracker 섹션 사용)')
    parser.add_argument('--synthetic', action='store_true',
                        help='MediaPipe 대신 합성 mesh 사용')
    parser.add_argument('--landmarks', action='store_true',
                        help='출력 JSON에 전체 랜드마크 포함')
    return parser


def run(image_path: str, config: TrackerConfig, synthetic: bool = False,
        include_landmarks: bool = False) -> int:
    """
    이미지 한 장 처리 후 JSON 출력

    Returns:
        종료 코드 (0: 얼굴 검출, 1: 입력/초기화 실패, 2: 얼굴 없음)
    """
    frame = cv2.imread(str(image_path))
    if frame is None:
        logger.error(f"Failed to load image: {image_path}")
        return 1

    source = SyntheticLandmarkSource() if synthetic else None

    with FaceTracker(config, source=source) as tracker:
        if not tracker.is_initialized():
            logger.error("Face tracker could not be initialized")
            return 1

        result = tracker.process_frame(frame)

    print(dumps(result, include_landmarks=include_landmarks, indent=2))
    return 0 if result.has_face else 2


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if not Path(args.image).exists():
        logger.error(f"File does not exist: {args.image}")
        return 1

    if args.config:
        try:
            config = TrackerConfig.from_config(Config(args.config))
        except (FileNotFoundError, ValueError) as e:
            logger.error(f"Failed to load config: {e}")
            return 1
    else:
        # 정지 이미지이므로 static_image_mode 사용
        config = TrackerConfig(static_image_mode=True)

    return run(args.image, config, synthetic=args.synthetic, include_landmarks=args.landmarks)


if __name__ == "__main__":
    sys.exit(main())
