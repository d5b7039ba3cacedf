"""커스텀 예외 클래스 정의"""


class FaceTrackerException(Exception):
    """기본 예외 클래스"""
    pass


class DetectionError(FaceTrackerException):
    """얼굴 검출 실패 예외"""
    pass


class InvalidFrameError(FaceTrackerException):
    """잘못된 프레임 입력 예외"""
    pass


class ConfigurationError(FaceTrackerException):
    """설정 오류 / 검출기 초기화 실패 예외"""
    pass

