import json

import cv2
import numpy as np
import pytest

from face_pose_tracker import cli
from face_pose_tracker.models import FaceResult
from face_pose_tracker.processing.session import FaceTracker
from face_pose_tracker.core.landmark_source import SyntheticLandmarkSource
from face_pose_tracker.utils.json_exporter import dumps, to_renderer_json


def test_renderer_json_for_empty_result():
    payload = to_renderer_json(FaceResult())

    assert payload['has_face'] is False
    assert payload['landmark_count'] == 0
    assert payload['landmarks_complete'] is False
    assert len(payload['model_matrix']) == 16
    assert 'landmarks' not in payload


def test_renderer_json_round_trips_through_json(frame):
    result = FaceTracker(source=SyntheticLandmarkSource()).process_frame(frame)
    decoded = json.loads(dumps(result, include_landmarks=True))

    assert decoded['has_face'] is True
    assert decoded['confidence'] == pytest.approx(0.95)
    assert len(decoded['landmarks']) == 478
    assert decoded['model_matrix'] == pytest.approx(list(result.pose.model_matrix))
    assert set(decoded['key_points']) == {
        'left_eye', 'right_eye', 'nose_tip', 'upper_lip',
        'chin', 'left_ear', 'right_ear', 'forehead',
    }


def test_face_result_to_dict(frame):
    result = FaceTracker(source=SyntheticLandmarkSource()).process_frame(frame)
    data = result.to_dict()
    assert data['has_face'] is True
    assert len(data['landmarks']) == 478
    assert set(data['pose']['rotation']) == {'pitch', 'yaw', 'roll'}


def test_cli_synthetic_image(tmp_path, capsys):
    image_path = tmp_path / "frame.png"
    cv2.imwrite(str(image_path), np.zeros((120, 160, 3), dtype=np.uint8))

    exit_code = cli.main([str(image_path), '--synthetic'])

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload['has_face'] is True
    assert payload['landmark_count'] == 478


def test_cli_missing_image(tmp_path):
    assert cli.main([str(tmp_path / "missing.png"), '--synthetic']) == 1


def test_cli_missing_config(tmp_path):
    image_path = tmp_path / "frame.png"
    cv2.imwrite(str(image_path), np.zeros((120, 160, 3), dtype=np.uint8))

    exit_code = cli.main([str(image_path), '--synthetic', '--config', str(tmp_path / "nope.yaml")])
    assert exit_code == 1


@pytest.mark.parametrize("content", [
    "tracker: [unclosed\n",
    "tracker:\n  max_num_faces: 0\n",
    "tracker: 3\n",
])
def test_cli_rejects_bad_config(tmp_path, capsys, content):
    image_path = tmp_path / "frame.png"
    cv2.imwrite(str(image_path), np.zeros((120, 160, 3), dtype=np.uint8))
    config_path = tmp_path / "config.yaml"
    config_path.write_text(content, encoding="utf-8")

    exit_code = cli.main([str(image_path), '--synthetic', '--config', str(config_path)])
    assert exit_code == 1
    assert capsys.readouterr().out == ""


def test_cli_unreadable_image(tmp_path):
    path = tmp_path / "not_an_image.png"
    path.write_bytes(b"plain text")
    assert cli.main([str(path), '--synthetic']) == 1
