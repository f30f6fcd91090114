"""Unit tests for export utilities module."""

import csv
import json
from pathlib import Path

import pytest

from pointing_kinematics.kinematics import KinematicModel
from pointing_kinematics.surfaces import HorizontalPlane
from pointing_kinematics.transform import RigidTransform
from pointing_kinematics.utils.export_utils import CSV_HEADER, PointingExporter


@pytest.fixture
def states():
    """交点あり・なしの2サンプル"""
    model = KinematicModel(1.835, HorizontalPlane(point=(0.0, 0.0, 0.0)))
    hit = model.state
    model.set_imu_transform(RigidTransform.from_rpy(pitch=-1.0))
    miss = model.state
    return [hit, miss]


class TestPointingExporter:
    """PointingExporterのテスト"""

    def test_init_creates_directory(self, tmp_path: Path):
        """ディレクトリ作成テスト"""
        new_dir = tmp_path / "new_dir"
        exporter = PointingExporter(new_dir)

        assert exporter.output_dir == new_dir
        assert exporter.output_dir.exists()

    def test_export_json(self, tmp_path: Path, states):
        """JSONエクスポートテスト"""
        exporter = PointingExporter(tmp_path)

        output_path = exporter.export_json(states, metadata={"body_height_m": 1.835})

        assert output_path == tmp_path / "pointing.json"
        with open(output_path, encoding="utf-8") as f:
            data = json.load(f)

        assert data["metadata"]["num_samples"] == 2
        assert data["metadata"]["num_hits"] == 1
        assert data["metadata"]["body_height_m"] == 1.835
        assert data["samples"][0]["index"] == 0
        assert data["samples"][0]["pointer"]["origin"][2] == pytest.approx(0.0, abs=1e-9)
        assert data["samples"][1]["pointer"] is None

    def test_export_json_empty(self, tmp_path: Path):
        """空リストのJSONエクスポートテスト"""
        output_path = PointingExporter(tmp_path).export_json([], filename="empty.json")

        with open(output_path, encoding="utf-8") as f:
            data = json.load(f)
        assert data["metadata"]["num_samples"] == 0
        assert data["samples"] == []

    def test_export_csv(self, tmp_path: Path, states):
        """CSVエクスポートテスト"""
        exporter = PointingExporter(tmp_path)

        output_path = exporter.export_csv(states, filename="result.csv")

        with open(output_path, newline="", encoding="utf-8") as f:
            rows = list(csv.reader(f))

        assert rows[0] == CSV_HEADER
        assert len(rows) == 3
        first = dict(zip(CSV_HEADER, rows[1]))
        second = dict(zip(CSV_HEADER, rows[2]))
        assert float(first["finger_z"]) == pytest.approx(1.47)
        assert float(first["pointer_z"]) == pytest.approx(0.0, abs=1e-6)
        assert second["pointer_x"] == ""
        assert second["pointer_yaw"] == ""
        assert second["ray_z"] != ""
