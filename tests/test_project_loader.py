"""
Unit tests for project_loader.py
"""

import json

import pytest

from impact_valuation_core.project_loader import load_project_file, load_projects


def _write(path, data):
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


class TestLoadProjectFile:
    def test_list_of_projects(self, tmp_path):
        path = _write(tmp_path / "projects.json", [{"id": "a"}, {"id": "b"}])
        assert load_project_file(str(path)) == [{"id": "a"}, {"id": "b"}]

    def test_portfolio_object(self, tmp_path):
        path = _write(tmp_path / "portfolio.json", {"name": "Kommun", "projects": [{"id": "a"}]})
        assert load_project_file(str(path)) == [{"id": "a"}]

    def test_single_project(self, tmp_path):
        path = _write(tmp_path / "project.json", {"id": "a", "title": "Chatbot för äldreomsorg"})
        assert load_project_file(str(path)) == [{"id": "a", "title": "Chatbot för äldreomsorg"}]

    def test_projects_must_be_a_list(self, tmp_path):
        path = _write(tmp_path / "bad.json", {"projects": {"id": "a"}})
        with pytest.raises(KeyError):
            load_project_file(str(path))

    def test_non_object_items(self, tmp_path):
        path = _write(tmp_path / "bad.json", [{"id": "a"}, "b"])
        with pytest.raises(ValueError):
            load_project_file(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_project_file(str(tmp_path / "missing.json"))


class TestLoadProjects:
    def test_file(self, tmp_path):
        path = _write(tmp_path / "projects.json", [{"id": "a"}])
        assert load_projects(str(path)) == [{"id": "a"}]

    def test_directory_in_name_order(self, tmp_path):
        _write(tmp_path / "b.json", {"id": "b"})
        _write(tmp_path / "a.json", [{"id": "a1"}, {"id": "a2"}])
        (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")
        assert [p["id"] for p in load_projects(str(tmp_path))] == ["a1", "a2", "b"]

    def test_empty_directory(self, tmp_path):
        assert load_projects(str(tmp_path)) == []

    def test_missing_path(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_projects(str(tmp_path / "nowhere"))
