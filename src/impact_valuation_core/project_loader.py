"""
Project Loader

Loads project records (as exported from the project database) from JSON files.
Supports a single project object, a list of projects, a portfolio object
({"projects": [...]}) and a directory of such files.
"""

import json
from pathlib import Path


def _projects_from_data(data, file_path) -> list[dict]:
    """
    Extract the project records from decoded JSON

    Raises:
        KeyError: If a portfolio object has no projects list
        ValueError: If the data is neither an object nor a list of objects
    """
    if isinstance(data, dict):
        if "projects" in data:
            projects = data["projects"]
            if not isinstance(projects, list):
                raise KeyError(f"Required field 'projects' is not a list: {file_path}")
            data = projects
        else:
            return [data]

    if not isinstance(data, list) or not all(isinstance(p, dict) for p in data):
        raise ValueError(f"Expected a project object or a list of project objects: {file_path}")
    return data


def load_project_file(file_path: str) -> list[dict]:
    """
    Load the project records of one JSON file

    Args:
        file_path: Path to the JSON file

    Returns:
        list[dict]: Raw project records

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file does not contain project objects
    """
    with open(file_path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return _projects_from_data(data, file_path)


def load_projects(path: str) -> list[dict]:
    """
    Load project records from a JSON file or a directory of JSON files

    Files in a directory are read in name order.

    Args:
        path: JSON file or directory

    Returns:
        list[dict]: Raw project records

    Raises:
        FileNotFoundError: If the path does not exist
    """
    projects_path = Path(path)
    if not projects_path.exists():
        raise FileNotFoundError(f"Projects path does not exist: {path}")

    if projects_path.is_file():
        return load_project_file(str(projects_path))

    projects = []
    for json_file in sorted(projects_path.glob("*.json")):
        projects.extend(load_project_file(str(json_file)))
    return projects
