# smplsim/utils/io.py
"""
IO helpers for simulation results.
"""
import json
from typing import Any
from pathlib import Path

import yaml


def save_json(obj: Any, file_path: str, indent: int = 2):
    """Save object as JSON."""
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w') as f:
        json.dump(obj, f, indent=indent)


def load_json(file_path: str) -> Any:
    """Load JSON file."""
    with open(file_path, 'r') as f:
        return json.load(f)


def save_yaml(obj: Any, file_path: str):
    """Save object as YAML."""
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w') as f:
        yaml.safe_dump(obj, f, default_flow_style=False, sort_keys=False)


def load_yaml(file_path: str) -> Any:
    """Load YAML file."""
    with open(file_path, 'r') as f:
        return yaml.safe_load(f)
