# src/nd_path/io/config.py
import json
import os

from nd_path.config.models import ScenarioModel


def load_scenario(path: str) -> ScenarioModel:
    file = os.path.expandvars(os.path.expanduser(path))
    with open(file, encoding="utf-8") as f:
        return ScenarioModel.model_validate(json.load(f))
