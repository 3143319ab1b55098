"""Generation options for LLM steps, optionally loaded from YAML."""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .. import config


@dataclass(frozen=True)
class LLMStepOptions:
    """Model parameters an LLM step forwards to its provider."""

    model: Optional[str] = None
    temperature: Optional[float] = 0.0
    max_tokens: Optional[int] = None
    additional_parameters: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LLMStepOptions":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown LLM step options: {sorted(unknown)}")
        return cls(**data)


class StepOptionsManager:
    """
    Manages generation options for each LLM step by step name.

    Expected YAML layout:

        defaults:
          model: openai/gpt-4o-mini
          temperature: 0.2
        steps:
          Summarize:
            temperature: 0.7
            max_tokens: 400
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        self.defaults: Dict[str, Any] = {}
        self.steps: Dict[str, Dict[str, Any]] = {}

        if config_path is not None:
            with open(config_path, "r") as f:
                data = yaml.safe_load(f) or {}

            self.defaults = data.get("defaults", {}) or {}
            self.steps = data.get("steps", {}) or {}

    def get_options(self, step_name: str) -> LLMStepOptions:
        """Get options for a step: step entry over file defaults over DEFAULT_MODEL."""
        merged: Dict[str, Any] = {}
        if config.DEFAULT_MODEL:
            merged["model"] = config.DEFAULT_MODEL
        merged.update(self.defaults)
        merged.update(self.steps.get(step_name, {}) or {})
        return LLMStepOptions.from_dict(merged)

    def get_all_step_names(self) -> list[str]:
        """Get names of all steps with explicit options."""
        return list(self.steps.keys())
