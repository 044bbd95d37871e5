"""
Configuration schema for plate drawing files.

A drawing configuration holds the view settings and the plate parameters.
Parameters are written in the configured display unit and are fed through
the ParameterStore, so a config file is validated exactly like UI input:

    version: "1.0"
    view:
      unit: mm
      precision: 1
      zoom: 3.0
      show_dimensions: true
    parameters:
      width: 300
      thickness: 50
      center_hole_diameter: 60
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .drawing_generator.drawing import PlateDrawing
from .drawing_generator.parameters import (
    PARAMETER_FIELDS,
    ParameterStore,
    PlateParameters,
    resolve_field,
)
from .drawing_generator.units import to_display
from .drawing_generator.view_config import ViewConfig


@dataclass
class DrawingConfig:
    """
    Root configuration for a plate drawing.

    Attributes:
        version: Config file version (currently "1.0")
        view: View settings
        parameters: Raw parameter values in the view's display unit
    """

    version: str = "1.0"
    view: ViewConfig = field(default_factory=ViewConfig)
    parameters: dict = field(default_factory=dict)

    def __post_init__(self):
        # Handle view as dict from YAML
        if isinstance(self.view, dict):
            self.view = ViewConfig(**self.view)
        elif self.view is None:
            self.view = ViewConfig()
        elif not isinstance(self.view, ViewConfig):
            raise TypeError(
                f"view must be a mapping, got {type(self.view).__name__}"
            )

        if self.parameters is None:
            self.parameters = {}
        elif not isinstance(self.parameters, Mapping):
            raise TypeError(
                f"parameters must be a mapping, got {type(self.parameters).__name__}"
            )
        self.parameters = dict(self.parameters)
        self.version = str(self.version)

    def build_parameters(self) -> PlateParameters:
        """
        Validate the raw parameters into a PlateParameters snapshot.

        Width is applied first so the slot bound uses the configured width.
        """
        raw = {resolve_field(k): v for k, v in self.parameters.items()}
        store = ParameterStore()
        for field_name in PARAMETER_FIELDS:
            if field_name in raw:
                store.update(field_name, raw[field_name], self.view.unit)
        return store.snapshot

    def build_drawing(self) -> PlateDrawing:
        return PlateDrawing(parameters=self.build_parameters(), view=self.view)

    @classmethod
    def from_drawing(cls, drawing: PlateDrawing) -> "DrawingConfig":
        """Capture a drawing as a config (parameters in display units)."""
        params = drawing.parameters.clamped()
        unit = drawing.view.unit
        return cls(
            view=drawing.view,
            parameters={
                name: to_display(getattr(params, name), unit)
                for name in PARAMETER_FIELDS
            },
        )

    @classmethod
    def from_dict(cls, data: dict | None) -> "DrawingConfig":
        return cls(**(data or {}))

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> "DrawingConfig":
        """Load a drawing configuration from a YAML file."""
        with open(yaml_path) as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data)

    def to_dict(self) -> dict:
        return {
            "version": self.version,
            "view": self.view.to_dict(),
            "parameters": dict(self.parameters),
        }

    def to_yaml(self, yaml_path: str | Path | None = None) -> str:
        """
        Serialize the configuration to YAML.

        Args:
            yaml_path: Optional file to write

        Returns:
            The YAML text
        """
        text = yaml.safe_dump(self.to_dict(), sort_keys=False)
        if yaml_path is not None:
            with open(yaml_path, "w") as f:
                f.write(text)
        return text
