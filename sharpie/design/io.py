"""
design/io.py - Native design file persistence

JSON design files validated through DesignFileModel.
"""

from __future__ import annotations
from dataclasses import fields, is_dataclass
from enum import Enum, Flag
from pathlib import Path
from typing import Any, Dict, Union
import json
import logging

from pydantic import ValidationError

from sharpie.core.enums import flag_names
from sharpie.errors import DesignFileError
from .inputs import DesignInput
from .schema import DesignFileModel

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


def _to_plain(value: Any) -> Any:
    if isinstance(value, Flag):
        return flag_names(value)
    if isinstance(value, Enum):
        return value.value
    if is_dataclass(value):
        return {f.name: _to_plain(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, (list, tuple)):
        return [_to_plain(v) for v in value]
    return value


def design_to_dict(design: DesignInput) -> Dict[str, Any]:
    """Serialize a design to the native file dictionary."""
    data = {"format_version": FORMAT_VERSION}
    data.update(_to_plain(design))
    return data


def design_from_dict(data: Dict[str, Any]) -> DesignInput:
    """
    Build a design from a native file dictionary.

    Raises:
        pydantic.ValidationError: if the dictionary does not match the schema
    """
    return DesignFileModel.model_validate(data).to_design_input()


def load_design(path: Union[str, Path]) -> DesignInput:
    """
    Load a design from a native JSON design file.

    Raises:
        DesignFileError: file missing, unreadable, not JSON or invalid
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise DesignFileError(path, "file not found")
    except UnicodeDecodeError as e:
        raise DesignFileError(path, f"invalid encoding: {e}")
    except OSError as e:
        raise DesignFileError(path, f"cannot read file: {e}")
    except json.JSONDecodeError as e:
        raise DesignFileError(path, f"invalid JSON: {e}")

    if not isinstance(data, dict):
        raise DesignFileError(path, "design file must contain a JSON object")

    try:
        design = design_from_dict(data)
    except ValidationError as e:
        raise DesignFileError(path, f"invalid design: {e.error_count()} validation error(s)\n{e}")

    logger.debug(f"Loaded design {design.name!r} from {path}")
    return design


def save_design(design: DesignInput, path: Union[str, Path]) -> Path:
    """
    Write a design to a native JSON design file.

    Raises:
        DesignFileError: file cannot be written
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(design_to_dict(design), f, indent=2)
    except OSError as e:
        raise DesignFileError(path, f"cannot write file: {e}")

    logger.debug(f"Saved design {design.name!r} to {path}")
    return path
