"""JSON input and output for batch builds.

A batch file is a JSON array of cutout mappings in the upstream form, each
optionally carrying a ``label``. Results are written as a JSON object from
label to PathSpec wire form, with ``null`` for cutouts that have nothing to
render.
"""

import json
from pathlib import Path
from typing import Any

from edgebeam.domain import PathSpec
from edgebeam.exceptions import BatchInputError, ExportError


def read_cutouts(input_path: Path) -> list[tuple[str, dict[str, Any]]]:
    """Read labelled cutout mappings from a batch file.

    Entries without a ``label`` are labelled by their position.

    Args:
        input_path: JSON file holding an array of cutout mappings

    Returns:
        List of (label, mapping) tuples, in file order

    Raises:
        BatchInputError: If the file cannot be read or is not an array of objects
    """
    try:
        data = json.loads(input_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise BatchInputError(str(input_path), str(e)) from e
    except json.JSONDecodeError as e:
        raise BatchInputError(str(input_path), f"invalid JSON: {e}") from e

    if not isinstance(data, list):
        raise BatchInputError(str(input_path), "expected a JSON array of cutouts")

    entries = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise BatchInputError(str(input_path), f"entry {index} is not an object")
        fields = dict(item)
        label = str(fields.pop("label", index))
        entries.append((label, fields))
    return entries


def results_to_dict(results: dict[str, PathSpec | None]) -> dict[str, Any]:
    """Wire form of a batch result."""
    return {
        label: spec.to_dict() if spec is not None else None for label, spec in results.items()
    }


def write_results(results: dict[str, PathSpec | None], output_path: Path) -> Path:
    """Write batch results as JSON.

    Raises:
        ExportError: If the file cannot be written
    """
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(
            json.dumps(results_to_dict(results), indent=2) + "\n", encoding="utf-8"
        )
    except OSError as e:
        raise ExportError(str(output_path), str(e)) from e
    return output_path
