import importlib
import os
import sys
from typing import Any, Optional


def load_model(model_str: Optional[str]):
    """
    Loads a model type from a string format 'module:attribute'.
    Example: 'notes.models:Note' imports 'notes.models' and retrieves 'Note'.
    Returns typing.Any (plain JSON values) when model_str is empty.
    """
    if not model_str:
        return Any

    if ":" not in model_str:
        raise ValueError(f"Invalid model string '{model_str}'. Must be in format 'module:attribute'")

    module_name, attr_name = model_str.split(":", 1)

    # Ensure current directory is in path (like uvicorn)
    cwd = os.getcwd()
    if cwd not in sys.path:
        sys.path.insert(0, cwd)

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ImportError(f"Could not import module '{module_name}': {e}") from e

    try:
        return getattr(module, attr_name)
    except AttributeError:
        raise AttributeError(f"Module '{module_name}' has no attribute '{attr_name}'") from None
