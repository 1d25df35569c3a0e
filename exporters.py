# exporters.py
import json
import numpy as np
import pandas as pd

from finances import FinancialProfile, profile_to_dict


def export_projection(frame: pd.DataFrame) -> tuple[str, bytes]:
    return "projection.csv", frame.to_csv(index=False).encode()


def _json_default(o):
    # numpy scalars/arrays from the engine
    if isinstance(o, np.ndarray):
        return o.tolist()
    if isinstance(o, np.generic):
        return o.item()
    raise TypeError(f"Object of type {o.__class__.__name__} is not JSON serializable")


def export_profile(profile: FinancialProfile) -> tuple[str, bytes]:
    """Profile as JSON; finances.profile_from_dict reads it back."""
    blob = json.dumps(profile_to_dict(profile), indent=2, default=_json_default, ensure_ascii=False)
    return "profile.json", blob.encode()
