from typing import List, Optional

import numpy as np
import pandas as pd

from .models import LatencyPoint


def generate_mock_stats(hours: int = 24, seed: Optional[int] = None) -> List[LatencyPoint]:
    """Simulated hourly latency/request figures for the detail chart.

    Nothing here is measured; the services are never contacted.
    """
    rng = np.random.default_rng(seed)
    base_latency = 100 + rng.random() * 200
    points = []
    for i in range(hours):
        points.append(LatencyPoint(
            time=f"{i}:00",
            latency=int(np.floor(base_latency + rng.random() * 100 - 50)),
            requests=int(np.floor(rng.random() * 1000 + 500)),
        ))
    return points


def stats_frame(points: List[LatencyPoint]) -> pd.DataFrame:
    return pd.DataFrame([p.model_dump() for p in points], columns=["time", "latency", "requests"])
