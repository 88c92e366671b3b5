from dataclasses import dataclass, field
from datetime import datetime
import json

import pydfa
from pydfa.core.types import Configuration, ExecutionTrace


@dataclass
class TraceArtifact:
    configuration: Configuration
    traces: list
    pydfa_version: str = pydfa.__version__
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())


def save_artifacts(artifacts: list[TraceArtifact], path: str) -> None:
    artifacts_as_dicts = [
        {
            "configuration": artifact.configuration.to_dict(),
            "traces": [trace.to_dict() for trace in artifact.traces],
            "pydfa_version": artifact.pydfa_version,
            "timestamp": artifact.timestamp,
        }
        for artifact in artifacts
    ]
    with open(path, "w") as f:
        json.dump(artifacts_as_dicts, f, indent=2)


def load_artifacts(path: str) -> list[TraceArtifact]:
    with open(path, "r") as f:
        data = json.load(f)

    artifacts = []
    for item in data:
        artifacts.append(
            TraceArtifact(
                configuration=Configuration.from_dict(item["configuration"]),
                traces=[ExecutionTrace.from_dict(trace) for trace in item["traces"]],
                pydfa_version=item["pydfa_version"],
                timestamp=item["timestamp"],
            )
        )

    return artifacts
