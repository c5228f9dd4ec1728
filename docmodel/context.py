"""Read-only configuration threaded through every conversion call."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class CrateInfo:
    """Package metadata of the crate being documented."""

    package_name: str
    version: str = ""

    def __str__(self) -> str:
        if self.version:
            return f"{self.package_name} {self.version}"
        return self.package_name


@dataclass(frozen=True)
class Context:
    store_path: Path
    crate_info: CrateInfo


def context_from_config(config: dict[str, Any]) -> Context:
    """Build a conversion context from a loaded configuration."""
    crate = config["crate"]
    return Context(
        store_path=Path(config["store"]["path"]),
        crate_info=CrateInfo(
            package_name=str(crate.get("name") or ""),
            version=str(crate.get("version") or ""),
        ),
    )
