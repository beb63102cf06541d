"""
Configuration management for the Recreation.gov availability viewer
"""
import os
import yaml
from pathlib import Path
from typing import Optional, List, Dict
from pydantic import BaseModel, Field

from .models import AvailabilityQuery


class QueryConfig(BaseModel):
    """Default query used when the command line does not supply one"""
    campground_id: Optional[str] = None
    year: Optional[int] = None
    months: List[int] = Field(default_factory=list)

    def to_query(
        self,
        campground_id: Optional[str] = None,
        year: Optional[int] = None,
        months: Optional[List[int]] = None
    ) -> AvailabilityQuery:
        """Build an AvailabilityQuery, letting explicit arguments override defaults"""
        return AvailabilityQuery(
            campground_id=campground_id or self.campground_id or "",
            year=year or self.year or 0,
            months=months or self.months
        )


class APIConfig(BaseModel):
    base_url: str = "https://www.recreation.gov"
    timeout: float = 10
    headers: Dict[str, str] = Field(default_factory=lambda: {
        "Accept": "application/json, text/plain, */*",
        "Accept-Language": "en-US,en;q=0.9",
        "Origin": "https://www.recreation.gov",
        "Referer": "https://www.recreation.gov/"
    })


class LoggingConfig(BaseModel):
    level: str = "INFO"
    file: Optional[str] = None


class Config(BaseModel):
    """Main configuration class"""
    api: APIConfig = Field(default_factory=APIConfig)
    query: QueryConfig = Field(default_factory=QueryConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from YAML file"""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables"""
        months = os.environ.get("RECGOV_MONTHS", "")
        year = os.environ.get("RECGOV_YEAR")
        return cls(
            api=APIConfig(
                base_url=os.environ.get("RECGOV_BASE_URL", APIConfig().base_url)
            ),
            query=QueryConfig(
                campground_id=os.environ.get("RECGOV_CAMPGROUND_ID"),
                year=int(year) if year else None,
                months=[int(m) for m in months.split(",") if m.strip()]
            ),
            logging=LoggingConfig(
                level=os.environ.get("RECGOV_LOG_LEVEL", "INFO")
            )
        )

    def to_yaml(self, path: str | Path):
        """Save configuration to YAML file"""
        path = Path(path)
        with open(path, 'w') as f:
            yaml.dump(self.model_dump(), f, default_flow_style=False)


def load_config(path: Optional[str] = None) -> Config:
    """Load configuration from file or environment"""
    if path:
        return Config.from_yaml(path)

    # Try default locations
    default_paths = [
        Path("config/config.yaml"),
        Path("config.yaml"),
        Path.home() / ".recgov" / "config.yaml",
    ]

    for p in default_paths:
        if p.exists():
            return Config.from_yaml(p)

    # Environment variables are all optional; unset ones keep their defaults
    try:
        return Config.from_env()
    except ValueError as e:
        raise RuntimeError(
            f"Invalid RECGOV_* environment variable: {e}. "
            f"Create config/config.yaml or fix the environment."
        )
