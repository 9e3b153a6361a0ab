"""Configuration loader for scrape_scripts."""

from dataclasses import dataclass, fields, replace
from pathlib import Path

from common.config import find_config_path, load_yaml

CONFIG_DIR = Path(__file__).parent / "configs"
CONFIG_ENV_VAR = "SCRAPER_CONFIG"


@dataclass
class ScraperConfig:
    endpoint_template: str = "https://www.imsdb.com/scripts/{title}.html"
    num_workers: int = 100
    queue_size: int = 1000
    request_timeout: float = 30.0
    user_agent: str = "scrape-scripts/1.0"
    container_tag: str = "pre"
    output_dir: str = "."


def load_config(config_name: str | None = None) -> ScraperConfig:
    """Load configuration from YAML file.

    Args:
        config_name: Name of config file (without .yaml extension) or a path.
                    If None, uses SCRAPER_CONFIG env var or "default".

    Returns:
        Loaded ScraperConfig object
    """
    config_path = find_config_path(config_name, CONFIG_DIR, env_var=CONFIG_ENV_VAR)
    return _parse_config(load_yaml(config_path))


def _parse_config(data: dict) -> ScraperConfig:
    """Parse config dictionary into ScraperConfig, rejecting unknown keys."""
    known = {f.name for f in fields(ScraperConfig)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")

    config = ScraperConfig(**data)
    if config.num_workers <= 0:
        raise ValueError("num_workers must be positive")
    if config.queue_size <= 0:
        raise ValueError("queue_size must be positive")
    timeout = config.request_timeout
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ValueError("request_timeout must be a positive number of seconds")
    if "{title}" not in config.endpoint_template:
        raise ValueError("endpoint_template must contain '{title}'")
    return config


def apply_overrides(config: ScraperConfig, **overrides) -> ScraperConfig:
    """Return a copy of config with every non-None override applied."""
    changes = {key: value for key, value in overrides.items() if value is not None}
    return replace(config, **changes)
