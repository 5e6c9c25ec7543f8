"""
Configuration constants for the DI Network Manager.

This module centralizes all configurable parameters to make the system
easy to tune and adapt to different environments.
"""

from pathlib import Path
from dataclasses import dataclass, field


@dataclass
class APIConfig:
    """API configuration settings."""
    products_url: str = "https://dummyjson.com/products"
    posts_url: str = "https://jsonplaceholder.typicode.com/posts"
    timeout_seconds: float = 10.0
    max_workers: int = 4  # Worker threads per backend instance
    validate_status: bool = True  # Treat non-2xx responses as failures
    default_backend: str = "httpx"  # "httpx" or "requests"
    user_agent: str = "di-network/0.1"


@dataclass
class LogConfig:
    """Logging configuration."""
    log_directory: Path = field(default_factory=lambda: Path("logs"))
    log_filename: str = "di_network.log"
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @property
    def log_file_path(self) -> Path:
        """Get full path to the log file."""
        return self.log_directory / self.log_filename


@dataclass
class Config:
    """Master configuration combining all sub-configurations."""
    api: APIConfig = field(default_factory=APIConfig)
    log: LogConfig = field(default_factory=LogConfig)


# Global configuration instance
config = Config()
