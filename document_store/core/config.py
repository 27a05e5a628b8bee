"""
Configuration management for the document store
"""
import os
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field


class StoreConfig(BaseModel):
    """
    Configuration for a document store instance

    Generated ids are 10 characters long; ``id_length`` exists for embedding
    stores that need another width, and any other value gives up the
    fixed-length id contract.
    """
    id_length: int = Field(default=10, ge=1, le=36)
    thread_safe: bool = True


class LoggingConfig(BaseModel):
    """Configuration for logging output"""
    level: str = "INFO"
    log_file: Optional[str] = None
    log_format: Optional[str] = None


class Config(BaseModel):
    """Main configuration class"""
    store: StoreConfig = Field(default_factory=StoreConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> "Config":
        """Create configuration from environment variables"""
        return cls(
            store=StoreConfig(
                id_length=int(os.getenv("DOCUMENT_STORE_ID_LENGTH", "10")),
                thread_safe=os.getenv("DOCUMENT_STORE_THREAD_SAFE", "true").lower() in ("1", "true", "yes")
            ),
            logging=LoggingConfig(
                level=os.getenv("DOCUMENT_STORE_LOG_LEVEL", "INFO"),
                log_file=os.getenv("DOCUMENT_STORE_LOG_FILE")
            )
        )

    @classmethod
    def load_from_file(cls, file_path: str) -> "Config":
        """Load and validate configuration from a JSON file"""
        return cls.model_validate_json(Path(file_path).read_text())

    def save_to_file(self, file_path: str) -> None:
        """Write configuration as JSON, creating parent directories"""
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2))
