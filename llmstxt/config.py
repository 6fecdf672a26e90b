"""
Generator configuration.

Everything the pipeline would otherwise read from process-wide state (working
directory, docs folder name, output file name) lives on GeneratorConfig, so the
generator can be driven against any directory in tests.
"""

import os
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv, find_dotenv
from pydantic import BaseModel, Field

ENV_PREFIX = "LLMSTXT_"

_TRUE_VALUES = {"1", "true", "yes", "on"}


class GeneratorConfig(BaseModel):
    """Where to read documentation from and where to write llms.txt."""
    working_dir: Path = Field(
        default_factory=Path.cwd,
        description="Directory the docs folder and output file are resolved against",
    )
    docs_dir: str = Field("docs", description="Documentation folder, relative to working_dir")
    output_filename: str = Field("llms.txt", description="Output file, relative to working_dir")
    extension: str = Field(".md", description="File name suffix of documents to include")
    sort_paths: bool = Field(
        True,
        description="Sort discovered files lexicographically (False keeps traversal order)",
    )

    @property
    def docs_path(self) -> Path:
        return (Path(self.working_dir) / self.docs_dir).resolve()

    @property
    def output_path(self) -> Path:
        return (Path(self.working_dir) / self.output_filename).resolve()

    @classmethod
    def from_env(cls, **overrides: Optional[Any]) -> "GeneratorConfig":
        """
        Build a config from LLMSTXT_* environment variables (and .env).

        Args:
            **overrides: Explicit values, e.g. from CLI options. None values are
                ignored so unset options fall through to the environment.

        Returns:
            GeneratorConfig
        """
        load_dotenv(find_dotenv(usecwd=True))

        values = {}
        env_docs = os.getenv(f"{ENV_PREFIX}DOCS_DIR")
        if env_docs:
            values["docs_dir"] = env_docs
        env_output = os.getenv(f"{ENV_PREFIX}OUTPUT")
        if env_output:
            values["output_filename"] = env_output
        env_extension = os.getenv(f"{ENV_PREFIX}EXTENSION")
        if env_extension:
            values["extension"] = env_extension
        env_sort = os.getenv(f"{ENV_PREFIX}SORT")
        if env_sort:
            values["sort_paths"] = env_sort.strip().lower() in _TRUE_VALUES

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
