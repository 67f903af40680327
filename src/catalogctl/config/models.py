"""Pydantic models for the catalogctl.toml sections.

Sparse TOML contract: defaults are baked in here and catalogctl.toml holds
only overrides. An empty file, or no file at all, is a valid configuration.
:class:`~catalogctl.config.settings.CatalogSettings` composes these sections.
"""

from __future__ import annotations

from pydantic import BaseModel


class ValidationConfig(BaseModel):
    """[validation] section: which rules the validator runs."""

    model_config = {"frozen": True}

    isbn_checksum: bool = False


class OutputConfig(BaseModel):
    """[output] section: human-readable rendering."""

    model_config = {"frozen": True}

    color: bool = True
    width: int = 100
