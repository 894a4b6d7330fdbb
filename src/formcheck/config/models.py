"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, formcheck.toml only contains
overrides.  An empty or missing file validates with browser-like
defaults plus the stricter "better validation" rules.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- formcheck.toml sections ---


class ValidationConfig(BaseModel):
    """[validation] section.

    Captured once per validation pass and passed explicitly into every
    engine entry point; nothing in the engine reads ambient state.

    Attributes:
        sanitize_input: Strip line breaks and surrounding whitespace from
            values before checking them.
        use_better_validation: Apply rules stricter than the HTML standard
            (email and URL grammars, color keywords, maxlength enforcement,
            range treated like number).
    """

    model_config = {"frozen": True}

    sanitize_input: bool = True
    use_better_validation: bool = True


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    max_value_width: int = Field(default=40, ge=8)


class FormcheckConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
