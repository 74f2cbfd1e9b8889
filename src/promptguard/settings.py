"""
Console settings.

Pydantic model for the terminal adapters in :mod:`promptguard.console`,
loadable from a YAML file::

    console:
      separator: " > "
      prompt_template: "[{{ prompt | upper }}]{{ separator }}"
      continue_message: "Press Enter to continue... "
      error_color: yellow
      use_stderr: true

The ``console:`` wrapper is optional; a file holding the keys at top level
is accepted too.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from jinja2 import BaseLoader, Environment, TemplateSyntaxError
from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import SettingsError

TERMINAL_COLORS = frozenset(
    {
        "black",
        "red",
        "green",
        "yellow",
        "blue",
        "magenta",
        "cyan",
        "white",
        "bright_black",
        "bright_red",
        "bright_green",
        "bright_yellow",
        "bright_blue",
        "bright_magenta",
        "bright_cyan",
        "bright_white",
        "reset",
    }
)

template_env = Environment(loader=BaseLoader())


class ConsoleSettings(BaseModel):
    """
    Terminal adapter configuration.

    Attributes:
        separator: Text written after the prompt.
        prompt_template: Jinja2 template with ``prompt`` and ``separator``
            in scope.
        continue_message: Acknowledgement line shown after an error.
        error_color: Terminal colour name for error messages.
        use_stderr: Write prompts and errors to stderr instead of stdout.
    """

    separator: str = Field(": ", description="Text written after the prompt")
    prompt_template: str = Field(
        "{{ prompt }}{{ separator }}", description="Jinja2 prompt template"
    )
    continue_message: str = Field(
        "Press Enter to try again... ", description="Shown after an error message"
    )
    error_color: str = Field("red", description="Colour of error messages")
    use_stderr: bool = Field(False, description="Write prompts and errors to stderr")

    @field_validator("error_color")
    @classmethod
    def check_color(cls, v: str) -> str:
        color = v.strip().lower()
        if color not in TERMINAL_COLORS:
            raise ValueError(
                f"Unknown color {v!r}; expected one of: {', '.join(sorted(TERMINAL_COLORS))}"
            )
        return color

    @field_validator("prompt_template")
    @classmethod
    def check_template(cls, v: str) -> str:
        try:
            template_env.from_string(v)
        except TemplateSyntaxError as e:
            raise ValueError(f"Invalid prompt template: {e}") from e
        return v

    def render_prompt(self, prompt: str) -> str:
        return template_env.from_string(self.prompt_template).render(
            prompt=prompt, separator=self.separator
        )

    @classmethod
    def from_yaml(cls, config: Optional[Dict[str, Any]]) -> "ConsoleSettings":
        """
        Build settings from a parsed YAML mapping.

        Raises:
            SettingsError: If the mapping is not a dict or fails validation.
        """
        if config is None:
            return cls()
        if not isinstance(config, dict):
            raise SettingsError(
                f"Console settings must be a mapping, got {type(config).__name__}"
            )
        section = config.get("console", config)
        if section is None:
            return cls()
        if not isinstance(section, dict):
            raise SettingsError(
                f"'console' section must be a mapping, got {type(section).__name__}"
            )
        try:
            return cls(**section)
        except ValidationError as e:
            raise SettingsError("Invalid console settings", details=e) from e


def load_settings(path: Union[str, Path]) -> ConsoleSettings:
    """
    Load :class:`ConsoleSettings` from a YAML file.

    Raises:
        SettingsError: If the file cannot be read, is not valid YAML, or
            fails validation.
    """
    source = str(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise SettingsError(f"Cannot read settings file: {e}", source=source, details=e) from e
    except yaml.YAMLError as e:
        raise SettingsError(f"Invalid YAML in settings file: {e}", source=source, details=e) from e

    try:
        return ConsoleSettings.from_yaml(data)
    except SettingsError as e:
        e.source = source
        raise
