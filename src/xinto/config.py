"""
xinto - Output Configuration
============================

Settings that control how decoded records are rendered. Configuration
comes only from default values and command-line options; xinto reads no
environment variables.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class OutputConfig:
    """
    Configuration for rendering records as JSON.

    Attributes:
        pretty: Render one value per line with indentation (default: False)
        indent: Spaces per indentation level when pretty (default: 2)
    """

    pretty: bool = False
    indent: int = 2

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.indent < 0:
            raise ValueError(f"indent must be >= 0, got {self.indent}")

    @property
    def json_indent(self) -> Optional[int]:
        """The indent argument for json.dumps(), None for compact output."""
        return self.indent if self.pretty else None
