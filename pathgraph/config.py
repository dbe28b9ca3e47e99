"""Configuration classes for pathgraph components."""

from dataclasses import dataclass


@dataclass
class EdgeListConfig:
    """Configuration for the textual edge-list format."""

    # Token separator within a line
    separator: str = " "

    # Strip surrounding whitespace from the whole text before splitting lines
    strip_input: bool = True

    def format_hint(self) -> str:
        """Return the expected line layout, as shown in format errors."""
        return self.separator.join(["{id1}", "{id2}", "{weight}"])


# Global configuration instance
EDGE_LIST_CONFIG = EdgeListConfig()
