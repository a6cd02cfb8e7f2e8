"""Configuration classes for uritpl components."""

from dataclasses import dataclass


@dataclass
class ParserConfig:
    """Limits applied while parsing template text."""

    # Largest accepted ``:N`` prefix length (signed 64-bit bound)
    max_prefix_length: int = 2**63 - 1

    def accepts_prefix_length(self, length: int) -> bool:
        """Return True if ``length`` is a usable prefix modifier value."""
        return 0 < length <= self.max_prefix_length


# Global configuration instance
PARSER_CONFIG = ParserConfig()
