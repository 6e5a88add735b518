"""
Generator configuration value.
"""

from typing import List, NamedTuple


class GeneratorConfig(NamedTuple):
    """
    Composition rules for password generation.

    The value is immutable: callers that edit settings derive a new
    configuration with ``_replace`` and pass it to the generator.
    """
    length: int = 12
    include_lowercase: bool = True
    include_uppercase: bool = True
    include_digits: bool = True
    include_special: bool = True
    readable_only: bool = False
    exclude_ambiguous: bool = False
    min_special: int = 1
    min_digits: int = 1

    def enabled_types(self) -> List[str]:
        """Names of the enabled character categories, in display order."""
        types = []
        if self.include_lowercase:
            types.append("lowercase")
        if self.include_uppercase:
            types.append("uppercase")
        if self.include_digits:
            types.append("digits")
        if self.include_special:
            types.append("special")
        return types

    def toggle(self, field: str) -> "GeneratorConfig":
        """Return a copy with boolean setting ``field`` flipped."""
        current = getattr(self, field)
        if not isinstance(current, bool):
            raise TypeError(f"{field} is not a toggleable setting")
        return self._replace(**{field: not current})

    def summary(self) -> str:
        """One-line description of the settings, as shown under the menu."""
        settings = [f"Length: {self.length}"]
        settings.append(f"Types: {', '.join(self.enabled_types()) or 'none'}")
        if self.readable_only:
            settings.append("Readable only")
        if self.exclude_ambiguous:
            settings.append("No ambiguous")
        if self.include_special:
            settings.append(f"Min special: {self.min_special}")
        if self.include_digits:
            settings.append(f"Min digits: {self.min_digits}")
        return " | ".join(settings)
