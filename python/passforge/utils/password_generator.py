"""
Secure password generation utilities.
"""

import string
from typing import List, Optional, Sequence, Tuple

from ..config import GeneratorConfig
from ..exceptions import ConfigurationError
from .randomness import RandomSource, default_source


# Character sets, full variants
LOWERCASE = tuple(string.ascii_lowercase)
UPPERCASE = tuple(string.ascii_uppercase)
DIGITS = tuple(string.digits)
SPECIAL = tuple("!@#$%^&*()-_+=[]{}|\\:;\"'<>,.?/~`")

# Readable variants drop characters that are easy to misread
READABLE_LOWERCASE = tuple(c for c in LOWERCASE if c not in "lo")
READABLE_UPPERCASE = tuple(c for c in UPPERCASE if c not in "IO")
READABLE_DIGITS = tuple("23456789")
READABLE_SPECIAL = tuple("!@#$%^&*-_+=")

# Removed from the final charset when exclude_ambiguous is set
AMBIGUOUS_CHARS = frozenset("0Ol1I|`'")


class PasswordGenerator:
    """Generate secure passwords from a :class:`GeneratorConfig`."""

    def __init__(self, config: Optional[GeneratorConfig] = None,
                 rng: Optional[RandomSource] = None):
        """
        Initialize password generator.

        Args:
            config: Composition rules (defaults to ``GeneratorConfig()``)
            rng: Random source with ``randbelow``; the OS CSPRNG by default
        """
        self.config = config if config is not None else GeneratorConfig()
        self.rng = rng if rng is not None else default_source

    def special_chars(self) -> Tuple[str, ...]:
        """Special alphabet for the configured variant."""
        return READABLE_SPECIAL if self.config.readable_only else SPECIAL

    def digit_chars(self) -> Tuple[str, ...]:
        """Digit alphabet for the configured variant."""
        return READABLE_DIGITS if self.config.readable_only else DIGITS

    def build_charset(self) -> Tuple[str, ...]:
        """
        Build the character set based on options.

        Returns:
            Ordered tuple of eligible characters, possibly empty
        """
        config = self.config
        if config.readable_only:
            lower, upper = READABLE_LOWERCASE, READABLE_UPPERCASE
        else:
            lower, upper = LOWERCASE, UPPERCASE

        chars: List[str] = []

        if config.include_lowercase:
            chars.extend(lower)

        if config.include_uppercase:
            chars.extend(upper)

        if config.include_digits:
            chars.extend(self.digit_chars())

        if config.include_special:
            chars.extend(self.special_chars())

        # Remove ambiguous characters if requested
        if config.exclude_ambiguous:
            chars = [c for c in chars if c not in AMBIGUOUS_CHARS]

        return tuple(chars)

    def _sample(self, alphabet: Sequence[str], count: int) -> List[str]:
        """Draw ``count`` characters from ``alphabet`` with replacement."""
        return [alphabet[self.rng.randbelow(len(alphabet))] for _ in range(count)]

    def _shuffle(self, buf: List[str]) -> None:
        """Fisher-Yates shuffle in place."""
        for i in range(len(buf) - 1, 0, -1):
            j = self.rng.randbelow(i + 1)
            buf[i], buf[j] = buf[j], buf[i]

    def generate(self) -> str:
        """
        Generate a secure password.

        Required specials and digits are placed first, the rest is filled
        from the whole charset, then everything is shuffled. When the minimums
        add up to more than ``length`` the password is longer than ``length``.

        Returns:
            Generated password string

        Raises:
            ConfigurationError: If no character categories are enabled
        """
        charset = self.build_charset()
        if not charset:
            raise ConfigurationError("no character categories selected")

        config = self.config
        password: List[str] = []

        if config.include_special and config.min_special > 0:
            password.extend(self._sample(self.special_chars(), config.min_special))

        if config.include_digits and config.min_digits > 0:
            password.extend(self._sample(self.digit_chars(), config.min_digits))

        remaining = max(0, config.length - len(password))
        password.extend(self._sample(charset, remaining))

        self._shuffle(password)
        return ''.join(password)

    def generate_multiple(self, count: int) -> List[str]:
        """
        Generate several independent passwords.

        Duplicates are possible and kept.

        Args:
            count: Number of passwords

        Returns:
            List of ``count`` passwords
        """
        return [self.generate() for _ in range(count)]

    def get_charset_info(self) -> str:
        """
        Get human-readable description of character set.

        Returns:
            Description of enabled character types
        """
        info = ", ".join(self.config.enabled_types())

        if self.config.readable_only:
            info += " (readable only)"
        if self.config.exclude_ambiguous:
            info += " (excluding ambiguous chars)"

        return info


def build_charset(config: GeneratorConfig) -> Tuple[str, ...]:
    """Eligible characters for ``config``."""
    return PasswordGenerator(config).build_charset()


def generate(config: GeneratorConfig, rng: Optional[RandomSource] = None) -> str:
    """Generate one password for ``config``."""
    return PasswordGenerator(config, rng).generate()


def generate_multiple(config: GeneratorConfig, count: int,
                      rng: Optional[RandomSource] = None) -> List[str]:
    """Generate ``count`` independent passwords for ``config``."""
    return PasswordGenerator(config, rng).generate_multiple(count)


def generate_password(length: int = 12,
                      use_lowercase: bool = True,
                      use_uppercase: bool = True,
                      use_digits: bool = True,
                      use_special: bool = True,
                      readable_only: bool = False,
                      exclude_ambiguous: bool = False,
                      min_special: int = 1,
                      min_digits: int = 1) -> str:
    """
    Convenience function to generate a password.

    Args:
        length: Password length (4-128)
        use_lowercase: Include lowercase letters
        use_uppercase: Include uppercase letters
        use_digits: Include digits
        use_special: Include special characters
        readable_only: Use only easy-to-read characters
        exclude_ambiguous: Exclude visually ambiguous characters
        min_special: Minimum number of special characters
        min_digits: Minimum number of digits

    Returns:
        Generated password string
    """
    config = GeneratorConfig(
        length=length,
        include_lowercase=use_lowercase,
        include_uppercase=use_uppercase,
        include_digits=use_digits,
        include_special=use_special,
        readable_only=readable_only,
        exclude_ambiguous=exclude_ambiguous,
        min_special=min_special,
        min_digits=min_digits,
    )
    return generate(config)
