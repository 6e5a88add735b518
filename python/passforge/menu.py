"""
Interactive text menu for Passforge.

The menu owns a working :class:`GeneratorConfig` and replaces it after every
settings change; the generator only ever sees immutable values.
"""

import logging
from typing import Callable, Dict, List, Optional

import click

from .clipboard import copy_to_clipboard
from .config import GeneratorConfig
from .display import EXAMPLES, RULE_WIDTH, analysis_lines, boxed, numbered, status_icon
from .exceptions import ConfigurationError, ExportError
from .export import export_passwords
from .utils.password_generator import PasswordGenerator
from .utils.randomness import RandomSource
from .utils.strength import MAX_SCORE, evaluate_strength
from .utils.validation import (
    MAX_BATCH,
    MAX_EXPORT,
    MAX_MINIMUM,
    get_validation_error_message,
    parse_int,
    validate_count,
    validate_length,
    validate_minimum,
    validate_minimums,
)

logger = logging.getLogger(__name__)

WELCOME = """
🔐 Strong password generator
═══════════════════════════════════════

🛡️  Create secure passwords quickly
🎯 Plenty of settings for any policy
📊 Password strength analysis
"""

MAIN_MENU = """
┌─ MAIN MENU ────────────────────────────────┐
│                                            │
│  1  Generate a password                    │
│  2  Generate several passwords             │
│  3  Generator settings                     │
│  4  Check password strength                │
│  5  Show examples                          │
│  6  Export passwords to a file             │
│  0  Exit                                   │
│                                            │
└────────────────────────────────────────────┘
"""

TOGGLES = {
    "2": "include_lowercase",
    "3": "include_uppercase",
    "4": "include_digits",
    "5": "include_special",
    "6": "readable_only",
    "7": "exclude_ambiguous",
}


class MenuApp:
    """Menu loop driving the generator and the strength evaluator."""

    def __init__(self, config: Optional[GeneratorConfig] = None,
                 rng: Optional[RandomSource] = None):
        """
        Initialize the menu.

        Args:
            config: Starting settings (defaults to ``GeneratorConfig()``)
            rng: Random source handed to the generator
        """
        self.config = config if config is not None else GeneratorConfig()
        self.rng = rng
        self.running = True
        self.actions: Dict[str, Callable[[], None]] = {
            "1": self.generate_single,
            "2": self.generate_several,
            "3": self.settings_menu,
            "4": self.check_password,
            "5": self.show_examples,
            "6": self.export,
            "0": self.stop,
        }

    def _ask(self, text: str) -> str:
        return click.prompt(text, default="", show_default=False, prompt_suffix=" ")

    def _generator(self) -> PasswordGenerator:
        return PasswordGenerator(self.config, self.rng)

    def run(self) -> None:
        """Show the menu until the user exits or interrupts."""
        click.echo(WELCOME)
        try:
            while self.running:
                click.echo(MAIN_MENU)
                click.echo(f"📋 Current settings: {self.config.summary()}")
                self.handle_choice(self._ask("➤"))
        except click.Abort:
            click.echo("\n\n👋 Stopped by user.")
            return

        click.echo("\n👋 Goodbye! Use strong passwords!")

    def handle_choice(self, choice: str) -> None:
        action = self.actions.get(choice.strip())
        if action is None:
            click.echo("❌ Invalid choice! Try again.")
            return
        action()

    def stop(self) -> None:
        self.running = False

    def generate_single(self) -> None:
        try:
            password = self._generator().generate()
        except ConfigurationError as e:
            click.echo(f"❌ Error: {e}")
            return

        click.echo("\n🎉 Generated password:")
        click.echo(boxed(password))
        click.echo("\n📊 Strength analysis:")
        for line in analysis_lines(evaluate_strength(password)):
            click.echo(line)

        answer = self._ask("\n💡 Type 'copy' to copy it to the clipboard, or press Enter:")
        if answer.strip().lower() == "copy":
            self.copy(password)

    def copy(self, password: str) -> None:
        if copy_to_clipboard(password):
            click.echo("✅ Password copied to clipboard!")
        else:
            click.echo(f"📋 Copy the password manually: {password}")

    def generate_several(self) -> None:
        count = parse_int(self._ask(f"\n🔢 How many passwords? (1-{MAX_BATCH}):"))
        if count is None or not validate_count(count, MAX_BATCH):
            click.echo(f"❌ {get_validation_error_message('count', count)}")
            return

        try:
            passwords = self._generator().generate_multiple(count)
        except ConfigurationError as e:
            click.echo(f"❌ Error: {e}")
            return

        click.echo("\n🎉 Generated passwords:")
        click.echo("═" * RULE_WIDTH)
        for index, password in enumerate(passwords, start=1):
            click.echo(numbered(index, password, evaluate_strength(password)))
        click.echo("═" * RULE_WIDTH)

        answer = self._ask("💾 Export these passwords to a file? (yes/no):")
        if answer.strip().lower() in ("y", "yes"):
            self._write_export(passwords)

    def export(self) -> None:
        count = parse_int(self._ask(f"\n🔢 How many passwords to export? (1-{MAX_EXPORT}):"))
        if count is None or not validate_count(count, MAX_EXPORT):
            click.echo(f"❌ {get_validation_error_message('export_count', count)}")
            return

        try:
            passwords = self._generator().generate_multiple(count)
        except ConfigurationError as e:
            click.echo(f"❌ Error: {e}")
            return

        self._write_export(passwords)

    def _write_export(self, passwords: List[str]) -> None:
        try:
            path = export_passwords(passwords, self.config)
        except ExportError as e:
            click.echo(f"❌ {e}")
            return
        click.echo(f"✅ Passwords exported to file: {path}")

    def check_password(self) -> None:
        password = self._ask("\n🔍 Enter a password to check:")
        if not password:
            click.echo("❌ Password cannot be empty!")
            return

        evaluation = evaluate_strength(password)
        click.echo("\n📊 PASSWORD ANALYSIS")
        click.echo("═" * 40)
        click.echo(f"Password: {password}")
        click.echo(f"Length: {len(password)} characters")
        click.echo(f"Rating: {evaluation.strength.symbol} {evaluation.strength.label}")
        click.echo(f"Score: {evaluation.score}/{MAX_SCORE}")
        click.echo("\n📋 Details:")
        for item in evaluation.feedback:
            click.echo(f"   {item}")
        click.echo("═" * 40)

    def show_examples(self) -> None:
        click.echo(EXAMPLES)

    def settings_menu(self) -> None:
        while True:
            config = self.config
            click.echo(f"""
⚙️  GENERATOR SETTINGS
════════════════════════

1. Password length: {config.length}
2. Lowercase letters (a-z): {status_icon(config.include_lowercase)}
3. Uppercase letters (A-Z): {status_icon(config.include_uppercase)}
4. Digits (0-9): {status_icon(config.include_digits)}
5. Special characters (!@#$%): {status_icon(config.include_special)}
6. Readable characters only: {status_icon(config.readable_only)}
7. Exclude ambiguous (0,O,l,1,I,|,`,'): {status_icon(config.exclude_ambiguous)}
8. Minimum special characters: {config.min_special}
9. Minimum digits: {config.min_digits}
0. Back to main menu
""")
            choice = self._ask("Choose a setting to change:").strip()

            if choice == "0":
                return
            if choice in TOGGLES:
                self.config = config.toggle(TOGGLES[choice])
                logger.debug(f"Toggled {TOGGLES[choice]}")
            elif choice == "1":
                self.change_length()
            elif choice == "8":
                self.change_minimum("min_special", "🔣 Minimum special characters")
            elif choice == "9":
                self.change_minimum("min_digits", "🔢 Minimum digits")
            else:
                click.echo("❌ Invalid choice!")

    def change_length(self) -> None:
        length = parse_int(self._ask("\n📏 New password length (4-128):"))
        if length is None or not validate_length(length):
            click.echo(f"❌ {get_validation_error_message('length', length)}")
            return

        config = self.config
        if not validate_minimums(config.min_special, config.min_digits, length):
            total = config.min_special + config.min_digits
            click.echo(f"❌ {get_validation_error_message('minimums', total, length)}")
            return

        self.config = config._replace(length=length)
        click.echo(f"✅ Length set to {length}")

    def change_minimum(self, field: str, text: str) -> None:
        value = parse_int(self._ask(f"\n{text} (0-{MAX_MINIMUM}):"))
        if value is None or not validate_minimum(value, self.config.length):
            click.echo(f"❌ {get_validation_error_message(field, value, self.config.length)}")
            return

        updated = self.config._replace(**{field: value})
        if not validate_minimums(updated.min_special, updated.min_digits, updated.length):
            total = updated.min_special + updated.min_digits
            click.echo(f"❌ {get_validation_error_message('minimums', total, updated.length)}")
            return

        self.config = updated
        click.echo(f"✅ {text.split(' ', 1)[1]}: {value}")
