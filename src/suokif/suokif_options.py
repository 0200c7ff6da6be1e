"""Conversion options passed explicitly to every SUO-KIF to TPTP translation call."""

from dataclasses import dataclass, replace
from enum import Enum


class SUOKIFOutputLanguage(Enum):
    """TPTP dialects the converter can emit."""
    FOF = "fof"
    TFF = "tff"
    THF = "thf"

    @classmethod
    def from_name(cls, name: str) -> "SUOKIFOutputLanguage":
        """
        Look up a dialect by its TPTP keyword, case-insensitively.

        Raises:
            ValueError: If the name is not a supported dialect
        """
        try:
            return cls(name.strip().lower())

        except ValueError as e:
            supported = ", ".join(lang.value for lang in cls)
            raise ValueError(f"Unsupported output language '{name}' (expected one of: {supported})") from e


@dataclass(frozen=True)
class SUOKIFConversionOptions:
    """
    Options that control how SUO-KIF symbols and formulas are written as TPTP.

    Attributes:
        hide_numbers: Encode numbers as symbols such as n__42 instead of numerals
        add_prefixes: Prefix symbols with s__
        remove_strings: Drop string literal arguments instead of interning them
        output_language: TPTP dialect to emit
    """
    hide_numbers: bool = True
    add_prefixes: bool = True
    remove_strings: bool = False
    output_language: SUOKIFOutputLanguage = SUOKIFOutputLanguage.FOF

    def with_language(self, language: SUOKIFOutputLanguage) -> "SUOKIFConversionOptions":
        """Return a copy of these options with a different output language."""
        return replace(self, output_language=language)

    @property
    def keyword(self) -> str:
        """The TPTP formula keyword for the output language (fof, tff or thf)."""
        return self.output_language.value
