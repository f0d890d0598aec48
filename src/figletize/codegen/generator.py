"""Build-time banner code generation.

Renders a fixed set of (member, font, text) banners once and writes them
into a Python module as string constants, so applications can ship banners
without parsing fonts at run time. Problems are reported as diagnostics
instead of surfacing later as runtime exceptions.
"""

import keyword
from dataclasses import dataclass
from pathlib import Path

import structlog
from pydantic import BaseModel, Field, TypeAdapter, ValidationError, field_validator

from figletize.core.renderer import NEWLINE, render
from figletize.exceptions import CodeGenerationError, FontError
from figletize.io.library import FontLibrary

HEADER = """\
# <auto-generated>
#     This code was generated by figletize.
#
#     Changes to this file may cause incorrect behavior and will be lost if
#     the code is regenerated.
# </auto-generated>
"""

logger = structlog.get_logger("figletize.codegen")


class BannerSpec(BaseModel):
    """One banner constant to generate."""

    member: str = Field(description="Name of the generated constant")
    font: str = Field(description="Name of the font to render with")
    text: str = Field(description="Text to render")
    smush_override: int | None = Field(default=None, ge=0, le=255)

    @field_validator("member")
    @classmethod
    def _member_is_identifier(cls, value: str) -> str:
        if not value.isidentifier() or keyword.iskeyword(value):
            raise ValueError(f"'{value}' is not a valid Python identifier")
        return value


@dataclass(frozen=True)
class Diagnostic:
    """A problem found while generating one banner.

    Attributes:
        member: Constant the problem belongs to ("" when unknown)
        message: Human readable description
    """

    member: str
    message: str

    def __str__(self) -> str:
        if self.member:
            return f"{self.member}: {self.message}"
        return self.message


_SPEC_LIST = TypeAdapter(list[BannerSpec])


def load_specs(path: Path) -> list[BannerSpec]:
    """Load banner specs from a JSON file.

    The file holds a list of objects with ``member``, ``font`` and ``text``
    keys (and optionally ``smush_override``).

    Raises:
        CodeGenerationError: If the file content is invalid
        OSError: If the file cannot be read
    """
    data = Path(path).read_bytes()
    try:
        return _SPEC_LIST.validate_json(data)
    except ValidationError as e:
        diagnostics = [
            Diagnostic(
                member="",
                message=f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}",
            )
            for error in e.errors()
        ]
        raise CodeGenerationError(diagnostics) from e


def _literal(banner: str) -> str:
    """Format a banner as a parenthesised run of string literals."""
    rows = banner.split(NEWLINE)
    if len(rows) == 1:
        return repr(banner)
    parts = [repr(row + NEWLINE) for row in rows[:-1]] + [repr(rows[-1])]
    body = "".join(f"    {part}\n" for part in parts)
    return f"(\n{body})"


def generate_module(specs: list[BannerSpec], library: FontLibrary) -> str:
    """Render every banner and return the source of the generated module.

    Args:
        specs: Banners to generate, in output order
        library: Font library the font names are resolved against

    Returns:
        Python module source

    Raises:
        CodeGenerationError: If any banner could not be generated
    """
    diagnostics: list[Diagnostic] = []
    constants: list[tuple[str, str]] = []
    seen: set[str] = set()

    for spec in specs:
        if spec.member in seen:
            diagnostics.append(Diagnostic(spec.member, "duplicate member name"))
            continue
        seen.add(spec.member)

        try:
            font = library.get(spec.font)
        except FontError as e:
            diagnostics.append(Diagnostic(spec.member, str(e)))
            continue

        constants.append((spec.member, render(font, spec.text, spec.smush_override)))
        logger.debug("Banner generated", member=spec.member, font=spec.font)

    if diagnostics:
        for diagnostic in diagnostics:
            logger.error("Banner generation failed", member=diagnostic.member, error=diagnostic.message)
        raise CodeGenerationError(diagnostics)

    lines = [HEADER, '"""Generated banner constants."""', "", "from typing import Final", ""]
    names = ", ".join(repr(member) for member, _ in constants)
    lines.append(f"__all__ = [{names}]")
    for member, banner in constants:
        lines.append("")
        lines.append(f"{member}: Final[str] = {_literal(banner)}")
    return NEWLINE.join(lines) + NEWLINE


def write_module(specs: list[BannerSpec], path: Path, library: FontLibrary) -> Path:
    """Generate the module and write it to ``path``.

    Nothing is written when generation fails.
    """
    source = generate_module(specs, library)
    path = Path(path)
    path.write_text(source, encoding="utf-8")
    logger.info("Module written", path=str(path), banners=len(specs))
    return path
