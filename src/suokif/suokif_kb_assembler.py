"""Assembly of complete TPTP documents from lists of SUO-KIF formulas."""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Set

from suokif.suokif_ast import SUOKIFFormula
from suokif.suokif_error import SUOKIFError, SUOKIFBadFormulaError, SUOKIFHOLError
from suokif.suokif_lexer import tokenize
from suokif.suokif_options import SUOKIFConversionOptions, SUOKIFOutputLanguage
from suokif.suokif_parser import parse
from suokif.suokif_symbols import EXCLUDED_PREDICATES
from suokif.suokif_tptp_converter import SUOKIFTPTPConverter


@dataclass
class SUOKIFSkippedFormula:
    """A formula that was left out of an assembled document, and why."""
    index: int
    source: str
    reason: str
    error: SUOKIFError | None = None


@dataclass
class SUOKIFKBResult:
    """
    The outcome of assembling a knowledge base.

    `axiom_count` counts axiom lines only; the per-dialect counts cover every
    emitted formula line, including a conjecture or question.
    """
    content: str
    axiom_count: int
    fof_count: int = 0
    tff_count: int = 0
    thf_count: int = 0
    skipped: List[SUOKIFSkippedFormula] = field(default_factory=list)


def sanitize_kb_name(kb_name: str) -> str:
    """Replace every character that is not valid in a TPTP name with '_'."""
    return re.sub(r'\W', '_', kb_name)


def lang_to_extension(lang: str) -> str:
    """Map a TPTP dialect to the file extension used for it."""
    return 'tptp' if lang == 'fof' else lang


def extension_to_lang(ext: str) -> str:
    """Map a TPTP file extension back to its dialect."""
    return 'fof' if ext == 'tptp' else ext


class SUOKIFKBAssembler:
    """
    Converts a list of SUO-KIF formula texts into one TPTP document.

    Formulas are deduplicated by source text, documentation-style statements
    are dropped, and each remaining formula becomes an axiom named
    kb_<name>_<k>, where k counts emitted axioms from 1.

    A formula that cannot be translated (higher-order or malformed) is
    recorded as skipped and the rest of the batch is still converted.  With
    `strict=True` the first such failure is raised instead.
    """

    def __init__(self, options: SUOKIFConversionOptions | None = None, strict: bool = False):
        """
        Initialize the assembler.

        Args:
            options: Conversion options; defaults are used when omitted
            strict: Raise on the first untranslatable formula instead of skipping it
        """
        self.options = options if options is not None else SUOKIFConversionOptions()
        self.strict = strict
        self._logger = logging.getLogger("SUOKIFKBAssembler")

    def convert_formulas(
        self,
        formulas: List[str],
        kb_name: str,
        conjecture: str | None = None,
        is_question: bool = False
    ) -> SUOKIFKBResult:
        """
        Convert formulas into a complete TPTP document.

        Args:
            formulas: SUO-KIF formula texts
            kb_name: Knowledge base name, used in the header and axiom names
            conjecture: Optional formula to append as the goal
            is_question: Emit the goal with role question instead of conjecture

        Returns:
            The document and its statistics

        Raises:
            SUOKIFBadFormulaError: If the conjecture cannot be parsed or
                translated, or in strict mode if any formula fails
        """
        name = sanitize_kb_name(kb_name)
        keyword = self.options.keyword
        converter = SUOKIFTPTPConverter(self.options)

        body_lines: List[str] = []
        skipped: List[SUOKIFSkippedFormula] = []
        seen_sources: Set[str] = set()
        written_bodies: Set[str] = set()
        axiom_count = 0

        for index, text in enumerate(formulas, start=1):
            if text in seen_sources:
                self._logger.debug("duplicate formula %d ignored: %s", index, text)
                continue

            seen_sources.add(text)

            for formula in self._parse_formula_text(text, f"{name}#{index}", index, skipped):
                head = formula.head_symbol()
                if head in EXCLUDED_PREDICATES:
                    self._logger.debug("excluded predicate '%s' in formula %d", head, index)
                    continue

                try:
                    body = converter.convert_formula(formula)

                except (SUOKIFHOLError, SUOKIFBadFormulaError) as e:
                    if self.strict:
                        raise

                    kind = "higher-order formula" if isinstance(e, SUOKIFHOLError) else "bad formula"
                    self._logger.warning("skipping %s %d: %s", kind, index, e.message)
                    skipped.append(SUOKIFSkippedFormula(index, formula.source, f"{kind}: {e.message}", e))
                    body_lines.append(f"% f: {formula.single_line_source()}")
                    body_lines.append(f"% skipped {kind}: {e.message}")
                    continue

                if body in written_bodies:
                    self._logger.debug("formula %d translates to an axiom already written", index)
                    continue

                written_bodies.add(body)
                axiom_count += 1
                body_lines.append(f"% f: {formula.single_line_source()}")
                body_lines.append(f"{keyword}(kb_{name}_{axiom_count},axiom,({body})).")

        formula_lines = axiom_count

        if conjecture is not None:
            goal = self._parse_conjecture(conjecture)
            try:
                body = converter.convert_formula(goal, query=True)

            except (SUOKIFHOLError, SUOKIFBadFormulaError) as e:
                raise SUOKIFBadFormulaError(
                    message=f"Conjecture cannot be translated: {e.message}",
                    received=conjecture,
                    source_file="conjecture",
                    line=e.line,
                    column=e.column
                ) from e

            role = "question" if is_question else "conjecture"
            body_lines.append(f"% f: {goal.single_line_source()}")
            body_lines.append(f"{keyword}(prove_from_{name},{role},({body})).")
            formula_lines += 1

        counts = {lang: 0 for lang in SUOKIFOutputLanguage}
        counts[self.options.output_language] = formula_lines

        lines = self._header(name)
        lines.extend(body_lines)
        lines.extend(self._footer(counts, axiom_count, skipped))

        self._logger.info("translated KB %s: %d axioms, %d skipped", name, axiom_count, len(skipped))

        return SUOKIFKBResult(
            content="\n".join(lines) + "\n",
            axiom_count=axiom_count,
            fof_count=counts[SUOKIFOutputLanguage.FOF],
            tff_count=counts[SUOKIFOutputLanguage.TFF],
            thf_count=counts[SUOKIFOutputLanguage.THF],
            skipped=skipped
        )

    def write_file(
        self,
        file_name: str | Path,
        formulas: List[str],
        kb_name: str,
        conjecture: str | None = None,
        is_question: bool = False
    ) -> SUOKIFKBResult:
        """Convert formulas and write the TPTP document to `file_name`."""
        result = self.convert_formulas(formulas, kb_name, conjecture, is_question)
        Path(file_name).write_text(result.content, encoding='utf-8')
        self._logger.debug("wrote %d axioms to %s", result.axiom_count, file_name)
        return result

    def _parse_formula_text(
        self,
        text: str,
        label: str,
        index: int,
        skipped: List[SUOKIFSkippedFormula]
    ) -> List[SUOKIFFormula]:
        tokens, lex_errors = tokenize(text, label)
        for lex_error in lex_errors:
            self._logger.debug("lexical problem in formula %d: %s", index, lex_error.message)

        parsed, parse_errors = parse(tokens, text, label)
        for parse_error in parse_errors:
            if self.strict:
                raise SUOKIFBadFormulaError(
                    message=f"Formula {index} cannot be parsed: {parse_error.message}",
                    line=parse_error.line,
                    column=parse_error.column,
                    source_file=label,
                    received=text
                ) from parse_error

            self._logger.warning("skipping unparsable formula %d: %s", index, parse_error.message)
            skipped.append(SUOKIFSkippedFormula(index, text, f"parse error: {parse_error.message}", parse_error))

        return parsed

    def _parse_conjecture(self, conjecture: str) -> SUOKIFFormula:
        tokens, _lex_errors = tokenize(conjecture, "conjecture")
        parsed, parse_errors = parse(tokens, conjecture, "conjecture")
        if parse_errors:
            first = parse_errors[0]
            raise SUOKIFBadFormulaError(
                message=f"Conjecture cannot be parsed: {first.message}",
                line=first.line,
                column=first.column,
                source_file="conjecture",
                received=conjecture
            ) from first

        if len(parsed) != 1:
            raise SUOKIFBadFormulaError(
                message=f"Conjecture must be exactly one formula, found {len(parsed)}",
                received=conjecture
            )

        return parsed[0]

    def _header(self, name: str) -> List[str]:
        return [
            "% Translation of SUO-KIF to TPTP by suokif",
            f"% This is a translation to TPTP of KB {name}",
            f"% Output language: {self.options.keyword}",
            "",
        ]

    def _footer(
        self,
        counts: Dict[SUOKIFOutputLanguage, int],
        axiom_count: int,
        skipped: List[SUOKIFSkippedFormula]
    ) -> List[str]:
        lines = [
            "",
            "% Statistics: " + ", ".join(f"{lang.value}={count}" for lang, count in counts.items()),
            f"% Axioms: {axiom_count}, skipped: {len(skipped)}",
        ]
        for entry in skipped:
            lines.append(f"% skipped formula {entry.index}: {entry.reason}")

        return lines


def convert_formulas(
    formulas: List[str],
    kb_name: str,
    conjecture: str | None = None,
    is_question: bool = False,
    options: SUOKIFConversionOptions | None = None
) -> SUOKIFKBResult:
    """Convert formulas into a TPTP document using a fresh assembler."""
    return SUOKIFKBAssembler(options).convert_formulas(formulas, kb_name, conjecture, is_question)


def write_file(
    file_name: str | Path,
    formulas: List[str],
    kb_name: str,
    conjecture: str | None = None,
    is_question: bool = False,
    options: SUOKIFConversionOptions | None = None
) -> SUOKIFKBResult:
    """Convert formulas and write the TPTP document to `file_name`."""
    return SUOKIFKBAssembler(options).write_file(file_name, formulas, kb_name, conjecture, is_question)


def parse_kif_formulas(text: str, source_file: str = "") -> List[str]:
    """
    Split a SUO-KIF document into the source texts of its top-level formulas.

    Malformed expressions are logged and left out.
    """
    tokens, _lex_errors = tokenize(text, source_file)
    formulas, errors = parse(tokens, text, source_file)
    logger = logging.getLogger("SUOKIFKBAssembler")
    for error in errors:
        logger.warning("%s: %s", error.location(), error.message)

    return [formula.source for formula in formulas]


def read_kif_file(path: str | Path) -> List[str]:
    """Read a SUO-KIF file and split it into top-level formula texts."""
    return parse_kif_formulas(Path(path).read_text(encoding='utf-8'), str(path))
