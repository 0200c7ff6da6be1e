"""Configuration for command-line SUO-KIF to TPTP translation runs."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import yaml

from suokif.suokif_options import SUOKIFConversionOptions, SUOKIFOutputLanguage


@dataclass
class SUOKIFConfig:
    """
    Settings for translating one knowledge base.

    This class handles the loading and saving of settings to a YAML file:

        kb_name: SUMO
        files:
          - Merge.kif
          - Mid-level-ontology.kif
        output: SUMO.tptp
        conjecture: "(instance ?X Human)"
        question: false
        strict: false
        options:
          hideNumbers: true
          addPrefixes: true
          removeStrings: false
          lang: fof
    """
    kb_name: str = "kb"
    files: List[str] = field(default_factory=list)
    output: str | None = None
    conjecture: str | None = None
    question: bool = False
    strict: bool = False
    options: SUOKIFConversionOptions = field(default_factory=SUOKIFConversionOptions)

    @classmethod
    def load_from_file(cls, config_path: str | Path) -> 'SUOKIFConfig':
        """
        Load configuration from a YAML file.

        Relative file paths are resolved against the directory holding the
        configuration file.

        Raises:
            FileNotFoundError: If the configuration file does not exist
            ValueError: If the file content is not a mapping, `files` is not a
                list, `options` is not a mapping, or a language is unknown
        """
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Configuration file must contain a mapping: {config_path}")

        file_list = data.get('files') or []
        if not isinstance(file_list, list):
            raise ValueError(f"'files' must be a list of paths in {config_path}")

        base_dir = Path(config_path).parent
        files = [str(base_dir / str(path)) for path in file_list]

        options = data.get('options') or {}
        if not isinstance(options, dict):
            raise ValueError(f"'options' must be a mapping in {config_path}")

        defaults = SUOKIFConversionOptions()

        return cls(
            kb_name=str(data.get('kb_name') or 'kb'),
            files=files,
            output=data.get('output'),
            conjecture=data.get('conjecture'),
            question=data.get('question', False),
            strict=data.get('strict', False),
            options=SUOKIFConversionOptions(
                hide_numbers=options.get('hideNumbers', defaults.hide_numbers),
                add_prefixes=options.get('addPrefixes', defaults.add_prefixes),
                remove_strings=options.get('removeStrings', defaults.remove_strings),
                output_language=SUOKIFOutputLanguage.from_name(str(options.get('lang') or defaults.keyword))
            )
        )

    def to_dict(self, base_dir: str | Path | None = None) -> Dict[str, Any]:
        """
        Return the configuration in its YAML file layout.

        Args:
            base_dir: Directory the file list is written relative to; paths are
                written unchanged when omitted
        """
        files = list(self.files)
        if base_dir is not None:
            files = [os.path.relpath(path, base_dir) for path in files]

        data: Dict[str, Any] = {
            'kb_name': self.kb_name,
            'files': files,
            'question': self.question,
            'strict': self.strict,
            'options': {
                'hideNumbers': self.options.hide_numbers,
                'addPrefixes': self.options.add_prefixes,
                'removeStrings': self.options.remove_strings,
                'lang': self.options.keyword,
            },
        }
        if self.output is not None:
            data['output'] = self.output

        if self.conjecture is not None:
            data['conjecture'] = self.conjecture

        return data

    def save(self, config_path: str | Path) -> None:
        """
        Save configuration to a YAML file.

        File paths are written relative to the directory holding the
        configuration file, so that `load_from_file` reads them back unchanged.
        """
        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(self.to_dict(Path(config_path).parent), f, default_flow_style=False, sort_keys=False)
