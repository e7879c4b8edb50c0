"""Domain models for icon-font-generator.

- GeneratorConfig: Engine input derived from validated options
- TemplateOptions: Variables for the CSS and HTML templates
- GenerationResult: Engine output with the stylesheet accessor
- GenerationReport: Files written by a generation run
"""

from icon_font_generator.domain.generator import GeneratorConfig, OptionValue, TemplateOptions
from icon_font_generator.domain.result import GenerationReport, GenerationResult

__all__ = [
    "GenerationReport",
    "GenerationResult",
    "GeneratorConfig",
    "OptionValue",
    "TemplateOptions",
]
