"""
yamlresume - YAML résumé to document-definition compiler

Turns a YAML description of a résumé into a declarative layout tree (text,
bullet lists, stacks, divider lines) that a PDF layout renderer consumes.

Architecture:
- Compiling Context: YAML parsing, theming, ATS keyword emphasis, layout tree assembly
- Utils: formatting helpers, logging, timestamps
"""

__version__ = "0.1.0"
