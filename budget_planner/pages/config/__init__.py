"""Page configuration files and loaders.

UI copy (category descriptions, education text, headings) is stored in
JSON files so it can be edited without code changes.
"""

from .defaults import get_budget_rule_config, get_copy, load_config

__all__ = ['load_config', 'get_budget_rule_config', 'get_copy']
