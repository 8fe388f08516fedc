"""Common literal values used across documenter_index.

These constants keep the asset layout centralized so the codec, the config
loader, and tests can import the same values without drifting. Intended for
internal use within the documenter_index package.

Examples
--------
>>> from documenter_index import _constants
>>> _constants.JS_PREFIX_TEMPLATE.format(name=_constants.DEFAULT_VARIABLE_NAME)
'var documenterSearchIndex = '
>>> _constants.ENTRY_FIELDS[0]
'location'
"""

DEFAULT_VARIABLE_NAME = "documenterSearchIndex"
DOCS_KEY = "docs"
JS_PREFIX_TEMPLATE = "var {name} = "
ENTRY_FIELDS = ("location", "page", "title", "text", "category")
