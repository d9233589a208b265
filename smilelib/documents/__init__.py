"""
The `documents` package works on configuration documents.

Contents:
    - dotted_path: set and read values in a parsed tree with keys like ``"a.b.c"``
    - yaml_manager: read, write, create and update YAML config files (PyYAML)
    - json_manager: read, write and edit top-level keys of JSON files
"""
