"""
Trema-style switch declarations.

This package provides:
- TremaSwitch, the declaration of a switch and its canonical port list
- YAML loading of switch stanzas
- JSON descriptors of the declared switches for downstream tools
"""
