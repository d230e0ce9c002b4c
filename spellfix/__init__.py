"""
spellfix - Frequency-Aware Spelling Corrector

Proposes the most frequent known word within two edits of the input.

Modules:
- corpus: tokenizer, corpus build and table persistence
- spellcheck: edit generation, vocabulary filter, tiered corrector
- api: FastAPI web service
- cli: build / interactive / serve entry points
- config: pydantic settings
"""

__version__ = "1.0.0"
