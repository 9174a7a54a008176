"""Core parsing pipeline and intermediate representation modules.

WHY: The core package contains the stable heart of the converter —
the IR dataclasses and the segment → block pipeline. These are consumed
by all formatters and must remain format-agnostic.

HOW: ir.py defines the data structures, segmenter.py turns source text
into segments, classifier.py turns segments into blocks, assembler.py
drives the pipeline over a whole document, errors.py holds the
exception types.

RULES:
- IR dataclasses are the contract — change with care
- No markup is produced here; rendering belongs to formatters
"""
