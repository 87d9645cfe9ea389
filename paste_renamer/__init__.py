"""
Paste Renamer
=============

Renames images pasted into a note vault and fixes the link that embeds them.

When an image is pasted into a note, the host application saves it under a
generic name ("Pasted image 20240115093000.png") and inserts an embed link
on the cursor line. The renamer notices the new file, renames it from a
user template (dates, the note's name, a front-matter key) and rewrites
that one link to the new name.

Main Components:
    - paste: Classifier, name generator, link rewriter and rename pipeline
    - workspace: Host adapters, focus session and the vault watcher
    - core: Logging, settings, paths, exceptions
    - utils: Vault paths, front matter and template expansion
    - cli: The ``paste-renamer`` command

Example Usage:
    >>> from datetime import datetime
    >>> from paste_renamer.paste import NameContext, generate_name
    >>> ctx = NameContext("Trip", now=datetime(2024, 1, 15, 9, 30))
    >>> generate_name("{{fileName}}-{{DATE:YYYYMMDD-HHmm}}", ctx, "png")
    'Trip-20240115-0930.png'

Version: 1.0.0
License: MIT
"""

__version__ = "1.0.0"
__author__ = "Paste Renamer Project"
