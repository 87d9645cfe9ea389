"""
Pasted image handling.

Host-independent core of the renamer:
- classifier: Is a newly created file a pasted image?
- naming: New file name from the rename template
- links: Rewrite the embed link on the cursor line
- renamer: The rename pipeline tying them to a host

Import the pure functions directly from this package:
    from paste_renamer.paste import is_candidate, generate_name, rewrite_line
"""

from .classifier import ObservedFile, is_candidate
from .naming import NameContext, generate_name, image_name_key_from
from .links import LinkStyle, RewriteResult, rewrite_line

__all__ = [
    # Classifier
    "ObservedFile",
    "is_candidate",
    # Naming
    "NameContext",
    "generate_name",
    "image_name_key_from",
    # Links
    "LinkStyle",
    "RewriteResult",
    "rewrite_line",
]
