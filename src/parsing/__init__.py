"""Text post-processing for model replies.

Responsibilities:
    - Fenced code block marker removal (with language tags)
    - Bold / italic unwrapping
    - Heading marker removal

Output is plain text suitable for a chat bubble, not faithful rendering.
"""

from src.parsing.markdown_cleaner import REWRITE_RULES, RewriteRule, clean

__all__ = ["REWRITE_RULES", "RewriteRule", "clean"]
