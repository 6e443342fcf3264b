"""Wiki page name derivation from Notion page titles.

Names are flat, lower-case and hyphenated so they double as wiki file names.
No collision handling is done: two titles that normalize to the same name
map to the same wiki page, and the later write wins.
"""

import re


class FilesafeConverter:
    """Converts Notion page titles to wiki page names.

    Conversion rules, applied in order:
    - Characters other than ASCII letters, digits, whitespace and hyphens → removed
    - Runs of whitespace → single hyphen
    - Runs of hyphens → single hyphen
    - Result → lower-cased
    - Non-empty prefix → prepended as "<prefix>-"

    Examples:
        - "My Test Page!@#$" → "my-test-page"
        - "API v2.0 - User Guide (2024)" with prefix "notion" → "notion-api-v20-user-guide-2024"
    """

    @staticmethod
    def derive_name(title: str, prefix: str = "") -> str:
        """Convert a page title to a wiki page name.

        Args:
            title: The Notion page title
            prefix: Optional namespace prefix

        Returns:
            The derived name; never raises, "" for an empty title and prefix

        Examples:
            >>> FilesafeConverter.derive_name("Multiple   Spaces   Here", "notion")
            'notion-multiple-spaces-here'
            >>> FilesafeConverter.derive_name("")
            ''
        """
        name = re.sub(r'[^a-zA-Z0-9\s-]', '', title or '')
        name = re.sub(r'\s+', '-', name)
        name = re.sub(r'-+', '-', name)
        name = name.lower()

        return f"{prefix}-{name}" if prefix else name
