"""
Data types shared by the extractor, the translation service and the writers.
"""

from dataclasses import dataclass
from typing import List, NamedTuple


class Line(NamedTuple):
    """One record of extracted text paired with its zero-based position."""
    index: int
    text: str


# Documents and translation results are both ordered lists of lines
Document = List[Line]
TranslationResult = List[Line]


@dataclass
class Credentials:
    """Google Cloud credentials used to authenticate translation requests."""
    api_key: str = ""
    project_id: str = ""
    access_token: str = ""

    def is_empty(self) -> bool:
        """Return True when none of the three credentials is set."""
        return not (self.api_key or self.project_id or self.access_token)
