"""
Shared field types for request models.
"""

from typing import Annotated

from pydantic import StringConstraints

# Non-blank text, a value made only of whitespace is rejected like an empty one
NOT_BLANK_PATTERN = r"\S"

RequiredStr = Annotated[str, StringConstraints(min_length=1, pattern=NOT_BLANK_PATTERN)]
