"""
Media entries: static constants and enum types.
"""
import enum


class MediaType(str, enum.Enum):
    MOVIE = "Movie"
    TV_SHOW = "TV Show"


# Longest value accepted for each free-text field.
MAX_TITLE_LENGTH = 255
MAX_TEXT_FIELD_LENGTH = 255

# Primary keys are 32-bit serials; larger path ids can never match a row.
MAX_ENTRY_ID = 2**31 - 1
