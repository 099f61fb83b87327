"""Application-wide constants and configuration values."""

# Speaker-note header keys, in their canonical spelling. Keys are matched case-insensitively
# against what users type in their notes, then stored under this spelling.
METADATA_KEYS: tuple[str, ...] = (
    "delay",
    "pad",
    "fade",
    "language",
    "voice",
    "sampleRate",
    "section",
    "topic",
    "license",
    "createdAt",
    "updatedAt",
    "keywords",
)

# Canonical header key -> Slide attribute name
METADATA_FIELD_NAMES: dict[str, str] = {
    "delay": "delay",
    "pad": "pad",
    "fade": "fade",
    "language": "language",
    "voice": "voice",
    "sampleRate": "sample_rate",
    "section": "section",
    "topic": "topic",
    "license": "license",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
}

# The header key whose value is split into a list instead of stored as a string
KEYWORDS_KEY = "keywords"

# Known fenced block types. Anything else is still accepted, but we warn about it.
BLOCK_TYPES: tuple[str, ...] = ("description", "text", "caption")
DEFAULT_BLOCK_TYPE = "text"

FENCE_MARKER = "```"

# div classes in the presentation XML export
SLIDE_CONTENT_CLASS = "slide-content"
SLIDE_NOTES_CLASS = "slide-notes"

# Output filename base which is combined with a unique timestamp on save to prevent clobbering
OUTPUT_JSON_FILENAME = r"deck2outline_output.json"

# Fallback for get_debug_mode() in utils
DEBUG_MODE_DEFAULT = False  # Hard-coded default
