"""Parse presentation speaker notes into slide metadata, content blocks, and a section/topic outline."""
