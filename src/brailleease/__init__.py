"""Spanish <-> braille transliteration service."""
