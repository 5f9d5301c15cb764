"""Domain value constraints for comments."""

# Length limits apply to trimmed input
NICKNAME_MAX_LENGTH = 50
CONTENT_MAX_LENGTH = 2000

# Character ids are numeric strings from the host site
CHARACTER_ID_MAX_LENGTH = 64
