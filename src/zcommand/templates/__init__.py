"""Template library lookup and enumeration."""
